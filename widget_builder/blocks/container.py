"""
Conteneurs : container, grid, flex-container, smart-grid.
Tous partagent fond / bordure / ombre / avancé (BoxedContent) ; seul le layout diffère.
"""
from typing import Literal, Optional, Union

from pydantic import Field

from .base import BoxedContent, ContentModel, Number, ResponsiveValue, responsive

JustifyItems = Literal["start", "center", "end", "stretch"]
JustifyContent = Literal["start", "center", "end", "between", "around", "evenly"]
AlignContent = Literal["start", "center", "end", "stretch", "between", "around"]
AutoFlow = Literal["row", "column", "dense", "row-dense", "column-dense"]
SelfAlign = Literal["auto", "start", "center", "end", "stretch"]


class ColumnWidth(ContentModel):
    type: Literal["auto", "fr", "px", "%"] = "fr"
    value: Optional[Number] = None


class RowHeight(ContentModel):
    type: Literal["auto", "minmax", "custom"] = "auto"
    value: Optional[Number] = None
    min_value: Optional[Number] = None


class ShapeDivider(ContentModel):
    enabled: bool = False
    position: Literal["top", "bottom"] = "bottom"
    shape: Literal["waves", "curves", "triangle", "tilt"] = "waves"
    color: str = "#ffffff"
    height: Number = 50
    flip: bool = False


# ── container ────────────────────────────────────────────────────────────────

class ContainerLayout(ContentModel):
    display_type: Literal["flex", "grid"] = "grid"
    columns: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(4, 2, 1))
    rows: Union[Literal["auto"], int] = "auto"
    column_gap: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(20, 16, 12))
    row_gap: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(20, 16, 12))
    justify_items: JustifyItems = "stretch"
    align_items: JustifyItems = "stretch"
    justify_content: JustifyContent = "start"
    align_content: AlignContent = "start"
    auto_flow: Optional[AutoFlow] = None
    column_width: Optional[ColumnWidth] = None
    row_height: Optional[RowHeight] = None
    gap_preset: Optional[Literal["none", "small", "medium", "large"]] = None


class ContainerContent(BoxedContent):
    layout: ContainerLayout = Field(default_factory=ContainerLayout)
    shape_divider: Optional[ShapeDivider] = None


# ── grid ─────────────────────────────────────────────────────────────────────

class GridLayout(ContentModel):
    columns: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(3, 2, 1))
    column_gap: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(16, 12, 8))
    row_gap: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(16, 12, 8))
    auto_flow: AutoFlow = "row"
    justify_items: JustifyItems = "stretch"
    align_items: JustifyItems = "stretch"


class GridContent(BoxedContent):
    layout: GridLayout = Field(default_factory=GridLayout)


# ── flex-container ───────────────────────────────────────────────────────────

class FlexLayout(ContentModel):
    direction: Literal["row", "column"] = "row"
    wrap: Literal["nowrap", "wrap", "wrap-reverse"] = "wrap"
    justify_content: JustifyContent = "start"
    align_items: Literal["start", "center", "end", "stretch", "baseline"] = "stretch"
    align_content: AlignContent = "start"
    gap: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(16, 12, 8))


class Resizable(ContentModel):
    width: bool = True
    height: bool = False


class FlexCanvasInteraction(ContentModel):
    padding_handles: bool = True
    resizable: Resizable = Field(default_factory=Resizable)


class FlexContainerContent(BoxedContent):
    layout: FlexLayout = Field(default_factory=FlexLayout)
    canvas_interaction: FlexCanvasInteraction = Field(default_factory=FlexCanvasInteraction)


# ── smart-grid ───────────────────────────────────────────────────────────────

class SmartGridLayout(ContentModel):
    columns: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(4, 2, 1))
    rows: Union[Literal["auto"], int] = "auto"
    column_gap: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(20, 16, 12))
    row_gap: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(20, 16, 12))
    column_template: Optional[str] = None
    row_template: Optional[str] = None
    auto_flow: AutoFlow = "row"
    justify_items: JustifyItems = "stretch"
    align_items: JustifyItems = "stretch"


class SmartGridCanvasInteraction(ContentModel):
    show_column_guides: bool = True
    gap_handles: bool = True
    cell_resizable: bool = True


class SmartGridContent(BoxedContent):
    layout: SmartGridLayout = Field(default_factory=SmartGridLayout)
    canvas_interaction: SmartGridCanvasInteraction = Field(default_factory=SmartGridCanvasInteraction)


# ── Placement d'un enfant dans une grille ────────────────────────────────────

class GridItemSettings(ContentModel):
    column_span: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(1, 1, 1))
    row_span: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(1, 1, 1))
    column_start: Optional[int] = None
    row_start: Optional[int] = None
    align_self: SelfAlign = "auto"
    justify_self: SelfAlign = "auto"
