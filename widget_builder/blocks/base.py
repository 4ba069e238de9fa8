"""
Sous-modèles partagés par tous les contenus de widgets.

Clés stockées en camelCase (fontSize, hideOnMobile…), attributs Python en snake_case.
Chaque champ a une valeur par défaut : un contenu partiel se complète à la validation.
"""
from typing import Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float]
T = TypeVar("T")


class ContentModel(BaseModel):
    """Base de tous les contenus (et sous-objets) de widgets."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_storage(self) -> dict:
        """Forme JSON stockée (camelCase, sans les champs optionnels vides)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class OpaqueContent(ContentModel):
    """Contenu sans schéma (features, faq, types inconnus) : conservé tel quel."""
    model_config = ConfigDict(extra="allow")


# ── Valeurs responsive ──────────────────────────────────────────────────────

class ResponsiveValue(ContentModel, Generic[T]):
    """Valeur par breakpoint. Seul desktop est obligatoire."""
    desktop: T
    tablet: Optional[T] = None
    mobile: Optional[T] = None


def responsive(desktop, tablet=None, mobile=None) -> ResponsiveValue:
    return ResponsiveValue[Number](desktop=desktop, tablet=tablet, mobile=mobile)


# ── Box model ───────────────────────────────────────────────────────────────

class BoxModel(ContentModel):
    top: Number = 0
    right: Number = 0
    bottom: Number = 0
    left: Number = 0
    linked: bool = True


def box(value: Number = 0, linked: bool = True) -> BoxModel:
    return BoxModel(top=value, right=value, bottom=value, left=value, linked=linked)


class RadiusBox(ContentModel):
    top_left: Number = 0
    top_right: Number = 0
    bottom_right: Number = 0
    bottom_left: Number = 0
    linked: bool = True


# ── Couleurs ────────────────────────────────────────────────────────────────

class GradientStop(ContentModel):
    color: str = "#000000"
    position: Number = 0


def _default_stops() -> List[GradientStop]:
    return [GradientStop(color="#3b82f6", position=0), GradientStop(color="#8b5cf6", position=100)]


class Gradient(ContentModel):
    type: Literal["linear", "radial"] = "linear"
    angle: Number = 90
    stops: List[GradientStop] = Field(default_factory=_default_stops)


class ColorValue(ContentModel):
    """Couleur pleine ou dégradé (tag `type`)."""
    type: Literal["solid", "gradient"] = "solid"
    solid: str = ""
    gradient: Optional[Gradient] = None


# ── Typo / ombres / bordures ────────────────────────────────────────────────

class LineHeight(ContentModel):
    value: Number = 1.2
    unit: Literal["em", "px"] = "em"


class TextShadow(ContentModel):
    horizontal: Number = 0
    vertical: Number = 0
    blur: Number = 0
    color: str = "rgba(0,0,0,0.3)"


class BoxShadow(ContentModel):
    horizontal: Number = 0
    vertical: Number = 4
    blur: Number = 6
    spread: Number = 0
    color: str = "rgba(0,0,0,0.1)"


class Border(ContentModel):
    type: Literal["none", "solid", "double", "dotted", "dashed"] = "none"
    width: Number = 0
    color: str = "#000000"
    radius: Number = 0


class ResponsiveVisibility(ContentModel):
    hide_on_desktop: bool = False
    hide_on_tablet: bool = False
    hide_on_mobile: bool = False


class Link(ContentModel):
    url: str = "#"
    open_in_new_tab: bool = False
    nofollow: bool = False


class CustomAttributes(ContentModel):
    """Attributs libres : id, classes, CSS (passés tels quels au rendu)."""
    css_id: Optional[str] = None
    css_classes: Optional[str] = None
    custom_css: Optional[str] = Field(default=None, alias="customCSS")


class AdvancedSettings(CustomAttributes):
    """Réglages avancés des widgets texte (heading)."""
    margin: BoxModel = Field(default_factory=BoxModel)
    padding: BoxModel = Field(default_factory=lambda: box(16))
    width: Literal["default", "full", "inline", "custom"] = "default"
    custom_width: Optional[Number] = None
    custom_width_unit: Literal["px", "%", "vw"] = "px"
    position: Literal["static", "relative", "absolute", "fixed"] = "static"
    z_index: Optional[int] = None
    opacity: Number = 100
    border: Border = Field(default_factory=Border)
    responsive: ResponsiveVisibility = Field(default_factory=ResponsiveVisibility)


# ── Conteneurs (container, grid, flex-container, smart-grid) ────────────────

class BackgroundImage(ContentModel):
    url: str = ""
    size: Literal["cover", "contain", "repeat"] = "cover"
    position: str = "center"


class Background(ContentModel):
    type: Literal["solid", "gradient", "image"] = "solid"
    color: str = "transparent"
    gradient: Optional[Gradient] = None
    image: Optional[BackgroundImage] = None


class ContainerBorder(ContentModel):
    style: Literal["none", "solid", "dashed", "dotted"] = "none"
    width: BoxModel = Field(default_factory=BoxModel)
    color: str = "#e5e7eb"
    radius: RadiusBox = Field(default_factory=RadiusBox)


class ContainerShadow(BoxShadow):
    enabled: bool = False


class ContainerWidth(ContentModel):
    type: Literal["auto", "full", "custom"] = "auto"
    value: Optional[Number] = None
    unit: Literal["px", "%", "vw"] = "px"


class ContainerHeight(ContentModel):
    type: Literal["auto", "custom"] = "auto"
    value: Optional[Number] = None
    unit: Literal["px", "vh"] = "px"


class PositionOffsets(ContentModel):
    top: Optional[Number] = None
    right: Optional[Number] = None
    bottom: Optional[Number] = None
    left: Optional[Number] = None


class ContainerAdvanced(CustomAttributes):
    margin: BoxModel = Field(default_factory=BoxModel)
    padding: BoxModel = Field(default_factory=lambda: box(16))
    z_index: Optional[int] = None
    responsive: ResponsiveVisibility = Field(default_factory=ResponsiveVisibility)
    min_height: Optional[ResponsiveValue[Number]] = None
    max_width: Literal["full", "lg", "md", "sm", "custom"] = "lg"
    custom_max_width: Optional[Number] = None
    width: Optional[ContainerWidth] = None
    height: Optional[ContainerHeight] = None
    overflow: Optional[Literal["visible", "hidden", "scroll", "auto"]] = None
    position: Optional[Literal["default", "relative", "absolute", "fixed"]] = None
    position_offsets: Optional[PositionOffsets] = None


class BoxedContent(ContentModel):
    """Parties communes aux conteneurs : fond, bordure, ombre, avancé."""
    background: Background = Field(default_factory=Background)
    border: ContainerBorder = Field(default_factory=ContainerBorder)
    shadow: ContainerShadow = Field(default_factory=ContainerShadow)
    advanced: ContainerAdvanced = Field(default_factory=ContainerAdvanced)
