"""Widget button : lien/CTA avec états normal et hover, icône optionnelle."""
from typing import Literal, Optional

from pydantic import Field

from .base import (
    BoxModel, BoxShadow, ContentModel, CustomAttributes, Link, Number,
    ResponsiveValue, ResponsiveVisibility, box, responsive,
)

ButtonAlign = Literal["left", "center", "right", "stretch"]


class ButtonIcon(ContentModel):
    enabled: bool = False
    name: str = "ArrowRight"
    position: Literal["left", "right"] = "right"
    spacing: Number = 8


class ButtonTypography(ContentModel):
    font_family: str = "inherit"
    font_size: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(16))
    font_size_unit: Literal["px", "rem"] = "px"
    font_weight: int = 500
    text_transform: Literal["none", "uppercase", "lowercase", "capitalize"] = "none"
    letter_spacing: Number = 0


class ButtonColors(ContentModel):
    """Couleurs de l'état normal. Chaîne vide = couleur du thème."""
    text_color: str = ""
    background_color: str = ""
    border_color: str = ""


class ButtonHoverColors(ButtonColors):
    """Couleurs hover. Chaîne vide = reprend la couleur de l'état normal."""
    transition_duration: Number = 300


class ButtonStyle(ContentModel):
    typography: ButtonTypography = Field(default_factory=ButtonTypography)
    normal: ButtonColors = Field(default_factory=ButtonColors)
    hover: ButtonHoverColors = Field(default_factory=ButtonHoverColors)
    padding: BoxModel = Field(default_factory=lambda: BoxModel(top=12, right=24, bottom=12, left=24, linked=False))
    border_radius: Number = 8
    border_width: Number = 0
    box_shadow: Optional[BoxShadow] = None
    hover_box_shadow: Optional[BoxShadow] = None


class ButtonAdvanced(CustomAttributes):
    margin: BoxModel = Field(default_factory=lambda: box(0))
    width: Literal["auto", "full", "custom"] = "auto"
    custom_width: Optional[Number] = None
    custom_width_unit: Literal["px", "%"] = "px"
    responsive: ResponsiveVisibility = Field(default_factory=ResponsiveVisibility)


class ButtonContent(ContentModel):
    text: str = "Click Me"
    link: Link = Field(default_factory=Link)
    icon: ButtonIcon = Field(default_factory=ButtonIcon)
    button_type: Literal["button", "submit", "reset"] = "button"
    alignment: ResponsiveValue[ButtonAlign] = Field(
        default_factory=lambda: ResponsiveValue[ButtonAlign](desktop="left")
    )
    style: ButtonStyle = Field(default_factory=ButtonStyle)
    advanced: ButtonAdvanced = Field(default_factory=ButtonAdvanced)
