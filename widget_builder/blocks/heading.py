"""Widget heading : titre h1-h6 avec typo, couleur (pleine ou dégradé) et ombre."""
from typing import Literal, Optional

from pydantic import Field

from .base import (
    AdvancedSettings, ColorValue, ContentModel, LineHeight, Link, Number,
    ResponsiveValue, TextShadow, responsive,
)

HeadingAlign = Literal["left", "center", "right", "justify"]


class HeadingTypography(ContentModel):
    font_family: str = "inherit"
    font_size: ResponsiveValue[Number] = Field(default_factory=lambda: responsive(36))
    font_size_unit: Literal["px", "rem", "vw"] = "px"
    font_weight: int = 700
    text_transform: Literal["none", "uppercase", "lowercase", "capitalize"] = "none"
    font_style: Literal["normal", "italic", "oblique"] = "normal"
    text_decoration: Literal["none", "underline", "line-through", "overline"] = "none"
    line_height: LineHeight = Field(default_factory=LineHeight)
    letter_spacing: Number = 0


class HeadingStyle(ContentModel):
    text_color: ColorValue = Field(default_factory=ColorValue)
    typography: HeadingTypography = Field(default_factory=HeadingTypography)
    text_shadow: Optional[TextShadow] = None
    blend_mode: str = "normal"


class HeadingContent(ContentModel):
    text: str = "Your Heading Here"
    link: Optional[Link] = None
    size: Literal["small", "medium", "large", "xl", "xxl"] = "large"
    level: Literal["h1", "h2", "h3", "h4", "h5", "h6", "div", "span", "p"] = "h2"
    alignment: ResponsiveValue[HeadingAlign] = Field(
        default_factory=lambda: ResponsiveValue[HeadingAlign](desktop="left")
    )
    style: HeadingStyle = Field(default_factory=HeadingStyle)
    advanced: AdvancedSettings = Field(default_factory=AdvancedSettings)
