"""Widgets simples : paragraph, icon, divider, spacer."""
from typing import Literal

from .base import ContentModel, Number

Align = Literal["left", "center", "right"]


class ParagraphContent(ContentModel):
    text: str = "Enter your text content here. You can edit this in the properties panel."
    alignment: Align = "left"


class IconContent(ContentModel):
    name: str = "Star"
    size: Number = 48
    color: str = "currentColor"


class DividerContent(ContentModel):
    style: Literal["solid", "dashed", "dotted"] = "solid"
    width: Number = 100
    color: str = "#e5e7eb"


class SpacerContent(ContentModel):
    height: Number = 40
