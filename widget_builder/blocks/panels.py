"""Widgets à panneaux : tabs, accordion."""
from typing import List

from pydantic import Field

from .base import ContentModel


class TabItem(ContentModel):
    label: str = ""
    content: str = ""


class TabsContent(ContentModel):
    items: List[TabItem] = Field(default_factory=lambda: [
        TabItem(label="Tab 1", content="Content for tab 1"),
        TabItem(label="Tab 2", content="Content for tab 2"),
    ])


class AccordionItem(ContentModel):
    title: str = ""
    content: str = ""


class AccordionContent(ContentModel):
    items: List[AccordionItem] = Field(default_factory=lambda: [
        AccordionItem(title="Section 1", content="Content for section 1"),
        AccordionItem(title="Section 2", content="Content for section 2"),
    ])
