"""
Schémas Pydantic du document : PageDocument → Block → contenu typé.

Le JSON stocké est en camelCase (htmlContent, codeVersionHistory) ;
Block.to_storage() y ajoute le tag schemaVersion.
"""
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, model_validator
from pydantic.alias_generators import to_camel

from ..blocks.base import ContentModel, OpaqueContent
from .config import SCHEMA_VERSION


class StorageModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class VersionEntry(StorageModel):
    """Version appliquée en mode code (timestamp ISO-8601 UTC, millisecondes)."""
    timestamp: str
    html_content: str


class Block(StorageModel):
    """Bloc de la page : type, mode (visual | code), contenu typé et historique code-mode."""
    id: str
    type: str
    mode: Literal["visual", "code"] = "visual"
    content: SerializeAsAny[ContentModel] = Field(default_factory=OpaqueContent)
    html_content: Optional[str] = None
    code_version_history: List[VersionEntry] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _normalize_content(cls, data: Any) -> Any:
        # Tout contenu brut passe par la migration + fusion avec les défauts
        if isinstance(data, dict) and "type" in data:
            from ..migration.normalize import normalize
            data = dict(data)
            data["content"] = normalize(
                data["type"], data.get("content"), data.pop("schemaVersion", None)
            )
        return data

    def to_storage(self) -> dict:
        """Forme JSON stockée, taguée avec la version de schéma courante."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        data["schemaVersion"] = SCHEMA_VERSION
        return data


class PageDocument(StorageModel):
    title: str = ""
    blocks: List[Block] = Field(default_factory=list)

    def to_storage(self) -> dict:
        return {"title": self.title, "blocks": [b.to_storage() for b in self.blocks]}


# ── Palette + templates ─────────────────────────────────────────────────────

WidgetCategory = Literal["basic", "media", "layout", "commerce", "legacy"]


class WidgetDefinition(StorageModel):
    type: str
    label: str
    description: str
    icon: str
    category: WidgetCategory


class TemplateRecord(StorageModel):
    """Modèle importable : un bloc brut ou une liste de blocs bruts."""
    id: str
    name: str
    category: str = ""
    content: Union[List[dict], dict]

    def raw_blocks(self) -> List[dict]:
        return self.content if isinstance(self.content, list) else [self.content]


def _w(type_: str, label: str, description: str, icon: str, category: str) -> WidgetDefinition:
    return WidgetDefinition(type=type_, label=label, description=description, icon=icon, category=category)


WIDGET_LIBRARY: List[WidgetDefinition] = [
    # Basic
    _w("heading",        "Heading",        "H1-H6 headings",             "Type",              "basic"),
    _w("paragraph",      "Paragraph",      "Rich text block",            "AlignLeft",         "basic"),
    _w("button",         "Button",         "CTA button",                 "MousePointerClick", "basic"),
    _w("icon",           "Icon",           "Lucide icon",                "Sparkles",          "basic"),
    _w("divider",        "Divider",        "Horizontal line",            "Minus",             "basic"),
    _w("spacer",         "Spacer",         "Vertical space",             "MoveVertical",      "basic"),
    # Media
    _w("image",          "Image",          "Single image",               "Image",             "media"),
    _w("video",          "Video",          "YouTube/Vimeo embed",        "Play",              "media"),
    _w("gallery",        "Gallery",        "Image grid",                 "LayoutGrid",        "media"),
    _w("slider",         "Slider",         "Image carousel",             "GalleryHorizontal", "media"),
    # Layout
    _w("container",      "Container",      "Section wrapper",            "Square",            "layout"),
    _w("grid",           "Grid",           "Column layout",              "Columns3",          "layout"),
    _w("flex-container", "Flex Container", "Flexible box layout",        "Box",               "layout"),
    _w("smart-grid",     "Smart Grid",     "2D grid with span controls", "Grid3x3",           "layout"),
    _w("tabs",           "Tabs",           "Tabbed content",             "PanelTop",          "layout"),
    _w("accordion",      "Accordion",      "Collapsible panels",         "ChevronDown",       "layout"),
    # Commerce & Marketing
    _w("checkout-form",  "Checkout Form",  "Order form",                 "CreditCard",        "commerce"),
    _w("countdown",      "Countdown",      "Timer widget",               "Clock",             "commerce"),
    _w("pricing-table",  "Pricing Table",  "Price comparison",           "DollarSign",        "commerce"),
    _w("testimonials",   "Testimonials",   "Customer reviews",           "Quote",             "commerce"),
    _w("progress-bar",   "Progress Bar",   "Visual progress",            "BarChart3",         "commerce"),
    _w("google-map",     "Google Map",     "Embedded map",               "MapPin",            "commerce"),
    _w("social-icons",   "Social Icons",   "Social links",               "Share2",            "commerce"),
]


def widget_definition(widget_type: str) -> Optional[WidgetDefinition]:
    return next((w for w in WIDGET_LIBRARY if w.type == widget_type), None)
