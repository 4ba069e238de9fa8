"""
Interfaces des collaborateurs externes (persistance, modèles, icônes, rendu).

Le cœur ne fait aucune I/O : il reçoit ces capacités explicitement.
"""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .core.schemas import TemplateRecord
from .renderer.base import Renderer
from .renderer.icons import RenderableIcon


@runtime_checkable
class PageStore(Protocol):
    def load_document(self, page_id: str) -> Dict[str, Any]: ...
    def save_document(self, page_id: str, blocks: List[dict]) -> None: ...


@runtime_checkable
class TemplateSource(Protocol):
    def fetch_templates(self, filter: Optional[str] = None) -> List[TemplateRecord]: ...


@runtime_checkable
class IconResolver(Protocol):
    def lookup(self, name: str) -> RenderableIcon: ...


class MemoryPageStore:
    """PageStore en mémoire (tests, prévisualisation)."""

    def __init__(self, pages: Optional[Dict[str, Dict[str, Any]]] = None):
        self.pages: Dict[str, Dict[str, Any]] = dict(pages or {})

    def load_document(self, page_id: str) -> Dict[str, Any]:
        return self.pages.get(page_id, {"title": "", "blocks": []})

    def save_document(self, page_id: str, blocks: List[dict]) -> None:
        page = self.pages.get(page_id, {"title": ""})
        self.pages[page_id] = {**page, "blocks": blocks}


class StaticTemplateSource:
    """TemplateSource sur une liste fixe ; `filter` = catégorie."""

    def __init__(self, templates: List[TemplateRecord]):
        self.templates = list(templates)

    def fetch_templates(self, filter: Optional[str] = None) -> List[TemplateRecord]:
        if filter is None:
            return list(self.templates)
        return [t for t in self.templates if t.category == filter]


__all__ = [
    "PageStore", "TemplateSource", "IconResolver", "Renderer",
    "MemoryPageStore", "StaticTemplateSource",
]
