"""
Protocol Renderer : interface pluggable pour les sorties (HTML, aperçu canvas…).
"""
from typing import Protocol, runtime_checkable

from ..core.config import DEFAULT_BREAKPOINT
from ..core.schemas import Block, PageDocument
from .html import render_block, render_document


@runtime_checkable
class Renderer(Protocol):
    def render_document(self, page: PageDocument) -> str: ...
    def render_block(self, block: Block) -> str: ...


class HtmlRenderer:
    """Renderer HTML par défaut, lié à un jeu d'icônes et un breakpoint."""

    def __init__(self, icons=None, breakpoint: str = DEFAULT_BREAKPOINT):
        self.icons = icons
        self.breakpoint = breakpoint

    def render_document(self, page: PageDocument) -> str:
        return render_document(page, icons=self.icons)

    def render_block(self, block: Block) -> str:
        return render_block(block, self.breakpoint, icons=self.icons)
