"""Renderer : compilation des styles, feuille de style scopée, HTML."""
from .base import Renderer, HtmlRenderer
from .compiler import CompiledStyle, compile_style, compile_block
from .css import block_css, generate_page_css
from .html import render_block, render_visual, render_document
from .icons import IconSet, RenderableIcon, DEFAULT_ICONS
from .widgets import compile_grid_item

__all__ = [
    "Renderer", "HtmlRenderer",
    "CompiledStyle", "compile_style", "compile_block",
    "block_css", "generate_page_css",
    "render_block", "render_visual", "render_document",
    "IconSet", "RenderableIcon", "DEFAULT_ICONS",
    "compile_grid_item",
]
