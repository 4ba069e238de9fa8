"""
Widget Builder : modèle de document par blocs pour un éditeur de pages visuel.

Usage (document):
    >>> from widget_builder import load_page, render_document
    >>> page = load_page({"title": "Home", "blocks": [{"id": "b1", "type": "heading", "content": {"text": "Hi"}}]})
    >>> html = render_document(page)

Usage (session d'édition):
    >>> from widget_builder import PageBuilder, MemoryPageStore
    >>> builder = PageBuilder(store=MemoryPageStore())
    >>> builder.load("home")
    >>> block = builder.add("button")
    >>> builder.update(block.id, {"text": "Acheter"})
    >>> builder.save()

Usage (styles):
    >>> from widget_builder import compile_style
    >>> compile_style("heading", {"text": "Hi"}, "mobile").style_string()
"""

# ── Core ────────────────────────────────────────────────────────────────────
from .core import (
    CODE_HISTORY_LIMIT, SCHEMA_VERSION, EMPTY_CODE_BLOCK,
    WidgetBuilderError, UnknownWidgetType, MigrationError,
    Breakpoint, BREAKPOINTS, resolve, media_query,
    generate_block_id, now_iso,
)
from .core.schemas import (
    Block, PageDocument, VersionEntry, TemplateRecord, WidgetDefinition,
    WIDGET_LIBRARY, widget_definition,
)

# ── Contenus ────────────────────────────────────────────────────────────────
from .blocks import (
    ContentModel, OpaqueContent, ResponsiveValue, BoxModel,
    HeadingContent, ButtonContent, ContainerContent, GridContent,
    FlexContainerContent, SmartGridContent, GridItemSettings,
    WidgetType, is_known_type, content_model, default_content, is_legacy_shape,
)

# ── Migration ───────────────────────────────────────────────────────────────
from .migration import migrate, normalize, validate_content, load_block, load_document, load_page

# ── Rendu ───────────────────────────────────────────────────────────────────
from .renderer import (
    CompiledStyle, compile_style, compile_block, compile_grid_item,
    block_css, generate_page_css, render_block, render_visual, render_document,
    IconSet, RenderableIcon, DEFAULT_ICONS, HtmlRenderer,
)

# ── Édition ─────────────────────────────────────────────────────────────────
from .editor import (
    new_block, insert, import_template, move, duplicate, delete, replace,
    enter_code_mode, revert_to_visual, apply_code, restore_version, CodeEditorSession,
    eligible_fields, patch, dispatch, set_box_side, toggle_linked, set_responsive,
)
from .interfaces import PageStore, TemplateSource, IconResolver, Renderer, MemoryPageStore, StaticTemplateSource
from .builder import PageBuilder, render_page

__version__ = "0.1.0"

__all__ = [
    # core
    "CODE_HISTORY_LIMIT", "SCHEMA_VERSION", "EMPTY_CODE_BLOCK",
    "WidgetBuilderError", "UnknownWidgetType", "MigrationError",
    "Breakpoint", "BREAKPOINTS", "resolve", "media_query", "generate_block_id", "now_iso",
    "Block", "PageDocument", "VersionEntry", "TemplateRecord", "WidgetDefinition",
    "WIDGET_LIBRARY", "widget_definition",
    # contenus
    "ContentModel", "OpaqueContent", "ResponsiveValue", "BoxModel",
    "HeadingContent", "ButtonContent", "ContainerContent", "GridContent",
    "FlexContainerContent", "SmartGridContent", "GridItemSettings",
    "WidgetType", "is_known_type", "content_model", "default_content", "is_legacy_shape",
    # migration
    "migrate", "normalize", "validate_content", "load_block", "load_document", "load_page",
    # rendu
    "CompiledStyle", "compile_style", "compile_block", "compile_grid_item",
    "block_css", "generate_page_css", "render_block", "render_visual", "render_document",
    "IconSet", "RenderableIcon", "DEFAULT_ICONS", "HtmlRenderer", "Renderer",
    # édition
    "new_block", "insert", "import_template", "move", "duplicate", "delete", "replace",
    "enter_code_mode", "revert_to_visual", "apply_code", "restore_version", "CodeEditorSession",
    "eligible_fields", "patch", "dispatch", "set_box_side", "toggle_linked", "set_responsive",
    "PageStore", "TemplateSource", "IconResolver", "MemoryPageStore", "StaticTemplateSource",
    "PageBuilder", "render_page",
]
