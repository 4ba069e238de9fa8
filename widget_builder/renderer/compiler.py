"""
Compilateur de styles : (type, contenu normalisé, breakpoint) → CompiledStyle.

Pur et déterministe : pas d'I/O, pas d'aléa, l'entrée n'est jamais modifiée.
Les icônes passent par un IconResolver explicite (DEFAULT_ICONS à défaut).
"""
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..blocks.registry import content_model
from ..core.responsive import BREAKPOINTS
from . import styles
from .icons import DEFAULT_ICONS
from .widgets import WIDGET_COMPILERS

log = logging.getLogger(__name__)


class CompiledStyle(BaseModel):
    """Sortie du compilateur, consommée par le rendu (HTML, canvas d'édition…)."""
    declarations: Dict[str, Union[int, float, str]] = Field(default_factory=dict)
    visibility_classes: List[str] = Field(default_factory=list)
    hints: Dict[str, Any] = Field(default_factory=dict)
    hidden: bool = False
    css_id: Optional[str] = None
    css_classes: Optional[str] = None
    custom_css: Optional[str] = None

    def style_string(self) -> str:
        """Déclarations au format attribut style (`prop: valeur; …`)."""
        return "; ".join(f"{k}: {v}" for k, v in self.declarations.items())


def unknown_style(widget_type: str) -> CompiledStyle:
    return CompiledStyle(hints={"placeholder": "unknown", "label": f"Unknown block: {widget_type}"})


def compile_style(
    widget_type: str,
    content: Any,
    breakpoint: str = "desktop",
    *,
    icons=None,
    scope: Optional[str] = None,
) -> CompiledStyle:
    """
    Compile le contenu d'un bloc pour un breakpoint.

    Args:
        widget_type: type du bloc (inconnu → placeholder "unknown", jamais d'exception)
        content:     contenu normalisé (un dict est normalisé au préalable)
        breakpoint:  "desktop" | "tablet" | "mobile"
        icons:       IconResolver (lookup(name) → RenderableIcon)
        scope:       id du bloc ; remplace `selector` dans le CSS personnalisé par `.widget-<scope>`

    Returns:
        CompiledStyle (déclarations, classes de visibilité, indications de rendu, attributs libres)
    """
    if breakpoint not in BREAKPOINTS:
        raise ValueError(f"Breakpoint inconnu : {breakpoint!r}. Attendu : {list(BREAKPOINTS)}")

    fn = WIDGET_COMPILERS.get(widget_type)
    if fn is None:
        log.debug("Compilation : type %r inconnu, placeholder", widget_type)
        return unknown_style(widget_type)

    if not isinstance(content, content_model(widget_type)):
        from ..migration.normalize import normalize
        content = normalize(widget_type, content)

    declarations, hints = fn(content, breakpoint, icons or DEFAULT_ICONS)
    declarations = styles.compact(declarations)

    advanced = getattr(content, "advanced", None)
    visibility = getattr(advanced, "responsive", None)
    hidden = breakpoint in styles.hidden_breakpoints(visibility)
    if hidden:
        declarations["display"] = "none"

    custom_css = getattr(advanced, "custom_css", None)
    if custom_css and scope:
        custom_css = custom_css.replace("selector", f".widget-{scope}")

    return CompiledStyle(
        declarations=declarations,
        visibility_classes=styles.visibility_classes(visibility),
        hints=hints,
        hidden=hidden,
        css_id=getattr(advanced, "css_id", None) or None,
        css_classes=getattr(advanced, "css_classes", None) or None,
        custom_css=custom_css or None,
    )


def compile_block(block, breakpoint: str = "desktop", *, icons=None) -> CompiledStyle:
    """Raccourci : compile un Block avec son id comme portée du CSS personnalisé."""
    return compile_style(block.type, block.content, breakpoint, icons=icons, scope=block.id)
