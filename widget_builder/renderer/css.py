"""
Feuille de style d'une page : une règle `.widget-<id>` par bloc visuel.

Ordre par bloc :
  1. règle de base (déclarations desktop)
  2. règle :hover (boutons)
  3. surcharges tablet / mobile (plages @media disjointes, seulement ce qui diffère)
  4. CSS personnalisé, en dernier
"""
from typing import Iterable, List

from ..core.responsive import media_query
from .compiler import compile_block


def rule(selector: str, declarations: dict) -> str:
    body = "; ".join(f"{k}: {v}" for k, v in declarations.items())
    return f"{selector} {{ {body}; }}" if body else ""


def _overrides(base: dict, target: dict) -> dict:
    changed = {k: v for k, v in target.items() if base.get(k) != v}
    # Propriété posée en desktop mais absente du breakpoint (ex. display: none) → valeur par défaut
    changed.update({k: "revert" for k in base if k not in target})
    return changed


def block_css(block, icons=None) -> str:
    """CSS scopé d'un bloc. Un bloc en mode code n'a pas de règles calculées."""
    if block.mode == "code":
        return ""
    selector = f".widget-{block.id}"
    desktop = compile_block(block, "desktop", icons=icons)
    parts: List[str] = [rule(selector, desktop.declarations)]

    hover_rule = desktop.hints.get("hover_rule")
    if hover_rule:
        parts.append(f"{selector}:hover {{ {hover_rule} }}")

    for bp in ("tablet", "mobile"):
        compiled = compile_block(block, bp, icons=icons)
        changed = _overrides(desktop.declarations, compiled.declarations)
        if changed:
            parts.append(f"@media {media_query(bp)} {{ {rule(selector, changed)} }}")

    if desktop.custom_css:
        parts.append(desktop.custom_css)
    return "\n".join(p for p in parts if p)


def generate_page_css(blocks: Iterable, icons=None) -> str:
    """CSS complet de la page (blocs dans l'ordre du document)."""
    return "\n\n".join(css for css in (block_css(b, icons) for b in blocks) if css)
