"""
Application des modifications de propriétés.

patch()    : fusion superficielle d'un contenu partiel sur le contenu du bloc,
             puis revalidation dans le modèle du type.
dispatch() : même chose après filtrage par onglet (content | style | advanced) ;
             les clés hors onglet sont ignorées.
L'id, le mode, htmlContent et l'historique ne sont jamais touchés ici.
"""
import logging
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ValidationError

from ..blocks.base import OpaqueContent
from ..blocks.registry import content_model, is_known_type
from ..core.responsive import BREAKPOINTS
from ..core.schemas import Block
from .block_list import index_of

log = logging.getLogger(__name__)

TABS = ("content", "style", "advanced")

# Champs de premier niveau éditables par onglet, pour les widgets à onglets
_STYLED = {
    "heading":        {"content": {"text", "link", "size", "level", "alignment"},
                       "style": {"style"}, "advanced": {"advanced"}},
    "button":         {"content": {"text", "link", "icon", "button_type", "alignment"},
                       "style": {"style"}, "advanced": {"advanced"}},
    "container":      {"content": {"layout", "shape_divider"},
                       "style": {"background", "border", "shadow"}, "advanced": {"advanced"}},
    "grid":           {"content": {"layout"},
                       "style": {"background", "border", "shadow"}, "advanced": {"advanced"}},
    "flex-container": {"content": {"layout", "canvas_interaction"},
                       "style": {"background", "border", "shadow"}, "advanced": {"advanced"}},
    "smart-grid":     {"content": {"layout", "canvas_interaction"},
                       "style": {"background", "border", "shadow"}, "advanced": {"advanced"}},
}

EDITOR_REGISTRY: Dict[str, Dict[str, FrozenSet[str]]] = {
    t: {tab: frozenset(fields) for tab, fields in tabs.items()} for t, tabs in _STYLED.items()
}


def eligible_fields(widget_type: str, tab: str) -> Optional[FrozenSet[str]]:
    """
    Champs (snake_case) modifiables depuis `tab`.
    None = pas de restriction (type sans schéma : features, faq, inconnu).
    """
    if tab not in TABS:
        raise ValueError(f"Onglet inconnu : {tab!r}. Attendu : {list(TABS)}")
    if widget_type in EDITOR_REGISTRY:
        return EDITOR_REGISTRY[widget_type].get(tab, frozenset())
    model = content_model(widget_type) if is_known_type(widget_type) else OpaqueContent
    if model is OpaqueContent:
        return None
    # Widgets simples : un seul panneau, tout est dans "content"
    return frozenset(model.model_fields) if tab == "content" else frozenset()


def _field_name(model, key: str) -> Optional[str]:
    if key in model.model_fields:
        return key
    return next((name for name, f in model.model_fields.items() if f.alias == key), None)


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def _merge(block: Block, partial: dict):
    current = block.content.model_dump(by_alias=True)
    model = content_model(block.type) if is_known_type(block.type) else OpaqueContent
    if model is OpaqueContent:
        return OpaqueContent.model_validate({**current, **_plain(partial)})

    merged = dict(current)
    touched = set()
    for key, value in partial.items():
        name = _field_name(model, key)
        if name is None:
            log.debug("patch %s : clé %r ignorée", block.type, key)
            continue
        alias = model.model_fields[name].alias or name
        merged[alias] = _plain(value)
        touched.add(alias)

    while True:
        try:
            return model.model_validate(merged)
        except ValidationError as exc:
            rejected = {err["loc"][0] for err in exc.errors() if err["loc"]} & touched
            if not rejected:
                log.warning("patch %s : contenu invalide, bloc %s inchangé", block.type, block.id)
                return block.content
            # valeurs refusées : on garde les valeurs courantes
            log.warning("patch %s : valeurs invalides ignorées %s", block.type, sorted(rejected))
            for alias in rejected:
                merged[alias] = current[alias]
            touched -= rejected


def patch(blocks: List[Block], block_id: str, partial: dict) -> List[Block]:
    """
    Fusionne `partial` (clés camelCase ou snake_case) sur le contenu du bloc.
    Id inconnu → liste inchangée.
    """
    idx = index_of(blocks, block_id)
    if idx < 0:
        log.debug("patch : bloc %s introuvable", block_id)
        return list(blocks)
    block = blocks[idx]
    updated = block.model_copy(update={"content": _merge(block, partial)})
    return [*blocks[:idx], updated, *blocks[idx + 1:]]


def dispatch(blocks: List[Block], block_id: str, tab: str, partial: dict) -> List[Block]:
    """Route une modification de l'éditeur `(type, onglet)` vers patch()."""
    idx = index_of(blocks, block_id)
    if idx < 0:
        log.debug("dispatch : bloc %s introuvable", block_id)
        return list(blocks)
    block = blocks[idx]
    allowed = eligible_fields(block.type, tab)
    if allowed is None:
        return patch(blocks, block_id, partial)

    model = content_model(block.type)
    kept, dropped = {}, []
    for key, value in partial.items():
        if _field_name(model, key) in allowed:
            kept[key] = value
        else:
            dropped.append(key)
    if dropped:
        log.info("dispatch %s/%s : clés hors onglet ignorées %s", block.type, tab, dropped)
    if not kept:
        return list(blocks)
    return patch(blocks, block_id, kept)


# ── Box model / responsive ──────────────────────────────────────────────────

def _sides(box: BaseModel) -> List[str]:
    return [name for name in type(box).model_fields if name != "linked"]


def set_box_side(box: BaseModel, side: str, value) -> BaseModel:
    """Côté (ou coin) modifié ; lié → les quatre prennent la valeur."""
    sides = _sides(box)
    if side not in sides:
        raise ValueError(f"Côté inconnu : {side!r}. Attendu : {sides}")
    if box.linked:
        return box.model_copy(update={s: value for s in sides})
    return box.model_copy(update={side: value})


def toggle_linked(box: BaseModel) -> BaseModel:
    """Lier recopie la première valeur (haut / haut-gauche) sur tous les côtés."""
    if box.linked:
        return box.model_copy(update={"linked": False})
    sides = _sides(box)
    first = getattr(box, sides[0])
    return box.model_copy(update={"linked": True, **{s: first for s in sides}})


def set_responsive(value: BaseModel, breakpoint: str, new_value) -> BaseModel:
    """Modifie un seul breakpoint d'une valeur responsive."""
    if breakpoint not in BREAKPOINTS:
        raise ValueError(f"Breakpoint inconnu : {breakpoint!r}. Attendu : {list(BREAKPOINTS)}")
    return value.model_copy(update={breakpoint: new_value})
