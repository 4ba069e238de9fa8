"""
Normalisation des contenus stockés : enveloppe → migration → complétion par défauts.

La fusion avec les défauts est portée par les modèles : chaque catégorie
(box model, typo, couleur, responsive, fond, bordure, ombre, avancé) est un
sous-modèle dont les champs absents reprennent leur valeur par défaut.
Les tableaux (images, items, stops…) et les valeurs responsive stockées
remplacent la valeur par défaut en bloc.
"""
import copy
import logging
from typing import Any, Callable, List, Optional

from pydantic import ValidationError
from pydantic.alias_generators import to_camel, to_snake

from ..blocks.base import ContentModel, OpaqueContent
from ..blocks.registry import content_key, content_model, is_known_type, is_legacy_shape
from ..core.config import CODE_HISTORY_LIMIT, SCHEMA_VERSION
from ..core.errors import MigrationError
from ..core.ids import generate_block_id
from .legacy import migrate

log = logging.getLogger(__name__)

_MAX_SALVAGE_ROUNDS = 3
_DROP = object()


# ── Contenu ─────────────────────────────────────────────────────────────────

def normalize(widget_type: str, raw: Any = None, schema_version: Optional[int] = None) -> ContentModel:
    """
    Contenu complet et valide pour `widget_type`.

    Args:
        widget_type:    type du bloc (inconnu → contenu conservé tel quel)
        raw:            dict stocké (forme courante, historique ou enveloppée),
                        instance de ContentModel, ou None
        schema_version: tag schemaVersion du bloc stocké ; la version courante
                        désactive la détection des formes historiques

    Returns:
        Une instance du modèle du type. Ne lève jamais pour un type connu :
        un contenu illisible retombe sur les valeurs par défaut (log WARNING).
    """
    if not is_known_type(widget_type):
        return _opaque(widget_type, raw)

    model = content_model(widget_type)
    if raw is None:
        return model()
    if isinstance(raw, model):
        return raw
    if isinstance(raw, ContentModel):
        raw, schema_version = raw.to_storage(), SCHEMA_VERSION
    if not isinstance(raw, dict):
        log.warning("Contenu %s illisible (%s) : valeurs par défaut", widget_type, type(raw).__name__)
        return model()

    raw = _unwrap(widget_type, raw)
    if schema_version != SCHEMA_VERSION and is_legacy_shape(widget_type, raw):
        try:
            raw = migrate(widget_type, raw)
        except MigrationError as exc:
            log.warning("Migration %s impossible (%s) : valeurs par défaut", widget_type, exc)
            return model()

    return _validate(widget_type, model, raw)


def validate_content(widget_type: str, raw: Any, schema_version: Optional[int] = None) -> ContentModel:
    """
    Variante stricte de normalize() : aucune récupération.

    Raises:
        UnknownWidgetType: type non enregistré
        MigrationError:    contenu historique incohérent
        ValidationError:   contenu invalide pour le modèle du type
    """
    model = content_model(widget_type)
    if raw is None:
        return model()
    if isinstance(raw, model):
        return raw
    if isinstance(raw, ContentModel):
        raw, schema_version = raw.to_storage(), SCHEMA_VERSION
    if not isinstance(raw, dict):
        raise MigrationError(f"Contenu {widget_type} illisible : {type(raw).__name__}")
    raw = _unwrap(widget_type, raw)
    if schema_version != SCHEMA_VERSION and is_legacy_shape(widget_type, raw):
        raw = migrate(widget_type, raw)
    return model.model_validate(raw)


def _opaque(widget_type: str, raw: Any) -> ContentModel:
    if isinstance(raw, ContentModel):
        return raw
    log.debug("Type %r non enregistré : contenu conservé tel quel", widget_type)
    return OpaqueContent.model_validate(raw if isinstance(raw, dict) else {})


def _unwrap(widget_type: str, raw: dict) -> dict:
    """{"flexContainer": {...}} → {...}"""
    key = content_key(widget_type)
    if len(raw) == 1 and isinstance(raw.get(key), dict):
        return raw[key]
    return raw


def _validate(widget_type: str, model, raw: dict) -> ContentModel:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        errors = exc.errors()

    # Champs invalides retirés : ils reprennent leur valeur par défaut
    data = copy.deepcopy(raw)
    for _ in range(_MAX_SALVAGE_ROUNDS):
        targets = {}
        for err in errors:
            target = _target(data, err["loc"])
            if target is not None:
                targets[(id(target[0]), target[1])] = target
        if not targets:
            break
        for parent, key in targets.values():
            if isinstance(parent, dict):
                parent.pop(key, None)
            else:
                parent[key] = _DROP
        data = _strip(data)
        log.warning("Contenu %s : champs invalides ignorés %s", widget_type,
                    sorted(".".join(str(p) for p in e["loc"]) for e in errors))
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors()

    log.warning("Contenu %s non récupérable : valeurs par défaut", widget_type)
    return model()


def _find_key(node: dict, part: str) -> Optional[str]:
    for candidate in (part, to_camel(part), to_snake(part)):
        if candidate in node:
            return candidate
    return None


def _target(data: Any, loc: tuple) -> Optional[tuple]:
    """(conteneur, clé) de la valeur la plus profonde encore présente le long de `loc`."""
    parent, key, node = None, None, data
    for part in loc:
        if isinstance(node, dict) and isinstance(part, str) and _find_key(node, part) is not None:
            found = _find_key(node, part)
            parent, key, node = node, found, node[found]
        elif isinstance(node, list) and isinstance(part, int) and 0 <= part < len(node):
            parent, key, node = node, part, node[part]
        else:
            break
    if parent is None:
        return None
    return parent, key


def _strip(node: Any) -> Any:
    if isinstance(node, dict):
        return {k: _strip(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_strip(v) for v in node if v is not _DROP]
    return node


# ── Blocs ───────────────────────────────────────────────────────────────────

def _clean_history(history: Any) -> List[dict]:
    if not isinstance(history, list):
        return []
    entries = []
    for entry in history:
        if hasattr(entry, "model_dump"):
            entry = entry.model_dump(by_alias=True)
        if not isinstance(entry, dict):
            log.debug("Entrée d'historique ignorée : %r", entry)
            continue
        ts = entry.get("timestamp")
        html = entry.get("htmlContent", entry.get("html_content"))
        if not isinstance(ts, str) or not isinstance(html, str):
            log.debug("Entrée d'historique ignorée : %r", entry)
            continue
        entries.append({"timestamp": ts, "htmlContent": html})
    return entries[:CODE_HISTORY_LIMIT]


def load_block(raw: Any, id_factory: Optional[Callable[[], str]] = None):
    """
    Bloc stocké (forme quelconque) → Block normalisé.

    id absent → généré ; mode inconnu → visual ; entrées d'historique
    malformées ignorées ; historique limité à CODE_HISTORY_LIMIT.

    Raises:
        MigrationError: si `raw` n'est pas un objet
    """
    from ..core.schemas import Block

    if isinstance(raw, Block):
        return raw
    if not isinstance(raw, dict):
        raise MigrationError(f"Bloc illisible : {type(raw).__name__}")

    data = dict(raw)
    if not isinstance(data.get("id"), str) or not data["id"]:
        data["id"] = (id_factory or generate_block_id)()
    if not isinstance(data.get("type"), str):
        data["type"] = "unknown"
    if data.get("mode") not in ("visual", "code"):
        if data.get("mode") is not None:
            log.debug("Bloc %s : mode %r inconnu, visual", data["id"], data["mode"])
        data["mode"] = "visual"

    html = data.pop("html_content", data.get("htmlContent"))
    data["htmlContent"] = html if isinstance(html, str) else None

    history = data.pop("code_version_history", data.get("codeVersionHistory"))
    data["codeVersionHistory"] = _clean_history(history)

    return Block.model_validate(data)


def load_document(raw_blocks: Any, id_factory: Optional[Callable[[], str]] = None) -> list:
    """
    Liste stockée → liste de Block aux ids deux à deux distincts.
    Un bloc illisible est ignoré (WARNING) ; un id dupliqué est régénéré (WARNING).
    """
    factory = id_factory or generate_block_id
    blocks, seen = [], set()
    for raw in raw_blocks or []:
        try:
            block = load_block(raw, factory)
        except MigrationError as exc:
            log.warning("Bloc ignoré : %s", exc)
            continue
        if block.id in seen:
            new_id = _fresh_id(factory, seen)
            log.warning("Id dupliqué %s → %s", block.id, new_id)
            block = block.model_copy(update={"id": new_id})
        seen.add(block.id)
        blocks.append(block)
    return blocks


def load_page(raw: Any, id_factory: Optional[Callable[[], str]] = None):
    """{"title", "blocks"} stocké → PageDocument."""
    from ..core.schemas import PageDocument

    raw = raw if isinstance(raw, dict) else {}
    title = raw.get("title")
    return PageDocument(
        title=title if isinstance(title, str) else "",
        blocks=load_document(raw.get("blocks"), id_factory),
    )


def _fresh_id(factory: Callable[[], str], taken: set) -> str:
    new_id = factory()
    while new_id in taken:
        new_id = factory()
    return new_id
