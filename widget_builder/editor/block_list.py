"""
Liste de blocs : insertion, déplacement, duplication, suppression.

Fonctions pures : chaque opération renvoie une nouvelle liste et réutilise
les instances non touchées. Un id inconnu ne lève pas : la liste est
renvoyée inchangée (courses possibles entre actions UI et références périmées).
"""
import logging
from typing import Any, Callable, List, Optional

from ..blocks.commerce import countdown_target
from ..blocks.registry import default_content
from ..core.ids import generate_block_id
from ..core.schemas import Block, TemplateRecord
from ..migration.normalize import load_block

log = logging.getLogger(__name__)

IdFactory = Callable[[], str]


# ── Lecture ─────────────────────────────────────────────────────────────────

def index_of(blocks: List[Block], block_id: str) -> int:
    return next((i for i, b in enumerate(blocks) if b.id == block_id), -1)


def find_block(blocks: List[Block], block_id: str) -> Optional[Block]:
    idx = index_of(blocks, block_id)
    return blocks[idx] if idx >= 0 else None


def _clamp(index: Optional[int], length: int) -> int:
    if index is None:
        return length
    return max(0, min(index, length))


def _unique_id(factory: IdFactory, taken: set) -> str:
    new_id = factory()
    while new_id in taken:
        new_id = factory()
    taken.add(new_id)
    return new_id


# ── Création ────────────────────────────────────────────────────────────────

def new_block(widget_type: str, *, id_factory: Optional[IdFactory] = None) -> Block:
    """
    Nouveau bloc du type avec son contenu par défaut.

    Raises:
        UnknownWidgetType: si le type n'est pas enregistré
    """
    content = default_content(widget_type)
    if widget_type == "countdown":
        content = content.model_copy(update={"target_date": countdown_target()})
    return Block(id=(id_factory or generate_block_id)(), type=widget_type, content=content)


def _clone(block: Block, new_id: str) -> Block:
    # Copie profonde : contenu et historique indépendants de l'original
    return block.model_copy(update={"id": new_id}, deep=True)


def _sources(source: Any) -> List[Any]:
    if isinstance(source, TemplateRecord):
        return source.raw_blocks()
    if isinstance(source, (list, tuple)):
        return list(source)
    return [source]


def insert(blocks: List[Block], source: Any, index: Optional[int] = None, *,
           id_factory: Optional[IdFactory] = None) -> List[Block]:
    """
    Insère un ou plusieurs blocs à `index` (borné à [0, len] ; None → fin).

    Args:
        source: type de widget, Block, bloc brut (dict), liste de blocs bruts
                ou TemplateRecord. Les blocs importés ou clonés reçoivent
                toujours un nouvel id, distinct de tous ceux du document.

    Raises:
        UnknownWidgetType: pour un type de widget inconnu
    """
    factory = id_factory or generate_block_id
    taken = {b.id for b in blocks}
    created: List[Block] = []
    for item in _sources(source):
        if isinstance(item, str):
            block = new_block(item, id_factory=lambda: _unique_id(factory, taken))
        else:
            block = _clone(load_block(item, factory), _unique_id(factory, taken))
        created.append(block)

    pos = _clamp(index, len(blocks))
    log.debug("Insertion de %d bloc(s) en position %d", len(created), pos)
    return [*blocks[:pos], *created, *blocks[pos:]]


def import_template(blocks: List[Block], template: Any, index: Optional[int] = None, *,
                    id_factory: Optional[IdFactory] = None) -> List[Block]:
    """Import d'un modèle (TemplateRecord, bloc brut ou liste) ; ids toujours régénérés."""
    if isinstance(template, dict) and "content" in template and "name" in template:
        template = TemplateRecord.model_validate(template)
    return insert(blocks, template, index, id_factory=id_factory)


# ── Réorganisation ──────────────────────────────────────────────────────────

def move(blocks: List[Block], from_id: str, to_index: int) -> List[Block]:
    """Déplace le bloc ; les autres gardent leur ordre relatif et leur identité."""
    idx = index_of(blocks, from_id)
    if idx < 0:
        log.debug("move : bloc %s introuvable", from_id)
        return list(blocks)
    rest = [*blocks[:idx], *blocks[idx + 1:]]
    pos = _clamp(to_index, len(rest))
    return [*rest[:pos], blocks[idx], *rest[pos:]]


def duplicate(blocks: List[Block], block_id: str, *,
              id_factory: Optional[IdFactory] = None) -> List[Block]:
    """Copie profonde insérée juste après l'original, avec un nouvel id."""
    idx = index_of(blocks, block_id)
    if idx < 0:
        log.debug("duplicate : bloc %s introuvable", block_id)
        return list(blocks)
    taken = {b.id for b in blocks}
    copy = _clone(blocks[idx], _unique_id(id_factory or generate_block_id, taken))
    return [*blocks[:idx + 1], copy, *blocks[idx + 1:]]


def delete(blocks: List[Block], block_id: str,
           confirm: Optional[Callable[[Block], bool]] = None) -> List[Block]:
    """
    Supprime le bloc. `confirm(block)` renvoyant False annule (liste inchangée).
    """
    idx = index_of(blocks, block_id)
    if idx < 0:
        log.debug("delete : bloc %s introuvable", block_id)
        return list(blocks)
    if confirm is not None and not confirm(blocks[idx]):
        log.debug("delete : suppression de %s annulée", block_id)
        return list(blocks)
    return [*blocks[:idx], *blocks[idx + 1:]]


def replace(blocks: List[Block], block: Block) -> List[Block]:
    """Remplace le bloc de même id."""
    idx = index_of(blocks, block.id)
    if idx < 0:
        log.debug("replace : bloc %s introuvable", block.id)
        return list(blocks)
    return [*blocks[:idx], block, *blocks[idx + 1:]]