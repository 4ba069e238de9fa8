"""
API publique du widget builder : session d'édition d'une page.
"""
import logging
from typing import Callable, List, Optional

from .core.schemas import Block, PageDocument, TemplateRecord
from .editor import block_list, code_mode
from .editor.patch import dispatch, patch
from .migration.normalize import load_page
from .renderer.compiler import CompiledStyle, compile_block
from .renderer.html import render_block as _render_block, render_document as _render_document

log = logging.getLogger(__name__)


class PageBuilder:
    """
    Session d'édition d'une page (un seul éditeur, opérations synchrones).

    Usage:
        >>> builder = PageBuilder(store=MemoryPageStore())
        >>> builder.load("home")
        >>> block = builder.add("heading")
        >>> builder.update(block.id, {"text": "Bienvenue"})
        >>> html = builder.render()
        >>> builder.save()
    """

    def __init__(self, store=None, templates=None, icons=None,
                 id_factory: Optional[Callable[[], str]] = None):
        """
        Args:
            store:      PageStore (load_document / save_document)
            templates:  TemplateSource (fetch_templates)
            icons:      IconResolver passé au compilateur
            id_factory: générateur d'ids de blocs (défaut : block-<ms>-<aléa>)
        """
        self.store = store
        self.templates = templates
        self.icons = icons
        self.id_factory = id_factory
        self.page_id: Optional[str] = None
        self.page = PageDocument()

    # ── Document ────────────────────────────────────────────────────────────

    @property
    def blocks(self) -> List[Block]:
        return self.page.blocks

    def _set_blocks(self, blocks: List[Block]) -> List[Block]:
        self.page = self.page.model_copy(update={"blocks": blocks})
        return blocks

    def load(self, page_id: str) -> PageDocument:
        """Charge et normalise la page `page_id` depuis le store."""
        if self.store is None:
            raise RuntimeError("Aucun PageStore configuré")
        self.page = load_page(self.store.load_document(page_id), self.id_factory)
        self.page_id = page_id
        log.info("Page %s chargée : %d bloc(s)", page_id, len(self.page.blocks))
        return self.page

    def save(self) -> None:
        """Écrit les blocs (tagués schemaVersion) dans le store."""
        if self.store is None or self.page_id is None:
            raise RuntimeError("Aucune page chargée")
        self.store.save_document(self.page_id, [b.to_storage() for b in self.page.blocks])
        log.info("Page %s sauvegardée", self.page_id)

    def find(self, block_id: str) -> Optional[Block]:
        return block_list.find_block(self.blocks, block_id)

    # ── Liste de blocs ──────────────────────────────────────────────────────

    def add(self, widget_type: str, index: Optional[int] = None) -> Block:
        """Ajoute un widget avec son contenu par défaut ; renvoie le bloc créé."""
        before = {b.id for b in self.blocks}
        blocks = self._set_blocks(block_list.insert(self.blocks, widget_type, index, id_factory=self.id_factory))
        return next(b for b in blocks if b.id not in before)

    def import_template(self, template, index: Optional[int] = None) -> List[Block]:
        """
        Importe un modèle (TemplateRecord, id de modèle du TemplateSource, bloc(s) brut(s)).

        Returns:
            Les blocs insérés (ids régénérés)
        """
        if isinstance(template, str):
            template = self._template(template)
        before = {b.id for b in self.blocks}
        blocks = self._set_blocks(
            block_list.import_template(self.blocks, template, index, id_factory=self.id_factory)
        )
        return [b for b in blocks if b.id not in before]

    def _template(self, template_id: str) -> TemplateRecord:
        if self.templates is None:
            raise RuntimeError("Aucun TemplateSource configuré")
        for record in self.templates.fetch_templates():
            if record.id == template_id:
                return record
        raise KeyError(f"Modèle inconnu : {template_id!r}")

    def move(self, block_id: str, to_index: int) -> List[Block]:
        return self._set_blocks(block_list.move(self.blocks, block_id, to_index))

    def duplicate(self, block_id: str) -> List[Block]:
        return self._set_blocks(block_list.duplicate(self.blocks, block_id, id_factory=self.id_factory))

    def delete(self, block_id: str, confirm: Optional[Callable[[Block], bool]] = None) -> List[Block]:
        return self._set_blocks(block_list.delete(self.blocks, block_id, confirm))

    # ── Propriétés ──────────────────────────────────────────────────────────

    def update(self, block_id: str, partial: dict, tab: Optional[str] = None) -> List[Block]:
        """Modification de propriétés ; `tab` restreint les champs à l'onglet de l'éditeur."""
        if tab is None:
            return self._set_blocks(patch(self.blocks, block_id, partial))
        return self._set_blocks(dispatch(self.blocks, block_id, tab, partial))

    # ── Mode code ───────────────────────────────────────────────────────────

    def _with_block(self, block_id: str, fn: Callable[[Block], Block]) -> Optional[Block]:
        block = self.find(block_id)
        if block is None:
            log.debug("Bloc %s introuvable", block_id)
            return None
        updated = fn(block)
        self._set_blocks(block_list.replace(self.blocks, updated))
        return updated

    def enter_code_mode(self, block_id: str) -> Optional[Block]:
        return self._with_block(block_id, lambda b: code_mode.enter_code_mode(b, icons=self.icons))

    def revert_to_visual(self, block_id: str) -> Optional[Block]:
        return self._with_block(block_id, code_mode.revert_to_visual)

    def apply_code(self, block_id: str, html: str) -> Optional[Block]:
        return self._with_block(block_id, lambda b: code_mode.apply_code(b, html))

    def restore_version(self, block_id: str, timestamp: str) -> Optional[Block]:
        return self._with_block(block_id, lambda b: code_mode.restore_version(b, timestamp))

    # ── Rendu ───────────────────────────────────────────────────────────────

    def compile(self, block_id: str, breakpoint: str = "desktop") -> Optional[CompiledStyle]:
        block = self.find(block_id)
        return compile_block(block, breakpoint, icons=self.icons) if block else None

    def render_block(self, block_id: str, breakpoint: str = "desktop") -> str:
        block = self.find(block_id)
        return _render_block(block, breakpoint, icons=self.icons) if block else ""

    def render(self) -> str:
        """HTML complet de la page courante."""
        return _render_document(self.page, icons=self.icons)


# Fonction raccourcie pour usage direct
def render_page(page: PageDocument, icons=None) -> str:
    """
    Rend une page en HTML complet (fonction raccourcie).

    Args:
        page:  PageDocument (ou dict stocké {"title", "blocks"})
        icons: IconResolver optionnel
    """
    if not isinstance(page, PageDocument):
        page = load_page(page)
    return _render_document(page, icons=icons)
