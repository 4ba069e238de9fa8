"""
Mode code : un bloc peut être rendu depuis du HTML saisi à la main.

visual → code : idempotent, le contenu est conservé, htmlContent amorcé
depuis le rendu du contenu s'il est vide.
code → visual : htmlContent abandonné, l'historique est conservé.
"Appliquer" valide le tampon et empile une version (20 au plus, la plus
récente en tête) ; "restaurer" remet une version sans en créer de nouvelle.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..core.config import CODE_HISTORY_LIMIT
from ..core.ids import now_iso
from ..core.schemas import Block, VersionEntry

log = logging.getLogger(__name__)


def _parse_ts(ts: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(ts.replace("Z", "+00:00"))
    except ValueError:
        return None


def _next_timestamp(history: List[VersionEntry], now: Optional[datetime] = None) -> str:
    """Horodatage strictement croissant par bloc (+1 ms si l'horloge n'a pas avancé)."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    # même précision que les horodatages stockés
    now = now.replace(microsecond=now.microsecond // 1000 * 1000)
    latest = _parse_ts(history[0].timestamp) if history else None
    if latest is not None and now <= latest:
        now = latest + timedelta(milliseconds=1)
    return now_iso(now)


def enter_code_mode(block: Block, *, icons=None) -> Block:
    """Passe le bloc en mode code (sans effet s'il y est déjà)."""
    if block.mode == "code":
        return block
    html = block.html_content
    if html is None:
        from ..renderer.html import render_visual
        html = render_visual(block, icons=icons)
    log.debug("Bloc %s : passage en mode code", block.id)
    return block.model_copy(update={"mode": "code", "html_content": html})


def revert_to_visual(block: Block) -> Block:
    """Retour au rendu depuis le contenu ; le HTML courant est abandonné, l'historique reste."""
    if block.mode == "visual" and block.html_content is None:
        return block
    log.debug("Bloc %s : retour au mode visuel", block.id)
    return block.model_copy(update={"mode": "visual", "html_content": None})


def apply_code(block: Block, buffer: str, now: Optional[datetime] = None) -> Block:
    """Valide `buffer` dans htmlContent et empile une version horodatée."""
    entry = VersionEntry(timestamp=_next_timestamp(block.code_version_history, now), html_content=buffer)
    history = [entry, *block.code_version_history][:CODE_HISTORY_LIMIT]
    return block.model_copy(update={
        "mode": "code",
        "html_content": buffer,
        "code_version_history": history,
    })


def restore_version(block: Block, timestamp: str) -> Block:
    """Remet la version `timestamp` dans htmlContent, sans nouvelle entrée d'historique."""
    entry = next((v for v in block.code_version_history if v.timestamp == timestamp), None)
    if entry is None:
        log.debug("Bloc %s : version %s introuvable", block.id, timestamp)
        return block
    return block.model_copy(update={"html_content": entry.html_content})


class CodeEditorSession:
    """
    Tampon d'édition non validé d'un bloc en mode code.

    Les frappes modifient seulement le tampon ; l'historique n'évolue qu'à apply().
    """

    def __init__(self, block: Block, *, icons=None):
        self.block = enter_code_mode(block, icons=icons)
        self.buffer = self.block.html_content or ""

    @property
    def dirty(self) -> bool:
        return self.buffer != (self.block.html_content or "")

    @property
    def history(self) -> List[VersionEntry]:
        return list(self.block.code_version_history)

    def edit(self, text: str) -> None:
        self.buffer = text

    def apply(self, now: Optional[datetime] = None) -> Block:
        self.block = apply_code(self.block, self.buffer, now)
        return self.block

    def restore(self, timestamp: str) -> Block:
        self.block = restore_version(self.block, timestamp)
        self.buffer = self.block.html_content or ""
        return self.block

    def discard(self) -> None:
        """Abandonne les modifications non appliquées."""
        self.buffer = self.block.html_content or ""

    def close(self) -> Block:
        """Retour au mode visuel ("Back to Visual") : tampon et htmlContent abandonnés."""
        self.block = revert_to_visual(self.block)
        self.buffer = ""
        return self.block
