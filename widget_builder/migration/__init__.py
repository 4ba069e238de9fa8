"""Migration des contenus historiques + complétion par les valeurs par défaut."""
from .legacy import migrate, LEGACY_MIGRATIONS
from .normalize import normalize, validate_content, load_block, load_document, load_page

__all__ = ["migrate", "LEGACY_MIGRATIONS", "normalize", "validate_content", "load_block", "load_document", "load_page"]
