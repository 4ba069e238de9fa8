"""Opérations d'édition : liste de blocs, mode code, propriétés."""
from .block_list import (
    index_of, find_block, new_block, insert, import_template, move, duplicate, delete, replace,
)
from .code_mode import (
    enter_code_mode, revert_to_visual, apply_code, restore_version, CodeEditorSession,
)
from .patch import (
    TABS, EDITOR_REGISTRY, eligible_fields, patch, dispatch, set_box_side, toggle_linked, set_responsive,
)
from ..core.ids import generate_block_id

__all__ = [
    "index_of", "find_block", "new_block", "generate_block_id", "insert", "import_template",
    "move", "duplicate", "delete", "replace",
    "enter_code_mode", "revert_to_visual", "apply_code", "restore_version", "CodeEditorSession",
    "TABS", "EDITOR_REGISTRY", "eligible_fields", "patch", "dispatch",
    "set_box_side", "toggle_linked", "set_responsive",
]
