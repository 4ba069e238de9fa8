"""Core module pour widget_builder."""
from .config import CODE_HISTORY_LIMIT, SCHEMA_VERSION, EMPTY_CODE_BLOCK
from .errors import WidgetBuilderError, UnknownWidgetType, MigrationError
from .responsive import Breakpoint, BREAKPOINTS, resolve, media_query
from .ids import generate_block_id, now_iso
