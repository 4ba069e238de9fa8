"""Identifiants de blocs et horodatages."""
import random
import string
import time
from datetime import datetime, timezone
from typing import Optional

from .config import ID_PREFIX


def _rand(n: int = 9) -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=n))


def generate_block_id(prefix: str = ID_PREFIX) -> str:
    """`block-<ms epoch>-<9 caractères>`"""
    return f"{prefix}-{int(time.time() * 1000)}-{_rand()}"


def now_iso(now: Optional[datetime] = None) -> str:
    """Horodatage ISO-8601 UTC à la milliseconde (suffixe Z)."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
