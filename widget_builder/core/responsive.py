"""
Résolution des valeurs responsive.

Règle unique pour toutes les propriétés (tailles, gaps, colonnes, spans, alignement) :
la valeur du breakpoint si elle est présente et non nulle, sinon desktop.
"""
from typing import Any, Literal, Tuple

from .config import MOBILE_MAX_WIDTH, TABLET_MAX_WIDTH

Breakpoint = Literal["desktop", "tablet", "mobile"]

BREAKPOINTS: Tuple[str, ...] = ("desktop", "tablet", "mobile")


def resolve(value: Any, breakpoint: str = "desktop") -> Any:
    """
    Résout une valeur responsive pour un breakpoint.

    Args:
        value:      ResponsiveValue, dict {desktop, tablet?, mobile?} ou scalaire
                    (traité comme {desktop: scalaire})
        breakpoint: "desktop" | "tablet" | "mobile"

    Returns:
        La valeur du breakpoint, ou desktop à défaut.
    """
    if breakpoint not in BREAKPOINTS:
        raise ValueError(f"Breakpoint inconnu : {breakpoint!r}. Attendu : {list(BREAKPOINTS)}")
    if isinstance(value, dict):
        picked = value.get(breakpoint)
        return picked if picked is not None else value.get("desktop")
    if hasattr(value, "desktop"):
        picked = getattr(value, breakpoint, None)
        return picked if picked is not None else value.desktop
    return value


def media_query(breakpoint: str) -> str:
    """Condition CSS @media du breakpoint. Plages disjointes : un breakpoint non surchargé reprend desktop."""
    if breakpoint == "tablet":
        return f"(min-width: {MOBILE_MAX_WIDTH + 1}px) and (max-width: {TABLET_MAX_WIDTH}px)"
    if breakpoint == "mobile":
        return f"(max-width: {MOBILE_MAX_WIDTH}px)"
    if breakpoint == "desktop":
        return f"(min-width: {TABLET_MAX_WIDTH + 1}px)"
    raise ValueError(f"Breakpoint inconnu : {breakpoint!r}")
