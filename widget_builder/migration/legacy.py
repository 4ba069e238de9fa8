"""
Migrations des formes historiques vers le schéma courant.

Une fonction pure par type : dict historique → dict au format courant.
Les champs non mentionnés sont laissés tels quels ; la complétion par les
valeurs par défaut est faite ensuite par normalize().
"""
import logging
from typing import Any, Callable, Dict

from ..core.errors import MigrationError

log = logging.getLogger(__name__)

# Tailles du bouton historique (sm / md / lg) → padding vertical, horizontal, taille de police
_BUTTON_SIZES: dict = {
    "sm": (8, 16, 14),
    "md": (12, 24, 16),
    "lg": (16, 32, 18),
}


def _number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise MigrationError(f"{field} : booléen inattendu")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            num = float(value.strip().removesuffix("px"))
        except ValueError:
            raise MigrationError(f"{field} : valeur non numérique {value!r}")
        return int(num) if num.is_integer() else num
    raise MigrationError(f"{field} : valeur non numérique {value!r}")


def _linked_box(value: Any, field: str) -> dict:
    n = _number(value, field)
    return {"top": n, "right": n, "bottom": n, "left": n, "linked": True}


def _responsive(value: Any) -> Any:
    return value if isinstance(value, dict) else {"desktop": value}


# ── Par type ────────────────────────────────────────────────────────────────

def migrate_container(raw: dict) -> dict:
    """{backgroundColor, padding, maxWidth} → background / advanced.padding / advanced.maxWidth"""
    out = {k: v for k, v in raw.items() if k not in ("backgroundColor", "padding", "maxWidth")}
    advanced = dict(out.get("advanced") or {})

    if "backgroundColor" in raw:
        out["background"] = {"type": "solid", "color": raw["backgroundColor"]}
    if "padding" in raw:
        advanced["padding"] = _linked_box(raw["padding"], "container.padding")
    if "maxWidth" in raw:
        advanced["maxWidth"] = raw["maxWidth"]

    if advanced:
        out["advanced"] = advanced
    return out


def migrate_button(raw: dict) -> dict:
    """{text, url, variant, size, alignment: str} → link / alignment / style"""
    out = {k: v for k, v in raw.items() if k not in ("url", "variant", "size")}

    if "link" not in raw:
        out["link"] = {"url": raw.get("url") or "#", "openInNewTab": False, "nofollow": False}
    if "alignment" in raw:
        out["alignment"] = _responsive(raw["alignment"])

    style = dict(out.get("style") or {})
    size = raw.get("size")
    if size is not None:
        if size not in _BUTTON_SIZES:
            raise MigrationError(f"button.size inconnue : {size!r}")
        py, px, font = _BUTTON_SIZES[size]
        style["padding"] = {"top": py, "right": px, "bottom": py, "left": px, "linked": False}
        style["typography"] = {**(style.get("typography") or {}), "fontSize": {"desktop": font}}
    if raw.get("variant") == "outline":
        style["normal"] = {**(style.get("normal") or {}), "backgroundColor": "transparent"}
        style["borderWidth"] = 1
    if style:
        out["style"] = style
    return out


def migrate_heading(raw: dict) -> dict:
    """alignment: str → {desktop: str}"""
    out = dict(raw)
    if "alignment" in raw:
        out["alignment"] = _responsive(raw["alignment"])
    return out


def migrate_grid(raw: dict) -> dict:
    """{columns: int, gap: int} → layout.columns / columnGap / rowGap"""
    out = {k: v for k, v in raw.items() if k not in ("columns", "gap")}
    layout = {}
    if "columns" in raw:
        layout["columns"] = {"desktop": _number(raw["columns"], "grid.columns")}
    if "gap" in raw:
        gap = _number(raw["gap"], "grid.gap")
        layout["columnGap"] = {"desktop": gap}
        layout["rowGap"] = {"desktop": gap}
    out["layout"] = layout
    return out


LEGACY_MIGRATIONS: Dict[str, Callable[[dict], dict]] = {
    "container": migrate_container,
    "button":    migrate_button,
    "heading":   migrate_heading,
    "grid":      migrate_grid,
}


def migrate(widget_type: str, raw: dict) -> dict:
    """
    Applique la migration enregistrée pour `widget_type`.

    Raises:
        MigrationError: si le contenu historique est incohérent
    """
    fn = LEGACY_MIGRATIONS.get(widget_type)
    if fn is None:
        return raw
    log.debug("Migration %s : clés %s", widget_type, sorted(raw))
    return fn(raw)
