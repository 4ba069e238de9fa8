"""
Traducteurs par catégorie : sous-modèle de contenu → déclarations CSS.

Chaque fonction renvoie un dict {propriété-css: valeur} ; aucune ne modifie
son entrée. Les valeurs numériques sont rendues en px sauf unité explicite.
"""
from typing import Iterable, List, Optional

from ..core.responsive import resolve

# Classes utilitaires (Tailwind) de la visibilité responsive, dans l'ordre desktop / tablet / mobile
VISIBILITY_CLASSES: dict = {
    "desktop": "lg:hidden",
    "tablet":  "md:hidden lg:block",
    "mobile":  "max-md:hidden",
}

MAX_WIDTHS: dict = {
    "full": "100%",
    "lg":   "1152px",
    "md":   "896px",
    "sm":   "672px",
}

_SPACE_KEYWORDS: dict = {
    "between": "space-between",
    "around":  "space-around",
    "evenly":  "space-evenly",
}

_FLEX_KEYWORDS: dict = {
    "start": "flex-start",
    "end":   "flex-end",
}

_AUTO_FLOW: dict = {
    "row-dense":    "row dense",
    "column-dense": "column dense",
}


def px(value) -> str:
    return f"{value}px"


def fmt_num(value) -> str:
    """36.0 → 36 ; les autres nombres inchangés."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def box_sides(box, prefix: str, suffix: str = "") -> dict:
    """BoxModel → quatre déclarations indépendantes (`margin-top`, `border-left-width`…)."""
    return {
        f"{prefix}-{side}{suffix}": px(fmt_num(getattr(box, side)))
        for side in ("top", "right", "bottom", "left")
    }


def radius_corners(radius) -> dict:
    return {
        "border-top-left-radius":     px(fmt_num(radius.top_left)),
        "border-top-right-radius":    px(fmt_num(radius.top_right)),
        "border-bottom-right-radius": px(fmt_num(radius.bottom_right)),
        "border-bottom-left-radius":  px(fmt_num(radius.bottom_left)),
    }


# ── Couleurs ────────────────────────────────────────────────────────────────

def gradient_css(gradient) -> str:
    stops = ", ".join(f"{s.color} {fmt_num(s.position)}%" for s in gradient.stops) or "#000 0%, #666 100%"
    if gradient.type == "radial":
        return f"radial-gradient(circle, {stops})"
    return f"linear-gradient({fmt_num(gradient.angle)}deg, {stops})"


def text_color(color) -> dict:
    """
    ColorValue appliquée au texte.

    Dégradé : fond en dégradé découpé au texte (background-clip + remplissage transparent).
    Couleur pleine vide : aucune déclaration (couleur héritée du thème).
    """
    if color.type == "gradient" and color.gradient is not None:
        return {
            "background": gradient_css(color.gradient),
            "background-clip": "text",
            "-webkit-background-clip": "text",
            "-webkit-text-fill-color": "transparent",
        }
    return {"color": color.solid} if color.solid else {}


def is_clip_text(color) -> bool:
    return color.type == "gradient" and color.gradient is not None


def background(bg) -> dict:
    if bg.type == "solid":
        if bg.color and bg.color != "transparent":
            return {"background-color": bg.color}
        return {}
    if bg.type == "gradient" and bg.gradient is not None:
        return {"background": gradient_css(bg.gradient)}
    if bg.type == "image" and bg.image is not None and bg.image.url:
        repeat = bg.image.size == "repeat"
        return {
            "background-image": f"url('{bg.image.url}')",
            "background-size": "auto" if repeat else bg.image.size,
            "background-repeat": "repeat" if repeat else "no-repeat",
            "background-position": bg.image.position or "center",
        }
    return {}


# ── Ombres / bordures ───────────────────────────────────────────────────────

def text_shadow(shadow) -> dict:
    """Émise seulement si un des décalages ou le flou est non nul."""
    if shadow is None or not (shadow.horizontal or shadow.vertical or shadow.blur):
        return {}
    return {
        "text-shadow": f"{fmt_num(shadow.horizontal)}px {fmt_num(shadow.vertical)}px {fmt_num(shadow.blur)}px {shadow.color}"
    }


def box_shadow_css(shadow) -> str:
    return (f"{fmt_num(shadow.horizontal)}px {fmt_num(shadow.vertical)}px "
            f"{fmt_num(shadow.blur)}px {fmt_num(shadow.spread)}px {shadow.color}")


def border(b) -> dict:
    """Border des widgets texte (largeur et rayon uniques)."""
    out = {}
    if b.type != "none":
        out.update({"border-style": b.type, "border-width": px(fmt_num(b.width)), "border-color": b.color})
    if b.radius:
        out["border-radius"] = px(fmt_num(b.radius))
    return out


def container_border(b) -> dict:
    out = {}
    if b.style != "none":
        out["border-style"] = b.style
        out.update(box_sides(b.width, "border", "-width"))
        out["border-color"] = b.color
    out.update(radius_corners(b.radius))
    return out


# ── Typo ────────────────────────────────────────────────────────────────────

def typography(t, breakpoint: str) -> dict:
    out = {
        "font-family": t.font_family,
        "font-size": f"{fmt_num(resolve(t.font_size, breakpoint))}{t.font_size_unit}",
        "font-weight": t.font_weight,
        "text-transform": t.text_transform,
    }
    for attr, prop in (("font_style", "font-style"), ("text_decoration", "text-decoration")):
        if hasattr(t, attr):
            out[prop] = getattr(t, attr)
    line_height = getattr(t, "line_height", None)
    if line_height is not None:
        out["line-height"] = f"{fmt_num(line_height.value)}{line_height.unit}"
    if t.letter_spacing:
        out["letter-spacing"] = px(fmt_num(t.letter_spacing))
    return out


# ── Largeur / visibilité ────────────────────────────────────────────────────

def width_mode(mode: str, custom_value=None, unit: str = "px") -> dict:
    """full → 100% ; inline → auto + inline-block ; custom → valeur + unité."""
    if mode == "full":
        return {"width": "100%"}
    if mode == "inline":
        return {"width": "auto", "display": "inline-block"}
    if mode == "custom" and custom_value is not None:
        return {"width": f"{fmt_num(custom_value)}{unit}"}
    return {}


def visibility_classes(visibility) -> List[str]:
    """Les drapeaux se cumulent : une classe par breakpoint masqué."""
    if visibility is None:
        return []
    flags = (
        ("desktop", visibility.hide_on_desktop),
        ("tablet", visibility.hide_on_tablet),
        ("mobile", visibility.hide_on_mobile),
    )
    return [VISIBILITY_CLASSES[bp] for bp, hidden in flags if hidden]


def hidden_breakpoints(visibility) -> List[str]:
    if visibility is None:
        return []
    return [bp for bp in ("desktop", "tablet", "mobile") if getattr(visibility, f"hide_on_{bp}")]


# ── Layout ──────────────────────────────────────────────────────────────────

def space_keyword(value: str, flex: bool = False) -> str:
    """between → space-between… ; en flex, start/end → flex-start/flex-end."""
    if value in _SPACE_KEYWORDS:
        return _SPACE_KEYWORDS[value]
    if flex:
        return _FLEX_KEYWORDS.get(value, value)
    return value


def auto_flow(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return _AUTO_FLOW.get(value, value)


def repeat_columns(count, column_width=None) -> str:
    count = fmt_num(count)
    if column_width is None or column_width.type == "fr":
        unit = f"{fmt_num(column_width.value)}fr" if column_width is not None and column_width.value else "1fr"
        return f"repeat({count}, {unit})"
    if column_width.type == "auto" or column_width.value is None:
        return f"repeat({count}, auto)"
    return f"repeat({count}, {fmt_num(column_width.value)}{column_width.type})"


def compact(declarations: dict) -> dict:
    """Retire les déclarations vides (None / chaîne vide)."""
    return {k: v for k, v in declarations.items() if v is not None and v != ""}


def join_classes(*parts: Iterable[str]) -> str:
    return " ".join(p for group in parts for p in group if p)
