"""
Compilation par type de widget : contenu normalisé → (déclarations, indications de rendu).

Fonctions pures ; la visibilité et les attributs personnalisés sont traités
en commun par compiler.compile_style.
"""
from typing import Callable, Dict, Tuple

from ..core.responsive import resolve
from . import styles
from .styles import fmt_num, px

Compiled = Tuple[dict, dict]


# ── Texte ───────────────────────────────────────────────────────────────────

def compile_heading(c, bp: str, icons) -> Compiled:
    style, adv = c.style, c.advanced
    decl = {"text-align": resolve(c.alignment, bp)}
    decl.update(styles.typography(style.typography, bp))
    decl.update(styles.text_color(style.text_color))
    decl.update(styles.text_shadow(style.text_shadow))
    if style.blend_mode != "normal":
        decl["mix-blend-mode"] = style.blend_mode

    decl.update(styles.box_sides(adv.margin, "margin"))
    decl.update(styles.box_sides(adv.padding, "padding"))
    decl.update(styles.width_mode(adv.width, adv.custom_width, adv.custom_width_unit))
    if adv.position != "static":
        decl["position"] = adv.position
    if adv.z_index is not None:
        decl["z-index"] = adv.z_index
    if adv.opacity != 100:
        decl["opacity"] = adv.opacity / 100
    decl.update(styles.border(adv.border))

    hints = {
        "tag": c.level,
        "text": c.text,
        "clip_text": styles.is_clip_text(style.text_color),
    }
    if c.link is not None:
        hints["link"] = c.link.model_dump()
    return decl, hints


def compile_paragraph(c, bp: str, icons) -> Compiled:
    return {"text-align": c.alignment}, {"tag": "p", "text": c.text}


def compile_button(c, bp: str, icons) -> Compiled:
    style, adv, normal, hover = c.style, c.advanced, c.style.normal, c.style.hover

    # État normal : couleurs du thème par défaut ; hover : repli sur l'état normal
    color = normal.text_color or "#ffffff"
    bg = normal.background_color or "#3b82f6"
    border_color = normal.border_color or bg

    decl = {
        "display": "inline-flex" if c.icon.enabled else "inline-block",
        "text-align": "center",
    }
    decl.update(styles.typography(style.typography, bp))
    decl.update({"color": color, "background-color": bg})
    if style.border_width:
        decl.update({
            "border-width": px(fmt_num(style.border_width)),
            "border-style": "solid",
            "border-color": border_color,
        })
    if style.border_radius:
        decl["border-radius"] = px(fmt_num(style.border_radius))
    decl.update(styles.box_sides(style.padding, "padding"))
    decl.update(styles.box_sides(adv.margin, "margin"))
    decl.update({"text-decoration": "none", "cursor": "pointer"})
    if style.box_shadow is not None:
        decl["box-shadow"] = styles.box_shadow_css(style.box_shadow)

    decl.update({
        "--hover-color": hover.text_color or color,
        "--hover-bg": hover.background_color or bg,
        "--hover-border": hover.border_color or border_color,
        "transition": f"all {fmt_num(hover.transition_duration)}ms ease",
    })

    align = resolve(c.alignment, bp)
    if align == "stretch" or adv.width == "full":
        decl["width"] = "100%"
    elif adv.width == "custom" and adv.custom_width is not None:
        decl["width"] = f"{fmt_num(adv.custom_width)}{adv.custom_width_unit}"

    hover_rule = "color: var(--hover-color); background-color: var(--hover-bg); border-color: var(--hover-border);"
    if style.hover_box_shadow is not None:
        hover_rule += f" box-shadow: {styles.box_shadow_css(style.hover_box_shadow)};"

    hints = {
        "tag": "a",
        "text": c.text,
        "link": c.link.model_dump(),
        "button_type": c.button_type,
        "wrapper": {"text-align": "left" if align == "stretch" else align},
        "hover_rule": hover_rule,
    }
    if c.icon.enabled:
        icon = icons.lookup(c.icon.name)
        decl["gap"] = px(fmt_num(c.icon.spacing))
        decl["align-items"] = "center"
        hints["icon"] = {"name": icon.name, "found": icon.found, "position": c.icon.position}
    return decl, hints


def compile_icon(c, bp: str, icons) -> Compiled:
    icon = icons.lookup(c.name)
    decl = {
        "width": px(fmt_num(c.size)),
        "height": px(fmt_num(c.size)),
        "color": c.color,
        "display": "flex",
        "align-items": "center",
        "justify-content": "center",
    }
    return decl, {"icon": {"name": icon.name, "found": icon.found, "size": c.size}}


def compile_divider(c, bp: str, icons) -> Compiled:
    decl = {
        "border-top": f"1px {c.style} {c.color}",
        "width": f"{fmt_num(c.width)}%",
        "margin": "16px auto",
    }
    return decl, {"tag": "hr"}


def compile_spacer(c, bp: str, icons) -> Compiled:
    return {"height": px(fmt_num(c.height))}, {}


# ── Média ───────────────────────────────────────────────────────────────────

def compile_image(c, bp: str, icons) -> Compiled:
    hints = {
        "src": c.url,
        "alt": c.alt,
        "img": {"max-width": "100%" if c.width == "full" else "auto", "height": "auto"},
    }
    return {"text-align": c.alignment}, hints


def compile_video(c, bp: str, icons) -> Compiled:
    decl = {"position": "relative", "padding-bottom": "56.25%", "height": 0, "overflow": "hidden"}
    src = f"{c.url}?autoplay=1" if c.autoplay else c.url
    return decl, {"src": src, "provider": c.type}


def compile_gallery(c, bp: str, icons) -> Compiled:
    decl = {"display": "grid", "grid-template-columns": f"repeat({c.columns}, 1fr)", "gap": "16px"}
    return decl, {"images": [img.model_dump() for img in c.images]}


def compile_slider(c, bp: str, icons) -> Compiled:
    hints = {
        "slides": [s.model_dump() for s in c.slides],
        "autoplay": c.autoplay,
        "interval": c.interval,
    }
    return {"position": "relative", "overflow": "hidden"}, hints


# ── Conteneurs ──────────────────────────────────────────────────────────────

def _boxed(c, bp: str) -> dict:
    """Fond, bordure, ombre et réglages avancés communs aux quatre conteneurs."""
    adv = c.advanced
    decl = styles.box_sides(adv.padding, "padding")
    margin = styles.box_sides(adv.margin, "margin")
    if adv.max_width != "full":
        margin["margin-left"] = margin["margin-right"] = "auto"
    decl.update(margin)

    decl.update(styles.background(c.background))
    decl.update(styles.container_border(c.border))
    if c.shadow.enabled:
        decl["box-shadow"] = styles.box_shadow_css(c.shadow)

    if adv.max_width == "custom":
        if adv.custom_max_width is not None:
            decl["max-width"] = px(fmt_num(adv.custom_max_width))
    else:
        decl["max-width"] = styles.MAX_WIDTHS[adv.max_width]
    if adv.min_height is not None:
        decl["min-height"] = px(fmt_num(resolve(adv.min_height, bp)))
    if adv.width is not None and adv.width.type != "auto":
        decl.update(styles.width_mode(adv.width.type, adv.width.value, adv.width.unit))
    if adv.height is not None and adv.height.type == "custom" and adv.height.value is not None:
        decl["height"] = f"{fmt_num(adv.height.value)}{adv.height.unit}"
    if adv.overflow:
        decl["overflow"] = adv.overflow
    if adv.position and adv.position != "default":
        decl["position"] = adv.position
        if adv.position_offsets is not None:
            for side in ("top", "right", "bottom", "left"):
                value = getattr(adv.position_offsets, side)
                if value is not None:
                    decl[side] = px(fmt_num(value))
    if adv.z_index is not None:
        decl["z-index"] = adv.z_index
    return decl


def _gaps(layout, bp: str) -> dict:
    return {
        "column-gap": px(fmt_num(resolve(layout.column_gap, bp))),
        "row-gap": px(fmt_num(resolve(layout.row_gap, bp))),
    }


def _container_hints(c, label: str) -> dict:
    # Liste de blocs à plat : les conteneurs n'ont pas d'enfants, zone de dépôt seulement
    hints = {"children": "placeholder", "label": label}
    shape = getattr(c, "shape_divider", None)
    if shape is not None and shape.enabled:
        hints["shape_divider"] = shape.model_dump()
    return hints


def compile_container(c, bp: str, icons) -> Compiled:
    layout = c.layout
    decl = _boxed(c, bp)
    if layout.display_type == "flex":
        decl.update({
            "display": "flex",
            "flex-wrap": "wrap",
            "gap": px(fmt_num(resolve(layout.column_gap, bp))),
            "justify-content": styles.space_keyword(layout.justify_content, flex=True),
            "align-items": styles.space_keyword(layout.align_items, flex=True),
        })
        return decl, _container_hints(c, "Container")

    decl.update({
        "display": "grid",
        "grid-template-columns": styles.repeat_columns(resolve(layout.columns, bp), layout.column_width),
    })
    if layout.rows != "auto":
        rh = layout.row_height
        if rh is not None and rh.type == "minmax" and rh.min_value is not None:
            track = f"minmax({fmt_num(rh.min_value)}px, auto)"
        elif rh is not None and rh.type == "custom" and rh.value is not None:
            track = px(fmt_num(rh.value))
        else:
            track = "auto"
        decl["grid-template-rows"] = f"repeat({layout.rows}, {track})"
    decl.update(_gaps(layout, bp))
    decl.update({
        "justify-items": layout.justify_items,
        "align-items": layout.align_items,
        "justify-content": styles.space_keyword(layout.justify_content),
        "align-content": styles.space_keyword(layout.align_content),
    })
    if layout.auto_flow:
        decl["grid-auto-flow"] = styles.auto_flow(layout.auto_flow)
    return decl, _container_hints(c, "Container")


def compile_grid(c, bp: str, icons) -> Compiled:
    layout = c.layout
    decl = _boxed(c, bp)
    decl.update({
        "display": "grid",
        "grid-template-columns": styles.repeat_columns(resolve(layout.columns, bp)),
        "grid-auto-flow": styles.auto_flow(layout.auto_flow),
        "justify-items": layout.justify_items,
        "align-items": layout.align_items,
    })
    decl.update(_gaps(layout, bp))
    return decl, _container_hints(c, "Grid")


def compile_flex_container(c, bp: str, icons) -> Compiled:
    layout = c.layout
    decl = _boxed(c, bp)
    decl.update({
        "display": "flex",
        "flex-direction": layout.direction,
        "flex-wrap": layout.wrap,
        "justify-content": styles.space_keyword(layout.justify_content, flex=True),
        "align-items": styles.space_keyword(layout.align_items, flex=True),
        "align-content": styles.space_keyword(layout.align_content, flex=True),
        "gap": px(fmt_num(resolve(layout.gap, bp))),
    })
    return decl, _container_hints(c, "Flex Container")


def compile_smart_grid(c, bp: str, icons) -> Compiled:
    layout = c.layout
    decl = _boxed(c, bp)
    decl.update({
        "display": "grid",
        "grid-template-columns": layout.column_template or styles.repeat_columns(resolve(layout.columns, bp)),
        "grid-auto-flow": styles.auto_flow(layout.auto_flow),
        "justify-items": layout.justify_items,
        "align-items": layout.align_items,
        "min-height": decl.get("min-height", "100px"),
    })
    if layout.rows != "auto":
        decl["grid-template-rows"] = layout.row_template or f"repeat({layout.rows}, auto)"
    decl.update(_gaps(layout, bp))
    return decl, _container_hints(c, "Smart Grid")


def compile_grid_item(settings, bp: str) -> dict:
    """Placement d'un enfant de grille (span / start / self-alignment)."""
    col_span = fmt_num(resolve(settings.column_span, bp))
    row_span = fmt_num(resolve(settings.row_span, bp))
    decl = {
        "grid-column": f"{settings.column_start} / span {col_span}" if settings.column_start else f"span {col_span}",
        "grid-row": f"{settings.row_start} / span {row_span}" if settings.row_start else f"span {row_span}",
    }
    if settings.align_self != "auto":
        decl["align-self"] = settings.align_self
    if settings.justify_self != "auto":
        decl["justify-self"] = settings.justify_self
    return decl


# ── Panneaux / commerce ─────────────────────────────────────────────────────

def compile_tabs(c, bp: str, icons) -> Compiled:
    return {}, {"items": [i.model_dump() for i in c.items]}


def compile_accordion(c, bp: str, icons) -> Compiled:
    return {}, {"items": [i.model_dump() for i in c.items]}


def compile_checkout_form(c, bp: str, icons) -> Compiled:
    decl = {"padding": "24px", "max-width": "500px", "margin": "0 auto"}
    hints = {"title": c.title, "button_text": c.button_text, "show_quantity": c.show_quantity}
    return decl, hints


def compile_countdown(c, bp: str, icons) -> Compiled:
    return {"text-align": "center"}, {"title": c.title, "target_date": c.target_date}


def compile_pricing_table(c, bp: str, icons) -> Compiled:
    columns = max(len(c.plans), 1)
    decl = {"display": "grid", "grid-template-columns": f"repeat({columns}, 1fr)", "gap": "24px"}
    return decl, {"plans": [p.model_dump() for p in c.plans]}


def compile_testimonials(c, bp: str, icons) -> Compiled:
    return {"display": "grid", "gap": "24px"}, {"items": [i.model_dump() for i in c.items]}


def compile_progress_bar(c, bp: str, icons) -> Compiled:
    value = min(max(c.value, 0), 100)
    return {"width": "100%"}, {"value": value, "label": c.label, "color": c.color}


def compile_google_map(c, bp: str, icons) -> Compiled:
    return {"height": px(fmt_num(c.height))}, {"embed_url": c.embed_url}


_SOCIAL_SIZES: dict = {"sm": 32, "md": 40, "lg": 48}


def compile_social_icons(c, bp: str, icons) -> Compiled:
    resolved = []
    for item in c.icons:
        icon = icons.lookup(item.platform.capitalize())
        resolved.append({"platform": item.platform, "url": item.url, "icon": icon.name, "found": icon.found})
    decl = {"display": "flex", "gap": "12px", "justify-content": "center"}
    return decl, {"icons": resolved, "size": _SOCIAL_SIZES[c.size]}


# ── Sections historiques ────────────────────────────────────────────────────

def compile_hero(c, bp: str, icons) -> Compiled:
    return {"padding": "60px 20px", "text-align": "center"}, c.model_dump()


def compile_product_showcase(c, bp: str, icons) -> Compiled:
    decl = {
        "display": "flex",
        "flex-direction": "row" if c.image_position == "left" else "row-reverse",
        "align-items": "center",
        "gap": "32px",
    }
    return decl, c.model_dump()


def compile_checkout(c, bp: str, icons) -> Compiled:
    decl = {"padding": "24px", "max-width": "500px", "margin": "0 auto"}
    return decl, {"title": c.title, "button_text": c.button_text, "show_quantity": False}


def compile_opaque(c, bp: str, icons) -> Compiled:
    return {}, {"placeholder": "empty"}


WIDGET_COMPILERS: Dict[str, Callable] = {
    "heading":          compile_heading,
    "paragraph":        compile_paragraph,
    "button":           compile_button,
    "icon":             compile_icon,
    "divider":          compile_divider,
    "spacer":           compile_spacer,
    "image":            compile_image,
    "video":            compile_video,
    "gallery":          compile_gallery,
    "slider":           compile_slider,
    "container":        compile_container,
    "grid":             compile_grid,
    "flex-container":   compile_flex_container,
    "smart-grid":       compile_smart_grid,
    "tabs":             compile_tabs,
    "accordion":        compile_accordion,
    "checkout-form":    compile_checkout_form,
    "countdown":        compile_countdown,
    "pricing-table":    compile_pricing_table,
    "testimonials":     compile_testimonials,
    "progress-bar":     compile_progress_bar,
    "google-map":       compile_google_map,
    "social-icons":     compile_social_icons,
    "hero":             compile_hero,
    "product-showcase": compile_product_showcase,
    "checkout":         compile_checkout,
    "features":         compile_opaque,
    "faq":              compile_opaque,
}
