"""
Rendu HTML : Block → balisage, PageDocument → page complète avec feuille de style scopée.

Mode code : htmlContent rendu tel quel (contenu d'auteur de confiance, non filtré),
ou le commentaire "<!-- Empty Code Block -->" s'il est vide.
Mode visual : balisage construit depuis CompiledStyle ; les textes saisis sont échappés.
"""
from html import escape
from typing import Callable, Dict, Iterable, Union

from ..core.config import EMPTY_CODE_BLOCK
from ..core.schemas import Block, PageDocument
from .compiler import CompiledStyle, compile_block
from .css import generate_page_css
from .icons import RenderableIcon


# ── Points d'entrée publics ─────────────────────────────────────────────────

def render_block(block: Block, breakpoint: str = "desktop", *, icons=None, inline: bool = True) -> str:
    """
    Balisage d'un bloc.

    Args:
        block:      bloc normalisé
        breakpoint: breakpoint des styles inline
        icons:      IconResolver
        inline:     styles en attribut style (False : la feuille de style de la page s'en charge)
    """
    if block.mode == "code":
        return block.html_content or EMPTY_CODE_BLOCK
    return render_visual(block, breakpoint, icons=icons, inline=inline)


def render_visual(block: Block, breakpoint: str = "desktop", *, icons=None, inline: bool = True) -> str:
    """Balisage calculé depuis le contenu, quel que soit le mode du bloc."""
    compiled = compile_block(block, breakpoint, icons=icons)
    if compiled.hints.get("placeholder") == "unknown":
        return (f'<div class="widget widget-unknown" data-widget-type="{escape(block.type)}">'
                f'{escape(compiled.hints["label"])}</div>')
    renderer = _RENDERERS.get(block.type, _render_empty)
    return renderer(block, compiled, _attrs(block, compiled, inline))


def render_document(page: Union[PageDocument, Iterable[Block]], *, title: str = "",
                    icons=None, extra_head: str = "") -> str:
    """Page HTML complète : une feuille de style pour tous les blocs, puis les blocs dans l'ordre."""
    if isinstance(page, PageDocument):
        title = title or page.title
        blocks = page.blocks
    else:
        blocks = list(page)

    css = generate_page_css(blocks, icons)
    body = "\n".join(render_block(b, icons=icons, inline=False) for b in blocks)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(title)}</title>
  <style>{css}</style>
  {extra_head}
</head>
<body>
{body}
</body>
</html>"""


# ── Attributs communs ───────────────────────────────────────────────────────

def _attrs(block: Block, compiled: CompiledStyle, inline: bool) -> str:
    classes = ["widget", f"widget-{block.id}", *compiled.visibility_classes]
    if compiled.css_classes:
        classes.append(compiled.css_classes)
    out = f' id="{escape(compiled.css_id)}"' if compiled.css_id else ""
    out += f' class="{escape(" ".join(classes))}"'
    if inline and compiled.declarations:
        out += f' style="{escape(compiled.style_string())}"'
    return out


def _style(declarations: dict) -> str:
    return "; ".join(f"{k}: {v}" for k, v in declarations.items())


def _link_attrs(link: dict) -> str:
    out = f' href="{escape(link.get("url") or "#")}"'
    if link.get("open_in_new_tab"):
        out += ' target="_blank"'
    if link.get("nofollow"):
        out += ' rel="nofollow"'
    return out


# ── Texte ───────────────────────────────────────────────────────────────────

def _render_heading(block, compiled, attrs) -> str:
    h = compiled.hints
    text = escape(h["text"])
    if "link" in h:
        text = f'<a{_link_attrs(h["link"])}>{text}</a>'
    return f'<{h["tag"]}{attrs}>{text}</{h["tag"]}>'


def _render_paragraph(block, compiled, attrs) -> str:
    return f'<p{attrs}>{escape(compiled.hints["text"])}</p>'


def _render_button(block, compiled, attrs) -> str:
    h = compiled.hints
    label = escape(h["text"])
    icon = h.get("icon")
    if icon:
        icon_html = RenderableIcon(name=icon["name"], found=icon["found"]).to_html(16)
        label = f"{icon_html}{label}" if icon["position"] == "left" else f"{label}{icon_html}"
    if h["button_type"] == "button":
        inner = f'<a{attrs}{_link_attrs(h["link"])}>{label}</a>'
    else:
        inner = f'<button type="{h["button_type"]}"{attrs}>{label}</button>'
    return f'<div style="{_style(h["wrapper"])}">{inner}</div>'


def _render_icon(block, compiled, attrs) -> str:
    icon = compiled.hints["icon"]
    svg = RenderableIcon(name=icon["name"], found=icon["found"]).to_html(icon["size"])
    return f"<div{attrs}>{svg}</div>"


def _render_divider(block, compiled, attrs) -> str:
    return f"<hr{attrs} />"


def _render_spacer(block, compiled, attrs) -> str:
    return f"<div{attrs}></div>"


# ── Média ───────────────────────────────────────────────────────────────────

def _render_image(block, compiled, attrs) -> str:
    h = compiled.hints
    return (f'<div{attrs}><img src="{escape(h["src"])}" alt="{escape(h["alt"])}" '
            f'style="{_style(h["img"])}" /></div>')


def _render_video(block, compiled, attrs) -> str:
    src = escape(compiled.hints["src"])
    return f"""<div{attrs}>
  <iframe src="{src}" style="position: absolute; top: 0; left: 0; width: 100%; height: 100%;" frameborder="0" allowfullscreen></iframe>
</div>"""


def _render_gallery(block, compiled, attrs) -> str:
    images = "".join(
        f'\n  <img src="{escape(img["url"])}" alt="{escape(img["alt"])}" style="width: 100%; height: auto;" />'
        for img in compiled.hints["images"]
    )
    return f"<div{attrs}>{images}\n</div>"


def _render_slider(block, compiled, attrs) -> str:
    h = compiled.hints
    slides = "".join(
        f'\n  <div class="slider__slide"><img src="{escape(s["image_url"])}" alt="{escape(s["title"])}" />'
        f'<h3>{escape(s["title"])}</h3><p>{escape(s["description"])}</p></div>'
        for s in h["slides"]
    )
    autoplay = "true" if h["autoplay"] else "false"
    return f'<div{attrs} data-autoplay="{autoplay}" data-interval="{h["interval"]}">{slides}\n</div>'


# ── Conteneurs ──────────────────────────────────────────────────────────────

def _render_container(block, compiled, attrs) -> str:
    return f"""<div{attrs}>
  <!-- {compiled.hints["label"]} children - add your content here -->
</div>"""


def _render_tabs(block, compiled, attrs) -> str:
    items = compiled.hints["items"]
    nav = "".join(f'<button class="tabs__tab" data-tab="{i}">{escape(t["label"])}</button>'
                  for i, t in enumerate(items))
    panels = "".join(f'\n  <div class="tabs__panel" data-tab="{i}">{escape(t["content"])}</div>'
                     for i, t in enumerate(items))
    return f'<div{attrs}>\n  <div class="tabs__nav">{nav}</div>{panels}\n</div>'


def _render_accordion(block, compiled, attrs) -> str:
    items = "".join(
        f'\n  <details><summary>{escape(i["title"])}</summary><div>{escape(i["content"])}</div></details>'
        for i in compiled.hints["items"]
    )
    return f"<div{attrs}>{items}\n</div>"


# ── Commerce ────────────────────────────────────────────────────────────────

_INPUT = 'style="width: 100%; padding: 12px; margin-bottom: 12px; border: 1px solid #ddd; border-radius: 6px;"'


def _render_checkout_form(block, compiled, attrs) -> str:
    h = compiled.hints
    quantity = f'\n    <input type="number" min="1" value="1" {_INPUT} />' if h["show_quantity"] else ""
    return f"""<div{attrs}>
  <h3 style="font-size: 24px; font-weight: 600; margin-bottom: 16px;">{escape(h["title"])}</h3>
  <form>
    <input type="text" placeholder="Name" {_INPUT} />
    <input type="tel" placeholder="Phone" {_INPUT} />
    <input type="text" placeholder="Address" {_INPUT} />{quantity}
    <button type="submit" style="width: 100%; padding: 14px; background: #22c55e; color: white; border: none; border-radius: 6px; font-size: 16px; cursor: pointer;">{escape(h["button_text"])}</button>
  </form>
</div>"""


def _render_countdown(block, compiled, attrs) -> str:
    h = compiled.hints
    return (f'<div{attrs} data-target-date="{escape(h["target_date"])}">'
            f'<h3>{escape(h["title"])}</h3><div class="countdown__timer"></div></div>')


def _render_pricing_table(block, compiled, attrs) -> str:
    cards = ""
    for plan in compiled.hints["plans"]:
        css_class = "pricing__card pricing__card--featured" if plan["highlighted"] else "pricing__card"
        features = "".join(f"<li>{escape(f)}</li>" for f in plan["features"])
        cards += (f'\n  <div class="{css_class}"><h3>{escape(plan["name"])}</h3>'
                  f'<div class="pricing__price">{escape(plan["price"])}</div><ul>{features}</ul></div>')
    return f"<div{attrs}>{cards}\n</div>"


def _render_testimonials(block, compiled, attrs) -> str:
    items = ""
    for t in compiled.hints["items"]:
        avatar = f'<img src="{escape(t["avatar"])}" alt="{escape(t["name"])}" />' if t["avatar"] else ""
        items += (f'\n  <blockquote class="testimonial">{avatar}<p>{escape(t["text"])}</p>'
                  f'<cite>{escape(t["name"])}, {escape(t["role"])}</cite></blockquote>')
    return f"<div{attrs}>{items}\n</div>"


def _render_progress_bar(block, compiled, attrs) -> str:
    h = compiled.hints
    return (f'<div{attrs}><div class="progress__label">{escape(h["label"])}</div>'
            f'<div class="progress__track"><div class="progress__fill progress__fill--{escape(h["color"])}" '
            f'style="width: {h["value"]}%"></div></div></div>')


def _render_google_map(block, compiled, attrs) -> str:
    url = compiled.hints["embed_url"]
    if not url:
        return f"<div{attrs}><!-- Google Map : embed URL manquante --></div>"
    return (f'<div{attrs}><iframe src="{escape(url)}" style="width: 100%; height: 100%; border: 0;" '
            f'loading="lazy" allowfullscreen></iframe></div>')


def _render_social_icons(block, compiled, attrs) -> str:
    h = compiled.hints
    links = "".join(
        f'<a href="{escape(i["url"])}" aria-label="{escape(i["platform"])}">'
        f'{RenderableIcon(name=i["icon"], found=i["found"]).to_html(h["size"])}</a>'
        for i in h["icons"]
    )
    return f"<div{attrs}>{links}</div>"


# ── Sections historiques ────────────────────────────────────────────────────

def _render_hero(block, compiled, attrs) -> str:
    h = compiled.hints
    image = (f'\n  <img src="{escape(h["image_url"])}" alt="Hero" style="max-width: 100%; height: auto; margin-bottom: 24px;" />'
             if h["image_url"] else "")
    return f"""<section{attrs}>
  <h1 style="font-size: 48px; font-weight: 700; margin-bottom: 16px;">{escape(h["headline"])}</h1>
  <p style="font-size: 18px; color: #666; margin-bottom: 24px;">{escape(h["subtext"])}</p>{image}
  <a href="{escape(h["cta_url"])}" style="display: inline-block; padding: 12px 32px; background: #3b82f6; color: white; text-decoration: none; border-radius: 8px;">{escape(h["cta_text"])}</a>
</section>"""


def _render_product_showcase(block, compiled, attrs) -> str:
    h = compiled.hints
    return f"""<section{attrs}>
  <img src="{escape(h["image_url"])}" alt="{escape(h["title"])}" style="max-width: 50%; height: auto; border-radius: 12px;" />
  <div>
    <h2>{escape(h["title"])}</h2>
    <p>{escape(h["description"])}</p>
    <div class="showcase__price">{escape(h["price"])}</div>
  </div>
</section>"""


def _render_empty(block, compiled, attrs) -> str:
    return f"<div{attrs}><!-- {escape(block.type)} --></div>"


_RENDERERS: Dict[str, Callable[[Block, CompiledStyle, str], str]] = {
    "heading":          _render_heading,
    "paragraph":        _render_paragraph,
    "button":           _render_button,
    "icon":             _render_icon,
    "divider":          _render_divider,
    "spacer":           _render_spacer,
    "image":            _render_image,
    "video":            _render_video,
    "gallery":          _render_gallery,
    "slider":           _render_slider,
    "container":        _render_container,
    "grid":             _render_container,
    "flex-container":   _render_container,
    "smart-grid":       _render_container,
    "tabs":             _render_tabs,
    "accordion":        _render_accordion,
    "checkout-form":    _render_checkout_form,
    "countdown":        _render_countdown,
    "pricing-table":    _render_pricing_table,
    "testimonials":     _render_testimonials,
    "progress-bar":     _render_progress_bar,
    "google-map":       _render_google_map,
    "social-icons":     _render_social_icons,
    "hero":             _render_hero,
    "product-showcase": _render_product_showcase,
    "checkout":         _render_checkout_form,
}
