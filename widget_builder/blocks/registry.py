"""
Registre des types de widgets : type → (clé de stockage camelCase, modèle de contenu).

Fournit les contenus par défaut et la détection des formes historiques
(duck typing sur la présence/absence de clés).
"""
from typing import Any, Literal, Type

from ..core.errors import UnknownWidgetType
from .base import ContentModel, OpaqueContent
from .basic import DividerContent, IconContent, ParagraphContent, SpacerContent
from .button import ButtonContent
from .commerce import (
    CheckoutFormContent, CountdownContent, GoogleMapContent, PricingTableContent,
    ProgressBarContent, SocialIconsContent, TestimonialsContent,
)
from .container import ContainerContent, FlexContainerContent, GridContent, SmartGridContent
from .heading import HeadingContent
from .legacy import CheckoutContent, HeroContent, ProductShowcaseContent
from .media import GalleryContent, ImageContent, SliderContent, VideoContent
from .panels import AccordionContent, TabsContent

WidgetType = Literal[
    # basic
    "heading", "paragraph", "button", "icon", "divider", "spacer",
    # media
    "image", "video", "gallery", "slider",
    # layout
    "container", "grid", "flex-container", "smart-grid", "tabs", "accordion",
    # commerce
    "checkout-form", "countdown", "pricing-table", "testimonials", "progress-bar",
    "google-map", "social-icons",
    # legacy
    "hero", "product-showcase", "checkout", "features", "faq",
]

_WIDGET_REGISTRY: dict = {
    "heading":          ("heading",         HeadingContent),
    "paragraph":        ("paragraph",       ParagraphContent),
    "button":           ("button",          ButtonContent),
    "icon":             ("icon",            IconContent),
    "divider":          ("divider",         DividerContent),
    "spacer":           ("spacer",          SpacerContent),
    "image":            ("image",           ImageContent),
    "video":            ("video",           VideoContent),
    "gallery":          ("gallery",         GalleryContent),
    "slider":           ("slider",          SliderContent),
    "container":        ("container",       ContainerContent),
    "grid":             ("grid",            GridContent),
    "flex-container":   ("flexContainer",   FlexContainerContent),
    "smart-grid":       ("smartGrid",       SmartGridContent),
    "tabs":             ("tabs",            TabsContent),
    "accordion":        ("accordion",       AccordionContent),
    "checkout-form":    ("checkoutForm",    CheckoutFormContent),
    "countdown":        ("countdown",       CountdownContent),
    "pricing-table":    ("pricingTable",    PricingTableContent),
    "testimonials":     ("testimonials",    TestimonialsContent),
    "progress-bar":     ("progressBar",     ProgressBarContent),
    "google-map":       ("googleMap",       GoogleMapContent),
    "social-icons":     ("socialIcons",     SocialIconsContent),
    "hero":             ("hero",            HeroContent),
    "product-showcase": ("productShowcase", ProductShowcaseContent),
    "checkout":         ("checkout",        CheckoutContent),
    "features":         ("features",        OpaqueContent),
    "faq":              ("faq",             OpaqueContent),
}


def is_known_type(widget_type: str) -> bool:
    return widget_type in _WIDGET_REGISTRY


def content_model(widget_type: str) -> Type[ContentModel]:
    """Classe de contenu du type. Lève UnknownWidgetType si le type n'est pas enregistré."""
    entry = _WIDGET_REGISTRY.get(widget_type)
    if entry is None:
        raise UnknownWidgetType(widget_type)
    return entry[1]


def content_key(widget_type: str) -> str:
    """Clé d'enveloppe du stockage historique (`flex-container` → `flexContainer`)."""
    entry = _WIDGET_REGISTRY.get(widget_type)
    if entry is None:
        raise UnknownWidgetType(widget_type)
    return entry[0]


def default_content(widget_type: str) -> ContentModel:
    """Nouvelle instance entièrement peuplée (jamais partagée entre deux appels)."""
    return content_model(widget_type)()


# ── Détection des formes historiques ────────────────────────────────────────

def _legacy_container(raw: dict) -> bool:
    if "layout" in raw:
        return False
    padding = raw.get("padding")
    numeric_padding = isinstance(padding, (int, float)) and not isinstance(padding, bool)
    return "backgroundColor" in raw or numeric_padding


def _legacy_button(raw: dict) -> bool:
    if isinstance(raw.get("alignment"), str):
        return True
    return ("url" in raw or "text" in raw) and "link" not in raw


def _legacy_heading(raw: dict) -> bool:
    if isinstance(raw.get("alignment"), str):
        return True
    return "text" in raw and "style" not in raw


def _legacy_grid(raw: dict) -> bool:
    return ("columns" in raw or "gap" in raw) and "layout" not in raw


_LEGACY_DETECTORS: dict = {
    "container": _legacy_container,
    "button":    _legacy_button,
    "heading":   _legacy_heading,
    "grid":      _legacy_grid,
}


def is_legacy_shape(widget_type: str, raw: Any) -> bool:
    """Vrai si `raw` a la forme d'un contenu antérieur au schéma courant."""
    if not isinstance(raw, dict):
        return False
    detector = _LEGACY_DETECTORS.get(widget_type)
    return bool(detector and detector(raw))
