"""Sections historiques (hero, product-showcase, checkout) : rendues, plus proposées à l'ajout."""
from typing import Literal

from .base import ContentModel


class HeroContent(ContentModel):
    headline: str = "Your Amazing Product"
    subtext: str = "Transform your life with our revolutionary solution."
    image_url: str = "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=800&q=80"
    cta_text: str = "Order Now"
    cta_url: str = "#checkout"


class ProductShowcaseContent(ContentModel):
    title: str = "Premium Quality Product"
    description: str = "Experience the difference with our carefully crafted solution."
    price: str = "৳2,999"
    image_url: str = "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=600&q=80"
    image_position: Literal["left", "right"] = "left"


class CheckoutContent(ContentModel):
    title: str = "Complete Your Order"
    button_text: str = "Place Order"
