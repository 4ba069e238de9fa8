"""
Widgets commerce : checkout-form, countdown, pricing-table, testimonials,
progress-bar, google-map, social-icons.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Literal

from pydantic import Field

from ..core.ids import now_iso
from .base import ContentModel, Number


class CheckoutFormContent(ContentModel):
    title: str = "Complete Your Order"
    button_text: str = "Place Order"
    show_quantity: bool = True


class CountdownContent(ContentModel):
    # vide par défaut, fixé à la création du bloc (countdown_target)
    target_date: str = ""
    title: str = "Sale Ends In"


def countdown_target(now: datetime = None, days: int = 7) -> str:
    """Date cible ISO-8601 à `days` jours de `now` (défaut : maintenant, UTC)."""
    now = now or datetime.now(timezone.utc)
    return now_iso(now + timedelta(days=days))


class PricingPlan(ContentModel):
    name: str = ""
    price: str = ""
    features: List[str] = Field(default_factory=list)
    highlighted: bool = False


class PricingTableContent(ContentModel):
    plans: List[PricingPlan] = Field(default_factory=lambda: [
        PricingPlan(name="Basic", price="৳999", features=["Feature 1", "Feature 2"]),
        PricingPlan(name="Pro", price="৳2999",
                    features=["Everything in Basic", "Feature 3", "Feature 4"], highlighted=True),
    ])


class Testimonial(ContentModel):
    name: str = ""
    role: str = ""
    text: str = ""
    avatar: str = ""


class TestimonialsContent(ContentModel):
    items: List[Testimonial] = Field(default_factory=lambda: [
        Testimonial(name="John Doe", role="Customer", text="Great product!"),
    ])


class ProgressBarContent(ContentModel):
    value: Number = 75
    label: str = "Progress"
    color: str = "primary"


class GoogleMapContent(ContentModel):
    embed_url: str = ""
    height: Number = 300


class SocialIcon(ContentModel):
    platform: str = ""
    url: str = "#"


class SocialIconsContent(ContentModel):
    icons: List[SocialIcon] = Field(default_factory=lambda: [
        SocialIcon(platform="facebook"),
        SocialIcon(platform="twitter"),
    ])
    size: Literal["sm", "md", "lg"] = "md"
