"""
Contenus de widgets : modèles par type + registre.
"""
from .base import (
    ContentModel, OpaqueContent, ResponsiveValue, responsive, BoxModel, box, RadiusBox,
    GradientStop, Gradient, ColorValue, LineHeight, TextShadow, BoxShadow, Border,
    ResponsiveVisibility, Link, CustomAttributes, AdvancedSettings,
    BackgroundImage, Background, ContainerBorder, ContainerShadow, ContainerAdvanced, BoxedContent,
)
from .heading import HeadingContent, HeadingStyle, HeadingTypography
from .button import ButtonContent, ButtonStyle, ButtonTypography, ButtonColors, ButtonHoverColors, ButtonIcon, ButtonAdvanced
from .container import (
    ContainerContent, ContainerLayout, GridContent, GridLayout,
    FlexContainerContent, FlexLayout, SmartGridContent, SmartGridLayout,
    GridItemSettings, ShapeDivider,
)
from .basic import ParagraphContent, IconContent, DividerContent, SpacerContent
from .media import ImageContent, VideoContent, GalleryContent, GalleryImage, SliderContent, Slide
from .panels import TabsContent, TabItem, AccordionContent, AccordionItem
from .commerce import (
    CheckoutFormContent, CountdownContent, countdown_target, PricingTableContent, PricingPlan,
    TestimonialsContent, Testimonial, ProgressBarContent, GoogleMapContent,
    SocialIconsContent, SocialIcon,
)
from .legacy import HeroContent, ProductShowcaseContent, CheckoutContent
from .registry import (
    WidgetType, is_known_type, content_model, content_key, default_content, is_legacy_shape,
)

__all__ = [
    # Base
    "ContentModel", "OpaqueContent", "ResponsiveValue", "responsive", "BoxModel", "box", "RadiusBox",
    "GradientStop", "Gradient", "ColorValue", "LineHeight", "TextShadow", "BoxShadow", "Border",
    "ResponsiveVisibility", "Link", "CustomAttributes", "AdvancedSettings",
    "BackgroundImage", "Background", "ContainerBorder", "ContainerShadow", "ContainerAdvanced", "BoxedContent",
    # Heading / Button
    "HeadingContent", "HeadingStyle", "HeadingTypography",
    "ButtonContent", "ButtonStyle", "ButtonTypography", "ButtonColors", "ButtonHoverColors",
    "ButtonIcon", "ButtonAdvanced",
    # Layout
    "ContainerContent", "ContainerLayout", "GridContent", "GridLayout",
    "FlexContainerContent", "FlexLayout", "SmartGridContent", "SmartGridLayout",
    "GridItemSettings", "ShapeDivider",
    # Basic / media / panels
    "ParagraphContent", "IconContent", "DividerContent", "SpacerContent",
    "ImageContent", "VideoContent", "GalleryContent", "GalleryImage", "SliderContent", "Slide",
    "TabsContent", "TabItem", "AccordionContent", "AccordionItem",
    # Commerce / legacy
    "CheckoutFormContent", "CountdownContent", "countdown_target", "PricingTableContent", "PricingPlan",
    "TestimonialsContent", "Testimonial", "ProgressBarContent", "GoogleMapContent",
    "SocialIconsContent", "SocialIcon",
    "HeroContent", "ProductShowcaseContent", "CheckoutContent",
    # Registre
    "WidgetType", "is_known_type", "content_model", "content_key", "default_content", "is_legacy_shape",
]
