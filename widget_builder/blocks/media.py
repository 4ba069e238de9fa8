"""
Widgets média : image, video, gallery, slider.
Les URLs sont des chaînes opaques (upload / résolution hors périmètre).
"""
from typing import List, Literal

from pydantic import Field

from .base import ContentModel

Align = Literal["left", "center", "right"]


class ImageContent(ContentModel):
    url: str = "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=800&q=80"
    alt: str = "Image"
    width: Literal["full", "auto"] = "full"
    alignment: Align = "center"


class VideoContent(ContentModel):
    url: str = "https://www.youtube.com/embed/dQw4w9WgXcQ"
    type: Literal["youtube", "vimeo"] = "youtube"
    autoplay: bool = False


class GalleryImage(ContentModel):
    url: str = ""
    alt: str = ""


def _gallery_images() -> List[GalleryImage]:
    return [
        GalleryImage(url="https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=400", alt="Image 1"),
        GalleryImage(url="https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=400", alt="Image 2"),
        GalleryImage(url="https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=400", alt="Image 3"),
    ]


class GalleryContent(ContentModel):
    images: List[GalleryImage] = Field(default_factory=_gallery_images)
    columns: Literal[2, 3, 4] = 3


class Slide(ContentModel):
    image_url: str = ""
    title: str = ""
    description: str = ""


class SliderContent(ContentModel):
    slides: List[Slide] = Field(default_factory=lambda: [
        Slide(image_url="https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=800",
              title="Slide 1", description="Description"),
    ])
    autoplay: bool = True
    interval: int = 5000
