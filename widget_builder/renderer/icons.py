"""
Résolution des icônes par nom.

Le compilateur reçoit un IconResolver explicite ; un nom absent du jeu
renvoie l'icône de remplacement. Une recherche ne lève jamais.
"""
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from ..core.config import PLACEHOLDER_ICON


class RenderableIcon(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    found: bool = True

    def to_html(self, size=24, color: str = "currentColor") -> str:
        return (f'<i class="icon icon-{self.name}" data-icon="{self.name}" '
                f'style="width: {size}px; height: {size}px; color: {color};"></i>')


# Noms utilisés par la palette et les contenus par défaut (jeu Lucide)
DEFAULT_ICON_NAMES = frozenset({
    "AlignLeft", "ArrowLeft", "ArrowRight", "BarChart3", "Box", "Check", "ChevronDown",
    "ChevronRight", "Clock", "Columns3", "CreditCard", "DollarSign", "Download", "ExternalLink",
    "Facebook", "GalleryHorizontal", "Grid3x3", "Heart", "HelpCircle", "Image", "Instagram",
    "LayoutGrid", "Linkedin", "Mail", "MapPin", "Minus", "MousePointerClick", "MoveVertical",
    "PanelTop", "Phone", "Play", "Plus", "Quote", "Send", "Share2", "ShoppingCart", "Sparkles",
    "Square", "Star", "Twitter", "Type", "Youtube", "Zap",
})


class IconSet:
    """Jeu d'icônes nommées avec icône de remplacement."""

    def __init__(self, names: Iterable[str] = DEFAULT_ICON_NAMES, placeholder: str = PLACEHOLDER_ICON):
        self._names = frozenset(names)
        self.placeholder = placeholder

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def lookup(self, name: Optional[str]) -> RenderableIcon:
        if isinstance(name, str) and name in self._names:
            return RenderableIcon(name=name)
        return RenderableIcon(name=self.placeholder, found=False)


DEFAULT_ICONS = IconSet()
