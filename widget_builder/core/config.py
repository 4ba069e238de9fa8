"""
Configuration du widget builder : constantes lues depuis l'environnement.
"""
import os

# Historique code-mode : nombre maximum de versions conservées par bloc
CODE_HISTORY_LIMIT = 20

# Tag de version écrit dans chaque bloc sauvegardé (absent = données anciennes)
SCHEMA_VERSION = 2

ID_PREFIX         = os.getenv("WIDGET_BUILDER_ID_PREFIX", "block")
PLACEHOLDER_ICON  = os.getenv("WIDGET_BUILDER_PLACEHOLDER_ICON", "HelpCircle")
LOG_LEVEL         = os.getenv("WIDGET_BUILDER_LOG_LEVEL", "INFO")
DEFAULT_BREAKPOINT = os.getenv("WIDGET_BUILDER_DEFAULT_BREAKPOINT", "desktop")

EMPTY_CODE_BLOCK = "<!-- Empty Code Block -->"

# Largeurs max des breakpoints (px), alignées sur md/lg de Tailwind
TABLET_MAX_WIDTH = 1023
MOBILE_MAX_WIDTH = 767
