"""Exceptions du widget builder."""


class WidgetBuilderError(Exception):
    """Erreur de base du package."""


class UnknownWidgetType(WidgetBuilderError, ValueError):
    """Type de widget absent de l'énumération WidgetType."""

    def __init__(self, widget_type: str):
        self.widget_type = widget_type
        super().__init__(f"Widget inconnu : {widget_type!r}")


class MigrationError(WidgetBuilderError):
    """Contenu stocké impossible à migrer vers le schéma courant."""
