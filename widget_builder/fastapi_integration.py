"""
Helpers pour intégration FastAPI.
"""
import logging
from typing import Callable, Union

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from .builder import render_page
from .core.config import LOG_LEVEL
from .core.schemas import PageDocument
from .router import router


def create_app(**app_kwargs) -> FastAPI:
    """Application autonome exposant le router /widget-builder."""
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s — %(message)s")
    app = FastAPI(title="Widget Builder", **app_kwargs)
    app.include_router(router)
    return app


def create_page_route(
    app: FastAPI,
    path: str,
    page_factory: Callable[[], Union[PageDocument, dict]],
    **route_kwargs
):
    """
    Crée une route FastAPI qui rend une page.

    Args:
        app: Instance FastAPI
        path: Chemin de la route (ex: "/")
        page_factory: Fonction qui retourne un PageDocument (ou sa forme stockée)
        **route_kwargs: Arguments additionnels pour @app.get()

    Example:
        >>> def home_page():
        ...     return {"title": "Home", "blocks": [...]}
        >>> create_page_route(app, "/", home_page)
    """
    @app.get(path, response_class=HTMLResponse, **route_kwargs)
    def route():
        page = page_factory()
        return HTMLResponse(render_page(page))

    return route


class PageRouter:
    """
    Router pour gérer plusieurs pages.

    Usage:
        >>> router = PageRouter()
        >>> router.add_page("/", lambda: store.load_document("home"))
        >>> router.add_page("/about", lambda: store.load_document("about"))
        >>> router.register(app)
    """

    def __init__(self):
        self.pages = {}

    def add_page(self, path: str, page_factory: Callable[[], Union[PageDocument, dict]]):
        """Ajoute une page au router."""
        self.pages[path] = page_factory

    def register(self, app: FastAPI):
        """Enregistre toutes les routes sur l'app FastAPI."""
        for path, factory in self.pages.items():
            create_page_route(app, path, factory)
