"""
Router FastAPI : endpoints widget_builder.

POST /widget-builder/normalize → {type, content, schemaVersion?} → contenu complet
POST /widget-builder/compile   → {type, content, breakpoint?}    → CompiledStyle
POST /widget-builder/render    → {title, blocks}                 → HTMLResponse
POST /widget-builder/validate  → {type, content, schemaVersion?} → {"valid": bool, "error"?}
GET  /widget-builder/catalog   → palette des widgets + leurs JSON schemas
"""
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .blocks.registry import content_model, is_known_type
from .core.config import DEFAULT_BREAKPOINT
from .core.errors import MigrationError
from .core.schemas import WIDGET_LIBRARY
from .migration.normalize import load_page, normalize, validate_content
from .renderer.compiler import compile_style
from .renderer.html import render_document

router = APIRouter(prefix="/widget-builder", tags=["widget_builder"])


class ContentRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str
    content: Optional[Any] = None
    schema_version: Optional[int] = None
    breakpoint: str = DEFAULT_BREAKPOINT


class PageRequest(BaseModel):
    title: str = ""
    blocks: List[dict] = []


def _known(widget_type: str) -> None:
    if not is_known_type(widget_type):
        raise HTTPException(status_code=422, detail=f"Widget inconnu : {widget_type!r}")


@router.post("/normalize", summary="Complète un contenu stocké avec les valeurs par défaut")
def normalize_content(req: ContentRequest) -> dict:
    """Migration des formes historiques + fusion avec les défauts du type."""
    _known(req.type)
    return normalize(req.type, req.content, req.schema_version).to_storage()


@router.post("/compile", summary="Compile le style d'un widget pour un breakpoint")
def compile_content(req: ContentRequest) -> dict:
    _known(req.type)
    try:
        compiled = compile_style(req.type, req.content, req.breakpoint)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return compiled.model_dump()


@router.post("/render", response_class=HTMLResponse, summary="Rend une page en HTML")
def render(req: PageRequest) -> HTMLResponse:
    """Reçoit {title, blocks} (forme stockée), retourne le HTML complet de la page."""
    page = load_page(req.model_dump())
    return HTMLResponse(content=render_document(page))


@router.post("/validate", summary="Valide un contenu sans récupération")
def validate(req: ContentRequest) -> dict:
    """Validation stricte : type connu, forme historique cohérente, champs valides."""
    try:
        validate_content(req.type, req.content, req.schema_version)
        return {"valid": True}
    except (ValidationError, ValueError, MigrationError) as e:
        return {"valid": False, "error": str(e)}


@router.get("/catalog", summary="Liste les widgets disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne la palette de widgets avec le JSON schema Pydantic de leur contenu."""
    catalog_data = []
    for widget in WIDGET_LIBRARY:
        catalog_data.append({
            **widget.model_dump(),
            "schema": content_model(widget.type).model_json_schema(by_alias=True),
        })
    return JSONResponse({"widgets": catalog_data})
