import logging
import os

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from docsite.errors import (
    CompositionError,
    DecodeError,
    DocumentNotFound,
    RenderError,
    StoreUnavailable,
)
from docsite.services.pages import assemble_document, assemble_home, assemble_listing

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()

DEFAULT_RATE_LIMIT = "60/minute"


def _rate_limit() -> str:
    """Per-client page limit, read from ``DOCS_RATE_LIMIT`` on every request."""
    return os.getenv("DOCS_RATE_LIMIT", DEFAULT_RATE_LIMIT)


@router.get("/", response_class=HTMLResponse, summary="Home page")
@limiter.limit(_rate_limit)
async def home(request: Request) -> HTMLResponse:
    state = request.app.state
    try:
        html = await assemble_home(state.store, state.composer)
    except StoreUnavailable as exc:
        logger.error("Content store unavailable while rendering home: %s", exc)
        raise HTTPException(status_code=502, detail="Error loading documents")
    except CompositionError:
        logger.exception("Template composition failed for home page")
        raise HTTPException(status_code=500, detail="Error rendering page")
    return HTMLResponse(html)


@router.get("/docs", response_class=HTMLResponse, summary="Documentation dashboard")
@limiter.limit(_rate_limit)
async def docs_index(request: Request) -> HTMLResponse:
    state = request.app.state
    try:
        html = await assemble_listing(state.store, state.composer)
    except StoreUnavailable as exc:
        logger.error("Content store unavailable while listing documents: %s", exc)
        raise HTTPException(status_code=502, detail="Error loading documents")
    except CompositionError:
        logger.exception("Template composition failed for docs listing")
        raise HTTPException(status_code=500, detail="Error rendering page")
    return HTMLResponse(html)


@router.get("/docs/{doc_id}", response_class=HTMLResponse, summary="Single document view")
@limiter.limit(_rate_limit)
async def docs_view(request: Request, doc_id: str) -> HTMLResponse:
    """Render document *doc_id* from markdown to a full HTML page."""
    state = request.app.state
    try:
        html = await assemble_document(doc_id, state.store, state.renderer, state.composer)
    except DocumentNotFound:
        logger.info("Document not found", extra={"doc_id": doc_id})
        raise HTTPException(status_code=404, detail="Document not found")
    except StoreUnavailable as exc:
        logger.error("Content store unavailable for document %s: %s", doc_id, exc)
        raise HTTPException(status_code=502, detail="Error loading document")
    except DecodeError as exc:
        logger.error("Corrupt content for document %s: %s", doc_id, exc)
        raise HTTPException(status_code=500, detail="Error decoding document")
    except RenderError as exc:
        logger.error("Cannot render document %s: %s", doc_id, exc)
        raise HTTPException(status_code=500, detail="Error converting markdown")
    except CompositionError:
        logger.exception("Template composition failed for document %s", doc_id)
        raise HTTPException(status_code=500, detail="Error rendering page")
    return HTMLResponse(html)
