"""FastAPI application serving rendered notes and search."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from pydantic import BaseModel

from noteserve import __version__
from noteserve.config import AppConfig
from noteserve.index.search import InvalidQuery, NotReady, SearchIndex
from noteserve.index.storage import load_index
from noteserve.utils.files import is_within
from noteserve.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)


class SearchPayload(BaseModel):
    # Left untyped so a non-string term reaches the index and is reported as InvalidQuery.
    search_term: Any = None


class NoteSummary(BaseModel):
    file: str
    title: str
    tags: List[str]


class SearchResponse(BaseModel):
    responses: List[NoteSummary] = []


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    LOGGER.info("Serving %d notes from %s", len(app.state.index), app.state.html_dir)
    yield


def _get_index(request: Request) -> SearchIndex:
    return request.app.state.index


def _run_search(index: SearchIndex, term: Any) -> SearchResponse:
    try:
        records = index.search(term)
    except InvalidQuery as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotReady as exc:
        raise HTTPException(
            status_code=503,
            detail="Search index not loaded. Render your notes first with 'noteserve render'.",
        ) from exc
    return SearchResponse(responses=[NoteSummary(**record.to_summary()) for record in records])


def _serve_note(request: Request, note: str) -> FileResponse:
    html_dir: Path = request.app.state.html_dir
    candidate = html_dir / note
    if not is_within(candidate, html_dir) or not candidate.is_file():
        raise HTTPException(status_code=404, detail=f"Note not found: {note}")
    return FileResponse(candidate, media_type="text/html")


def create_app(config: AppConfig | None = None, index: SearchIndex | None = None) -> FastAPI:
    """Build the server around a single, read-only search index.

    When ``index`` is omitted it is loaded from the summary file named by
    ``config``.
    """
    config = config or AppConfig()
    base_dir = Path.cwd()
    if index is None:
        index = load_index(
            config.resolve_summary_path(base_dir), case_sensitive=config.case_sensitive
        )

    app = FastAPI(title="NoteServe", version=__version__, lifespan=_lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.index = index
    app.state.html_dir = config.resolve_html_dir(base_dir)
    app.include_router(frontend_router)

    @app.post("/search", response_model=SearchResponse)
    async def search_notes(payload: SearchPayload, request: Request) -> SearchResponse:
        return _run_search(_get_index(request), payload.search_term)

    @app.get("/search", response_model=SearchResponse)
    async def search_notes_get(request: Request, search_term: str = "") -> SearchResponse:
        return _run_search(_get_index(request), search_term)

    @app.get("/notes/{note:path}")
    async def get_note(note: str, request: Request) -> FileResponse:
        return _serve_note(request, note)

    @app.post("/notes/{note:path}")
    async def post_note(note: str, request: Request) -> FileResponse:
        return _serve_note(request, note)

    @app.get("/health")
    async def health(request: Request) -> dict[str, Any]:
        index = _get_index(request)
        return {"status": "ok", "ready": index.is_ready, "notes": len(index)}

    return app
