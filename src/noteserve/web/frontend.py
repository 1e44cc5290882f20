"""Search UI served at the site root."""

from __future__ import annotations

from importlib.resources import files

from fastapi import APIRouter, Response
from fastapi.responses import HTMLResponse

router = APIRouter()


def _load_template() -> str:
    template = files("noteserve.web").joinpath("templates", "index.html")
    return template.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(content=_load_template())


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    # No icon is shipped; answer without a body so browsers stop asking.
    return Response(status_code=204)
