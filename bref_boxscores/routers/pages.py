"""Static HTML pages."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from ..config import settings

router = APIRouter(tags=["pages"])


def _page(name: str) -> FileResponse:
    return FileResponse(Path(settings.templates_dir) / name, media_type="text/html")


@router.get("/", include_in_schema=False)
def index() -> FileResponse:
    return _page("index.html")


@router.get("/searchPlayer", include_in_schema=False)
def search_player() -> FileResponse:
    return _page("search.html")
