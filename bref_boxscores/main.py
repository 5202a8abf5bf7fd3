from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from . import __version__
from .db import close_db
from .middleware.logging import StructuredLoggingMiddleware
from .routers import boxscores, pages, players


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    close_db()


app = FastAPI(title="bref-boxscores", version=__version__, lifespan=lifespan)

app.add_middleware(StructuredLoggingMiddleware)

app.include_router(pages.router)
app.include_router(boxscores.router)
app.include_router(players.router)


@app.get("/healthz")
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
