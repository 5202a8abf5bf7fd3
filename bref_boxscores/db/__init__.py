"""Database models and session management.

Session management:
    from bref_boxscores.db import get_session, get_db
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..config import settings
from ..logging import logger
from .base import Base
from .season_stats import PlayerSeasonStats

# Lazy-loaded engine and session factory so importing the package never
# opens a database connection.
_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is None:
        _engine = create_engine(
            settings.database_url,
            echo=settings.sql_echo,
            future=True,
            pool_pre_ping=True,
        )
    return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=get_engine(),
            autoflush=False,
            autocommit=False,
            class_=Session,
        )
    return _SessionLocal


@contextmanager
def get_session() -> Iterator[Session]:
    """
    Provide a transactional database session context manager.

    Usage:
        with get_session() as session:
            session.add(object)
            # Commit happens automatically on exit
    """
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception as exc:
        session.rollback()
        logger.exception("db_session_rollback", error=str(exc))
        raise
    finally:
        session.close()


def get_db() -> Iterator[Session]:
    """FastAPI dependency for database sessions with commit/rollback semantics."""
    with get_session() as session:
        yield session


def close_db() -> None:
    """Dispose of the engine, if one was created."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _SessionLocal = None


__all__ = [
    "Base",
    "PlayerSeasonStats",
    "Session",
    "close_db",
    "get_db",
    "get_engine",
    "get_session",
]
