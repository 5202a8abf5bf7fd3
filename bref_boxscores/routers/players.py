"""Season player stats loaded from CSV."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import PlayerSeasonStats, get_db
from ..logging import logger
from ..models import ErrorResponse, PlayerSeasonStatsOut

router = APIRouter(tags=["players"])


@router.get(
    "/players",
    response_model=list[PlayerSeasonStatsOut],
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse}},
)
def search_players(
    session: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Query(max_length=100)] = None,
    limit: Annotated[int, Query(ge=1, le=1000)] = 50,
) -> list[PlayerSeasonStatsOut]:
    """Loaded season lines ordered by player name.

    ``name`` filters to players whose name contains it (case-insensitive);
    without it the first ``limit`` players are returned.
    """
    stmt = select(PlayerSeasonStats)
    if name and name.strip():
        stmt = stmt.where(PlayerSeasonStats.name.ilike(f"%{name.strip()}%"))
    stmt = stmt.order_by(PlayerSeasonStats.name, PlayerSeasonStats.id).limit(limit)
    try:
        rows = session.execute(stmt).scalars().all()
    except SQLAlchemyError as exc:
        logger.error("player_search_failed", error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "database_unavailable", "message": "Season stats are unavailable"},
        ) from exc
    return [PlayerSeasonStatsOut.model_validate(row) for row in rows]
