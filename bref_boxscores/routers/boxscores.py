"""Box-score endpoints scraped live from Basketball Reference."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Annotated, Iterator

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ..dependencies import get_scraper
from ..exceptions import (
    ExtractionError,
    FetchError,
    FetchTimeoutError,
    UnknownTeamError,
    UpstreamNotFoundError,
)
from ..logging import logger
from ..models import ErrorResponse, GameSummary, PlayerTotalsTeam, TeamTotals
from ..scrapers import NBASportsReferenceScraper

router = APIRouter(prefix="/boxscore", tags=["boxscores"])

Year = Annotated[str, Path(pattern=r"^\d{4}$")]
Month = Annotated[str, Path(pattern=r"^\d{1,2}$")]
Day = Annotated[str, Path(pattern=r"^\d{1,2}$")]
TeamCode = Annotated[str, Path(pattern=r"^[A-Za-z]{3}$")]
Scraper = Annotated[NBASportsReferenceScraper, Depends(get_scraper)]

_ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    status.HTTP_504_GATEWAY_TIMEOUT: {"model": ErrorResponse},
}


def _http_error(status_code: int, error: str, exc: Exception) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"error": error, "message": str(exc)})


def _game_date(year: str, month: str, day: str) -> date:
    try:
        return date(int(year), int(month), int(day))
    except ValueError as exc:
        raise _http_error(422, "invalid_date", exc) from exc


@contextmanager
def _translate_scraper_errors() -> Iterator[None]:
    """Map scraper failures onto HTTP responses."""
    try:
        yield
    except FetchTimeoutError as exc:
        logger.warning("boxscore_fetch_timeout", url=exc.url)
        raise _http_error(status.HTTP_504_GATEWAY_TIMEOUT, "upstream_timeout", exc) from exc
    except UpstreamNotFoundError as exc:
        raise _http_error(status.HTTP_404_NOT_FOUND, "not_found", exc) from exc
    except FetchError as exc:
        logger.warning("boxscore_fetch_failed", url=exc.url, status_code=exc.status_code)
        raise _http_error(status.HTTP_502_BAD_GATEWAY, "upstream_error", exc) from exc
    except ExtractionError as exc:
        logger.error("boxscore_extraction_failed", selector=exc.selector, error=str(exc))
        raise _http_error(status.HTTP_502_BAD_GATEWAY, "extraction_error", exc) from exc
    except UnknownTeamError as exc:
        raise _http_error(status.HTTP_404_NOT_FOUND, "unknown_team", exc) from exc


@router.get(
    "/{year}/{month}/{day}",
    response_model=list[GameSummary],
    responses=_ERROR_RESPONSES,
)
def day_summary(year: Year, month: Month, day: Day, scraper: Scraper) -> list[GameSummary]:
    """Every game played on a date, in scoreboard order."""
    game_date = _game_date(year, month, day)
    with _translate_scraper_errors():
        return scraper.fetch_day_summary(game_date).box_scores


@router.get(
    "/{year}/{month}/{day}/{awayteam}/{hometeam}",
    response_model=list[TeamTotals],
    responses=_ERROR_RESPONSES,
)
def team_totals(
    year: Year,
    month: Month,
    day: Day,
    awayteam: TeamCode,
    hometeam: TeamCode,
    scraper: Scraper,
) -> list[TeamTotals]:
    """Team totals for one game, away team first."""
    game_date = _game_date(year, month, day)
    with _translate_scraper_errors():
        return scraper.fetch_team_totals(game_date, awayteam, hometeam)


@router.get(
    "/{year}/{month}/{day}/{awayteam}/{hometeam}/player",
    response_model=list[PlayerTotalsTeam],
    responses=_ERROR_RESPONSES,
)
def player_totals(
    year: Year,
    month: Month,
    day: Day,
    awayteam: TeamCode,
    hometeam: TeamCode,
    scraper: Scraper,
) -> list[PlayerTotalsTeam]:
    """Starters and reserves for both teams, away team first."""
    game_date = _game_date(year, month, day)
    with _translate_scraper_errors():
        return scraper.fetch_player_totals(game_date, awayteam, hometeam)
