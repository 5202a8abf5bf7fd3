"""Typed records produced by the scrapers and served by the API."""

from .schemas import (
    BOX_SCORE_COLUMNS,
    BoxScoreLine,
    DayBoxScores,
    ErrorDetail,
    ErrorResponse,
    GameSummary,
    PlayerSeasonStatsOut,
    PlayerTotals,
    PlayerTotalsTeam,
    TeamTotals,
)

__all__ = [
    "BOX_SCORE_COLUMNS",
    "BoxScoreLine",
    "DayBoxScores",
    "ErrorDetail",
    "ErrorResponse",
    "GameSummary",
    "PlayerSeasonStatsOut",
    "PlayerTotals",
    "PlayerTotalsTeam",
    "TeamTotals",
]
