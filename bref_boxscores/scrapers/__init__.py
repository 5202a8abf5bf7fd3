"""Sports Reference scrapers."""

from __future__ import annotations

from .base import BaseSportsReferenceScraper
from .nba_sportsref import NBASportsReferenceScraper
from .player_totals import parse_player_totals
from .scoreboard import parse_scoreboard
from .team_totals import parse_team_totals

__all__ = [
    "BaseSportsReferenceScraper",
    "NBASportsReferenceScraper",
    "parse_player_totals",
    "parse_scoreboard",
    "parse_team_totals",
]
