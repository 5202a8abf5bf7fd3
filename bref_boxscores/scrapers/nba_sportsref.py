"""NBA scraper powered by Basketball Reference."""

from __future__ import annotations

from datetime import date

import httpx

from ..config import settings
from ..logging import logger
from ..models import DayBoxScores, PlayerTotalsTeam, TeamTotals
from ..normalization import DEFAULT_TEAM_LOOKUP, TeamCodeLookup, normalize_team_code
from .base import BaseSportsReferenceScraper
from .player_totals import parse_player_totals
from .scoreboard import parse_scoreboard
from .team_totals import parse_team_totals
from .urls import boxscore_url, scoreboard_url


class NBASportsReferenceScraper(BaseSportsReferenceScraper):
    """Scoreboard, team totals and player totals for a single date or game.

    Each operation is one fetch followed by a pure parse of the document.
    """

    base_url = settings.scraper_config.base_url

    def __init__(
        self,
        timeout_seconds: float | None = None,
        client: httpx.Client | None = None,
        lookup: TeamCodeLookup = DEFAULT_TEAM_LOOKUP,
        max_reserves: int | None = None,
    ) -> None:
        super().__init__(timeout_seconds=timeout_seconds, client=client)
        self.lookup = lookup
        self.max_reserves = (
            max_reserves if max_reserves is not None else settings.scraper_config.max_reserves
        )

    def scoreboard_url(self, day: date) -> str:
        return scoreboard_url(self.base_url, day)

    def boxscore_url(self, day: date, home_code: str) -> str:
        return boxscore_url(self.base_url, day, home_code)

    def fetch_day_summary(self, day: date) -> DayBoxScores:
        soup = self.fetch_html(self.scoreboard_url(day))
        games = parse_scoreboard(soup, day, self.lookup)
        logger.info("day_summary_extracted", game_date=str(day), games=len(games))
        return DayBoxScores(game_date=day, box_scores=games)

    def fetch_team_totals(self, day: date, away_code: str, home_code: str) -> list[TeamTotals]:
        away_code, home_code = normalize_team_code(away_code), normalize_team_code(home_code)
        soup = self.fetch_html(self.boxscore_url(day, home_code))
        totals = parse_team_totals(soup, away_code, home_code)
        logger.info(
            "team_totals_extracted",
            game_date=str(day),
            away_team=away_code,
            home_team=home_code,
        )
        return totals

    def fetch_player_totals(
        self, day: date, away_code: str, home_code: str
    ) -> list[PlayerTotalsTeam]:
        away_code, home_code = normalize_team_code(away_code), normalize_team_code(home_code)
        soup = self.fetch_html(self.boxscore_url(day, home_code))
        teams = parse_player_totals(soup, away_code, home_code, self.max_reserves)
        logger.info(
            "player_totals_extracted",
            game_date=str(day),
            away_team=away_code,
            home_team=home_code,
            away_players=len(teams[0].starters) + len(teams[0].reserves),
            home_players=len(teams[1].starters) + len(teams[1].reserves),
        )
        return teams
