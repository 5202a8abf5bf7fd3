"""Daily scoreboard parsing: one GameSummary per game block.

Each ``.game_summary`` block holds two tables. The first lists the loser and
winner rows with final scores and the game link; the second is the line
score, away row first, with one ``.center`` cell per period (overtime
included).
"""

from __future__ import annotations

from datetime import date

from bs4 import BeautifulSoup, Tag

from ..logging import logger
from ..models import GameSummary
from ..normalization import DEFAULT_TEAM_LOOKUP, TeamCodeLookup, UnknownTeamError
from ..utils.html_parsing import select_text, text_of
from .urls import player_breakdown_path, score_breakdown_path

GAME_SUMMARY_SELECTOR = ".game_summary"


def _line_score_rows(table: Tag | None) -> list[Tag]:
    if table is None:
        return []
    return [row for row in table.find_all("tr") if row.find("td")]


def _period_scores(row: Tag | None) -> list[str | None]:
    if row is None:
        return []
    return [text_of(cell) for cell in row.select(".center")]


def _breakdown_links(
    day: date, away_team: str | None, home_team: str | None, lookup: TeamCodeLookup
) -> tuple[str | None, str | None]:
    if not away_team or not home_team:
        return None, None
    try:
        away_code = lookup.team_code(away_team)
        home_code = lookup.team_code(home_team)
    except UnknownTeamError as exc:
        logger.warning(
            "team_code_unresolved",
            team=exc.value,
            away_team=away_team,
            home_team=home_team,
            game_date=str(day),
        )
        return None, None
    return (
        score_breakdown_path(day, away_code, home_code),
        player_breakdown_path(day, away_code, home_code),
    )


def parse_game_summary(
    block: Tag, day: date, lookup: TeamCodeLookup = DEFAULT_TEAM_LOOKUP
) -> GameSummary:
    """Map one ``.game_summary`` block onto a GameSummary.

    Missing nodes leave their fields ``None``. Line-score rows with a
    different number of periods leave both period lists empty.
    """
    tables = block.find_all("table")
    teams_table = tables[0] if tables else None
    line_score = tables[1] if len(tables) > 1 else None

    loser = teams_table.select_one("tr.loser") if teams_table else None
    winner = teams_table.select_one("tr.winner") if teams_table else None

    rows = _line_score_rows(line_score)
    away_row = rows[0] if rows else None
    home_row = rows[1] if len(rows) > 1 else None

    away_scores = _period_scores(away_row)
    home_scores = _period_scores(home_row)
    if len(away_scores) != len(home_scores):
        logger.warning(
            "line_score_mismatch",
            game_date=str(day),
            away_periods=len(away_scores),
            home_periods=len(home_scores),
        )
        away_scores, home_scores = [], []

    away_team = select_text(away_row, "td a")
    home_team = select_text(home_row, "td a")
    score_breakdown, player_breakdown = _breakdown_links(day, away_team, home_team, lookup)

    return GameSummary(
        losing_team=select_text(loser, "td a"),
        winning_team=select_text(winner, "td a"),
        losing_team_score=select_text(loser, ".right"),
        winning_team_score=select_text(winner, ".right"),
        status=select_text(loser, ".gamelink a"),
        away_team=away_team,
        home_team=home_team,
        away_quarter_score=away_scores,
        home_quarter_score=home_scores,
        score_breakdown=score_breakdown,
        player_breakdown=player_breakdown,
    )


def parse_scoreboard(
    soup: BeautifulSoup, day: date, lookup: TeamCodeLookup = DEFAULT_TEAM_LOOKUP
) -> list[GameSummary]:
    """One GameSummary per game block, in page order."""
    blocks = soup.select(GAME_SUMMARY_SELECTOR)
    games = [parse_game_summary(block, day, lookup) for block in blocks]
    logger.debug("scoreboard_parsed", game_date=str(day), games_found=len(games))
    return games
