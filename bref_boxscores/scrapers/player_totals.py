"""Player totals: starters and reserves from each team's basic table.

The table body lists the five starters, one "Reserves" separator row and
then the reserves. Players who did not play render a single ``reason``
cell instead of stat columns.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from ..exceptions import ExtractionError
from ..logging import logger
from ..models import BOX_SCORE_COLUMNS, PlayerTotals, PlayerTotalsTeam
from ..utils.html_parsing import decode_cells, require_table, select_text
from .team_totals import basic_table_id

STARTER_COUNT = 5


def _is_separator(row: Tag) -> bool:
    return "thead" in row.get("class", [])


def parse_player_row(row: Tag, team_code: str, selector: str) -> PlayerTotals:
    name = select_text(row, "th a") or select_text(row, "th")
    reason = select_text(row, 'td[data-stat="reason"]')
    if reason is not None:
        return PlayerTotals(team=team_code, name=name, reason=reason)
    stats = decode_cells(
        row.find_all("td"),
        BOX_SCORE_COLUMNS,
        selector=selector,
        optional=("plus_minus",),
    )
    return PlayerTotals(team=team_code, name=name, **stats)


def parse_player_totals_team(
    soup: BeautifulSoup, team_code: str, max_reserves: int
) -> PlayerTotalsTeam:
    team_code = team_code.upper()
    table_id = basic_table_id(team_code)
    table = require_table(soup, table_id)
    selector = f"#{table_id} tbody tr"
    rows = table.select("tbody tr")

    starter_rows = rows[:STARTER_COUNT]
    if len(starter_rows) < STARTER_COUNT or any(_is_separator(row) for row in starter_rows):
        raise ExtractionError(
            f"{selector}: expected {STARTER_COUNT} starter rows before the separator",
            selector=selector,
        )

    remaining = rows[STARTER_COUNT:]
    if remaining and _is_separator(remaining[0]):
        remaining = remaining[1:]
    elif remaining:
        logger.warning("player_totals_separator_missing", table_id=table_id)

    reserve_rows = [row for row in remaining if not _is_separator(row)][:max_reserves]

    team = PlayerTotalsTeam(
        starters=[parse_player_row(row, team_code, selector) for row in starter_rows],
        reserves=[parse_player_row(row, team_code, selector) for row in reserve_rows],
    )
    logger.debug(
        "player_totals_parsed",
        team=team_code,
        starters=len(team.starters),
        reserves=len(team.reserves),
        total_rows=len(rows),
    )
    return team


def parse_player_totals(
    soup: BeautifulSoup, away_code: str, home_code: str, max_reserves: int
) -> list[PlayerTotalsTeam]:
    """Two teams, away first."""
    return [
        parse_player_totals_team(soup, away_code, max_reserves),
        parse_player_totals_team(soup, home_code, max_reserves),
    ]
