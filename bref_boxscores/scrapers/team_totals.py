"""Team totals: the footer row of each team's basic box-score table."""

from __future__ import annotations

from bs4 import BeautifulSoup

from ..exceptions import ExtractionError
from ..models import BOX_SCORE_COLUMNS, TeamTotals
from ..utils.html_parsing import decode_cells, require_table


def basic_table_id(team_code: str) -> str:
    # Basketball Reference uses UPPERCASE team abbreviations in table IDs
    return f"box-{team_code.upper()}-game-basic"


def parse_team_totals_row(soup: BeautifulSoup, team_code: str) -> TeamTotals:
    table_id = basic_table_id(team_code)
    table = require_table(soup, table_id)
    selector = f"#{table_id} tfoot tr"
    row = table.select_one("tfoot tr")
    if row is None:
        raise ExtractionError(f"{selector}: team totals row not found", selector=selector)
    stats = decode_cells(row.find_all("td"), BOX_SCORE_COLUMNS, selector=selector)
    return TeamTotals(team=team_code.upper(), **stats)


def parse_team_totals(soup: BeautifulSoup, away_code: str, home_code: str) -> list[TeamTotals]:
    """Exactly two records, away first."""
    return [
        parse_team_totals_row(soup, away_code),
        parse_team_totals_row(soup, home_code),
    ]
