"""
Shared HTML / DOM-specific parsing utilities for scrapers.

Contains helpers that depend on BeautifulSoup or other HTML-specific structures.
Generic data-type conversion (ints, floats) should live in parsing.py.
"""

from __future__ import annotations

from typing import Sequence

from bs4 import BeautifulSoup, Tag

from ..logging import logger
from ..exceptions import ExtractionError


def text_of(node: Tag | None) -> str | None:
    """Stripped text of a node; ``None`` when the node is missing or empty."""
    if node is None:
        return None
    text = node.get_text(strip=True)
    return text or None


def select_text(root: Tag | None, selector: str) -> str | None:
    """Text of the first match for a CSS selector under ``root``."""
    if root is None:
        return None
    return text_of(root.select_one(selector))


def find_table_by_id(soup: BeautifulSoup, table_id: str) -> Tag | None:
    """Find a table by ID.

    Args:
        soup: BeautifulSoup document
        table_id: Table ID to search for

    Returns:
        Table Tag if found, None otherwise
    """
    return soup.find("table", id=table_id)


def require_table(soup: BeautifulSoup, table_id: str) -> Tag:
    """Like ``find_table_by_id`` but a missing table is an extraction error."""
    table = find_table_by_id(soup, table_id)
    if table is None:
        logger.warning(
            "table_not_found",
            table_id=table_id,
            available_tables=get_table_ids_on_page(soup, limit=15),
        )
        raise ExtractionError(f"Table #{table_id} not found", selector=f"#{table_id}")
    return table


def decode_cells(
    cells: Sequence[Tag],
    columns: Sequence[str],
    *,
    selector: str,
    optional: Sequence[str] = (),
) -> dict[str, str | None]:
    """Map cells onto named columns by position.

    The first ``len(columns)`` cells are required; a shorter row raises
    ``ExtractionError``. ``optional`` columns follow and decode to ``None``
    when the row ends early. Extra trailing cells are ignored.
    """
    if len(cells) < len(columns):
        raise ExtractionError(
            f"{selector}: expected at least {len(columns)} cells, found {len(cells)}",
            selector=selector,
        )
    decoded = {name: text_of(cell) for name, cell in zip(columns, cells)}
    remaining = cells[len(columns):]
    for index, name in enumerate(optional):
        decoded[name] = text_of(remaining[index]) if index < len(remaining) else None
    return decoded


def get_table_ids_on_page(soup: BeautifulSoup, limit: int = 15) -> list[str]:
    """Get all table IDs found on a page (for debugging).

    Args:
        soup: BeautifulSoup document
        limit: Maximum number of IDs to return

    Returns:
        List of table IDs
    """
    all_tables = soup.find_all("table")
    return [t.get("id", "no-id") for t in all_tables[:limit]]
