"""Common utilities for scrapers and data loading."""

from .html_parsing import (
    decode_cells,
    find_table_by_id,
    get_table_ids_on_page,
    require_table,
    select_text,
    text_of,
)
from .parsing import parse_stat

__all__ = [
    # Parsing utilities
    "parse_stat",
    # HTML parsing
    "text_of",
    "select_text",
    "find_table_by_id",
    "require_table",
    "decode_cells",
    "get_table_ids_on_page",
]
