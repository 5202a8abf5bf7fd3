"""
Generic, format-agnostic parsing utilities.

This module must NOT depend on format-specific libraries (like BeautifulSoup)
so it can parse values coming from HTML, CSV or query strings alike.
"""

from __future__ import annotations

_BLANK_VALUES = ("", "-", "NA", "N/A")


def parse_stat(value: str | None) -> float | None:
    """Parse a numeric season statistic strictly.

    Blank markers become ``None``. Thousands separators, a leading ``$``, a
    trailing ``%`` and a bare leading ``.`` (``.512``) are accepted. Anything
    else raises ``ValueError`` so the caller can reject the row.
    """
    if value is None:
        return None
    text = value.strip()
    if text.upper() in _BLANK_VALUES:
        return None
    cleaned = text.replace(",", "").lstrip("$")
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    return float(cleaned)
