"""Persistence helpers."""

from .season_stats import (
    SEASON_STATS_COLUMNS,
    LoadReport,
    create_table,
    load_season_stats,
    parse_season_stats_row,
    read_season_stats,
)

__all__ = [
    "SEASON_STATS_COLUMNS",
    "LoadReport",
    "create_table",
    "load_season_stats",
    "parse_season_stats_row",
    "read_season_stats",
]
