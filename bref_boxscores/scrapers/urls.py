"""URL builders for Basketball Reference pages and this service's deep links."""

from __future__ import annotations

from datetime import date


def scoreboard_url(base_url: str, day: date) -> str:
    """Daily scoreboard listing every game played on ``day``."""
    return f"{base_url.rstrip('/')}/boxscores/?month={day.month}&day={day.day}&year={day.year}"


def boxscore_url(base_url: str, day: date, home_code: str) -> str:
    """Single-game box-score page, keyed by date and home team code."""
    return f"{base_url.rstrip('/')}/boxscores/{day:%Y%m%d}0{home_code.upper()}.html"


def score_breakdown_path(day: date, away_code: str, home_code: str) -> str:
    return f"/boxscore/{day.year}/{day.month:02d}/{day.day:02d}/{away_code}/{home_code}"


def player_breakdown_path(day: date, away_code: str, home_code: str) -> str:
    return f"{score_breakdown_path(day, away_code, home_code)}/player"
