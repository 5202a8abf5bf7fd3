"""Custom exceptions for scraping and season-stats loading."""

from __future__ import annotations

from .normalization import UnknownTeamError


class ScraperError(RuntimeError):
    """Raised when a scraper encounters an unrecoverable error."""


class FetchError(ScraperError):
    """The upstream page could not be fetched."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FetchTimeoutError(FetchError):
    """The bounded request timeout elapsed before the page arrived."""


class UpstreamNotFoundError(FetchError):
    """Upstream answered 404, e.g. no game for that date and home team."""


class UpstreamUnavailableError(FetchError):
    """Transient upstream failure (429, 5xx, connection error). Retried."""


class ExtractionError(ScraperError):
    """The page does not have the structure the parser relies on."""

    def __init__(self, message: str, *, selector: str | None = None) -> None:
        super().__init__(message)
        self.selector = selector


class MalformedRowError(ValueError):
    """A season-stats CSV line that cannot be mapped onto the table."""

    def __init__(self, message: str, *, line_number: int) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


__all__ = [
    "ExtractionError",
    "FetchError",
    "FetchTimeoutError",
    "MalformedRowError",
    "ScraperError",
    "UnknownTeamError",
    "UpstreamNotFoundError",
    "UpstreamUnavailableError",
]
