"""FastAPI dependencies for the box-score API."""

from __future__ import annotations

from typing import Iterator

from ..scrapers import NBASportsReferenceScraper


def get_scraper() -> Iterator[NBASportsReferenceScraper]:
    """One scraper (and HTTP client) per request, closed when the response is sent."""
    scraper = NBASportsReferenceScraper()
    try:
        yield scraper
    finally:
        scraper.close()


__all__ = ["get_scraper"]
