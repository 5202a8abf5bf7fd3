"""Base class for Sports Reference scrapers: bounded, typed HTTP fetching."""

from __future__ import annotations

from types import TracebackType

import httpx
from bs4 import BeautifulSoup
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..config import settings
from ..exceptions import (
    FetchError,
    FetchTimeoutError,
    ScraperError,
    UpstreamNotFoundError,
    UpstreamUnavailableError,
)
from ..logging import logger

_scraper_config = settings.scraper_config


class BaseSportsReferenceScraper:
    """Shared fetching for Sports Reference pages.

    Each instance owns one ``httpx.Client``; create one per request and
    close it (or use the instance as a context manager) when done.

    Features:
    - Bounded timeout on every request, surfaced as ``FetchTimeoutError``
    - Upstream status mapped onto typed ``FetchError`` subclasses
    - Retry with exponential backoff for transient failures only
    """

    base_url: str

    def __init__(
        self,
        timeout_seconds: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        timeout = timeout_seconds or _scraper_config.request_timeout_seconds
        self.timeout_seconds = timeout
        self.client = client or httpx.Client(
            timeout=timeout,
            headers={
                "User-Agent": _scraper_config.user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.5",
            },
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "BaseSportsReferenceScraper":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @retry(
        wait=wait_exponential(
            min=_scraper_config.retry_wait_min_seconds,
            max=_scraper_config.retry_wait_max_seconds,
        ),
        stop=stop_after_attempt(_scraper_config.max_attempts),
        retry=retry_if_exception_type(UpstreamUnavailableError),
        reraise=True,
    )
    def _fetch_from_network(self, url: str) -> str:
        """Fetch a page, mapping every failure onto a typed FetchError."""
        logger.info("fetching_url", url=url)
        try:
            response = self.client.get(url, follow_redirects=True)
        except httpx.TimeoutException as exc:
            logger.warning("fetch_timeout", url=url, timeout_seconds=self.timeout_seconds)
            raise FetchTimeoutError(
                f"Timed out after {self.timeout_seconds}s fetching {url}", url=url
            ) from exc
        except httpx.TransportError as exc:
            logger.warning("fetch_transport_error", url=url, error=str(exc))
            raise UpstreamUnavailableError(f"Failed to reach {url}: {exc}", url=url) from exc

        status = response.status_code
        if status == 404:
            raise UpstreamNotFoundError(f"Page not found: {url} (404)", url=url, status_code=status)
        if status == 429 or status >= 500:
            logger.warning("upstream_unavailable", url=url, status_code=status)
            raise UpstreamUnavailableError(
                f"Upstream unavailable: {url} ({status})", url=url, status_code=status
            )
        if status != 200:
            raise FetchError(f"Failed to fetch {url} ({status})", url=url, status_code=status)

        final_url = str(response.url)
        if final_url != url:
            logger.debug("redirect_followed", original_url=url, final_url=final_url)
        return response.text

    def fetch_html(self, url: str) -> BeautifulSoup:
        """Fetch a page and parse it with lxml."""
        return BeautifulSoup(self._fetch_from_network(url), "lxml")


__all__ = [
    "BaseSportsReferenceScraper",
    "FetchError",
    "FetchTimeoutError",
    "ScraperError",
    "UpstreamNotFoundError",
    "UpstreamUnavailableError",
]
