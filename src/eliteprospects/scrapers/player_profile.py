"""Player profile page scraper.

Fetches one profile page per roster row, strictly one after another, with
the base scraper's random delay before each request.
"""

import asyncio
from collections.abc import AsyncIterator, Callable, Sequence

import httpx
from bs4 import BeautifulSoup

from ..exceptions import FetchError
from ..models import RosterRow
from .base import BaseScraper

ProgressCallback = Callable[[int, int, RosterRow], None]


class PlayerProfileScraper(BaseScraper):
    """Scraper for individual player profile pages."""

    SOURCE_NAME = "player_profile"

    async def fetch_page(self, url: str) -> BeautifulSoup:
        """
        Fetch and parse a profile page.

        Raises:
            FetchError: The request failed, or the response is not HTML
        """
        try:
            response = await self.get(url)
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        content_type = response.headers.get("content-type", "")
        if content_type and "html" not in content_type.lower():
            raise FetchError(url, f"unexpected content type {content_type!r}")
        if not response.text.strip():
            raise FetchError(url, "empty response body")

        return BeautifulSoup(response.text, "lxml")

    async def iter_pages(
        self,
        rows: Sequence[RosterRow],
        on_progress: ProgressCallback | None = None,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[tuple[BeautifulSoup | FetchError, RosterRow]]:
        """
        Fetch each roster row's profile page in order.

        Fetch failures are yielded in place of the page so the caller
        decides whether to skip or abort.

        Args:
            rows: Roster rows, each with a player_url
            on_progress: Called as (index, total, row) after each fetch
            cancel: When set, iteration stops before the next player

        Yields:
            (page or FetchError, row) pairs in input order
        """
        total = len(rows)
        for index, row in enumerate(rows, 1):
            if cancel is not None and cancel.is_set():
                self.logger.info("scrape_cancelled", processed=index - 1, total=total)
                return

            try:
                page: BeautifulSoup | FetchError = await self.fetch_page(row.player_url)
            except FetchError as e:
                page = e

            self.logger.debug(
                "player_fetched",
                player_url=row.player_url,
                ok=not isinstance(page, FetchError),
                index=index,
                total=total,
            )
            if on_progress is not None:
                on_progress(index, total, row)

            yield page, row
