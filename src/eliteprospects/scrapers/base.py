"""Base scraper with a shared HTTP client and politeness delay."""

import asyncio
import random
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import structlog

from ..config import ScraperConfig


class BaseScraper:
    """
    Async HTTP scraper base.

    Every request is preceded by a random delay drawn from
    [config.delay_min, config.delay_max] at millisecond granularity so
    that requests are spread out in time.
    """

    SOURCE_NAME = "base"
    BASE_URL = ""

    def __init__(
        self,
        config: ScraperConfig | None = None,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        rng: random.Random | None = None,
    ):
        self.config = config or ScraperConfig()
        self._client = client
        self._owns_client = client is None
        self._sleep = sleep
        self._rng = rng or random.Random()
        self.logger = structlog.get_logger().bind(source=self.SOURCE_NAME)

    async def __aenter__(self):
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent},
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError(f"{type(self).__name__} must be used as an async context manager")
        return self._client

    def next_delay(self) -> float:
        """Pick the pause before the next request, in seconds."""
        low = round(self.config.delay_min * 1000)
        high = round(self.config.delay_max * 1000)
        return self._rng.randint(low, high) / 1000

    async def throttle(self) -> float:
        delay = self.next_delay()
        self.logger.debug("request_delay", seconds=delay)
        await self._sleep(delay)
        return delay

    async def get(self, url: str, **kwargs) -> httpx.Response:
        """GET a URL after the politeness delay."""
        await self.throttle()
        response = await self.client.get(url, **kwargs)
        response.raise_for_status()
        return response

