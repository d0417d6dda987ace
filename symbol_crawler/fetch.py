"""Serial, cache-first page fetching.

Every live request is awaited to completion before the next one can start,
and each live request is followed by a fixed delay. Cache hits skip both the
request and the delay, so warm reruns are fast.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx
from bs4 import BeautifulSoup

from .cache import ByteCache
from .config import DEFAULT_DELAY, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .errors import InvalidResponse, NetworkError

LOGGER = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class Fetcher:
    """Fetch raw page bytes through a :class:`ByteCache`.

    Use as an async context manager when no ``client`` is injected::

        async with Fetcher(DiskByteCache("cache")) as fetcher:
            html = await fetcher.fetch_html(url)
    """

    def __init__(
        self,
        cache: ByteCache,
        *,
        delay: float = DEFAULT_DELAY,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self.cache = cache
        self.delay = delay
        self.user_agent = user_agent
        self.timeout = timeout
        self.request_count = 0
        self._client = client
        self._owns_client = client is None
        self._sleep = sleep

    async def __aenter__(self) -> "Fetcher":
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                follow_redirects=True,
            )
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch_bytes(self, url: str) -> bytes:
        """Return the bytes of *url*, from the cache when present.

        Raises:
            NetworkError: On transport failure.
            InvalidResponse: On a non-2xx status.
            CacheDirectoryError: If the cache directory cannot be created.
        """
        cached = self.cache.get(url)
        if cached is not None:
            LOGGER.debug("cache hit: %s", url)
            return cached

        LOGGER.info("fetching %s", url)
        data = await self._request(url)

        await self._sleep(self.delay)

        self.cache.put(url, data)
        return data

    async def _request(self, url: str) -> bytes:
        if self._client is None:
            raise RuntimeError("Fetcher used outside of 'async with' without a client")

        self.request_count += 1
        try:
            response = await self._client.get(
                url, headers={"User-Agent": self.user_agent}
            )
        except httpx.HTTPError as exc:
            raise NetworkError(url, exc) from exc

        if not 200 <= response.status_code <= 299:
            raise InvalidResponse(
                f"HTTP {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )
        return response.content

    async def fetch_text(self, url: str) -> str:
        data = await self.fetch_bytes(url)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidResponse(f"Response from {url} is not UTF-8", url=url) from exc

    async def fetch_html(self, url: str) -> BeautifulSoup:
        text = await self.fetch_text(url)
        return BeautifulSoup(text, "html.parser")
