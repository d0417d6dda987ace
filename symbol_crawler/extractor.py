"""Locate and decode the documentation JSON embedded in a page."""

from __future__ import annotations

import logging
from typing import Optional

from .cache import ByteCache
from .config import DEFAULT_DATA_SELECTOR
from .document import DocumentationData, decode_documentation_data
from .fetch import Fetcher

LOGGER = logging.getLogger(__name__)


class DocumentDataExtractor:
    """Resolve page URLs to :class:`DocumentationData` through the JSON cache."""

    def __init__(
        self,
        fetcher: Fetcher,
        json_cache: ByteCache,
        *,
        selector: str = DEFAULT_DATA_SELECTOR,
    ):
        self.fetcher = fetcher
        self.json_cache = json_cache
        self.selector = selector

    async def fetch_document_data(self, url: str) -> Optional[DocumentationData]:
        """Return the decoded data for *url*, or None if the page carries none.

        A corrupt cache entry is not treated as a miss: it raises
        :class:`DecodeError` like malformed upstream data does.
        """
        source = await self.fetch_document_source(url)
        if source is None:
            return None
        return decode_documentation_data(source, url=url)

    async def fetch_document_source(self, url: str) -> Optional[bytes]:
        cached = self.json_cache.get(url)
        if cached is not None:
            LOGGER.debug("json cache hit: %s", url)
            return cached

        document = await self.fetcher.fetch_html(url)
        element = document.select_one(self.selector)
        if element is None:
            LOGGER.debug("no %s element on %s", self.selector, url)
            return None

        data = element.get_text().encode("utf-8")
        self.json_cache.put(url, data)
        return data
