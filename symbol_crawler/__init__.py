"""Crawler that collects Swift standard library and Foundation symbol names.

The crawler walks Apple's documentation pages, reads the JSON embedded in
each page, and sorts every listed symbol into one of six buckets (types,
enum cases, methods, properties, functions, constants) per namespace.
Pages are fetched one at a time, with a fixed delay after every live
request, and both the raw pages and the extracted JSON are cached on disk.

Example usage:

    from symbol_crawler import crawl_symbols

    result = crawl_symbols()
    swift = result.symbols["https://developer.apple.com/documentation/swift/"]
    print(sorted(swift.functions))

    # Custom cache locations and a shorter delay
    from symbol_crawler import CrawlerSettings
    settings = CrawlerSettings(cache_dir="/tmp/pages", json_cache_dir="/tmp/json", delay=1.0)
    result = crawl_symbols(settings)
"""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from .cache import ByteCache, DiskByteCache, MemoryByteCache, cache_name_of
from .classifier import SymbolSets, classify_symbol, simple_name_of
from .config import CrawlerSettings, Namespace, parse_root_urls
from .document import DocumentationData, Symbol, Task, Title, decode_documentation_data
from .errors import (
    CacheDirectoryError,
    CrawlerError,
    DecodeError,
    FetchError,
    InvalidResponse,
    NetworkError,
    SymbolNameError,
)
from .extractor import DocumentDataExtractor
from .fetch import Fetcher, SleepFunc
from .kinds import SymbolBucket, SymbolKind
from .traversal import CrawlResult, TraversalEngine

__all__ = [
    # Records
    "DocumentationData",
    "Task",
    "Symbol",
    "Title",
    "decode_documentation_data",
    # Caching
    "ByteCache",
    "DiskByteCache",
    "MemoryByteCache",
    "cache_name_of",
    # Fetching
    "Fetcher",
    "DocumentDataExtractor",
    # Classification
    "SymbolKind",
    "SymbolBucket",
    "SymbolSets",
    "classify_symbol",
    "simple_name_of",
    # Traversal
    "TraversalEngine",
    "CrawlResult",
    "crawl_symbols",
    "crawl_symbols_async",
    # Config
    "CrawlerSettings",
    "Namespace",
    # Errors
    "CrawlerError",
    "FetchError",
    "NetworkError",
    "InvalidResponse",
    "DecodeError",
    "CacheDirectoryError",
    "SymbolNameError",
]


async def crawl_symbols_async(
    settings: Optional[CrawlerSettings] = None,
    *,
    page_cache: Optional[ByteCache] = None,
    json_cache: Optional[ByteCache] = None,
    client: Optional[httpx.AsyncClient] = None,
    sleep: Optional[SleepFunc] = None,
) -> CrawlResult:
    """
    Crawl the documentation graph and classify every symbol found.

    Args:
        settings: Crawl settings; defaults to ``CrawlerSettings()``.
        page_cache: Cache for raw pages; defaults to a DiskByteCache at
            ``settings.cache_dir``.
        json_cache: Cache for extracted JSON; defaults to a DiskByteCache at
            ``settings.json_cache_dir``.
        client: Optional preconfigured httpx.AsyncClient.
        sleep: Optional replacement for ``asyncio.sleep`` used for the
            post-request delay.

    Returns:
        CrawlResult with per-namespace symbol sets, seen kinds, errors and stats.
    """
    settings = settings or CrawlerSettings()
    page_cache = page_cache if page_cache is not None else DiskByteCache(settings.cache_dir)
    json_cache = (
        json_cache if json_cache is not None else DiskByteCache(settings.json_cache_dir)
    )

    fetcher = Fetcher(
        page_cache,
        delay=settings.delay,
        user_agent=settings.user_agent,
        timeout=settings.timeout,
        client=client,
        sleep=sleep or asyncio.sleep,
    )
    async with fetcher:
        extractor = DocumentDataExtractor(
            fetcher, json_cache, selector=settings.data_selector
        )
        engine = TraversalEngine(
            extractor,
            base_url=settings.base_url,
            namespaces=settings.namespaces,
        )
        return await engine.run(parse_root_urls(settings.root_urls))


def crawl_symbols(
    settings: Optional[CrawlerSettings] = None,
    *,
    page_cache: Optional[ByteCache] = None,
    json_cache: Optional[ByteCache] = None,
) -> CrawlResult:
    """Synchronous wrapper for crawl_symbols_async."""
    return asyncio.run(
        crawl_symbols_async(settings, page_cache=page_cache, json_cache=json_cache)
    )
