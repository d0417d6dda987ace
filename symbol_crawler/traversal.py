"""Depth-first walk over documentation pages.

The worklist is a stack of URLs; duplicates are allowed on push and removed
on pop by checking the visited set. Only container-like symbols (collection
groups and class-like kinds) add pages to the worklist, so the walk follows
the type hierarchy rather than every link on a page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set

from .classifier import SymbolSets, classify_symbol
from .config import BASE_URL, NAMESPACES, Namespace, resolve_url
from .document import Symbol
from .errors import CrawlerError
from .extractor import DocumentDataExtractor
from .kinds import (
    EXCLUDED_DOMAINS,
    ROLE_COLLECTION_GROUP,
    ROLE_PSEUDO_SYMBOL,
    SymbolKind,
    is_class_like,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class CrawlResult:
    """Result of a traversal run."""

    symbols: Dict[str, SymbolSets] = field(default_factory=dict)
    seen_kinds: Set[str] = field(default_factory=set)
    errors: List[Dict[str, str]] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)


class TraversalEngine:
    """Owns the crawl state: worklist, visited set, symbol sets, seen kinds."""

    def __init__(
        self,
        extractor: DocumentDataExtractor,
        *,
        base_url: str = BASE_URL,
        namespaces: Optional[Iterable[Namespace]] = None,
    ):
        self.extractor = extractor
        self.base_url = base_url
        self.namespaces = list(NAMESPACES if namespaces is None else namespaces)

        self.worklist: List[str] = []
        self.visited: Set[str] = set()
        self.symbols: Dict[str, SymbolSets] = {
            namespace.prefix: SymbolSets() for namespace in self.namespaces
        }
        self.seen_kinds: Set[str] = set()
        self.errors: List[Dict[str, str]] = []
        self._pages_with_data = 0
        self._symbols_classified = 0

    async def run(self, root_urls: Iterable[str]) -> CrawlResult:
        """Crawl from *root_urls* until the worklist is empty."""
        self.worklist.extend(root_urls)

        while self.worklist:
            url = self.worklist.pop()

            if url in self.visited:
                continue
            self.visited.add(url)

            try:
                await self.process_page(url)
            except CrawlerError as exc:
                LOGGER.error("cannot get data from %s: %s", url, exc)
                self.errors.append(
                    {
                        "url": url,
                        "error": str(exc),
                        "stage": type(exc).__name__,
                    }
                )

        result = CrawlResult(
            symbols={prefix: sets.copy() for prefix, sets in self.symbols.items()},
            seen_kinds=set(self.seen_kinds),
            errors=list(self.errors),
            stats=self._stats(),
        )
        LOGGER.info(
            "Crawl complete: %d pages visited (%d with data, %d failed)",
            result.stats["visited_pages"],
            result.stats["pages_with_data"],
            result.stats["failed_pages"],
        )
        return result

    async def process_page(self, url: str) -> None:
        data = await self.extractor.fetch_document_data(url)
        if data is None:
            return
        self._pages_with_data += 1

        for task in data.groups():
            for symbol in task.symbols:
                for path in symbol.paths:
                    self.process_symbol(url, symbol, path)

    def process_symbol(self, page_url: str, symbol: Symbol, path: str) -> None:
        """Handle one path of *symbol* found on *page_url*.

        Attribution uses the page being walked, not the symbol's own URL.
        """
        next_url = resolve_url(path, self.base_url)
        if next_url is None:
            return

        if symbol.kind is not None and symbol.kind not in self.seen_kinds:
            self.seen_kinds.add(symbol.kind)
            LOGGER.debug("new kind: %s", symbol.kind)

        if (symbol.domain or "") in EXCLUDED_DOMAINS:
            return
        if symbol.role == ROLE_PSEUDO_SYMBOL:
            return

        kind = SymbolKind.from_tag(symbol.kind)
        if symbol.role == ROLE_COLLECTION_GROUP or is_class_like(kind):
            self.worklist.append(next_url)

        for prefix, symbol_sets in self.symbols.items():
            if not page_url.startswith(prefix):
                continue
            if classify_symbol(symbol, symbol_sets):
                self._symbols_classified += 1

    def _stats(self) -> Dict[str, Any]:
        fetcher = self.extractor.fetcher
        return {
            "visited_pages": len(self.visited),
            "pages_with_data": self._pages_with_data,
            "failed_pages": len(self.errors),
            "symbols_classified": self._symbols_classified,
            "live_requests": getattr(fetcher, "request_count", 0),
        }
