"""Crawl settings, namespace definitions and URL helpers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from urllib.parse import urljoin, urlparse

LOGGER = logging.getLogger(__name__)

BASE_URL = "https://developer.apple.com"

ROOT_URLS: List[str] = [
    "https://developer.apple.com/documentation/foundation",
    "https://developer.apple.com/documentation/swift/swift_standard_library",
]

DEFAULT_CACHE_DIR = "cache"
DEFAULT_JSON_CACHE_DIR = "cache_json"
DEFAULT_DELAY = 5.0
DEFAULT_TIMEOUT = 30.0
DEFAULT_DATA_SELECTOR = "#bootstrap-data"
DEFAULT_USER_AGENT = (
    "SwiftStdlibCrawlerForSwiftMode/1.0 (+https://github.com/swift-emacs/swift-mode)"
)


@dataclass(frozen=True, slots=True)
class Namespace:
    """A documentation root whose symbols are collected separately.

    ``prefix`` is compared against page URLs with ``str.startswith``.
    ``const_prefix`` and ``doc_prefix`` are used by the Emacs Lisp emitter.
    """

    prefix: str
    const_prefix: str
    doc_prefix: str


NAMESPACES: List[Namespace] = [
    Namespace(
        prefix="https://developer.apple.com/documentation/swift/",
        const_prefix="standard",
        doc_prefix="Built-in",
    ),
    Namespace(
        prefix="https://developer.apple.com/documentation/foundation/",
        const_prefix="foundation",
        doc_prefix="Foundation",
    ),
]


def is_absolute_url(url: str) -> bool:
    """Return True for an http(s) URL with a host and no whitespace."""
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def resolve_url(path: str, base_url: str = BASE_URL) -> Optional[str]:
    """Resolve *path* against *base_url*; return None when no usable URL results."""
    try:
        resolved = urljoin(base_url, path)
    except ValueError:
        return None
    if not is_absolute_url(resolved):
        return None
    return resolved


def parse_root_urls(candidates: Iterable[str]) -> List[str]:
    """Keep valid absolute URLs; invalid entries are logged and dropped."""
    urls: List[str] = []
    for candidate in candidates:
        if not is_absolute_url(candidate):
            LOGGER.warning("invalid url: %s", candidate)
            continue
        urls.append(candidate)
    return urls


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r; using %s.", name, raw, default)
        return default


@dataclass
class CrawlerSettings:
    """Everything a crawl needs besides its collaborators."""

    base_url: str = BASE_URL
    root_urls: List[str] = field(default_factory=lambda: list(ROOT_URLS))
    namespaces: List[Namespace] = field(default_factory=lambda: list(NAMESPACES))
    cache_dir: str = DEFAULT_CACHE_DIR
    json_cache_dir: str = DEFAULT_JSON_CACHE_DIR
    delay: float = DEFAULT_DELAY
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    data_selector: str = DEFAULT_DATA_SELECTOR

    @classmethod
    def from_env(cls) -> "CrawlerSettings":
        """Build settings from ``SYMBOL_CRAWLER_*`` environment variables.

        Variables are read at call time so late ``.env`` loading and test
        monkeypatching both take effect.
        """
        return cls(
            cache_dir=os.getenv("SYMBOL_CRAWLER_CACHE_DIR") or DEFAULT_CACHE_DIR,
            json_cache_dir=(
                os.getenv("SYMBOL_CRAWLER_JSON_CACHE_DIR") or DEFAULT_JSON_CACHE_DIR
            ),
            delay=_float_from_env("SYMBOL_CRAWLER_DELAY", DEFAULT_DELAY),
            timeout=_float_from_env("SYMBOL_CRAWLER_TIMEOUT", DEFAULT_TIMEOUT),
            user_agent=os.getenv("SYMBOL_CRAWLER_USER_AGENT") or DEFAULT_USER_AGENT,
        )
