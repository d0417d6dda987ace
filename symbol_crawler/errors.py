"""Exception types raised while crawling documentation pages."""

from __future__ import annotations

from typing import Optional


class CrawlerError(Exception):
    """Base class for failures the traversal engine tolerates per page."""


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------


class FetchError(CrawlerError):
    """Raised when a page cannot be fetched."""

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class NetworkError(FetchError):
    """Transport-level failure; the underlying exception is kept in ``cause``."""

    def __init__(self, url: str, cause: BaseException):
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}", url=url)


class InvalidResponse(FetchError):
    """Bad status code, missing body, or undecodable text."""

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: Optional[int] = None,
    ):
        self.status_code = status_code
        super().__init__(message, url=url)


# ---------------------------------------------------------------------------
# Decoding and storage
# ---------------------------------------------------------------------------


class DecodeError(CrawlerError):
    """Raised when embedded documentation JSON is malformed."""

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class CacheDirectoryError(CrawlerError):
    """Raised when a cache directory cannot be created."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"cannot create cache directory at {path}{detail}")


class SymbolNameError(CrawlerError, ValueError):
    """Raised when a symbol title has no usable name segment."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"symbol title has no name segment: {title!r}")
