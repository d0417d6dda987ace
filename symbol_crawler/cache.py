"""Disk-backed byte caches keyed by URL.

Two independent caches are used during a crawl: one for raw page bytes and
one for the documentation JSON extracted from those pages. A cache entry is a
plain file named after the percent-encoded URL; its presence is the only hit
signal and entries never expire.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union
from urllib.parse import quote

from .errors import CacheDirectoryError

LOGGER = logging.getLogger(__name__)

# Characters allowed unencoded in a URL host component (unreserved, sub-delims,
# and the IPv6/port punctuation). Everything else is percent-encoded, so "/"
# never reaches the filesystem.
_HOST_ALLOWED = "-._~!$&'()*+,;=:[]"

# Cache names always start with a URL scheme, so this never collides.
_TMP_PREFIX = ".tmp-"


def cache_name_of(url: str) -> str:
    """Return the filesystem-safe cache file name for *url*."""
    return quote(url, safe=_HOST_ALLOWED)


def ensure_directory(path: Union[str, Path]) -> None:
    """Create *path* (one level only) unless it already exists as a directory.

    Raises:
        CacheDirectoryError: If the directory cannot be created and no
            directory exists at *path*.
    """
    try:
        os.mkdir(path)
    except OSError as exc:
        if not os.path.isdir(path):
            raise CacheDirectoryError(str(path), exc) from exc


class ByteCache(Protocol):
    """Storage interface consumed by the fetcher and the extractor."""

    def get(self, url: str) -> Optional[bytes]:
        ...

    def put(self, url: str, data: bytes) -> bool:
        ...


class DiskByteCache:
    """One file per URL under ``base_dir``."""

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)

    def path_for(self, url: str) -> Path:
        return self.base_dir / cache_name_of(url)

    def get(self, url: str) -> Optional[bytes]:
        path = self.path_for(url)
        try:
            return path.read_bytes()
        except OSError:
            return None

    def put(self, url: str, data: bytes) -> bool:
        """Store *data* for *url*.

        The bytes go to a temporary file in ``base_dir`` that is renamed onto
        the entry, so a failed write never leaves a partial entry behind.
        Directory creation failures propagate as :class:`CacheDirectoryError`.
        Write failures are only logged; the caller keeps using *data*.
        """
        ensure_directory(self.base_dir)
        path = self.path_for(url)
        tmp_name: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=self.base_dir, prefix=_TMP_PREFIX, delete=False
            ) as handle:
                tmp_name = handle.name
                handle.write(data)
            os.replace(tmp_name, path)
        except OSError as exc:
            LOGGER.warning("cannot create cache file at %s: %s", path, exc)
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            return False
        return True

    def __repr__(self) -> str:
        return f"DiskByteCache({str(self.base_dir)!r})"


class MemoryByteCache:
    """In-memory cache with the same contract as :class:`DiskByteCache`."""

    def __init__(self, entries: Optional[Dict[str, bytes]] = None):
        self.entries: Dict[str, bytes] = dict(entries or {})

    def get(self, url: str) -> Optional[bytes]:
        return self.entries.get(cache_name_of(url))

    def put(self, url: str, data: bytes) -> bool:
        self.entries[cache_name_of(url)] = bytes(data)
        return True

    def __len__(self) -> int:
        return len(self.entries)
