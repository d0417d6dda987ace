"""Records decoded from a documentation page's embedded JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .errors import DecodeError


@dataclass(frozen=True, slots=True)
class Title:
    content: str


@dataclass(frozen=True, slots=True)
class Symbol:
    """A reference to another documentation page listed on the current one."""

    title: Title
    role: str
    paths: List[str] = field(default_factory=list)
    name: Optional[str] = None
    kind: Optional[str] = None
    usr: Optional[str] = None
    domain: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Task:
    """A titled group of symbols (a "topic" section on the page)."""

    title: Title
    role: str
    symbols: List[Symbol] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class DocumentationData:
    title: Title
    tasks: Optional[List[Task]] = None
    containing_group: Optional[List[Task]] = None

    def groups(self) -> Iterator[Task]:
        """Yield task groups followed by containing-group entries."""
        yield from self.tasks or []
        yield from self.containing_group or []


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _require(raw: Dict[str, Any], key: str, kind: type) -> Any:
    if key not in raw:
        raise KeyError(key)
    value = raw[key]
    if not isinstance(value, kind):
        raise TypeError(f"{key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _optional_str(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be str, got {type(value).__name__}")
    return value


def _title_from(raw: Any) -> Title:
    if not isinstance(raw, dict):
        raise TypeError("'title' must be an object")
    return Title(content=_require(raw, "content", str))


def _symbol_from(raw: Any) -> Symbol:
    if not isinstance(raw, dict):
        raise TypeError("symbol entry must be an object")
    paths = _require(raw, "paths", list)
    if not all(isinstance(path, str) for path in paths):
        raise TypeError("'paths' must contain strings")
    return Symbol(
        title=_title_from(_require(raw, "title", dict)),
        role=_require(raw, "role", str),
        paths=list(paths),
        name=_optional_str(raw, "name"),
        kind=_optional_str(raw, "kind"),
        usr=_optional_str(raw, "usr"),
        domain=_optional_str(raw, "domain"),
    )


def _task_from(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise TypeError("task entry must be an object")
    return Task(
        title=_title_from(_require(raw, "title", dict)),
        role=_require(raw, "role", str),
        symbols=[_symbol_from(item) for item in _require(raw, "symbols", list)],
    )


def _tasks_from(raw: Dict[str, Any], key: str) -> Optional[List[Task]]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"{key!r} must be list")
    return [_task_from(item) for item in value]


def documentation_data_from_dict(raw: Any) -> DocumentationData:
    """Build a :class:`DocumentationData` from parsed JSON.

    Raises KeyError/TypeError on schema mismatches; unknown keys are ignored.
    """
    if not isinstance(raw, dict):
        raise TypeError("documentation data must be an object")
    return DocumentationData(
        title=_title_from(_require(raw, "title", dict)),
        tasks=_tasks_from(raw, "tasks"),
        containing_group=_tasks_from(raw, "containingGroup"),
    )


def decode_documentation_data(data: bytes, url: str = "") -> DocumentationData:
    """Decode UTF-8 JSON bytes into a :class:`DocumentationData`.

    Raises:
        DecodeError: On invalid UTF-8, invalid JSON, or a schema mismatch.
    """
    try:
        raw = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"Malformed documentation data for {url}: {exc}", url=url) from exc

    try:
        return documentation_data_from_dict(raw)
    except KeyError as exc:
        raise DecodeError(
            f"Documentation data for {url} is missing key {exc}", url=url
        ) from exc
    except TypeError as exc:
        raise DecodeError(f"Unexpected documentation data for {url}: {exc}", url=url) from exc
