"""Builders for documentation pages and a fake site served through httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx

SWIFT_PREFIX = "https://developer.apple.com/documentation/swift/"
FOUNDATION_PREFIX = "https://developer.apple.com/documentation/foundation/"


def make_symbol(
    title: str,
    *,
    role: str = "symbol",
    kind: Optional[str] = None,
    paths: Optional[List[str]] = None,
    domain: Optional[str] = None,
) -> Dict[str, Any]:
    raw: Dict[str, Any] = {
        "title": {"content": title},
        "role": role,
        "paths": paths if paths is not None else [f"/documentation/swift/{title.lower()}"],
    }
    if kind is not None:
        raw["kind"] = kind
    if domain is not None:
        raw["domain"] = domain
    return raw


def make_data(title: str, *symbols: Dict[str, Any], containing=None) -> Dict[str, Any]:
    data: Dict[str, Any] = {"title": {"content": title}}
    if symbols:
        data["tasks"] = [
            {"title": {"content": "Topics"}, "role": "task", "symbols": list(symbols)}
        ]
    if containing is not None:
        data["containingGroup"] = containing
    return data


def make_page(data: Optional[Dict[str, Any]]) -> str:
    """Render an HTML page, embedding *data* in #bootstrap-data when given."""
    body = "<p>No API here.</p>"
    if data is not None:
        payload = json.dumps(data).replace("</", "<\\/")
        body = (
            '<script type="application/json" id="bootstrap-data">'
            + payload
            + "</script>"
        )
    return f"<!DOCTYPE html><html><head><title>t</title></head><body>{body}</body></html>"


class FakeSite:
    """Serves canned pages and records every request."""

    def __init__(self, pages: Optional[Dict[str, Any]] = None):
        self.pages: Dict[str, Any] = dict(pages or {})
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self.pages.get(str(request.url))
        if page is None:
            return httpx.Response(404, text="not found")
        if isinstance(page, httpx.Response):
            return page
        if isinstance(page, Exception):
            raise page
        if isinstance(page, bytes):
            return httpx.Response(200, content=page)
        return httpx.Response(200, text=page)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def requested_urls(self) -> List[str]:
        return [str(request.url) for request in self.requests]


class SleepRecorder:
    """Async stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
