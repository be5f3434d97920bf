"""Express-like request view over a Starlette request (read accessors + body slots)."""
from __future__ import annotations

from typing import Any

from starlette.datastructures import QueryParams
from starlette.requests import Request


class RequestView:
    """
    Request facade: raw, params, query, path, hostname, protocol, original_url, get().
    URL parts are computed once at construction; body/raw_body are left for body-parsing middleware.
    """

    def __init__(self, raw: Request, params: dict[str, str] | None = None) -> None:
        url = raw.url
        self.raw = raw
        self.params = params if params is not None else {}
        self.query = QueryParams(url.query)
        self.path = url.path
        self.hostname: str | None = url.hostname
        self.protocol = url.scheme
        self.original_url = str(url)
        self.body: Any = None
        self.raw_body: bytes | None = None

    @property
    def method(self) -> str:
        return self.raw.method

    def get(self, name: str) -> str | None:
        """Header value by name (case-insensitive), None if absent."""
        return self.raw.headers.get(name.lower())

    def __repr__(self) -> str:
        return f"RequestView({self.method} {self.original_url!r})"
