from __future__ import annotations

from typing import Callable
from urllib.parse import urlsplit

import pytest
from starlette.requests import Request

_DEFAULT_PORTS = {"http": 80, "https": 443}


def build_request(url: str, headers: dict[str, str] | None = None, method: str = "GET") -> Request:
    """Starlette request for an absolute URL, built from a bare ASGI scope."""
    parts = urlsplit(url)
    scope = {
        "type": "http",
        "method": method,
        "scheme": parts.scheme,
        "server": (parts.hostname, parts.port or _DEFAULT_PORTS[parts.scheme]),
        "path": parts.path or "/",
        "query_string": parts.query.encode("latin-1"),
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
    }
    return Request(scope)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    return build_request
