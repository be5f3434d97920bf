"""Per-request context: one request view and one response builder, handed to handlers."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from starlette.requests import Request

from expresso.core.config import Config
from expresso.core.request import RequestView
from expresso.core.responses import ResponseBuilder

logger = logging.getLogger(__name__)


@dataclass
class Context:
    """Request/response pair for middleware and handlers. Not shared across requests."""

    req: RequestView
    res: ResponseBuilder


def create_context(
    raw: Request,
    params: dict[str, str] | None = None,
    *,
    config: Config | None = None,
) -> Context:
    """Build a context from the raw request and route params resolved by the router."""
    ctx = Context(req=RequestView(raw, params), res=ResponseBuilder(config))
    logger.debug("Created context for %s %s", ctx.req.method, ctx.req.path)
    return ctx
