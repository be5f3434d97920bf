"""Handler adapter: run context handlers as Starlette endpoints."""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

from expresso.core.config import Config
from expresso.core.context import Context, create_context

Handler = Callable[[Context], "Response | None | Awaitable[Response | None]"]


def endpoint(handler: Handler, *, config: Config | None = None) -> Callable[[Request], Awaitable[Response]]:
    """
    Wrap handler(ctx) into a Starlette endpoint.
    Route params come from request.path_params. A handler returning None gets
    the response it already finalized, or the builder is finalized as-is.
    """

    async def run(request: Request) -> Response:
        ctx = create_context(request, dict(request.path_params), config=config)
        result: Any = handler(ctx)
        if inspect.isawaitable(result):
            result = await result
        if result is not None:
            return result
        if ctx.res.response is not None:
            return ctx.res.response
        return ctx.res.finalize()

    run.__name__ = getattr(handler, "__name__", "endpoint")
    run.__doc__ = handler.__doc__
    return run

