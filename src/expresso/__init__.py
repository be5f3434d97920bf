"""
Expresso — Express-style request/response layer over Starlette.
Handlers get ctx = create_context(request, params); ctx.res.json(...) returns the Starlette response.
"""
from expresso.core import (
    Config,
    Context,
    ExpressoError,
    RequestView,
    ResponseBuilder,
    ResponseFinalizedError,
    ResponseState,
    create_context,
    endpoint,
)

__all__ = [
    "Config",
    "Context",
    "create_context",
    "ExpressoError",
    "ResponseFinalizedError",
    "RequestView",
    "ResponseBuilder",
    "ResponseState",
    "endpoint",
]
