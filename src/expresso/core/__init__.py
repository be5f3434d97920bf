from expresso.core.config import Config
from expresso.core.context import Context, create_context
from expresso.core.errors import ExpressoError, ResponseFinalizedError
from expresso.core.request import RequestView
from expresso.core.responses import ResponseBuilder, ResponseState
from expresso.core.routing import endpoint

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
