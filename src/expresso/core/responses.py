"""Express-like response builder: chainable setters, one finalize step producing a Starlette response."""
from __future__ import annotations

import enum
import json
import logging
from typing import Any, AsyncIterable, Mapping, Union

from starlette.datastructures import MutableHeaders
from starlette.responses import Response, StreamingResponse

from expresso.core.config import Config
from expresso.core.errors import ResponseFinalizedError

logger = logging.getLogger(__name__)

Body = Union[str, bytes, AsyncIterable[Any], None]


class ResponseState(enum.Enum):
    WRITABLE = "writable"
    FINALIZED = "finalized"


class ResponseBuilder:
    """
    Accumulates status, headers and body. Setters return self for chaining;
    send/json/stream/redirect/finalize produce the response and freeze the builder.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or Config()
        self._status = 200
        self._headers = MutableHeaders()
        self._body: Body = None
        self._state = ResponseState.WRITABLE
        self._response: Response | None = None

    def _assert_writable(self, operation: str) -> None:
        if self._state is ResponseState.FINALIZED:
            raise ResponseFinalizedError(operation)

    # Status

    def status(self, code: int) -> ResponseBuilder:
        self._assert_writable("status")
        self._status = code
        return self

    def get_status(self) -> int:
        return self._status

    # Headers

    def set(self, name: str, value: str) -> ResponseBuilder:
        """Set one header, replacing any previous value for that name."""
        self._assert_writable("set")
        self._headers[name] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> ResponseBuilder:
        """Set several headers in iteration order. Either all are applied or none."""
        self._assert_writable("headers")
        staged = self._headers.mutablecopy()
        for name, value in headers.items():
            staged[name] = value
        self._headers = staged
        return self

    def type(self, mime: str) -> ResponseBuilder:
        """Shorthand for set("Content-Type", mime)."""
        self._assert_writable("type")
        self._headers["Content-Type"] = mime
        return self

    def get_header(self, name: str) -> str | None:
        return self._headers.get(name)

    def get_headers(self) -> MutableHeaders:
        """Copy of the current headers; changing it does not touch the builder."""
        return self._headers.mutablecopy()

    # Body / finalization

    def send(self, body: str | bytes) -> Response:
        self._assert_writable("send")
        return self._commit(self._status, self._headers, body)

    def json(self, data: Any) -> Response:
        """Serialize data to JSON and finalize with Content-Type: application/json."""
        self._assert_writable("json")
        cfg = self._config
        body = json.dumps(
            data,
            ensure_ascii=cfg.json_ensure_ascii,
            sort_keys=cfg.json_sort_keys,
            indent=cfg.json_indent,
            separators=(",", ":") if cfg.json_indent is None else None,
        )
        staged = self._headers.mutablecopy()
        staged["Content-Type"] = "application/json"
        return self._commit(self._status, staged, body)

    def stream(self, stream: AsyncIterable[Any]) -> StreamingResponse:
        """Finalize with a streaming body; the response iterates the given object itself."""
        self._assert_writable("stream")
        return self._commit(self._status, self._headers, stream, streaming=True)  # type: ignore[return-value]

    def redirect(self, url: str, status: int = 302) -> Response:
        """Redirect (301, 302, 303, 307 or 308) to url with an empty body."""
        self._assert_writable("redirect")
        staged = self._headers.mutablecopy()
        staged["Location"] = url
        return self._commit(status, staged, None)

    def finalize(self) -> Response:
        """Freeze the builder and build the response from the current status, headers and body."""
        self._assert_writable("finalize")
        return self._commit(self._status, self._headers, self._body)

    def _commit(
        self,
        status: int,
        headers: MutableHeaders,
        body: Body,
        *,
        streaming: bool = False,
    ) -> Response:
        # Builder state changes only once the response has been built.
        out = headers.mutablecopy()
        if streaming:
            response: Response = StreamingResponse(body, status_code=status, headers=out)  # type: ignore[arg-type]
        else:
            if isinstance(body, str) and "content-type" not in out:
                out["Content-Type"] = self._config.text_media_type
            response = Response(body, status_code=status, headers=out)
        self._status = status
        self._headers = headers
        self._body = body
        self._state = ResponseState.FINALIZED
        self._response = response
        logger.debug(
            "Finalized response: status=%s body=%s",
            status,
            "stream" if streaming else type(body).__name__,
        )
        return response

    @property
    def state(self) -> ResponseState:
        return self._state

    @property
    def response(self) -> Response | None:
        """Response produced by the finalize step, None while writable."""
        return self._response

    def is_finalized(self) -> bool:
        return self._state is ResponseState.FINALIZED

    def __repr__(self) -> str:
        return f"ResponseBuilder(status={self._status}, state={self._state.value})"
