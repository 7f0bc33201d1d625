"""FastAPI adapter – StructuredErrorHandler."""
from __future__ import annotations

from typing import Any

from xerror.adapters.fastapi.responses import StarletteResponseSink, _require_starlette
from xerror.kernel.errors import LogSink, StructuredError


class StructuredErrorHandler:
    """Reply to raised :class:`StructuredError`s through ``handle_http()``.

    The response body is the compact rendering and the status is the
    error's ``status`` (500 when unset); the internal cause only goes to the
    log sink::

        app = FastAPI()
        StructuredErrorHandler().register(app)

        @app.get("/users/{uid}")
        def get_user(uid: str):
            raise errorf(exc, None, "invalid userid", status=404)
    """

    def __init__(self, log_sink: LogSink | None = None) -> None:
        _require_starlette()
        self._log_sink = log_sink

    def __call__(self, request: Any, exc: Exception) -> Any:  # noqa: ARG002
        if not isinstance(exc, StructuredError):
            raise exc
        sink = StarletteResponseSink()
        exc.handle_http(sink, log_sink=self._log_sink)
        return sink.response

    def register(self, app: Any) -> None:
        """Register on a ``FastAPI`` or ``Starlette`` app."""
        app.add_exception_handler(StructuredError, self)


__all__ = ["StructuredErrorHandler"]
