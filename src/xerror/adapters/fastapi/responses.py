"""FastAPI adapter – StarletteResponseSink."""
from __future__ import annotations

from typing import Any


def _require_starlette() -> None:
    try:
        import starlette  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'xerror[fastapi]' to use the FastAPI adapter"
        ) from exc


class StarletteResponseSink:
    """Response sink that produces a plain-text Starlette response.

    ``handle_http()`` writes to it once; the handler then returns
    :attr:`response` to the framework.
    """

    def __init__(self) -> None:
        _require_starlette()
        self._response: Any = None

    def write(self, body: str, status: int) -> None:
        from starlette.responses import PlainTextResponse

        if self._response is not None:
            raise RuntimeError("response already written")
        self._response = PlainTextResponse(
            body,
            status_code=status,
            headers={"X-Content-Type-Options": "nosniff"},
        )

    @property
    def written(self) -> bool:
        return self._response is not None

    @property
    def response(self) -> Any:
        if self._response is None:
            raise RuntimeError("no response written yet")
        return self._response


__all__ = ["StarletteResponseSink"]
