"""Kernel errors – output ports used when an error reports itself."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Append-only text sink. Lines from one call keep their order."""

    def write(self, line: str) -> None: ...


@runtime_checkable
class ResponseSink(Protocol):
    """Reply channel of an HTTP request: plain-text body plus status code."""

    def write(self, body: str, status: int) -> None: ...


__all__ = ["LogSink", "ResponseSink"]
