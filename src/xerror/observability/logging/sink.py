"""Observability – structlog-backed log sink."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally with bound values."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


class StructlogSink:
    """Write each error line as one structlog event.

    Prefixes and timestamps are whatever the structlog configuration adds;
    see :class:`~xerror.observability.logging.factory.LoggerFactory`.
    """

    def __init__(self, logger_name: str = "xerror", level: str = "error") -> None:
        self._logger_name = logger_name
        self._level = level.lower()

    @property
    def logger_name(self) -> str:
        return self._logger_name

    def write(self, line: str) -> None:
        # fetched per call so reconfiguring structlog takes effect
        logger = get_logger(self._logger_name)
        getattr(logger, self._level)(line)


__all__ = ["StructlogSink", "get_logger"]
