"""Observability – structlog logging helpers."""
from xerror.observability.logging.factory import LoggerFactory
from xerror.observability.logging.sink import StructlogSink, get_logger

__all__ = ["LoggerFactory", "StructlogSink", "get_logger"]
