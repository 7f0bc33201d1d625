"""FastAPI adapter – plain-text error replies for structured errors."""
from xerror.adapters.fastapi.exception_handler import StructuredErrorHandler
from xerror.adapters.fastapi.responses import StarletteResponseSink

__all__ = ["StarletteResponseSink", "StructuredErrorHandler"]
