"""
xerror – structured errors with short codes, split internal/external
messages and call-site capture.

Import path convention::

    from xerror import errorf, is_caused_by, wrapf
    from xerror.runtime import configure
    from xerror.adapters.fastapi import StructuredErrorHandler
"""

from xerror.kernel.errors import (
    Error,
    ErrorCode,
    LogSink,
    Rendering,
    ResponseSink,
    StructuredError,
    WrappedError,
    errorf,
    find_cause,
    is_caused_by,
    iter_chain,
    new,
    unwrap,
    wrapf,
)

__version__ = "0.1.0"
__all__ = [
    "Error",
    "ErrorCode",
    "LogSink",
    "Rendering",
    "ResponseSink",
    "StructuredError",
    "WrappedError",
    "__version__",
    "errorf",
    "find_cause",
    "is_caused_by",
    "iter_chain",
    "new",
    "unwrap",
    "wrapf",
]
