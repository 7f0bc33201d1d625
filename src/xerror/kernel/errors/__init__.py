"""Kernel errors – public re-export surface.

Layout::

    structured.py   StructuredError, errorf(), new(), Error protocol
    identity.py     ErrorCode, RandomTokenIdentity, SuppliedIdentity
    rendering.py    Rendering modes and renderers
    chain.py        unwrap / iter_chain / is_caused_by / find_cause / wrapf
    location.py     call-site capture
    formatting.py   lenient printf-style formatting
    sinks.py        LogSink / ResponseSink ports
"""

from xerror.kernel.errors.chain import (
    WrappedError,
    find_cause,
    is_caused_by,
    iter_chain,
    unwrap,
    wrapf,
)
from xerror.kernel.errors.formatting import lenient_format
from xerror.kernel.errors.identity import (
    DEFAULT_TOKEN_LENGTH,
    DIGITS,
    ErrorCode,
    IdentityStrategy,
    RandomSource,
    RandomTokenIdentity,
    SuppliedIdentity,
)
from xerror.kernel.errors.location import caller_location
from xerror.kernel.errors.rendering import (
    UNKNOWN_EXTERNAL,
    UNSPECIFIED_INTERNAL,
    Rendering,
)
from xerror.kernel.errors.sinks import LogSink, ResponseSink
from xerror.kernel.errors.structured import Error, StructuredError, errorf, new

__all__ = [
    "DEFAULT_TOKEN_LENGTH",
    "DIGITS",
    "UNKNOWN_EXTERNAL",
    "UNSPECIFIED_INTERNAL",
    "Error",
    "ErrorCode",
    "IdentityStrategy",
    "LogSink",
    "RandomSource",
    "RandomTokenIdentity",
    "Rendering",
    "ResponseSink",
    "StructuredError",
    "SuppliedIdentity",
    "WrappedError",
    "caller_location",
    "errorf",
    "find_cause",
    "is_caused_by",
    "iter_chain",
    "lenient_format",
    "new",
    "unwrap",
    "wrapf",
]
