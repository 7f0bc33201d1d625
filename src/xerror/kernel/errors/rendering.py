"""Kernel errors – text renderings of a structured error.

Compact (single line, safe for end users)::

    error: invalid userid [0x1a7]

Verbose (multi-line, for developers)::

    error: invalid userid
    \te0423
    \tNo userid found in users table: No rows found.
    \t/srv/app/users.py:42
"""
from __future__ import annotations

from enum import Enum

from xerror.kernel.errors.identity import ErrorCode

EXTERNAL_PREFIX = "error: "
UNKNOWN_EXTERNAL = "unknown error"
UNSPECIFIED_INTERNAL = "unspecified internal error"


class Rendering(str, Enum):
    VERBOSE = "verbose"
    COMPACT_HEX = "compact_hex"
    COMPACT_DECIMAL = "compact_decimal"

    @classmethod
    def parse(cls, value: "str | Rendering") -> "Rendering":
        """Accept an enum member or its (case-insensitive) name or value."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise ValueError(f"unknown rendering {value!r}")


def external_text(message: str | None) -> str:
    return EXTERNAL_PREFIX + (message or UNKNOWN_EXTERNAL)


def cause_text(cause: BaseException | None) -> str:
    """Render the internal cause; falls back to placeholders, never raises."""
    if cause is None:
        return UNSPECIFIED_INTERNAL
    try:
        text = str(cause)
    except Exception:  # noqa: BLE001
        text = ""
    return text or type(cause).__name__


def format_code(code: ErrorCode, rendering: Rendering) -> str:
    if rendering is Rendering.VERBOSE:
        return f"e{code}"
    number = code.as_int()
    if number is None:
        return f"[{code}]"
    if rendering is Rendering.COMPACT_DECIMAL:
        return f"[{number}]"
    return f"[{number:#x}]"


def render_compact(message: str | None, code: ErrorCode, rendering: Rendering) -> str:
    if rendering is Rendering.VERBOSE:
        rendering = Rendering.COMPACT_HEX
    return f"{external_text(message)} {format_code(code, rendering)}"


def render_verbose(
    message: str | None,
    code: ErrorCode,
    cause: BaseException | None,
    location: str,
) -> str:
    lines = [
        external_text(message),
        format_code(code, Rendering.VERBOSE),
        cause_text(cause),
        location,
    ]
    return "\n\t".join(lines)


__all__ = [
    "EXTERNAL_PREFIX",
    "UNKNOWN_EXTERNAL",
    "UNSPECIFIED_INTERNAL",
    "Rendering",
    "cause_text",
    "external_text",
    "format_code",
    "render_compact",
    "render_verbose",
]
