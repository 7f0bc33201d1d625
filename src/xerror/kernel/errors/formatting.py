"""Kernel errors – lenient printf-style formatting.

``lenient_format`` behaves like ``fmt % args`` when the arguments match the
template. When they don't, it substitutes what it can instead of raising::

    lenient_format("100%% done", ())        -> "100% done"
    lenient_format("id %d", ())             -> "id %!d(MISSING)"
    lenient_format("id %d %s", (7,))        -> "id 7 %!s(MISSING)"
    lenient_format("id %d", ("x",))         -> "id %!d(str=x)"
    lenient_format("id", (7, "x"))          -> "id%!(EXTRA int=7, str=x)"
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_CONVERSION = re.compile(
    r"%(?:\([^)]*\))?[#0\- +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?(?P<verb>[A-Za-z%])"
)


def _describe(value: Any) -> str:
    """Return ``<type>=<value>`` without ever raising."""
    try:
        text = str(value)
    except Exception:  # noqa: BLE001
        text = object.__repr__(value)
    return f"{type(value).__name__}={text}"


def _best_effort(fmt: str, args: tuple[Any, ...]) -> str:
    parts: list[str] = []
    remaining = list(args)
    pos = 0
    for match in _CONVERSION.finditer(fmt):
        parts.append(fmt[pos : match.start()])
        pos = match.end()
        verb = match.group("verb")
        if verb == "%":
            parts.append("%")
            continue
        if not remaining:
            parts.append(f"%!{verb}(MISSING)")
            continue
        arg = remaining.pop(0)
        try:
            parts.append(match.group(0) % (arg,))
        except Exception:  # noqa: BLE001
            parts.append(f"%!{verb}({_describe(arg)})")
    parts.append(fmt[pos:])
    if remaining:
        parts.append("%!(EXTRA " + ", ".join(_describe(a) for a in remaining) + ")")
    return "".join(parts)


def lenient_format(fmt: str, args: tuple[Any, ...]) -> str:
    """Format *fmt* with *args*; never raises.

    A single mapping argument is used for ``%(name)s`` style templates, the
    same way :mod:`logging` treats it. The template is formatted even when
    *args* is empty, so ``%%`` always collapses to ``%``.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        try:
            return fmt % args[0]
        except Exception:  # noqa: BLE001
            pass
    try:
        return fmt % args
    except Exception:  # noqa: BLE001
        return _best_effort(fmt, args)


__all__ = ["lenient_format"]
