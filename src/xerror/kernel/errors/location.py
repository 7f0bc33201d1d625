"""Kernel errors – call-site capture."""
from __future__ import annotations

import inspect

UNKNOWN_LOCATION = "<unknown>:0"


def caller_location(stacklevel: int = 1) -> str:
    """Return ``<source-path>:<line-number>`` of a frame above the caller.

    ``stacklevel=1`` is the function that called the function invoking
    ``caller_location``, mirroring :func:`warnings.warn`. If the stack is
    shallower than requested the outermost frame is used.
    """
    frame = inspect.currentframe()
    target = frame.f_back if frame is not None else None
    try:
        for _ in range(stacklevel):
            if target is None or target.f_back is None:
                break
            target = target.f_back
        if target is None:
            return UNKNOWN_LOCATION
        return f"{target.f_code.co_filename}:{target.f_lineno}"
    finally:
        # break the frame reference cycle
        del frame, target


__all__ = ["UNKNOWN_LOCATION", "caller_location"]
