"""Kernel errors – cause-chain walking.

Lets calling code ask "was this ultimately a *not found*?" without parsing
messages::

    NO_ROWS = LookupError("No rows found.")

    err = errorf(wrapf(NO_ROWS, "No userid found in users table"), None, "invalid userid")
    is_caused_by(err, NO_ROWS)       # True
    find_cause(err, LookupError)     # NO_ROWS

Each link is followed through ``unwrap()`` when the exception provides one,
otherwise through ``__cause__`` and then ``__context__`` (unless the context
was suppressed with ``raise ... from None``).
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from xerror.kernel.errors.formatting import lenient_format

E = TypeVar("E", bound=BaseException)


def unwrap(exc: BaseException) -> BaseException | None:
    """Return the next link in *exc*'s chain, or ``None``."""
    method = getattr(exc, "unwrap", None)
    if callable(method):
        return method()
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def iter_chain(exc: BaseException | None) -> Iterator[BaseException]:
    """Yield *exc* and every exception it wraps, stopping on cycles."""
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = unwrap(exc)


def is_caused_by(exc: BaseException | None, target: BaseException) -> bool:
    """True when *target* (same object, or an equal one) appears in the chain."""
    for link in iter_chain(exc):
        if link is target:
            return True
        try:
            if link == target:
                return True
        except Exception:  # noqa: BLE001
            continue
    return False


def find_cause(exc: BaseException | None, exc_type: type[E]) -> E | None:
    """First exception in the chain that is an instance of *exc_type*."""
    for link in iter_chain(exc):
        if isinstance(link, exc_type):
            return link
    return None


class WrappedError(Exception):
    """Annotates a cause with context: ``"<message>: <cause>"``."""

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(f"{message}: {cause}")
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def unwrap(self) -> BaseException:
        return self.cause

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.cause))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, cause={self.cause!r})"


def wrapf(cause: BaseException, fmt: str, *args: Any) -> WrappedError:
    """Wrap *cause* under a printf-style message, keeping it reachable."""
    return WrappedError(lenient_format(fmt, args), cause)


__all__ = ["WrappedError", "find_cause", "is_caused_by", "iter_chain", "unwrap", "wrapf"]
