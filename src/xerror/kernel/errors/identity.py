"""Kernel errors – error codes and identity strategies.

An :class:`ErrorCode` is the short value a user reads back to an operator.
It is produced once per error by an :class:`IdentityStrategy`:

* :class:`RandomTokenIdentity` draws a fixed-length token (``"0427"``) from a
  shared :class:`RandomSource`.
* :class:`SuppliedIdentity` always returns the caller's integer.
"""
from __future__ import annotations

import dataclasses
import random
import threading
import time
from typing import Protocol, runtime_checkable

DIGITS = "0123456789"
DEFAULT_TOKEN_LENGTH = 4


@dataclasses.dataclass(frozen=True, slots=True)
class ErrorCode:
    """Identity of one error: a random token or a caller-supplied integer."""

    value: int | str

    @property
    def is_token(self) -> bool:
        return isinstance(self.value, str)

    def as_int(self) -> int | None:
        """Numeric value of the code, or ``None`` for non-numeric tokens."""
        if isinstance(self.value, int):
            return self.value
        if self.value.isascii() and self.value.isdigit():
            return int(self.value)
        return None

    def __str__(self) -> str:
        return str(self.value)


@runtime_checkable
class IdentityStrategy(Protocol):
    """Port: produce the code for a newly constructed error."""

    def next_code(self) -> ErrorCode: ...


class RandomSource:
    """Lock-guarded :class:`random.Random` shared by every error call site.

    Seeded once, from the current time in nanoseconds unless a seed or a
    ready-made generator is given.
    """

    def __init__(self, seed: int | None = None, *, rng: random.Random | None = None) -> None:
        if rng is None:
            rng = random.Random(time.time_ns() if seed is None else seed)  # noqa: S311
        self._rng = rng
        self._lock = threading.Lock()

    def token(self, alphabet: str, length: int) -> str:
        with self._lock:
            return "".join(self._rng.choices(alphabet, k=length))


class RandomTokenIdentity:
    """Generate a *length*-character token drawn uniformly from *alphabet*."""

    def __init__(
        self,
        length: int = DEFAULT_TOKEN_LENGTH,
        alphabet: str = DIGITS,
        source: RandomSource | None = None,
    ) -> None:
        if length < 1:
            raise ValueError(f"token length must be positive, got {length}")
        if not alphabet:
            raise ValueError("token alphabet must not be empty")
        self._length = length
        self._alphabet = alphabet
        self._source = source or RandomSource()

    @property
    def length(self) -> int:
        return self._length

    @property
    def alphabet(self) -> str:
        return self._alphabet

    def next_code(self) -> ErrorCode:
        return ErrorCode(self._source.token(self._alphabet, self._length))


class SuppliedIdentity:
    """Always return the same caller-supplied integer code."""

    def __init__(self, code: int) -> None:
        self._code = code

    def next_code(self) -> ErrorCode:
        return ErrorCode(self._code)


__all__ = [
    "DEFAULT_TOKEN_LENGTH",
    "DIGITS",
    "ErrorCode",
    "IdentityStrategy",
    "RandomSource",
    "RandomTokenIdentity",
    "SuppliedIdentity",
]
