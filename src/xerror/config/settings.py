"""Config – 12-factor settings for the error runtime.

Every field maps to an ``XERROR_``-prefixed environment variable, e.g.
``XERROR_RENDERING=verbose`` or ``XERROR_DEFAULT_STATUS=503``.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from xerror.config.errors import InvalidSettingValueError
from xerror.kernel.errors.identity import DEFAULT_TOKEN_LENGTH, DIGITS
from xerror.kernel.errors.rendering import Rendering


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ErrorSettings(Settings):
    """Process-wide defaults applied by :func:`xerror.runtime.configure`."""

    _prefix: ClassVar[str] = "XERROR"

    rendering: str = Rendering.COMPACT_HEX.value
    token_length: int = DEFAULT_TOKEN_LENGTH
    token_alphabet: str = DIGITS
    default_status: int = 500
    logger_name: str = "xerror"

    def _validate(self) -> None:
        try:
            Rendering.parse(self.rendering)
        except ValueError as exc:
            raise InvalidSettingValueError(
                "rendering", self.rendering, "expected one of "
                + ", ".join(m.value for m in Rendering)
            ) from exc
        if self.token_length < 1:
            raise InvalidSettingValueError("token_length", self.token_length, "must be positive")
        if not self.token_alphabet:
            raise InvalidSettingValueError("token_alphabet", self.token_alphabet, "must not be empty")
        if not 100 <= self.default_status <= 599:
            raise InvalidSettingValueError(
                "default_status", self.default_status, "must be an HTTP status (100-599)"
            )

    @property
    def rendering_mode(self) -> Rendering:
        return Rendering.parse(self.rendering)


__all__ = ["ErrorSettings", "Settings"]
