"""Kernel errors – StructuredError and its constructor.

A :class:`StructuredError` carries

* a short ``code`` users can read back to an operator,
* an internal ``cause`` for developers (never shown to end users),
* an external message that is safe to display,
* the ``location`` (``path:line``) of the code that constructed it,
* an optional HTTP ``status``.

Errors are built with :func:`errorf`, which records the caller's location::

    raise errorf(exc, None, "invalid userid %s", user_id)   # random token
    raise errorf(exc, 0x2A, "upload rejected", status=413)  # fixed code
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from xerror.kernel.errors.formatting import lenient_format
from xerror.kernel.errors.identity import ErrorCode, IdentityStrategy
from xerror.kernel.errors.location import caller_location
from xerror.kernel.errors.rendering import (
    Rendering,
    cause_text,
    external_text,
    render_compact,
    render_verbose,
)
from xerror.kernel.errors.sinks import LogSink, ResponseSink


@runtime_checkable
class Error(Protocol):
    """Capabilities every structured error offers."""

    def render(self) -> str: ...
    def unwrap(self) -> BaseException | None: ...
    def log(self, sink: LogSink | None = None) -> None: ...
    def handle_http(self, sink: ResponseSink, log_sink: LogSink | None = None) -> None: ...


class StructuredError(Exception):
    """Exception with a code, split internal/external messages and a call site.

    Build instances with :func:`errorf`; every field except ``status`` is
    read-only afterwards.
    """

    def __init__(
        self,
        *,
        code: ErrorCode,
        location: str,
        cause: BaseException | None = None,
        external: str | None = None,
        status: int | None = None,
        rendering: Rendering = Rendering.COMPACT_HEX,
    ) -> None:
        super().__init__(external_text(external))
        self._code = code
        self._location = location
        self._cause = cause
        self._external = external or None
        self._rendering = rendering
        self.status = status
        if cause is not None:
            self.__cause__ = cause

    @property
    def code(self) -> ErrorCode:
        return self._code

    @property
    def location(self) -> str:
        return self._location

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def external_message(self) -> str:
        """User-facing text, ``"error: "`` prefixed, placeholder when unset."""
        return external_text(self._external)

    @property
    def internal_message(self) -> str:
        return cause_text(self._cause)

    @property
    def rendering(self) -> Rendering:
        return self._rendering

    # -- rendering ----------------------------------------------------------

    def render(self) -> str:
        if self._rendering is Rendering.VERBOSE:
            return render_verbose(self._external, self._code, self._cause, self._location)
        return self.compact()

    def compact(self) -> str:
        """Single-line rendering without internal detail."""
        return render_compact(self._external, self._code, self._rendering)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code.value!r}, "
            f"message={self.external_message!r}, location={self._location!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # the keyword-only constructor cannot be rebuilt from self.args
        return (
            _rebuild,
            (
                type(self),
                self._code,
                self._location,
                self._cause,
                self._external,
                self.status,
                self._rendering,
            ),
        )

    def to_dict(self, include_internal: bool = False) -> dict[str, Any]:
        """Serialise to a plain dict; the cause is only included on request."""
        payload: dict[str, Any] = {
            "code": self._code.value,
            "message": self.external_message,
            "location": self._location,
            "status": self.status,
        }
        if include_internal:
            payload["cause"] = self.internal_message
        return payload

    # -- cause chain --------------------------------------------------------

    def unwrap(self) -> BaseException | None:
        return self._cause

    # -- reporting ----------------------------------------------------------

    def log(self, sink: LogSink | None = None) -> None:
        """Write the internal cause and the location to *sink*."""
        if sink is None:
            sink = _runtime().log_sink
        sink.write(f"error: {self.internal_message}")
        sink.write(f"  at {self._location}")

    def handle_http(self, sink: ResponseSink, log_sink: LogSink | None = None) -> None:
        """Log the error and reply on *sink* with the compact rendering.

        An unset ``status`` is resolved to the configured default here and
        nowhere else. The response is written even if the log sink fails;
        that failure is then re-raised.
        """
        runtime = _runtime()
        if self.status is None:
            self.status = runtime.default_status
        if log_sink is None:
            log_sink = runtime.log_sink
        body = self.compact()
        try:
            self.log(log_sink)
            log_sink.write(f"{body}: {self.internal_message}")
        finally:
            sink.write(body, self.status)


def _rebuild(
    cls: type[StructuredError],
    code: ErrorCode,
    location: str,
    cause: BaseException | None,
    external: str | None,
    status: int | None,
    rendering: Rendering,
) -> StructuredError:
    return cls(
        code=code,
        location=location,
        cause=cause,
        external=external,
        status=status,
        rendering=rendering,
    )


def _runtime() -> Any:
    from xerror.runtime import get_runtime

    return get_runtime()


def errorf(
    cause: BaseException | None,
    identity: int | str | ErrorCode | IdentityStrategy | None = None,
    fmt: str | None = None,
    *args: Any,
    status: int | None = None,
    rendering: Rendering | str | None = None,
    stacklevel: int = 1,
) -> StructuredError:
    """Build a :class:`StructuredError`; never raises.

    Args:
        cause: Internal error being reported, or ``None``.
        identity: ``None`` draws a token from the configured strategy, an
            ``int`` (or ``str``/``ErrorCode``) is stored unchanged, an
            :class:`IdentityStrategy` is asked for a code. Anything else is
            stored as its ``str()`` text.
        fmt: printf-style template of the external message; formatted with
            *args* leniently and prefixed with ``"error: "``.
        status: HTTP status to reply with; defaults at the HTTP boundary.
        rendering: Overrides the configured default rendering.
        stacklevel: Frames to skip when recording the location; ``1`` is the
            direct caller, wrappers pass ``2`` and so on.
    """
    location = caller_location(stacklevel)
    runtime = _runtime()

    if identity is None:
        code = runtime.identity.next_code()
    elif isinstance(identity, ErrorCode):
        code = identity
    elif isinstance(identity, (int, str)):
        code = ErrorCode(identity)
    elif callable(getattr(identity, "next_code", None)):
        code = identity.next_code()
    else:
        code = ErrorCode(_identity_text(identity))

    if rendering is None:
        mode = runtime.rendering
    else:
        try:
            mode = Rendering.parse(rendering)
        except ValueError:
            mode = runtime.rendering

    return StructuredError(
        code=code,
        location=location,
        cause=cause,
        external=lenient_format(fmt, args) if fmt else None,
        status=status,
        rendering=mode,
    )


def _identity_text(identity: object) -> str:
    try:
        return str(identity)
    except Exception:  # noqa: BLE001
        return type(identity).__name__


def new(cause: BaseException | None, message: str | None = None) -> StructuredError:
    """Shorthand for a random-token error with a literal external message."""
    template = message.replace("%", "%%") if message else None
    return errorf(cause, None, template, stacklevel=2)


__all__ = ["Error", "StructuredError", "errorf", "new"]
