"""Process-wide defaults for constructing and reporting errors.

Call :func:`configure` once at process start::

    from xerror.runtime import configure

    configure()                       # settings from XERROR_* env vars
    configure(ErrorSettings(rendering="verbose"), rng=random.Random(7))

If nothing calls it, the first error built configures the defaults lazily
from :class:`~xerror.config.ErrorSettings` defaults.
"""
from __future__ import annotations

import dataclasses
import random
import threading

from xerror.config import EnvSettingsLoader, ErrorSettings
from xerror.kernel.errors.identity import IdentityStrategy, RandomSource, RandomTokenIdentity
from xerror.kernel.errors.rendering import Rendering
from xerror.kernel.errors.sinks import LogSink
from xerror.observability.logging import StructlogSink


@dataclasses.dataclass(frozen=True)
class Runtime:
    identity: IdentityStrategy
    rendering: Rendering
    default_status: int
    log_sink: LogSink
    settings: ErrorSettings


_lock = threading.Lock()
_runtime: Runtime | None = None


def _build(
    settings: ErrorSettings,
    rng: random.Random | None = None,
    identity: IdentityStrategy | None = None,
    log_sink: LogSink | None = None,
) -> Runtime:
    if identity is None:
        identity = RandomTokenIdentity(
            length=settings.token_length,
            alphabet=settings.token_alphabet,
            source=RandomSource(rng=rng),
        )
    return Runtime(
        identity=identity,
        rendering=settings.rendering_mode,
        default_status=settings.default_status,
        log_sink=StructlogSink(settings.logger_name) if log_sink is None else log_sink,
        settings=settings,
    )


def configure(
    settings: ErrorSettings | None = None,
    *,
    rng: random.Random | None = None,
    identity: IdentityStrategy | None = None,
    log_sink: LogSink | None = None,
) -> Runtime:
    """Install the process-wide defaults and return them.

    Args:
        settings: Defaults to :class:`ErrorSettings` loaded from the
            environment.
        rng: Generator for random tokens; a new one seeded from the current
            time is created when omitted.
        identity: Replaces the random-token strategy altogether.
        log_sink: Replaces the structlog sink.
    """
    global _runtime
    if settings is None:
        settings = EnvSettingsLoader().load(ErrorSettings)
    runtime = _build(settings, rng=rng, identity=identity, log_sink=log_sink)
    with _lock:
        _runtime = runtime
    return runtime


def get_runtime() -> Runtime:
    global _runtime
    runtime = _runtime
    if runtime is not None:
        return runtime
    with _lock:
        if _runtime is None:
            _runtime = _build(ErrorSettings())
        return _runtime


def reset() -> None:
    """Drop the installed defaults; the next error rebuilds them lazily."""
    global _runtime
    with _lock:
        _runtime = None


__all__ = ["Runtime", "configure", "get_runtime", "reset"]
