"""Shared pytest fixtures."""
from __future__ import annotations

import random
from collections.abc import Iterator

import pytest

from xerror.config import ErrorSettings
from xerror.runtime import Runtime, configure, reset
from xerror.testing import FakeLogSink


@pytest.fixture(autouse=True)
def _isolated_runtime() -> Iterator[None]:
    reset()
    yield
    reset()


@pytest.fixture()
def log_sink() -> FakeLogSink:
    return FakeLogSink()


@pytest.fixture()
def runtime(log_sink: FakeLogSink) -> Runtime:
    """Default settings, a seeded token generator and an in-memory log sink."""
    return configure(ErrorSettings(), rng=random.Random(1234), log_sink=log_sink)
