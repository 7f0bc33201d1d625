"""Testing – fakes and strategies for code that reports structured errors."""
from xerror.testing.fakes import (
    FakeLogSink,
    FakeResponseSink,
    RecordedResponse,
    SeededIdentity,
    SequenceIdentity,
)

__all__ = [
    "FakeLogSink",
    "FakeResponseSink",
    "RecordedResponse",
    "SeededIdentity",
    "SequenceIdentity",
]
