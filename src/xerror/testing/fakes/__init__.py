"""Testing fakes – in-memory doubles for the error ports."""
from xerror.testing.fakes.identity import SeededIdentity, SequenceIdentity
from xerror.testing.fakes.sinks import FakeLogSink, FakeResponseSink, RecordedResponse

__all__ = [
    "FakeLogSink",
    "FakeResponseSink",
    "RecordedResponse",
    "SeededIdentity",
    "SequenceIdentity",
]
