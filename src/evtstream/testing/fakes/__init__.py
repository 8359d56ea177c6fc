"""Testing fakes – in-memory doubles for predicates and encoders."""
from evtstream.testing.fakes.encoders import (
    EncoderCall,
    FailingEncoder,
    FailingPredicate,
    RecordingEncoder,
)

__all__ = ["EncoderCall", "FailingEncoder", "FailingPredicate", "RecordingEncoder"]
