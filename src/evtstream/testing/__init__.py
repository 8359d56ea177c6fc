"""Testing support – fakes and hypothesis strategies for stream engines."""

from evtstream.testing.fakes import (
    EncoderCall,
    FailingEncoder,
    FailingPredicate,
    RecordingEncoder,
)
from evtstream.testing.generators import event_name_strategy, incoming_event_strategy

__all__ = [
    "EncoderCall",
    "FailingEncoder",
    "FailingPredicate",
    "RecordingEncoder",
    "event_name_strategy",
    "incoming_event_strategy",
]
