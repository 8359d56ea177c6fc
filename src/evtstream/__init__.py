"""
evtstream – in-process event-stream engine.

Import path convention::

    from evtstream import StreamEngine, error_to_string
    from evtstream.decoding import data_predicate, decoder
    from evtstream.config import load_settings
"""

from evtstream.engine import (
    Event,
    EventHistory,
    MatcherRegistry,
    StreamEngine,
    StreamSession,
    Trigger,
    TriggerRegistry,
)
from evtstream.kernel.errors import (
    DecodeError,
    RegistrationError,
    StreamError,
    TriggerError,
    UnknownEventError,
    error_to_string,
)
from evtstream.kernel.types import Err, Ok, Result

__version__ = "0.1.0"
__all__ = [
    "DecodeError",
    "Err",
    "Event",
    "EventHistory",
    "MatcherRegistry",
    "Ok",
    "RegistrationError",
    "Result",
    "StreamEngine",
    "StreamError",
    "StreamSession",
    "Trigger",
    "TriggerError",
    "TriggerRegistry",
    "UnknownEventError",
    "__version__",
    "error_to_string",
]
