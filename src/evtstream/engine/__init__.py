"""Engine – matcher/trigger registries, event history and the StreamEngine."""

from evtstream.engine.event import Event, EventHistory
from evtstream.engine.matchers import MatcherPredicate, MatcherRegistry, matches
from evtstream.engine.session import StreamSession
from evtstream.engine.stream import StreamEngine, Submission
from evtstream.engine.triggers import OutgoingEncoder, Trigger, TriggerRegistry

__all__ = [
    "Event",
    "EventHistory",
    "MatcherPredicate",
    "MatcherRegistry",
    "OutgoingEncoder",
    "StreamEngine",
    "StreamSession",
    "Submission",
    "Trigger",
    "TriggerRegistry",
    "matches",
]
