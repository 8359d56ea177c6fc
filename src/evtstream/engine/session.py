"""Engine – StreamSession, a mutable holder around a StreamEngine."""

from __future__ import annotations

from typing import Any

from evtstream.engine.stream import StreamEngine
from evtstream.engine.triggers import OutgoingEncoder
from evtstream.kernel.errors import TriggerError


class StreamSession:
    """Owns the current :class:`StreamEngine` and replaces it in place.

    For callers that prefer exceptions over ``Result`` values. Not
    thread-safe; one session per logical stream of mutations.
    """

    def __init__(self, engine: StreamEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> StreamEngine:
        return self._engine

    def submit(self, payload: Any) -> list[Any]:
        """Record *payload* and return the outgoing payloads it produced.

        Raises the validation error unchanged (nothing recorded). On a
        :class:`TriggerError` the event is already in history: the session
        keeps the committed engine, then raises.
        """
        result = self._engine.add_event(payload)
        if result.is_err():
            error = result.unwrap_err()
            if isinstance(error, TriggerError):
                self._engine = error.engine
            raise error
        self._engine, outgoing = result.unwrap()
        return outgoing

    def add_trigger(self, matcher: str, encoder: OutgoingEncoder) -> None:
        self._engine = self._engine.add_trigger(matcher, encoder)

    def events(self, matcher: str) -> list[Any]:
        return self._engine.get_events(matcher)

    def __len__(self) -> int:
        return len(self._engine.history)


__all__ = ["StreamSession"]
