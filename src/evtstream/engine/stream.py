"""Engine – StreamEngine, the aggregate root.

A :class:`StreamEngine` validates incoming payloads against the predicate
registered for their event name, records them, and fires triggers whose
matcher matches the recorded event::

    engine = StreamEngine.create(
        [("Click", data_predicate(lambda m, d: m == f"Click:{d['target']}", required=["target"]))],
    )
    engine = engine.add_trigger("Click:buy", encode_purchase_intent)

    result = engine.add_event({"eventName": "Click", "eventData": {"target": "buy"}})
    if result.is_ok():
        engine, outgoing = result.unwrap()
    else:
        print(error_to_string(result.unwrap_err()))

Engines are values. Every operation that changes state returns a new engine
and leaves the receiver untouched.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Mapping
from typing import Any, Iterable

from evtstream.config.settings import EngineSettings
from evtstream.decoding import decoder
from evtstream.engine.event import Event, EventHistory
from evtstream.engine.matchers import MatcherPredicate, MatcherRegistry, matches, run_predicate
from evtstream.engine.triggers import OutgoingEncoder, TriggerRegistry
from evtstream.kernel.errors import (
    DecodeError,
    StreamError,
    TriggerError,
    error_to_string,
)
from evtstream.kernel.types import Err, Ok, Result, collect
from evtstream.observability.logging import get_logger

_log = get_logger(__name__)

type Submission = tuple["StreamEngine", list[Any]]


@dataclasses.dataclass(frozen=True, eq=False)
class StreamEngine:
    matchers: MatcherRegistry
    triggers: TriggerRegistry = dataclasses.field(default_factory=TriggerRegistry)
    history: EventHistory = dataclasses.field(default_factory=EventHistory)
    settings: EngineSettings = dataclasses.field(default_factory=EngineSettings)

    @classmethod
    def create(
        cls,
        matchers: Iterable[tuple[str, MatcherPredicate]] | Mapping[str, MatcherPredicate],
        triggers: Iterable[tuple[str, OutgoingEncoder]] = (),
        *,
        settings: EngineSettings | None = None,
    ) -> "StreamEngine":
        """Build an engine with an empty history.

        Raises :class:`~evtstream.kernel.errors.RegistrationError` for a
        malformed matcher or trigger registration.
        """
        return cls(
            matchers=MatcherRegistry(matchers),
            triggers=TriggerRegistry(triggers),
            settings=settings or EngineSettings(),
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_event(self, payload: Any) -> Result[Submission, StreamError]:
        """Validate, record and fire triggers for one incoming *payload*.

        Returns ``Ok((engine, outgoing))`` where ``outgoing`` lists encoder
        outputs in trigger order. Validation failures return ``Err`` and record
        nothing. A failing encoder returns ``Err(TriggerError)`` whose
        ``engine`` already holds the new event.
        """
        validated = self._validate(payload)
        if validated.is_err():
            error = validated.unwrap_err()
            _log.warning("event.rejected", error_code=error.code, error=error_to_string(error))
            return validated

        event = validated.unwrap()
        engine = dataclasses.replace(self, history=self.history.prepend(event))
        _log.debug("event.recorded", event_name=event.name, history_size=len(engine.history))

        fired = engine._fire_triggers(event)
        if fired.is_err():
            error = fired.unwrap_err()
            _log.warning(
                "trigger.failed",
                event_name=event.name,
                matcher=error.matcher,
                error=error_to_string(error),
            )
            return fired
        return Ok((engine, fired.unwrap()))

    def add_trigger(self, matcher: str, encoder: OutgoingEncoder) -> "StreamEngine":
        """Return an engine where ``(matcher, encoder)`` is evaluated first."""
        return dataclasses.replace(self, triggers=self.triggers.add(matcher, encoder))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_events(self, matcher: str) -> list[Any]:
        """Payloads of every recorded event matching *matcher*, newest first."""
        return [event.payload for event in self.history if matches(self.matchers, matcher, event)]

    @property
    def events(self) -> list[Event]:
        return list(self.history)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _event_name(self, payload: Any) -> Result[str, DecodeError]:
        field = self.settings.event_name_field
        if not isinstance(payload, Mapping):
            return Err(DecodeError(
                f"Expecting an object with a field named '{field}', got {type(payload).__name__}",
            ))
        if field not in payload:
            return Err(DecodeError(f"Expecting an object with a field named '{field}'"))
        name = payload[field]
        if not isinstance(name, str):
            return Err(DecodeError(
                f"Field '{field}' must be a string, got {type(name).__name__}",
                detail={"field": field},
            ))
        return Ok(name)

    def _validate(self, payload: Any) -> Result[Event, StreamError]:
        named = self._event_name(payload)
        if named.is_err():
            return named
        name = named.unwrap()

        found = self.matchers.lookup(name)
        if found.is_err():
            return found

        # Ok(False) is accepted; the predicate only has to decode the payload.
        checked = run_predicate(found.unwrap(), name, payload)
        if checked.is_err():
            return checked
        return Ok(Event(name, payload))

    def _fire_triggers(self, event: Event) -> Result[list[Any], TriggerError]:
        return collect(
            decoder(trigger.encoder)(trigger.matcher, event.payload, self).map_err(
                functools.partial(TriggerError.wrap, trigger.matcher, engine=self)
            )
            for trigger in self.triggers
            if matches(self.matchers, trigger.matcher, event)
        )

    def __repr__(self) -> str:
        return (
            f"StreamEngine(events={len(self.history)}, "
            f"matchers={sorted(self.matchers)!r}, triggers={len(self.triggers)})"
        )


__all__ = ["StreamEngine", "Submission"]
