"""Engine – MatcherRegistry and the shared matching rule."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator

from evtstream.decoding import decoder
from evtstream.engine.event import Event
from evtstream.kernel.errors import (
    DecodeError,
    RegistrationError,
    UnknownEventError,
    error_to_string,
)
from evtstream.kernel.types import Err, Ok, Result
from evtstream.observability.logging import get_logger

#: ``(matcher, raw_payload) -> Ok(bool) | Err(DecodeError)``
type MatcherPredicate = Callable[[str, Any], Result[bool, DecodeError]]

_log = get_logger(__name__)


class MatcherRegistry:
    """Read-only mapping from event name to its :data:`MatcherPredicate`.

    Built once; duplicate names keep the last predicate given.
    """

    __slots__ = ("_predicates",)

    def __init__(
        self,
        registrations: Iterable[tuple[str, MatcherPredicate]] | Mapping[str, MatcherPredicate] = (),
    ) -> None:
        pairs = registrations.items() if isinstance(registrations, Mapping) else registrations
        predicates: dict[str, MatcherPredicate] = {}
        for name, predicate in pairs:
            if not isinstance(name, str) or not name:
                raise RegistrationError(
                    f"Event name must be a non-empty string, got {name!r}",
                    detail={"event_name": repr(name)},
                )
            if not callable(predicate):
                raise RegistrationError(
                    f"Predicate for event {name!r} is not callable",
                    detail={"event_name": name},
                )
            predicates[name] = predicate
        self._predicates: Mapping[str, MatcherPredicate] = MappingProxyType(predicates)

    def lookup(self, name: str) -> Result[MatcherPredicate, UnknownEventError]:
        predicate = self._predicates.get(name)
        if predicate is None:
            return Err(UnknownEventError(name))
        return Ok(predicate)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._predicates)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        return f"MatcherRegistry({sorted(self._predicates)!r})"


def run_predicate(predicate: MatcherPredicate, matcher: str, payload: Any) -> Result[bool, DecodeError]:
    """Call *predicate*; decode failures it raises come back as ``Err``."""
    return decoder(predicate)(matcher, payload)


def matches(registry: MatcherRegistry, matcher: str, event: Event) -> bool:
    """Return whether *event* satisfies *matcher*.

    Exact name equality always matches. Otherwise the predicate registered for
    the event's name decides; an unknown name or a decode failure counts as no
    match. Used for trigger firing and history queries alike.
    """
    if matcher == event.name:
        return True
    found = registry.lookup(event.name)
    if found.is_err():
        return False
    outcome = run_predicate(found.unwrap(), matcher, event.payload)
    if outcome.is_err():
        _log.debug(
            "matcher.predicate_failed",
            matcher=matcher,
            event_name=event.name,
            error=error_to_string(outcome.unwrap_err()),
        )
        return False
    return bool(outcome.unwrap())


__all__ = ["MatcherPredicate", "MatcherRegistry", "matches", "run_predicate"]
