"""Engine – Trigger and TriggerRegistry."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

from evtstream.kernel.errors import DecodeError, RegistrationError
from evtstream.kernel.types import Result

if TYPE_CHECKING:
    from evtstream.engine.stream import StreamEngine

#: ``(matcher, raw_payload, engine) -> Ok(outgoing) | Err(DecodeError)``
type OutgoingEncoder = Callable[[str, Any, "StreamEngine"], Result[Any, DecodeError]]


@dataclasses.dataclass(frozen=True)
class Trigger:
    """A registered ``(matcher, encoder)`` pair."""

    matcher: str
    encoder: OutgoingEncoder

    def __post_init__(self) -> None:
        if not isinstance(self.matcher, str):
            raise RegistrationError(
                f"Trigger matcher must be a string, got {self.matcher!r}",
                detail={"matcher": repr(self.matcher)},
            )
        if not callable(self.encoder):
            raise RegistrationError(
                f"Encoder for trigger {self.matcher!r} is not callable",
                detail={"matcher": self.matcher},
            )


class TriggerRegistry:
    """Ordered triggers; iteration yields them in evaluation order.

    :meth:`add` prepends, so the most recently added trigger is evaluated
    first. Matchers need not be unique.
    """

    __slots__ = ("_triggers",)

    def __init__(self, registrations: Iterable[tuple[str, OutgoingEncoder]] = ()) -> None:
        self._triggers: tuple[Trigger, ...] = tuple(
            Trigger(matcher, encoder) for matcher, encoder in registrations
        )

    def add(self, matcher: str, encoder: OutgoingEncoder) -> "TriggerRegistry":
        registry = TriggerRegistry()
        registry._triggers = (Trigger(matcher, encoder), *self._triggers)
        return registry

    def __iter__(self) -> Iterator[Trigger]:
        return iter(self._triggers)

    def __len__(self) -> int:
        return len(self._triggers)

    def __repr__(self) -> str:
        return f"TriggerRegistry({[t.matcher for t in self._triggers]!r})"


__all__ = ["OutgoingEncoder", "Trigger", "TriggerRegistry"]
