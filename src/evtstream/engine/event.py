"""Engine – recorded Event and the persistent EventHistory."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterator


@dataclasses.dataclass(frozen=True)
class Event:
    """An incoming payload that passed validation and was recorded.

    ``payload`` is the raw incoming value exactly as submitted, including any
    fields the engine itself does not look at.
    """

    name: str
    payload: Any


@dataclasses.dataclass(frozen=True)
class _Node:
    event: Event
    rest: "_Node | None"


class EventHistory:
    """Append-only history of recorded events, newest first.

    Histories are persistent values: :meth:`prepend` returns a new history that
    shares every older entry with the one it was built from.
    """

    __slots__ = ("_head", "_size")

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    @classmethod
    def of(cls, *events: Event) -> "EventHistory":
        """Build a history whose iteration order is *events* as given."""
        history = cls()
        for event in reversed(events):
            history = history.prepend(event)
        return history

    def prepend(self, event: Event) -> "EventHistory":
        history = EventHistory()
        history._head = _Node(event, self._head)
        history._size = self._size + 1
        return history

    @property
    def latest(self) -> Event | None:
        return self._head.event if self._head is not None else None

    def __iter__(self) -> Iterator[Event]:
        node = self._head
        while node is not None:
            yield node.event
            node = node.rest

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"EventHistory(size={self._size})"


__all__ = ["Event", "EventHistory"]
