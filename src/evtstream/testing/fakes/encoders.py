"""Testing fakes – recording and failing encoders/predicates."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

from evtstream.kernel.errors import DecodeError
from evtstream.kernel.types import Err, Ok, Result


@dataclasses.dataclass(frozen=True)
class EncoderCall:
    """One recorded encoder invocation."""

    matcher: str
    payload: Any
    history_size: int


class RecordingEncoder:
    """Encoder double that records every call.

    Returns *value* for each call, or ``compute(matcher, payload)`` when a
    function is given.
    """

    def __init__(
        self,
        value: Any = None,
        *,
        compute: Callable[[str, Any], Any] | None = None,
    ) -> None:
        self._value = value
        self._compute = compute
        self._calls: list[EncoderCall] = []

    def __call__(self, matcher: str, payload: Any, engine: Any) -> Result[Any, DecodeError]:
        self._calls.append(EncoderCall(matcher, payload, len(engine.history)))
        if self._compute is not None:
            return Ok(self._compute(matcher, payload))
        return Ok(self._value)

    @property
    def calls(self) -> list[EncoderCall]:
        return list(self._calls)

    @property
    def call_count(self) -> int:
        return len(self._calls)

    def clear(self) -> None:
        self._calls.clear()


class FailingEncoder(RecordingEncoder):
    """Encoder double that records the call, then fails with a DecodeError."""

    def __init__(self, details: str = "encoder failed") -> None:
        super().__init__()
        self.details = details

    def __call__(self, matcher: str, payload: Any, engine: Any) -> Result[Any, DecodeError]:
        super().__call__(matcher, payload, engine)
        return Err(DecodeError(self.details))


class FailingPredicate:
    """Predicate double that fails to decode every payload."""

    def __init__(self, details: str = "predicate failed") -> None:
        self.details = details
        self.call_count = 0

    def __call__(self, matcher: str, payload: Any) -> Result[bool, DecodeError]:
        self.call_count += 1
        return Err(DecodeError(self.details))


__all__ = ["EncoderCall", "FailingEncoder", "FailingPredicate", "RecordingEncoder"]
