"""Stream errors — submission, decoding and registration failures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from evtstream.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from evtstream.engine.stream import StreamEngine


class StreamError(BaseError):
    """Base for every error produced by the stream engine."""

    default_code = "stream_error"


class UnknownEventError(StreamError):
    """The submitted payload names an event with no registered predicate."""

    default_code = "unknown_event"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown event {name!r}", **kwargs)
        self.name = name
        self.detail.setdefault("event_name", name)


class DecodeError(StreamError):
    """A payload did not have the shape a predicate or encoder expected.

    ``details`` is the decoder's own description of the failure and is what
    :func:`~evtstream.kernel.errors.formatting.error_to_string` shows.
    """

    default_code = "decode_error"

    def __init__(self, details: str, **kwargs: Any) -> None:
        super().__init__(details, **kwargs)
        self.details = details


class TriggerError(DecodeError):
    """A trigger's encoder failed after the event was recorded.

    ``engine`` is the engine value that already holds the new event, so a
    caller can decide to keep the committed history despite the failure.
    """

    default_code = "trigger_failed"

    def __init__(
        self,
        matcher: str,
        details: str,
        *,
        engine: StreamEngine,
        **kwargs: Any,
    ) -> None:
        super().__init__(details, **kwargs)
        self.matcher = matcher
        self.engine = engine
        self.detail.setdefault("matcher", matcher)

    @classmethod
    def wrap(cls, matcher: str, error: Exception, engine: StreamEngine) -> "TriggerError":
        """Attach trigger context to the error an encoder returned."""
        details = error.details if isinstance(error, DecodeError) else str(error)
        return cls(matcher, details or type(error).__name__, engine=engine, cause=error)


class RegistrationError(StreamError):
    """A matcher or trigger registration is malformed."""

    default_code = "invalid_registration"


__all__ = [
    "DecodeError",
    "RegistrationError",
    "StreamError",
    "TriggerError",
    "UnknownEventError",
]
