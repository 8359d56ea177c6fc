"""Human-readable rendering of stream errors."""

from __future__ import annotations

from evtstream.kernel.errors.base import BaseError
from evtstream.kernel.errors.stream import DecodeError, TriggerError, UnknownEventError


def error_to_string(error: BaseException) -> str:
    """Render *error* for display. Never raises."""
    if isinstance(error, UnknownEventError):
        return f"Unknown event: {error.name}"
    if isinstance(error, TriggerError):
        return f"Trigger '{error.matcher}' failed: {error.details}"
    if isinstance(error, DecodeError):
        return f"Decode error: {error.details}"
    if isinstance(error, BaseError):
        return error.message or type(error).__name__
    try:
        text = str(error)
    except Exception:  # noqa: BLE001 - a broken __str__ must not escape
        text = ""
    return text or type(error).__name__


__all__ = ["error_to_string"]
