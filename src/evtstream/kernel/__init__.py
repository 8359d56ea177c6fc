"""Kernel – framework-agnostic building blocks (errors and result types)."""

from evtstream.kernel.errors import (
    BaseError,
    DecodeError,
    RegistrationError,
    StreamError,
    TriggerError,
    UnknownEventError,
    error_to_string,
)
from evtstream.kernel.types import Err, Ok, Result, collect

__all__ = [
    "BaseError",
    "DecodeError",
    "Err",
    "Ok",
    "RegistrationError",
    "Result",
    "StreamError",
    "TriggerError",
    "UnknownEventError",
    "collect",
    "error_to_string",
]
