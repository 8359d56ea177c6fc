"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError                  (base.py)
    └── StreamError            (stream.py)
        ├── UnknownEventError
        ├── DecodeError
        │   └── TriggerError
        └── RegistrationError
"""

from evtstream.kernel.errors.base import BaseError
from evtstream.kernel.errors.formatting import error_to_string
from evtstream.kernel.errors.stream import (
    DecodeError,
    RegistrationError,
    StreamError,
    TriggerError,
    UnknownEventError,
)

__all__ = [
    "BaseError",
    "DecodeError",
    "RegistrationError",
    "StreamError",
    "TriggerError",
    "UnknownEventError",
    "error_to_string",
]
