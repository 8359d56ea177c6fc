"""Decoding – helpers for writing matcher predicates and outgoing encoders.

Predicates and encoders report shape problems as ``Err(DecodeError)``. These
helpers keep that plumbing out of application code::

    @decoder
    def encode_click(matcher, payload, engine):
        x = field(payload, "eventData", "x").unwrap()
        return {"type": "click", "x": x * 2}

    click = data_predicate(lambda matcher, data: matcher == f"Click:{data['target']}",
                           required=["target"])
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any, Callable, Iterable

from evtstream.kernel.errors import DecodeError
from evtstream.kernel.types import Err, Ok, Result

DEFAULT_DATA_FIELD = "eventData"

_DECODE_FAILURES = (DecodeError, KeyError, TypeError, ValueError)


def field(payload: Any, *path: str) -> Result[Any, DecodeError]:
    """Follow *path* through nested mappings."""
    current = payload
    for depth, key in enumerate(path):
        where = ".".join(path[:depth]) or "<root>"
        if not isinstance(current, Mapping):
            return Err(DecodeError(
                f"Expecting an object at {where}, got {type(current).__name__}",
                detail={"path": list(path)},
            ))
        if key not in current:
            return Err(DecodeError(
                f"Expecting an object with a field named '{key}' at {where}",
                detail={"path": list(path)},
            ))
        current = current[key]
    return Ok(current)


def decoder(fn: Callable[..., Any]) -> Callable[..., Result[Any, DecodeError]]:
    """Turn a raising function into one returning ``Result``.

    Plain return values become ``Ok``; a returned ``Ok``/``Err`` passes through.
    ``DecodeError``, ``KeyError``, ``TypeError`` and ``ValueError`` become
    ``Err(DecodeError)``. Anything else propagates.
    """
    name = getattr(fn, "__name__", type(fn).__name__)

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Result[Any, DecodeError]:
        try:
            value = fn(*args, **kwargs)
        except DecodeError as exc:
            return Err(exc)
        except _DECODE_FAILURES as exc:
            return Err(DecodeError(
                f"{name}: {type(exc).__name__}: {exc}",
                cause=exc,
            ))
        if isinstance(value, (Ok, Err)):
            return value
        return Ok(value)

    return wrapper


def _decode_data(payload: Any, data_field: str, required: tuple[str, ...]) -> Result[Mapping[str, Any], DecodeError]:
    found = field(payload, data_field)
    if found.is_err():
        return found
    data = found.unwrap()
    if not isinstance(data, Mapping):
        return Err(DecodeError(
            f"Field '{data_field}' must be an object, got {type(data).__name__}",
        ))
    missing = [key for key in required if key not in data]
    if missing:
        return Err(DecodeError(
            f"Field '{data_field}' is missing: {', '.join(missing)}",
            detail={"missing": missing},
        ))
    return Ok(data)


def data_predicate(
    check: Callable[[str, Mapping[str, Any]], bool],
    *,
    required: Iterable[str] = (),
    data_field: str = DEFAULT_DATA_FIELD,
) -> Callable[[str, Any], Result[bool, DecodeError]]:
    """Build a matcher predicate over the payload's data object.

    The data field must be an object holding every *required* key; then
    ``check(matcher, data)`` decides the match. Exceptions from *check* listed
    in :func:`decoder` count as decode failures.
    """
    keys = tuple(required)
    guarded = decoder(check)

    def predicate(matcher: str, payload: Any) -> Result[bool, DecodeError]:
        return _decode_data(payload, data_field, keys).flat_map(
            lambda data: guarded(matcher, data).map(bool)
        )

    return predicate


def name_predicate(
    *,
    required: Iterable[str] = (),
    data_field: str = DEFAULT_DATA_FIELD,
) -> Callable[[str, Any], Result[bool, DecodeError]]:
    """Predicate that validates the data object and matches nothing else.

    Events registered with it are only found by their exact name.
    """
    return data_predicate(lambda matcher, data: False, required=required, data_field=data_field)


__all__ = [
    "DEFAULT_DATA_FIELD",
    "data_predicate",
    "decoder",
    "field",
    "name_predicate",
]
