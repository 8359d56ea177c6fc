"""Result[T, E] — Ok and Err variants used across the engine's pipeline."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err() on {self!r}")

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self._value))

    def map_err(self, func: Callable[[Any], Exception]) -> "Ok[T]":  # noqa: ARG002
        return self

    def flat_map(self, func: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
        return func(self._value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and other._value == self._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant. Carries an exception so ``unwrap`` can raise it."""

    __slots__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self._error

    def map(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    def map_err(self, func: Callable[[E], Exception]) -> "Err[Exception]":
        return Err(func(self._error))

    def flat_map(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and other._error is self._error

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]


def collect(results: Iterable["Result[T, E]"]) -> "Result[list[T], E]":
    """Combine *results* into one, failing with the first ``Err`` in order.

    The iterable is consumed completely before deciding, so every result
    producer runs even when an earlier one already failed.
    """
    values: list[T] = []
    first_error: Err[E] | None = None
    for result in list(results):
        if result.is_err():
            if first_error is None:
                first_error = result  # type: ignore[assignment]
        else:
            values.append(result.unwrap())
    if first_error is not None:
        return first_error
    return Ok(values)


__all__ = ["Err", "Ok", "Result", "collect"]
