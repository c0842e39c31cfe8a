"""Success/failure values for callback boundaries that must not unwind."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

__all__ = ["Outcome", "as_outcome", "attempt", "catch"]

T = TypeVar("T")
U = TypeVar("U")

ErrorHandler = Callable[[Exception], Any]


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or the exception that prevented producing it."""

    value: T | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Outcome[U]":
        if self.error is not None:
            return Outcome.failure(self.error)
        return attempt(fn, self.value)

    def __bool__(self) -> bool:
        return self.ok


def as_outcome(result: Any) -> Outcome[Any]:
    """Normalize a callback return value.

    An ``Outcome`` is passed through unchanged; anything else, ``None``
    included, counts as success. Plain callables report failure by raising.
    """
    if isinstance(result, Outcome):
        return result
    return Outcome.success(result)


def attempt(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome[Any]:
    """Run ``fn`` and capture either its result or the exception it raised."""
    try:
        result = fn(*args, **kwargs)
    except Exception as exc:
        return Outcome.failure(exc)
    return as_outcome(result)


def catch(fn: Callable[..., Any], handler: ErrorHandler) -> Callable[..., Outcome[Any]]:
    """Wrap ``fn`` so failures are handed to ``handler`` and still reported.

    The wrapper never raises for errors coming from ``fn``; it returns the
    failed ``Outcome`` after ``handler`` has seen the error.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
        outcome = attempt(fn, *args, **kwargs)
        if outcome.error is not None:
            handler(outcome.error)
        return outcome

    return wrapper
