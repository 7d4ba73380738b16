"""Typed success/failure values for operations whose failures are *data*.

Programmer errors in the history engine (using a manager before
``initialize``, a non-positive capacity) raise exceptions from
:mod:`rvedit.core.errors`. Failures that a user can cause and a caller is
expected to report, such as a malformed edit script on disk, are returned as
``Err`` values instead so the CLI can render them without a traceback.

Example
-------
>>> from rvedit.core.result import ok, err, Result
>>> def parse_capacity(raw: str) -> Result[int, str]:
...     return ok(int(raw)) if raw.isdigit() else err(f"not a capacity: {raw!r}")
>>> ok("3").flat_map(parse_capacity).unwrap()
3
>>> parse_capacity("x").get_or(100)
100
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(Generic[T, E]):
    """Either :class:`Ok` carrying a ``T`` or :class:`Err` carrying an ``E``."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    # ----- Extraction --------------------------------------------------------

    def unwrap(self) -> T:
        """Return the success value, raising ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"called unwrap() on {self!r}")

    def expect(self, msg: str) -> T:
        """Return the success value, raising ``RuntimeError(msg)`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(msg)

    def unwrap_err(self) -> E:
        """Return the error payload, raising ``RuntimeError`` on ``Ok``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"called unwrap_err() on {self!r}")

    def get_or(self, default: T) -> T:
        """Return the success value, or ``default`` when this is ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return default

    # ----- Chaining ----------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value; errors pass through untouched."""
        if isinstance(self, Ok):
            return Ok(fn(cast(Ok[T, E], self).value))
        return cast(Result[U, E], self)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the error payload; successes pass through untouched."""
        if isinstance(self, Err):
            return Err(fn(cast(Err[T, E], self).error))
        return cast(Result[T, F], self)

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a step that itself returns a :class:`Result`."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return cast(Result[U, E], self)

    def or_else(self, fallback: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Recover from an error by calling ``fallback(error)``; ``Ok`` is returned as is."""
        if isinstance(self, Err):
            return fallback(cast(Err[T, E], self).error)
        return self


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Success variant."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failure variant."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Build an :class:`Ok` typed as the :class:`Result` base."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Build an :class:`Err` typed as the :class:`Result` base."""
    return Err(error)


__all__ = ["Err", "Ok", "Result", "err", "ok"]
