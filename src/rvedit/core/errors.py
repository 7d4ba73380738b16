"""Exceptions raised by the history engine.

Only programmer/integration errors are exceptions. Undoing with an empty past
or redoing with an empty future is a normal transition that returns ``None``.
"""

from __future__ import annotations


class HistoryError(RuntimeError):
    """Base class for history engine errors."""


class UninitializedHistoryError(HistoryError):
    """A manager was used before its first ``initialize`` call."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() called before initialize()")
        self.operation = operation


class InvalidCapacityError(HistoryError, ValueError):
    """A manager was configured with a capacity that is not a positive integer."""

    def __init__(self, capacity: object) -> None:
        super().__init__(f"history capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity


__all__ = ["HistoryError", "InvalidCapacityError", "UninitializedHistoryError"]
