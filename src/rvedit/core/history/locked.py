"""
Thread-safe history manager.

The base :class:`~.manager.HistoryManager` assumes a single owner (the UI event
loop). When another actor, such as a background auto-save task, also reads or
mutates the same document history, use :class:`LockedHistoryManager`: every
public operation runs under one re-entrant lock per instance, so
``push``/``undo``/``redo`` stay linearizable per document.

Compound decisions ("undo only if there is something to undo and then read the
counters") must hold the lock across the whole sequence; use
:meth:`LockedHistoryManager.transaction` for that.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from rvedit.core.contracts.status import HistoryStatus

from .entry import HistoryEntry
from .manager import HistoryManager

S = TypeVar("S")


class LockedHistoryManager(HistoryManager[S]):
    """:class:`HistoryManager` whose operations are serialized by an ``RLock``."""

    __slots__ = ("_lock",)

    def __init__(self, capacity: int | None = None) -> None:
        super().__init__(capacity)
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[LockedHistoryManager[S]]:
        """Hold the lock for a block of operations and yield ``self``."""
        with self._lock:
            yield self

    def initialize(self, snapshot: S, note: str | None = None) -> None:
        with self._lock:
            super().initialize(snapshot, note)

    def push(self, snapshot: S, note: str | None = None) -> None:
        with self._lock:
            super().push(snapshot, note)

    def undo(self) -> S | None:
        with self._lock:
            return super().undo()

    def redo(self) -> S | None:
        with self._lock:
            return super().redo()

    def clear(self) -> None:
        with self._lock:
            super().clear()

    def is_initialized(self) -> bool:
        with self._lock:
            return super().is_initialized()

    def can_undo(self) -> bool:
        with self._lock:
            return super().can_undo()

    def can_redo(self) -> bool:
        with self._lock:
            return super().can_redo()

    def get_undo_count(self) -> int:
        with self._lock:
            return super().get_undo_count()

    def get_redo_count(self) -> int:
        with self._lock:
            return super().get_redo_count()

    def get_present(self) -> S:
        with self._lock:
            return super().get_present()

    def past(self) -> tuple[S, ...]:
        with self._lock:
            return super().past()

    def future(self) -> tuple[S, ...]:
        with self._lock:
            return super().future()

    def peek_undo(self) -> HistoryEntry[S] | None:
        with self._lock:
            return super().peek_undo()

    def peek_redo(self) -> HistoryEntry[S] | None:
        with self._lock:
            return super().peek_redo()

    def status(self) -> HistoryStatus:
        # Counters read under one acquisition.
        with self._lock:
            return super().status()


__all__ = ["LockedHistoryManager"]
