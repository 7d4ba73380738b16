"""
Bounded, linear undo/redo history over opaque snapshots.

This module implements the engine every editing surface delegates to. One
:class:`HistoryManager` exists per open document; the editor calls
:meth:`~HistoryManager.push` after each committed structural edit and applies
whatever :meth:`~HistoryManager.undo` / :meth:`~HistoryManager.redo` return
back onto its own rendering state.

State
-----
- ``present``: the entry the document currently shows, ``None`` until
  :meth:`~HistoryManager.initialize`.
- ``past``: entries older than present, oldest on the left. The right end is
  the top of the undo stack.
- ``future``: entries undone and available for redo. The right end is the
  most recently undone one.

Rules
-----
- ``len(past) <= capacity`` at all times. Overflow is evicted from the *left*
  (oldest) end, never the recent end, both on push and on redo.
- Any push empties ``future``: once a new forward edit is committed, redo
  history is unreachable.
- Undo/redo on an empty stack is not an error; it returns ``None`` and
  changes nothing.
- Every operation either completes fully or raises before mutating anything.

The manager is not thread-safe; see :mod:`.locked` for the serialized variant.
"""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

from rvedit.core.contracts.status import HistoryStatus
from rvedit.core.errors import InvalidCapacityError, UninitializedHistoryError
from rvedit.core.settings import get_logger, load_settings

from .entry import HistoryEntry

S = TypeVar("S")

logger = get_logger("rvedit.history")


def _resolve_capacity(capacity: int | None) -> int:
    """Return a validated capacity, falling back to the configured default."""
    if capacity is None:
        return load_settings().history_capacity
    # bool is an int subclass; True is not a meaningful capacity.
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidCapacityError(capacity)
    return capacity


class HistoryManager(Generic[S]):
    """
    Linear undo/redo history holding at most ``capacity`` undo steps.

    Parameters
    ----------
    capacity : int | None
        Maximum number of entries kept in the past stack. ``None`` uses
        ``RVEDIT_HISTORY_CAPACITY`` (100 unless configured).

    Raises
    ------
    InvalidCapacityError
        If ``capacity`` is not a positive integer.
    """

    __slots__ = ("_capacity", "_present", "_past", "_future")

    def __init__(self, capacity: int | None = None) -> None:
        self._capacity: int = _resolve_capacity(capacity)
        self._present: HistoryEntry[S] | None = None
        self._past: deque[HistoryEntry[S]] = deque()
        self._future: deque[HistoryEntry[S]] = deque()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"undo={len(self._past)}, redo={len(self._future)}, "
            f"initialized={self._present is not None})"
        )

    @property
    def capacity(self) -> int:
        """Maximum depth of the undo stack (fixed at construction)."""
        return self._capacity

    # ------------------------------ Mutations -------------------------------

    def initialize(self, snapshot: S, note: str | None = None) -> None:
        """
        Make ``snapshot`` the present state and forget all history.

        May be called again at any time, e.g. when another document is loaded
        into an existing manager; each call fully resets the stacks.
        """
        self._past.clear()
        self._future.clear()
        self._present = HistoryEntry.commit(snapshot, note)
        logger.debug("history initialized (capacity=%d)", self._capacity)

    def push(self, snapshot: S, note: str | None = None) -> None:
        """
        Commit ``snapshot`` as the new present state.

        The previous present moves onto the undo stack (evicting the oldest
        entries beyond ``capacity``) and the redo stack is cleared.

        Raises
        ------
        UninitializedHistoryError
            If :meth:`initialize` has not been called yet.
        """
        present = self._require_present("push")
        self._archive(present)
        self._present = HistoryEntry.commit(snapshot, note)
        if self._future:
            logger.debug("push discarded %d redo entries", len(self._future))
            self._future.clear()

    def undo(self) -> S | None:
        """
        Step back one entry and return the restored snapshot.

        Returns ``None`` without any change when there is nothing to undo.

        Raises
        ------
        UninitializedHistoryError
            If :meth:`initialize` has not been called yet.
        """
        present = self._require_present("undo")
        if not self._past:
            return None
        previous = self._past.pop()
        self._future.append(present)
        self._present = previous
        return previous.snapshot

    def redo(self) -> S | None:
        """
        Re-apply the most recently undone entry and return its snapshot.

        The current present goes back onto the undo stack under the same
        eviction rule as :meth:`push`. Returns ``None`` without any change
        when there is nothing to redo.

        Raises
        ------
        UninitializedHistoryError
            If :meth:`initialize` has not been called yet.
        """
        present = self._require_present("redo")
        if not self._future:
            return None
        following = self._future.pop()
        self._archive(present)
        self._present = following
        return following.snapshot

    def clear(self) -> None:
        """Drop both stacks but keep the present snapshot."""
        self._past.clear()
        self._future.clear()

    # ------------------------------- Queries --------------------------------

    def is_initialized(self) -> bool:
        return self._present is not None

    def can_undo(self) -> bool:
        return len(self._past) > 0

    def can_redo(self) -> bool:
        return len(self._future) > 0

    def get_undo_count(self) -> int:
        return len(self._past)

    def get_redo_count(self) -> int:
        return len(self._future)

    def get_present(self) -> S:
        """
        Return the current snapshot.

        Raises
        ------
        UninitializedHistoryError
            If :meth:`initialize` has not been called yet.
        """
        return self._require_present("get_present").snapshot

    def past(self) -> tuple[S, ...]:
        """Snapshots on the undo stack, oldest first."""
        return tuple(entry.snapshot for entry in self._past)

    def future(self) -> tuple[S, ...]:
        """Snapshots on the redo stack; the last one is redone first."""
        return tuple(entry.snapshot for entry in self._future)

    def peek_undo(self) -> HistoryEntry[S] | None:
        """Return the entry the next :meth:`undo` would restore, if any."""
        return self._past[-1] if self._past else None

    def peek_redo(self) -> HistoryEntry[S] | None:
        """Return the entry the next :meth:`redo` would restore, if any."""
        return self._future[-1] if self._future else None

    def status(self) -> HistoryStatus:
        """Return an immutable summary for menu/toolbar enablement."""
        return HistoryStatus(
            initialized=self.is_initialized(),
            can_undo=self.can_undo(),
            can_redo=self.can_redo(),
            undo_count=self.get_undo_count(),
            redo_count=self.get_redo_count(),
            capacity=self._capacity,
        )

    # ------------------------------- Internals ------------------------------

    def _require_present(self, operation: str) -> HistoryEntry[S]:
        if self._present is None:
            raise UninitializedHistoryError(operation)
        return self._present

    def _archive(self, entry: HistoryEntry[S]) -> None:
        """Append ``entry`` to the undo stack, evicting from the oldest end."""
        self._past.append(entry)
        evicted = 0
        while len(self._past) > self._capacity:
            self._past.popleft()
            evicted += 1
        if evicted:
            logger.debug("evicted %d oldest undo entries (capacity=%d)", evicted, self._capacity)


__all__ = ["HistoryManager"]
