"""
Per-document history registry.

Each editable document (a script file, a label's block tree, the project
settings) owns exactly one history manager for the length of its editing
session. The registry keeps that mapping: it creates and seeds a manager when
a document is opened and drops it when the document is closed. Histories of
different documents are never merged.

Note on Persistence
-------------------
This is a volatile store. Closing a document or restarting the editor discards
its undo history.
"""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager, nullcontext
from typing import Any, ClassVar

from rvedit.core.settings import get_logger

from .locked import LockedHistoryManager
from .manager import HistoryManager

logger = get_logger("rvedit.history.registry")


class HistoryRegistry:
    """
    A dictionary-backed store of one :class:`HistoryManager` per document id.

    Parameters
    ----------
    thread_safe : bool
        When True, newly opened documents get a :class:`LockedHistoryManager`
        and `open`/`close` are serialized by a registry-level lock.
    """

    _instance: ClassVar[HistoryRegistry | None] = None

    def __init__(self, thread_safe: bool = False) -> None:
        self.thread_safe = thread_safe
        self._managers: dict[str, HistoryManager[Any]] = {}
        self._lock: AbstractContextManager[Any] = (
            threading.Lock() if thread_safe else nullcontext()
        )

    @classmethod
    def get_instance(cls) -> HistoryRegistry:
        """Accessor for the process-wide registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def open(
        self,
        document_id: str,
        snapshot: Any,
        capacity: int | None = None,
        note: str | None = None,
    ) -> HistoryManager[Any]:
        """
        Start (or restart) the editing session of ``document_id``.

        A new manager is created and seeded with ``snapshot``. If the document
        is already open, its existing manager is re-initialized instead, which
        discards its previous history; ``capacity`` is ignored in that case.

        Returns
        -------
        HistoryManager
            The manager now owning the document's history.
        """
        with self._lock:
            manager = self._managers.get(document_id)
            if manager is None:
                factory = LockedHistoryManager if self.thread_safe else HistoryManager
                manager = factory(capacity)
                self._managers[document_id] = manager
                logger.info(
                    "opened history for %s (capacity=%d)", document_id, manager.capacity
                )
            else:
                logger.info("reloaded history for %s", document_id)
            manager.initialize(snapshot, note)
            return manager

    def get(self, document_id: str) -> HistoryManager[Any] | None:
        """Return the manager of an open document, or None."""
        return self._managers.get(document_id)

    def close(self, document_id: str) -> bool:
        """Discard the history of ``document_id``; False if it was not open."""
        with self._lock:
            if self._managers.pop(document_id, None) is None:
                return False
        logger.info("closed history for %s", document_id)
        return True

    def document_ids(self) -> tuple[str, ...]:
        """Return the open document ids, sorted."""
        return tuple(sorted(self._managers))

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._managers

    def __len__(self) -> int:
        return len(self._managers)


def get_history_registry() -> HistoryRegistry:
    return HistoryRegistry.get_instance()


__all__ = ["HistoryRegistry", "get_history_registry"]
