"""Undo/redo history engine.

- :class:`HistoryManager`: bounded linear history for one document.
- :class:`LockedHistoryManager`: the same, serialized for multi-threaded owners.
- :class:`HistoryRegistry`: one manager per open document.
"""

from __future__ import annotations

from .entry import HistoryEntry
from .locked import LockedHistoryManager
from .manager import HistoryManager
from .registry import HistoryRegistry, get_history_registry

__all__ = [
    "HistoryEntry",
    "HistoryManager",
    "LockedHistoryManager",
    "HistoryRegistry",
    "get_history_registry",
]
