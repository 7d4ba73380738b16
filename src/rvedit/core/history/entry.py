"""
History entry definition.

An entry is the unit the history stacks hold: one caller-owned snapshot plus
the moment it was committed and an optional caption. It is separated from
``manager.py`` so the registry and the replay tooling can refer to it without
importing the engine.

Design Notes
------------
- **Immutability**: entries are ``frozen``; they move between the past, present
  and future positions unchanged.
- **Opaque payload**: ``snapshot`` is stored by reference. It is never copied,
  compared or inspected, so callers must hand over values they will not
  mutate afterwards.
- **Timestamps as strings**: the UTC time is rendered once, at commit, in the
  same ISO-8601 ``...Z`` form the rest of the tooling prints.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, TypeVar

S = TypeVar("S")


def utc_timestamp() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.ffffffZ``."""
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


@dataclass(frozen=True, slots=True)
class HistoryEntry(Generic[S]):
    """
    Immutable record of one committed document state.

    Attributes
    ----------
    snapshot : S
        The caller's state value (block tree, node graph, settings...).
    timestamp : str
        UTC time at which the snapshot entered the history.
    note : str | None
        Optional human-readable caption such as ``"delete node"``; editors
        show it in "Undo <note>" menu items.
    """

    snapshot: S
    timestamp: str
    note: str | None = None

    @classmethod
    def commit(cls, snapshot: S, note: str | None = None) -> HistoryEntry[S]:
        """Wrap ``snapshot`` in a new entry stamped with the current time."""
        return cls(snapshot=snapshot, timestamp=utc_timestamp(), note=note)


__all__ = ["HistoryEntry", "utc_timestamp"]
