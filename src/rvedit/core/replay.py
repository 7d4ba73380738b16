"""
Edit script loading and replay.

Responsibilities
----------------
- **Load**: read a JSON edit script from disk and validate it into a
  :class:`~rvedit.core.contracts.script.HistoryScript`. Every failure a user
  can cause (missing file, bad JSON, schema mismatch) comes back as an
  ``Err(message)`` rather than an exception.
- **Replay**: drive a fresh :class:`~rvedit.core.history.HistoryManager`
  through the script and record, for every operation, what the engine
  returned and the resulting state.

Replay builds an in-memory manager and discards it with the report; nothing
about the history itself is written anywhere.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rvedit.core.contracts.script import ClearOp, HistoryOp, HistoryScript, PushOp, UndoOp
from rvedit.core.contracts.status import HistoryStatus
from rvedit.core.history import HistoryManager
from rvedit.core.result import Result, err, ok
from rvedit.core.settings import get_logger

logger = get_logger("rvedit.replay")


@dataclass(frozen=True)
class ReplayStep:
    """Outcome of one script operation.

    ``returned`` is what ``undo``/``redo`` gave back (``None`` for an empty
    stack, and always ``None`` for ``push``/``clear``).
    """

    index: int
    op: HistoryOp
    returned: Any
    present: Any
    status: HistoryStatus


@dataclass
class ReplayReport:
    """All steps of a replay plus the manager in its final state."""

    manager: HistoryManager[Any]
    steps: list[ReplayStep] = field(default_factory=list)

    @property
    def final_status(self) -> HistoryStatus:
        return self.manager.status()


def load_script(path: Path) -> Result[HistoryScript, str]:
    """Read and validate the edit script at ``path``."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        return err(f"cannot read {path}: {e}")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return err(f"{path} is not valid JSON: {e}")
    try:
        return ok(HistoryScript.model_validate(data))
    except ValidationError as e:
        return err(f"{path} is not a valid edit script:\n{e}")


def _apply(manager: HistoryManager[Any], op: HistoryOp) -> Any:
    if isinstance(op, PushOp):
        manager.push(op.snapshot, op.note)
        return None
    if isinstance(op, UndoOp):
        return manager.undo()
    if isinstance(op, ClearOp):
        manager.clear()
        return None
    return manager.redo()


def replay(script: HistoryScript, capacity: int | None = None) -> ReplayReport:
    """
    Run ``script`` against a new manager.

    Parameters
    ----------
    script : HistoryScript
        The validated edit script.
    capacity : int | None
        Overrides ``script.capacity``; when both are ``None`` the configured
        default applies.

    Raises
    ------
    InvalidCapacityError
        If ``capacity`` is given and not a positive integer.
    """
    manager: HistoryManager[Any] = HistoryManager(
        capacity if capacity is not None else script.capacity
    )
    manager.initialize(script.initial, script.note)
    report = ReplayReport(manager=manager)

    for index, op in enumerate(script.ops, start=1):
        returned = _apply(manager, op)
        report.steps.append(
            ReplayStep(
                index=index,
                op=op,
                returned=returned,
                present=manager.get_present(),
                status=manager.status(),
            )
        )

    logger.debug("replayed %d operations (capacity=%d)", len(report.steps), manager.capacity)
    return report


__all__ = ["ReplayReport", "ReplayStep", "load_script", "replay"]
