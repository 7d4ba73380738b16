"""
Edit script contracts.

An edit script is a JSON document describing a sequence of history operations
against one manager. Scripts let a developer reproduce what an editor did to a
document's history (and what the engine answered) without the GUI:

.. code-block:: json

    {
      "capacity": 3,
      "initial": "s0",
      "ops": [
        {"op": "push", "snapshot": "s1", "note": "add label"},
        {"op": "undo"},
        {"op": "redo"}
      ]
    }

Snapshots are arbitrary JSON values; the engine treats them as opaque.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# --------------------------------------------------------------------------- #
# Operations
# --------------------------------------------------------------------------- #


class PushOp(BaseModel):
    """Commit ``snapshot`` as the new present state."""

    model_config = ConfigDict(frozen=True)

    op: Literal["push"] = "push"
    snapshot: Any = Field(description="Opaque JSON value of the new document state.")
    note: str | None = Field(default=None, description="Caption shown in Undo menus.")


class UndoOp(BaseModel):
    model_config = ConfigDict(frozen=True)

    op: Literal["undo"] = "undo"


class RedoOp(BaseModel):
    model_config = ConfigDict(frozen=True)

    op: Literal["redo"] = "redo"


class ClearOp(BaseModel):
    """Forget the undo and redo stacks, keeping the present state."""

    model_config = ConfigDict(frozen=True)

    op: Literal["clear"] = "clear"


HistoryOp = Annotated[PushOp | UndoOp | RedoOp | ClearOp, Field(discriminator="op")]


# --------------------------------------------------------------------------- #
# Script
# --------------------------------------------------------------------------- #


class HistoryScript(BaseModel):
    """
    A replayable sequence of history operations.

    Parameters
    ----------
    capacity:
        Undo depth of the manager; ``None`` uses the configured default.
    initial:
        Snapshot passed to ``initialize`` before the first operation.
    note:
        Optional caption of the initial snapshot.
    ops:
        Operations applied in order.
    """

    capacity: int | None = Field(default=None, gt=0, description="Undo depth override.")
    initial: Any = Field(description="Snapshot the history is initialized with.")
    note: str | None = Field(default=None, description="Caption of the initial snapshot.")
    ops: list[HistoryOp] = Field(default_factory=list, description="Operations, in order.")


__all__ = ["ClearOp", "HistoryOp", "HistoryScript", "PushOp", "RedoOp", "UndoOp"]
