"""
History status contract.

:class:`HistoryStatus` is the read-only projection of a manager that the menu
and toolbar layer consumes to enable or disable Undo/Redo controls. It is a
value: taking a status never exposes or locks the underlying stacks.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HistoryStatus(BaseModel):
    """Counters and flags of a history manager at one moment.

    Parameters
    ----------
    initialized:
        Whether ``initialize`` has been called on the manager.
    can_undo / can_redo:
        Whether the past / future stack holds at least one entry.
    undo_count / redo_count:
        Number of entries in the past / future stack.
    capacity:
        Maximum depth of the past stack.
    """

    model_config = ConfigDict(frozen=True)

    initialized: bool = Field(description="True once initialize() has been called.")
    can_undo: bool = Field(description="Undo control should be enabled.")
    can_redo: bool = Field(description="Redo control should be enabled.")
    undo_count: int = Field(ge=0, description="Entries in the past stack.")
    redo_count: int = Field(ge=0, description="Entries in the future stack.")
    capacity: int = Field(gt=0, description="Maximum entries retained in the past stack.")

    @model_validator(mode="after")
    def _flags_match_counts(self) -> HistoryStatus:
        """Reject statuses whose flags disagree with their counters."""
        if self.can_undo != (self.undo_count > 0):
            raise ValueError("can_undo must equal undo_count > 0")
        if self.can_redo != (self.redo_count > 0):
            raise ValueError("can_redo must equal redo_count > 0")
        if self.undo_count > self.capacity:
            raise ValueError("undo_count cannot exceed capacity")
        return self
