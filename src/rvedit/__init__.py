"""rvedit: bounded undo/redo history for the branching-narrative script editor.

Every editing surface (node graph, block tree, settings) keeps one
:class:`~rvedit.core.history.HistoryManager` per open document and delegates
its reversible-edit semantics to it.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
