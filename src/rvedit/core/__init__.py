"""Core package initializer for rvedit.

Downstream code imports from the submodules directly:
    from rvedit.core.settings import settings, load_settings, Settings, get_logger
    from rvedit.core.history import HistoryManager
"""

from __future__ import annotations

__all__ = ["__doc__"]
