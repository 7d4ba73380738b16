"""
Smoke tests for package structure and availability.

These tests strictly verify that the package is installed correctly in the
environment and that top-level modules are importable.
"""

from __future__ import annotations

import importlib

from rvedit import __version__


def test_package_importable() -> None:
    mod = importlib.import_module("rvedit")
    assert mod is not None


def test_version_is_set() -> None:
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_history_package_exports() -> None:
    history = importlib.import_module("rvedit.core.history")
    for name in ("HistoryManager", "LockedHistoryManager", "HistoryRegistry", "HistoryEntry"):
        assert hasattr(history, name), f"rvedit.core.history must export {name}"


def test_cli_module_exposes_app() -> None:
    """`rvedit.cli:app` is the console-script entry point in pyproject.toml."""
    cli = importlib.import_module("rvedit.cli")
    assert hasattr(cli, "app"), "rvedit.cli must expose an 'app' Typer object."
