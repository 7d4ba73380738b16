"""Shared fixtures for the rvedit test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from rvedit.core.settings import load_settings


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Rebuild cached settings after each test so env overrides do not leak."""
    yield
    load_settings.cache_clear()
