"""Unit tests for the Result utilities used by script loading."""

from __future__ import annotations

import pytest

from rvedit.core.result import Err, Ok, Result, err, ok


def _parse_capacity(raw: str) -> Result[int, str]:
    return ok(int(raw)) if raw.isdigit() and int(raw) > 0 else err(f"bad capacity {raw!r}")


def test_ok_map_and_flat_map() -> None:
    r: Result[str, str] = ok("4")
    out = r.flat_map(_parse_capacity).map(lambda c: c * 2)
    assert out.is_ok() and out.unwrap() == 8
    assert isinstance(out, Ok)


def test_err_short_circuits_map_and_flat_map() -> None:
    r = _parse_capacity("0")
    assert r.is_err()
    assert r.map(lambda c: c + 1).is_err()
    assert r.flat_map(lambda c: ok(c)).unwrap_err() == "bad capacity '0'"


def test_map_err_transforms_only_errors() -> None:
    failed: Result[int, str] = err("boom")
    mapped = failed.map_err(lambda e: f"{e}!")
    assert isinstance(mapped, Err) and mapped.unwrap_err() == "boom!"
    assert ok(1).map_err(lambda e: f"{e}!").unwrap() == 1


def test_get_or_and_expect() -> None:
    assert _parse_capacity("x").get_or(100) == 100
    assert _parse_capacity("3").get_or(100) == 3
    assert ok("v").expect("should not fail") == "v"
    with pytest.raises(RuntimeError, match="no capacity"):
        err("e").expect("no capacity")


def test_unwrap_on_wrong_variant_raises() -> None:
    with pytest.raises(RuntimeError):
        err("e").unwrap()
    with pytest.raises(RuntimeError):
        ok(1).unwrap_err()


def test_or_else_recovers_only_from_errors() -> None:
    """`or_else` calls the fallback on Err and leaves Ok untouched."""
    calls: list[str] = []

    def default_capacity(error: str) -> Result[int, str]:
        calls.append(error)
        return ok(100)

    recovered = _parse_capacity("-").or_else(default_capacity)
    assert recovered.is_ok() and recovered.unwrap() == 100
    assert calls == ["bad capacity '-'"]

    kept = _parse_capacity("7").or_else(default_capacity)
    assert kept.unwrap() == 7
    assert calls == ["bad capacity '-'"]
