from __future__ import annotations

import pytest

from gigaint import from_str
from gigaint.config import DEFAULT_MEMO_MIN_BUCKETS, GigaintConfig, load_config

_VARS = ("GIGAINT_CHECK_INVARIANTS", "GIGAINT_MEMO_MIN_BUCKETS", "GIGAINT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


def test_defaults() -> None:
    assert load_config() == GigaintConfig()
    assert load_config().memo_min_buckets == DEFAULT_MEMO_MIN_BUCKETS == 8
    assert load_config().log_level == "WARNING"
    assert not load_config().check_invariants


@pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), (" ON ", True), ("0", False), ("off", False), ("maybe", False)])
def test_check_invariants(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("GIGAINT_CHECK_INVARIANTS", raw)
    assert load_config().check_invariants is expected


@pytest.mark.parametrize("raw, expected", [("32", 32), ("0", 1), ("-4", 1), ("lots", 8), ("", 8)])
def test_memo_min_buckets(monkeypatch, raw: str, expected: int) -> None:
    monkeypatch.setenv("GIGAINT_MEMO_MIN_BUCKETS", raw)
    assert load_config().memo_min_buckets == expected


@pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), ("INFO", "INFO"), ("loud", "WARNING")])
def test_log_level(monkeypatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("GIGAINT_LOG_LEVEL", raw)
    assert load_config().log_level == expected


def test_cached_until_cleared(monkeypatch) -> None:
    first = load_config()
    monkeypatch.setenv("GIGAINT_MEMO_MIN_BUCKETS", "64")
    assert load_config() is first
    load_config.cache_clear()
    assert load_config().memo_min_buckets == 64


def test_invariant_checks_leave_valid_results_alone(monkeypatch) -> None:
    monkeypatch.setenv("GIGAINT_CHECK_INVARIANTS", "true")
    n = from_str("-3222222222111111111000000000")
    assert str(n * n + n // 7) == str(int(n) * int(n) + int(n) // 7)
