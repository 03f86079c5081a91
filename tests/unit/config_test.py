"""Unit tests for environment configuration."""

import pytest

from garage_query.config import get_cheap_threshold, get_inventory_path, get_log_level


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GARAGE_INVENTORY", raising=False)
    monkeypatch.delenv("GARAGE_CHEAP_THRESHOLD", raising=False)
    monkeypatch.delenv("GARAGE_LOG_LEVEL", raising=False)
    assert get_inventory_path() == "inventory.json"
    assert get_cheap_threshold() == 20_000
    assert get_log_level() == "WARNING"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GARAGE_INVENTORY", "/data/garage.json")
    monkeypatch.setenv("GARAGE_CHEAP_THRESHOLD", "15000")
    monkeypatch.setenv("GARAGE_LOG_LEVEL", "debug")
    assert get_inventory_path() == "/data/garage.json"
    assert get_cheap_threshold() == 15_000
    assert get_log_level() == "DEBUG"


def test_invalid_threshold(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GARAGE_CHEAP_THRESHOLD", "cheap")
    with pytest.raises(ValueError, match="GARAGE_CHEAP_THRESHOLD"):
        get_cheap_threshold()
