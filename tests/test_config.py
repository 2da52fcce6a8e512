"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from rail_insights.adapters.config import AppConfig


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test from an empty directory so no local .env is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in ("RECONCILE_MODE", "LOG_LEVEL", "VALIDATE_RECORDS", "INDENT"):
        monkeypatch.delenv(f"RAIL_INSIGHTS_{name}", raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.reconcile_mode == "single"
    assert config.log_level == "INFO"
    assert config.validate_records is True
    assert config.indent == 2


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("RAIL_INSIGHTS_RECONCILE_MODE", "MULTI")
    monkeypatch.setenv("RAIL_INSIGHTS_LOG_LEVEL", "debug")
    monkeypatch.setenv("RAIL_INSIGHTS_VALIDATE_RECORDS", "false")
    monkeypatch.setenv("RAIL_INSIGHTS_INDENT", "4")

    config = AppConfig()

    assert config.reconcile_mode == "multi"
    assert config.log_level == "DEBUG"
    assert config.validate_records is False
    assert config.indent == 4


def test_config_loads_from_env_file(tmp_path: Path) -> None:
    """Given a .env file in the working directory, when loading config, then it is used."""
    (tmp_path / ".env").write_text("RAIL_INSIGHTS_RECONCILE_MODE=multi\n", encoding="utf-8")

    config = AppConfig()

    assert config.reconcile_mode == "multi"


def test_config_validates_reconcile_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given invalid reconcile mode, when loading config, then validation error is raised."""
    monkeypatch.setenv("RAIL_INSIGHTS_RECONCILE_MODE", "weekly")

    with pytest.raises(ValueError, match="reconcile_mode must be either"):
        AppConfig()


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given invalid log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("RAIL_INSIGHTS_LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="log_level must be a logging level name"):
        AppConfig()
