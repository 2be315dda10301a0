"""Tests for environment-driven settings and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from stackicons.config.settings import DEFAULT_ASSET_BASE_URL, get_settings
from stackicons.monitoring.logging import configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("ICON_ASSET_BASE_URL", "ICON_CATALOG_PATH", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.asset_base_url == DEFAULT_ASSET_BASE_URL
    assert settings.catalog_path == ""
    assert settings.environment == "dev"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ICON_ASSET_BASE_URL", "https://mirror.test/icons/")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")

    settings = get_settings()

    assert settings.asset_base_url == "https://mirror.test/icons"
    assert settings.request_timeout == 2.5


def test_env_file_does_not_override_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# local overrides\nICON_CATALOG_PATH=/data/icons.json\nLOG_LEVEL=DEBUG\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    # .env loading writes to os.environ directly; register the key so teardown removes it
    monkeypatch.setenv("ICON_CATALOG_PATH", "")
    monkeypatch.delenv("ICON_CATALOG_PATH")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    settings = get_settings()

    assert settings.catalog_path == "/data/icons.json"
    assert settings.log_level == "WARNING"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_logging_quiets_httpx(mocker) -> None:
    basic_config = mocker.patch("stackicons.monitoring.logging.logging.basicConfig")

    configure_logging("debug")

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
