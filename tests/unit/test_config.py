import logging

import pytest

from tea_api.core.config import Settings
from tea_api.core.logging_config import setup_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings()
    assert settings.port == 3000
    assert settings.app_name == "Tea API"


def test_rate_limit_string(test_settings: Settings) -> None:
    assert test_settings.default_rate_limit == "20 per 60 seconds"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.port == 8080
    assert settings.log_level == "debug"


def test_setup_logging_adds_handler_once(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.Logger("root-under-test", level=logging.WARNING)
    monkeypatch.setattr(logging, "getLogger", lambda name=None: root)

    setup_logging("info")
    setup_logging("info")
    assert root.level == logging.INFO
    assert len(root.handlers) == 1


def test_setup_logging_applies_level_to_configured_root(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.Logger("root-under-test", level=logging.WARNING)
    existing = logging.NullHandler()
    root.addHandler(existing)
    monkeypatch.setattr(logging, "getLogger", lambda name=None: root)

    setup_logging("debug")

    assert root.level == logging.DEBUG
    assert root.handlers == [existing]
