"""로깅/설정 테스트"""

import logging

from pmapi.config import Settings, settings
from pmapi.core.logging import get_logger, setup_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("ITEM_DEFAULT_NAME", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.ITEM_DEFAULT_NAME == "????"
    assert s.LOG_LEVEL == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ITEM_DEFAULT_NAME", "Unknown")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings()
    assert s.ITEM_DEFAULT_NAME == "Unknown"
    assert s.LOG_LEVEL == "DEBUG"


def test_get_logger_namespaced():
    logger = get_logger("pmapi.core.item.effective")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "pmapi.core.item.effective"


def test_setup_logging_accepts_level_names(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    setup_logging("debug")
    setup_logging()
    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == getattr(logging, settings.LOG_LEVEL.upper())


def test_package_version():
    import pmapi

    assert pmapi.__version__ == "0.1.0a0"
