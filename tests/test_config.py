import importlib
import logging

import pytest
from pydantic import ValidationError
from genfp.config import DEFAULT_LOG_FORMAT, Settings, load_settings


def test_defaults():
    settings = Settings.load(environ={})
    assert settings.log_level == "INFO"
    assert settings.log_format == DEFAULT_LOG_FORMAT


def test_package_level_env_is_normalized():
    settings = Settings.load(environ={"GENFP_LOG_LEVEL": " debug "})
    assert settings.log_level == "DEBUG"


def test_generic_log_level_is_ignored():
    assert Settings.load(environ={"LOG_LEVEL": "trace"}).log_level == "INFO"
    assert Settings.load(environ={"LOG_LEVEL": "ERROR"}).log_level == "INFO"


def test_custom_format():
    settings = Settings.load(environ={"GENFP_LOG_FORMAT": "%(message)s"})
    assert settings.log_format == "%(message)s"


def test_numeric_level_is_resolved():
    assert Settings(log_level=40).log_level == "ERROR"


def test_invalid_level_rejected():
    with pytest.raises(ValidationError):
        Settings.load(environ={"GENFP_LOG_LEVEL": "LOUD"})


def test_load_settings_falls_back_to_defaults(caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger("genfp"), "propagate", True)
    with caplog.at_level(logging.WARNING, logger="genfp.config"):
        settings = load_settings(environ={"GENFP_LOG_LEVEL": "verbose"})
    assert settings == Settings()
    assert any(
        record.name == "genfp.config" and record.levelno == logging.WARNING
        for record in caplog.records
    )


def test_import_survives_foreign_and_invalid_log_levels(monkeypatch):
    import genfp
    import genfp.config

    monkeypatch.setenv("LOG_LEVEL", "trace")
    monkeypatch.setenv("GENFP_LOG_LEVEL", "warn")
    try:
        reloaded = importlib.reload(genfp.config)
        assert reloaded.settings.log_level == "INFO"
        assert importlib.reload(genfp).contains([1, 2, 3], 2)
    finally:
        monkeypatch.undo()
        importlib.reload(genfp.config)
