import logging

import pytest
from pydantic import ValidationError

from config.logging_config import setup_logging
from config.settings import Settings, print_settings


def test_defaults():
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.verbose is False
    assert settings.input_encoding == "utf-8"
    assert settings.effective_log_level == logging.WARNING


def test_env_override(monkeypatch):
    monkeypatch.setenv("MAXFINDER_LOG_LEVEL", "debug")
    monkeypatch.setenv("MAXFINDER_INPUT_ENCODING", "latin-1")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.input_encoding == "latin-1"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_verbose_lowers_level_to_info():
    assert Settings(verbose=True).effective_log_level == logging.INFO
    assert Settings(verbose=True, log_level="DEBUG").effective_log_level == logging.DEBUG


def test_setup_logging_uses_settings():
    root = setup_logging(Settings(log_level="ERROR"))
    assert root.level == logging.ERROR
    assert len(root.handlers) == 1


def test_setup_logging_explicit_level_wins():
    root = setup_logging(Settings(verbose=True), level="debug")
    assert root.level == logging.DEBUG


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging(Settings(), level="chatty")


def test_print_settings_writes_to_stderr(capsys):
    print_settings(Settings())
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CURRENT SETTINGS" in captured.err
