"""Tests for configuration defaults, env overrides and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from numerus.core.config import AppSettings, ParserConfig, configure_logging
from numerus.core.exceptions import ConfigurationError
from numerus.parser.validator import parse_roman_numerals


def test_default_settings():
    settings = AppSettings()
    assert settings.log_level == "INFO"
    assert settings.parser.max_run_length == 4


def test_parser_config_env_override(monkeypatch):
    monkeypatch.setenv("NUMERUS_PARSER_MAX_RUN_LENGTH", "3")
    assert ParserConfig().max_run_length == 3


def test_parser_config_rejects_zero_run_length():
    with pytest.raises(ValidationError):
        ParserConfig(max_run_length=0)


def test_parser_config_caps_run_length_at_four():
    with pytest.raises(ValidationError):
        ParserConfig(max_run_length=5)


def test_env_cannot_raise_repeat_ceiling(monkeypatch):
    monkeypatch.setenv("NUMERUS_PARSER_MAX_RUN_LENGTH", "5")
    with pytest.raises(ValidationError):
        parse_roman_numerals("IIIII")


class TestConfigureLogging:
    def test_applies_level_to_package_logger(self):
        logger = configure_logging(AppSettings(log_level="debug"))
        assert logger.name == "numerus"
        assert logger.level == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ConfigurationError):
            configure_logging(AppSettings(log_level="LOUD"))
