"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings

from numerus.core.exceptions import ConfigurationError


class ParserConfig(BaseSettings):
    """Roman numeral parser configuration."""

    model_config = {"env_prefix": "NUMERUS_PARSER_"}

    max_run_length: int = Field(default=4, ge=1, le=4)  # "IIII" is accepted, "IIIII" never is


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "NUMERUS_"}

    log_level: str = "INFO"

    parser: ParserConfig = ParserConfig()


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Apply ``settings.log_level`` to the ``numerus`` logger namespace."""
    if settings is None:
        settings = AppSettings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.log_level!r}")

    logger = logging.getLogger("numerus")
    logger.setLevel(level)
    return logger
