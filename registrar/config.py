"""
Configuration for a college registry.
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigurationError

LOGGER_NAME = "registrar"


class CollegeConfig(BaseModel):
    """Settings a ``College`` is created with."""

    name: str = Field("college", min_length=1, max_length=200)
    default_course_active: bool = True
    default_student_active: bool = True
    log_level: str = "WARNING"

    @field_validator('log_level')
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


def load_config(config: Union[CollegeConfig, Dict[str, Any], None] = None) -> CollegeConfig:
    """Normalise ``config`` into a ``CollegeConfig``.

    Accepts an existing model, a plain dict of settings or None for defaults.
    """
    if isinstance(config, CollegeConfig):
        return config
    try:
        return CollegeConfig.model_validate(config or {})
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid college configuration: {e.error_count()} error(s)",
            error_code="invalid_config",
            details={'errors': e.errors(include_url=False)}
        ) from e


def configure_logging(config: Optional[CollegeConfig] = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    config = config or CollegeConfig()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    return logger
