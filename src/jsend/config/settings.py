# src/jsend/config/settings.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""JSend Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for rendering and logging. Only the
    renderer and the logging bootstrap read it; envelope construction is
    configuration-free.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown keys.
    - Every field reads an explicit ``JSEND_*`` environment variable.
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVEL_NAMES = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


class Settings(BaseSettings):
    """Typed configuration for JSend rendering and logging."""

    log_level: str = Field(
        default="INFO",
        description="Root log level used by configure_root_logging() (e.g., 'DEBUG').",
        validation_alias="JSEND_LOG_LEVEL",
    )

    json_indent: int | None = Field(
        default=None,
        ge=0,
        description="Indentation for render_json(). None renders compact JSON.",
        validation_alias="JSEND_JSON_INDENT",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        """Upper-case the level name and reject unknown names.

        Raises:
            ValueError: If the value is not a standard logging level name.
        """
        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        if level not in _LOG_LEVEL_NAMES:
            raise ValueError(f"unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid JSend configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
    logger.debug(
        "Settings initialized",
        extra={
            "log_level": settings.log_level,
            "json_indent": settings.json_indent,
        },
    )
    return settings
