"""Chronos configuration settings.

Settings are read from ``CHRONOS_*`` environment variables (and an
optional ``.env`` file) the first time they are needed. Applications
that prefer explicit configuration call :func:`configure` once at
startup; every Instant factory also accepts a ``settings=`` argument
so callers can pass their own instance instead of the process-wide one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chronos._internal.constants import (
    ALLOWED_LANGUAGES,
    DEFAULT_LANGUAGE,
    FALLBACK_TIMEZONE,
    LANG_DIR,
)
from chronos.errors import InvalidFormatError, InvalidTimezoneError, UnknownLanguageError
from chronos.i18n.translator import reset_translator
from chronos.logging import configure_logging, get_module_logger
from chronos.validators import is_valid_format, is_valid_timezone

logger = get_module_logger()


class ChronosSettings(BaseSettings):
    """Process-wide defaults for formatting, timezones and languages."""

    default_format: str | None = None
    default_timezone: str | None = None
    language: str | None = None
    default_language: str = DEFAULT_LANGUAGE
    allowed_languages: list[str] = Field(default_factory=lambda: list(ALLOWED_LANGUAGES))
    lang_dir: Path = LANG_DIR
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="CHRONOS_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("default_format")
    @classmethod
    def _check_format(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_format(value):
            raise ValueError(f"{value!r} is not a valid format")
        return value

    @field_validator("default_timezone")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_timezone(value):
            raise ValueError(f"{value!r} is not a valid timezone")
        return value

    @field_validator("allowed_languages")
    @classmethod
    def _check_allowed(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("allowed_languages cannot be empty")
        return value

    @model_validator(mode="after")
    def _check_languages(self) -> ChronosSettings:
        if self.default_language not in self.allowed_languages:
            raise ValueError(
                f"default_language {self.default_language!r} is not in allowed_languages"
            )
        if self.language is not None and self.language not in self.allowed_languages:
            raise ValueError(f"language {self.language!r} is not in allowed_languages")
        return self

    @property
    def timezone(self) -> str:
        """The default timezone, falling back to UTC."""
        return self.default_timezone or FALLBACK_TIMEZONE

    @property
    def current_language(self) -> str:
        """The current language, falling back to the default language."""
        return self.language or self.default_language


_settings: ChronosSettings | None = None


def get_settings() -> ChronosSettings:
    """Return the process-wide settings, building them from the environment.

    The settings' log level is applied when they are first built.
    """
    global _settings
    if _settings is None:
        _settings = ChronosSettings()
        configure_logging(_settings.log_level)
    return _settings


def configure(**overrides: Any) -> ChronosSettings:
    """Validate and install new process-wide settings.

    Values not given are kept from the current settings. The new log
    level is applied, and the process-wide translator is dropped so that
    it picks up the new languages.

    Args:
        **overrides: ChronosSettings fields to replace.

    Returns:
        The installed settings.

    Raises:
        InvalidFormatError: If ``default_format`` is not a valid format.
        InvalidTimezoneError: If ``default_timezone`` is not a valid timezone.
        UnknownLanguageError: If a language is outside ``allowed_languages``.
    """
    global _settings

    fmt = overrides.get("default_format")
    if fmt is not None and not is_valid_format(fmt):
        raise InvalidFormatError(f"{fmt!r} is not a valid format")
    tz = overrides.get("default_timezone")
    if tz is not None and not is_valid_timezone(tz):
        raise InvalidTimezoneError(f"{tz!r} is not a valid timezone")

    values = get_settings().model_dump()
    values.update(overrides)

    allowed = values["allowed_languages"]
    for key in ("default_language", "language"):
        lang = values.get(key)
        if lang is not None and lang not in allowed:
            raise UnknownLanguageError(f"{key} {lang!r} is not in allowed languages {allowed}")

    _settings = ChronosSettings(**values)
    configure_logging(_settings.log_level)
    reset_translator()
    logger.info(
        "configured_settings",
        default_format=_settings.default_format,
        default_timezone=_settings.default_timezone,
        language=_settings.current_language,
    )
    return _settings


def reset_settings() -> None:
    """Drop the process-wide settings so they are rebuilt on next use."""
    global _settings
    _settings = None


__all__ = ["ChronosSettings", "get_settings", "configure", "reset_settings"]
