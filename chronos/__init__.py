"""Chronos: timezone-aware date-times with localized relative phrases.

Chronos wraps Python's ``datetime`` and ``zoneinfo`` in an immutable
Instant type with calendar arithmetic, strict strftime parsing and
human-readable rendering ("3 days ago", "tomorrow") in several
languages.

Core Types:
    Instant: Immutable, timezone-aware point in time
    Delta: Calendar breakdown of the difference between two instants

Units:
    TimeUnit: Calendar units (YEAR, MONTH, DAY, HOUR, MINUTE, SECOND)
    Day: Named weekdays
    Month: Named months

Configuration:
    ChronosSettings: Default format, timezone and languages
    configure: Install process-wide settings
    get_settings: Return the process-wide settings

Translation:
    Translator: Phrase lookup with ``#placeholder#`` substitution
    PhraseKey: Keys of the relative-time phrases
    initialize, translate: Process-wide translator helpers

Validators:
    is_timestamp, is_formattable, is_valid_format, is_valid_timezone

Exceptions:
    ChronosError: Base exception
    InvalidFormatError, InvalidTimezoneError, InvalidTimestampError,
    ParseError, InvalidDepthError, NoFormatConfiguredError,
    UnknownLanguageError, MissingKeyError

Example:
    >>> from chronos import Instant
    >>> base = Instant.from_format("2024-03-15 12:00:00", "%Y-%m-%d %H:%M:%S")
    >>> base.sub_years(1).sub_months(2).pretty_diff(depth=2, other=base)
    '1 year 2 months ago'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from chronos.core.delta import Delta
from chronos.core.instant import Instant

# Units
from chronos.units.day import Day
from chronos.units.month import Month
from chronos.units.timeunit import TimeUnit

# Configuration
from chronos.config import ChronosSettings, configure, get_settings, reset_settings

# Relative-time rendering
from chronos.format.relative import pretty_diff

# Translation
from chronos.i18n import PhraseKey, Translator, initialize, translate

# Validators
from chronos.validators import (
    is_formattable,
    is_timestamp,
    is_valid_format,
    is_valid_timezone,
)

# Exceptions
from chronos.errors import (
    ChronosError,
    InvalidDepthError,
    InvalidFormatError,
    InvalidTimestampError,
    InvalidTimezoneError,
    MissingKeyError,
    NoFormatConfiguredError,
    ParseError,
    UnknownLanguageError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Delta",
    "Instant",
    # Units
    "Day",
    "Month",
    "TimeUnit",
    # Configuration
    "ChronosSettings",
    "configure",
    "get_settings",
    "reset_settings",
    # Relative-time rendering
    "pretty_diff",
    # Translation
    "PhraseKey",
    "Translator",
    "initialize",
    "translate",
    # Validators
    "is_timestamp",
    "is_formattable",
    "is_valid_format",
    "is_valid_timezone",
    # Exceptions
    "ChronosError",
    "InvalidFormatError",
    "InvalidTimezoneError",
    "InvalidTimestampError",
    "ParseError",
    "InvalidDepthError",
    "NoFormatConfiguredError",
    "UnknownLanguageError",
    "MissingKeyError",
]
