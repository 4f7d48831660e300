"""Internal constants for Chronos.

These constants define the defaults and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

from pathlib import Path

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Timestamps must resolve to a UTC year strictly after this one
MIN_TIMESTAMP_YEAR: int = 1970

# Zone used when neither the caller nor the settings name one
FALLBACK_TIMEZONE: str = "UTC"

# Languages shipped in chronos/lang
DEFAULT_LANGUAGE: str = "en"
ALLOWED_LANGUAGES: tuple[str, ...] = ("az", "en", "tr")
LANG_DIR: Path = Path(__file__).resolve().parent.parent / "lang"

# Fixed formats used by the accessors
DATE_FORMAT: str = "%Y-%m-%d"
TIME_FORMAT: str = "%H:%M:%S"
SHORT_TIME_FORMAT: str = "%H:%M"

# Directives understood by datetime.strftime and datetime.strptime on every
# platform. Platform-specific extensions (%-d, %e, ...) are rejected.
SUPPORTED_DIRECTIVES: frozenset[str] = frozenset(
    {
        "%a", "%A", "%w", "%d", "%b", "%B", "%m", "%y", "%Y",
        "%H", "%I", "%p", "%M", "%S", "%f", "%z", "%Z", "%j",
        "%U", "%W", "%c", "%x", "%X", "%G", "%u", "%V", "%%",
    }
)

# Placeholder substituted with the joined unit phrases in adverb templates
TIME_PLACEHOLDER: str = "#time#"


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_TIMESTAMP_YEAR",
    "FALLBACK_TIMEZONE",
    "DEFAULT_LANGUAGE",
    "ALLOWED_LANGUAGES",
    "LANG_DIR",
    "DATE_FORMAT",
    "TIME_FORMAT",
    "SHORT_TIME_FORMAT",
    "SUPPORTED_DIRECTIVES",
    "TIME_PLACEHOLDER",
]
