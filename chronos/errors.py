"""Chronos exception hierarchy.

All Chronos-specific exceptions inherit from ChronosError.
"""

from __future__ import annotations


class ChronosError(Exception):
    """Base exception for all Chronos errors."""

    pass


class InvalidFormatError(ChronosError):
    """Format string is empty or uses an unsupported directive.

    Examples:
        - Empty format string
        - Unknown directive such as ``%Q``
        - Trailing lone ``%``
    """

    pass


class InvalidTimezoneError(ChronosError):
    """Timezone identifier is not in the IANA timezone database.

    Examples:
        - "Not/AZone"
        - Empty string
    """

    pass


class InvalidTimestampError(ChronosError):
    """Value is not a usable Unix timestamp.

    Raised for negative values, non-integers and values that resolve to
    a year at or before 1970 in UTC.
    """

    pass


class ParseError(ChronosError):
    """Failed to parse a string against a format.

    Raised when the string does not match the format, or when formatting
    the parsed value again does not reproduce the input.
    """

    pass


class InvalidDepthError(ChronosError, ValueError):
    """Relative-time depth is negative."""

    pass


class NoFormatConfiguredError(ChronosError):
    """No format was given and no default format is configured."""

    pass


class UnknownLanguageError(ChronosError):
    """Language code is not allowed or has no phrase table."""

    pass


class MissingKeyError(ChronosError, KeyError):
    """Phrase key has no template in the resolved language table."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


__all__ = [
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
