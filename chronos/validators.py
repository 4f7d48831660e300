"""Validation predicates for Chronos inputs.

Every function in this module is side-effect free, takes a candidate
value and returns a bool. None of them raise.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from chronos._internal.constants import MIN_TIMESTAMP_YEAR
from chronos.errors import InvalidFormatError, ParseError
from chronos.format.strftime import strptime, validate_format
from chronos.units.timezone import list_identifiers


def is_timestamp(value: Any) -> bool:
    """Check whether a value is a usable Unix timestamp.

    Integers and all-digit strings are accepted when they are
    non-negative, representable, and fall in a UTC year after 1970.

    Args:
        value: Candidate timestamp.

    Returns:
        True if the value can be turned into an Instant.

    Examples:
        >>> is_timestamp(1705329000)
        True
        >>> is_timestamp("1705329000")
        True
        >>> is_timestamp(-1)
        False
        >>> is_timestamp(3600)  # still 1970
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            return False
        try:
            value = int(value)
        except ValueError:
            # beyond the interpreter's int string conversion limit
            return False
    if not isinstance(value, int) or value < 0:
        return False
    try:
        year = datetime.fromtimestamp(value, tz=timezone.utc).year
    except (OverflowError, OSError, ValueError):
        return False
    return year > MIN_TIMESTAMP_YEAR


def is_valid_format(fmt: Any) -> bool:
    """Check whether a format string can be used for formatting and parsing.

    Examples:
        >>> is_valid_format("%Y-%m-%d %H:%M:%S")
        True
        >>> is_valid_format("")
        False
        >>> is_valid_format("%Q")
        False
    """
    try:
        validate_format(fmt)
    except InvalidFormatError:
        return False
    return True


def is_formattable(value: Any, fmt: str | None = None) -> bool:
    """Check whether a string parses exactly against a format.

    Args:
        value: Candidate date-time string.
        fmt: Format string. Defaults to the configured default format.

    Returns:
        True if ``value`` matches ``fmt`` and round-trips through it.

    Examples:
        >>> is_formattable("2024-01-15", "%Y-%m-%d")
        True
        >>> is_formattable("2024-1-15", "%Y-%m-%d")
        False
    """
    if fmt is None:
        from chronos.config import get_settings

        fmt = get_settings().default_format
    if not isinstance(value, str) or not is_valid_format(fmt):
        return False
    try:
        strptime(value, fmt)
    except ParseError:
        return False
    return True


def is_valid_timezone(tz: Any) -> bool:
    """Check whether a string is a known IANA timezone identifier.

    Examples:
        >>> is_valid_timezone("Europe/Istanbul")
        True
        >>> is_valid_timezone("Not/AZone")
        False
        >>> is_valid_timezone("")
        False
    """
    if not isinstance(tz, str) or not tz:
        return False
    return tz in list_identifiers()


__all__ = [
    "is_timestamp",
    "is_valid_format",
    "is_formattable",
    "is_valid_timezone",
]
