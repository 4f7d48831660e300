"""strftime-style formatting and parsing.

This module validates format strings and performs strict formatting and
parsing through :meth:`datetime.datetime.strftime` and
:meth:`datetime.datetime.strptime`.

Supported Directives:
    %a %A %w %u - Weekday (abbreviated, full, 0-6 Sunday first, 1-7 Monday first)
    %d          - 2-digit day (01-31)
    %b %B %m    - Month (abbreviated, full, 2-digit)
    %y %Y %G    - Year (2-digit, 4-digit, ISO 8601)
    %H %I %p    - Hour (24-hour, 12-hour, AM/PM)
    %M %S %f    - Minute, second, microsecond
    %z %Z       - UTC offset (+0300), zone abbreviation
    %j %U %W %V - Day of year, week numbers
    %c %x %X    - Locale date/time representations
    %%          - Literal %

Platform extensions such as %-d or %e are rejected so that a format
behaves the same everywhere.

Functions:
    iter_directives: Yield the %-directives of a format string.
    validate_format: Raise InvalidFormatError for unusable formats.
    strftime: Format a datetime.
    strptime: Parse a string, requiring an exact round trip.

Examples:
    >>> from datetime import datetime
    >>> strftime(datetime(2024, 1, 15, 14, 30, 45), "%Y-%m-%d %H:%M:%S")
    '2024-01-15 14:30:45'

    >>> strptime("2024-01-15", "%Y-%m-%d")
    datetime.datetime(2024, 1, 15, 0, 0)
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Iterator

from chronos._internal.constants import SUPPORTED_DIRECTIVES
from chronos.errors import InvalidFormatError, ParseError
from chronos.logging import get_module_logger

logger = get_module_logger()


def iter_directives(fmt: str) -> Iterator[str]:
    """Yield every two-character %-directive in a format string.

    Args:
        fmt: Format string.

    Yields:
        Directives such as "%Y" in order of appearance. A trailing lone
        "%" is yielded as-is.
    """
    i = 0
    while i < len(fmt):
        if fmt[i] == "%":
            yield fmt[i : i + 2]
            i += 2
        else:
            i += 1


def validate_format(fmt: str | None) -> str:
    """Check that a format string is usable.

    Args:
        fmt: Format string to check.

    Returns:
        The format string unchanged.

    Raises:
        InvalidFormatError: If the format is empty, not a string, or uses an
            unsupported directive.
    """
    if not isinstance(fmt, str) or not fmt:
        raise InvalidFormatError(f"{fmt!r} is not a valid format")

    for directive in iter_directives(fmt):
        if directive not in SUPPORTED_DIRECTIVES:
            raise InvalidFormatError(
                f"{fmt!r} is not a valid format: unsupported directive {directive!r}"
            )
    return fmt


def strftime(value: datetime, fmt: str) -> str:
    """Format a datetime using a validated strftime format.

    Args:
        value: The datetime to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        InvalidFormatError: If the format is not valid.
    """
    return value.strftime(validate_format(fmt))


def strptime(text: str, fmt: str, tz: tzinfo | None = None) -> datetime:
    """Parse a string using a strftime format, requiring an exact match.

    The string must match the format completely, and formatting the
    parsed value with the same format must reproduce the string. This
    rejects inputs that strptime accepts loosely, such as "2024-1-5"
    against "%Y-%m-%d".

    Args:
        text: The string to parse.
        fmt: Format string with %-directives.
        tz: Zone attached to the result when the string carries no %z
            offset. An offset parsed from the string is kept as-is.

    Returns:
        The parsed datetime. Components missing from the format take the
        strptime defaults (1900-01-01 00:00:00).

    Raises:
        InvalidFormatError: If the format is not valid.
        ParseError: If the string does not match the format.
    """
    validate_format(fmt)
    if not isinstance(text, str):
        raise ParseError(f"expected str, got {type(text).__name__}")

    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError as e:
        logger.debug("strptime_failed", text=text, format=fmt, error=str(e))
        raise ParseError(f"string {text!r} does not match format {fmt!r}") from e

    if parsed.strftime(fmt) != text:
        logger.debug("strptime_round_trip_failed", text=text, format=fmt)
        raise ParseError(f"string {text!r} does not round-trip through format {fmt!r}")

    if parsed.tzinfo is None and tz is not None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


__all__ = ["iter_directives", "validate_format", "strftime", "strptime"]
