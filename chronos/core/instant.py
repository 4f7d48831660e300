"""Instant class: an immutable, timezone-aware point in time.

This module provides the Instant class, which wraps one aware
:class:`datetime.datetime` and offers arithmetic, formatting,
comparison and localized rendering on top of it.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from chronos._internal.constants import DATE_FORMAT, SHORT_TIME_FORMAT, TIME_FORMAT
from chronos._internal.decorators import deprecated
from chronos.config import ChronosSettings, get_settings
from chronos.errors import InvalidTimestampError, NoFormatConfiguredError
from chronos.format.strftime import strftime, strptime, validate_format
from chronos.units.day import Day
from chronos.units.month import Month
from chronos.units.timeunit import TimeUnit
from chronos.units.timezone import get_zone, zone_name
from chronos.validators import is_timestamp

if TYPE_CHECKING:
    from chronos.arithmetic.comparisons import Comparable
    from chronos.core.delta import Delta


class Instant:
    """An immutable point in time bound to a timezone.

    Every Instant wraps an aware datetime. Operations that "modify" an
    Instant return a new one; the original is never changed. Equality,
    ordering and hashing follow the absolute moment, so the same moment
    seen from two zones compares equal.

    Each Instant keeps the settings it was built with. Those settings
    supply the default format, timezone and language for its methods.

    Attributes:
        datetime: The wrapped aware datetime.
        timezone: Zone identifier ("Europe/Istanbul", "UTC"...).
        year, month, day, hour, minute, second: Zero-padded strings.

    Examples:
        >>> i = Instant.from_format("2024-01-15 14:30:45", "%Y-%m-%d %H:%M:%S")
        >>> i.year, i.month, i.hour
        ('2024', '01', '14')

        >>> i.add_months(1).date()
        '2024-02-15'

        >>> i.to_timezone("Europe/Istanbul").time()
        '17:30:45'
    """

    __slots__ = ("_dt", "_settings")

    def __init__(
        self,
        value: _datetime.datetime | None = None,
        *,
        settings: ChronosSettings | None = None,
    ) -> None:
        """Create an Instant from a datetime.

        Args:
            value: The datetime to wrap. A naive value is taken as wall
                clock time in the configured default timezone. None
                means now.
            settings: Settings to use instead of the process-wide ones.

        Raises:
            TypeError: If value is not a datetime.
            InvalidTimezoneError: If the configured timezone is unknown.
        """
        settings = settings or get_settings()
        if value is None:
            value = _datetime.datetime.now(tz=get_zone(settings.timezone))
        if not isinstance(value, _datetime.datetime):
            raise TypeError(f"expected datetime, got {type(value).__name__}")
        if value.tzinfo is None:
            value = value.replace(tzinfo=get_zone(settings.timezone))

        self._dt: _datetime.datetime = value
        self._settings: ChronosSettings = settings

    def _replace_datetime(self, value: _datetime.datetime) -> Instant:
        """Return a new Instant wrapping ``value`` with the same settings."""
        instance = object.__new__(Instant)
        instance._dt = value
        instance._settings = self._settings
        return instance

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def now(
        cls,
        timezone: str | None = None,
        *,
        settings: ChronosSettings | None = None,
    ) -> Instant:
        """Return the current moment.

        Args:
            timezone: Zone identifier. Defaults to the configured timezone,
                then UTC.
            settings: Settings to use instead of the process-wide ones.

        Raises:
            InvalidTimezoneError: If the timezone is unknown.

        Examples:
            >>> Instant.now("Europe/Istanbul").timezone
            'Europe/Istanbul'
        """
        settings = settings or get_settings()
        zone = get_zone(timezone or settings.timezone)
        return cls(_datetime.datetime.now(tz=zone), settings=settings)

    @classmethod
    def from_format(
        cls,
        text: str,
        fmt: str | None = None,
        timezone: str | None = None,
        *,
        settings: ChronosSettings | None = None,
    ) -> Instant:
        """Parse a string against a strftime format.

        The string must match the format exactly: formatting the result
        with the same format reproduces the string. Components missing
        from the format default to 1900-01-01 00:00:00. An offset parsed
        with %z takes precedence over the timezone argument.

        Args:
            text: The string to parse.
            fmt: Format string. Defaults to the configured default format.
            timezone: Zone for the wall clock time in the string.
            settings: Settings to use instead of the process-wide ones.

        Returns:
            The parsed Instant.

        Raises:
            NoFormatConfiguredError: If no format is given or configured.
            InvalidFormatError: If the format is not valid.
            InvalidTimezoneError: If the timezone is unknown.
            ParseError: If the string does not match the format.

        Examples:
            >>> Instant.from_format("15/01/2024", "%d/%m/%Y").date()
            '2024-01-15'
            >>> Instant.from_format("2024-01-15 12:00 +0300", "%Y-%m-%d %H:%M %z").timestamp
            1705309200
        """
        settings = settings or get_settings()
        fmt = settings.default_format if fmt is None else fmt
        if fmt is None:
            raise NoFormatConfiguredError("no format given and no default format configured")
        validate_format(fmt)
        zone = get_zone(timezone or settings.timezone)
        return cls(strptime(text, fmt, zone), settings=settings)

    @classmethod
    def from_timestamp(
        cls,
        timestamp: int | str,
        timezone: str | None = None,
        *,
        settings: ChronosSettings | None = None,
    ) -> Instant:
        """Create an Instant from Unix epoch seconds.

        Args:
            timestamp: Seconds since the epoch, as an int or digit string.
            timezone: Zone to express the result in.
            settings: Settings to use instead of the process-wide ones.

        Raises:
            InvalidTimestampError: If the value is not a usable timestamp.
            InvalidTimezoneError: If the timezone is unknown.

        Examples:
            >>> Instant.from_timestamp(1705329000).format("%Y-%m-%d %H:%M")
            '2024-01-15 14:30'
        """
        if not is_timestamp(timestamp):
            raise InvalidTimestampError(f"{timestamp!r} is not a valid timestamp")
        settings = settings or get_settings()
        zone = get_zone(timezone or settings.timezone)
        return cls(_datetime.datetime.fromtimestamp(int(timestamp), tz=zone), settings=settings)

    @classmethod
    @deprecated("Instant.from_format")
    def create_from_format(
        cls,
        text: str,
        fmt: str | None = None,
        timezone: str | None = None,
    ) -> Instant:
        """Deprecated alias of :meth:`from_format`."""
        return cls.from_format(text, fmt, timezone)

    @classmethod
    @deprecated("Instant.from_timestamp")
    def create_from_timestamp(cls, timestamp: int | str, timezone: str | None = None) -> Instant:
        """Deprecated alias of :meth:`from_timestamp`."""
        return cls.from_timestamp(timestamp, timezone)

    @classmethod
    def yesterday(
        cls,
        timezone: str | None = None,
        *,
        settings: ChronosSettings | None = None,
    ) -> Instant:
        """Return the current moment one day ago."""
        return cls.now(timezone, settings=settings).sub_days(1)

    @classmethod
    def tomorrow(
        cls,
        timezone: str | None = None,
        *,
        settings: ChronosSettings | None = None,
    ) -> Instant:
        """Return the current moment one day ahead."""
        return cls.now(timezone, settings=settings).add_days(1)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def datetime(self) -> _datetime.datetime:
        """The wrapped aware datetime."""
        return self._dt

    @property
    def settings(self) -> ChronosSettings:
        """The settings this Instant was built with."""
        return self._settings

    @property
    def timezone(self) -> str:
        """Zone identifier, or the offset name for fixed-offset zones."""
        return zone_name(self._dt.tzinfo) or self._dt.tzname() or ""

    @property
    def timestamp(self) -> int:
        """Whole seconds since the Unix epoch."""
        return int(self._dt.timestamp())

    @property
    def weekday(self) -> int:
        """ISO weekday (Monday=1, Sunday=7)."""
        return self._dt.isoweekday()

    @property
    def second(self) -> str:
        """Two-digit second ("00"-"59")."""
        return self.format("%S")

    @property
    def minute(self) -> str:
        """Two-digit minute ("00"-"59")."""
        return self.format("%M")

    @property
    def hour(self) -> str:
        """Two-digit 24-hour clock hour ("00"-"23")."""
        return self.format("%H")

    @property
    def day(self) -> str:
        """Two-digit day of the month ("01"-"31")."""
        return self.format("%d")

    @property
    def month(self) -> str:
        """Two-digit month ("01"-"12")."""
        return self.format("%m")

    @property
    def year(self) -> str:
        """Four-digit year."""
        return self.format("%Y")

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, fmt: str | None = None) -> str:
        """Render with a strftime format.

        Args:
            fmt: Format string. Defaults to the configured default format.

        Raises:
            NoFormatConfiguredError: If no format is given or configured.
            InvalidFormatError: If the format is not valid.

        Examples:
            >>> Instant.from_format("2024-01-15", "%Y-%m-%d").format("%d.%m.%Y")
            '15.01.2024'
        """
        fmt = self._settings.default_format if fmt is None else fmt
        if fmt is None:
            raise NoFormatConfiguredError("no format given and no default format configured")
        return strftime(self._dt, fmt)

    def date(self, fmt: str = DATE_FORMAT) -> str:
        """Render the local date, "2024-01-15" by default."""
        return self.format(fmt)

    def time(self, include_seconds: bool = True) -> str:
        """Render the local time as "14:30:45", or "14:30" without seconds."""
        return self.format(TIME_FORMAT if include_seconds else SHORT_TIME_FORMAT)

    def day_name(self, lang: str | None = None) -> str:
        """Return the localized weekday name."""
        return Day.from_number(self.weekday).translate(lang)

    def month_name(self, lang: str | None = None) -> str:
        """Return the localized month name."""
        return Month.from_number(self._dt.month).translate(lang)

    def pretty_date(self, lang: str | None = None, include_year: bool = True) -> str:
        """Render the date in words, e.g. "15 January 2024".

        Word order follows the language table: Turkish gives
        "15 Ocak 2024".
        """
        month = Month.from_number(self._dt.month)
        return month.render(lang, day=self.day, year=self.year if include_year else "")

    def pretty_print(
        self,
        lang: str | None = None,
        include_year: bool = True,
        include_seconds: bool = True,
    ) -> str:
        """Render the date in words followed by the time.

        Examples:
            >>> Instant.from_format("2024-01-15 14:30:45", "%Y-%m-%d %H:%M:%S").pretty_print()
            '15 January 2024 14:30:45'
        """
        return f"{self.pretty_date(lang, include_year)} {self.time(include_seconds)}"

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_timezone(self, timezone: str) -> Instant:
        """Return the same moment expressed in another zone.

        Raises:
            InvalidTimezoneError: If the timezone is unknown.
        """
        return self._replace_datetime(self._dt.astimezone(get_zone(timezone)))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _shift(self, amount: int, unit: TimeUnit) -> Instant:
        from chronos.arithmetic.ops import add

        return add(self, amount, unit)

    def add_years(self, years: int = 1) -> Instant:
        """Add years, clamping the day to the end of a shorter month."""
        return self._shift(years, TimeUnit.YEAR)

    def add_months(self, months: int = 1) -> Instant:
        """Add months, clamping the day to the end of a shorter month.

        Examples:
            >>> Instant.from_format("2024-01-31", "%Y-%m-%d").add_months(1).date()
            '2024-02-29'
        """
        return self._shift(months, TimeUnit.MONTH)

    def add_days(self, days: int = 1) -> Instant:
        """Add calendar days, keeping the local time of day."""
        return self._shift(days, TimeUnit.DAY)

    def add_hours(self, hours: int = 1) -> Instant:
        """Add elapsed hours."""
        return self._shift(hours, TimeUnit.HOUR)

    def add_minutes(self, minutes: int = 1) -> Instant:
        """Add elapsed minutes."""
        return self._shift(minutes, TimeUnit.MINUTE)

    def add_seconds(self, seconds: int = 1) -> Instant:
        """Add elapsed seconds."""
        return self._shift(seconds, TimeUnit.SECOND)

    def _unshift(self, amount: int, unit: TimeUnit) -> Instant:
        from chronos.arithmetic.ops import subtract

        return subtract(self, amount, unit)

    def sub_years(self, years: int = 1) -> Instant:
        """Subtract years, clamping the day to the end of a shorter month."""
        return self._unshift(years, TimeUnit.YEAR)

    def sub_months(self, months: int = 1) -> Instant:
        """Subtract months, clamping the day to the end of a shorter month."""
        return self._unshift(months, TimeUnit.MONTH)

    def sub_days(self, days: int = 1) -> Instant:
        """Subtract calendar days, keeping the local time of day."""
        return self._unshift(days, TimeUnit.DAY)

    def sub_hours(self, hours: int = 1) -> Instant:
        """Subtract elapsed hours."""
        return self._unshift(hours, TimeUnit.HOUR)

    def sub_minutes(self, minutes: int = 1) -> Instant:
        """Subtract elapsed minutes."""
        return self._unshift(minutes, TimeUnit.MINUTE)

    def sub_seconds(self, seconds: int = 1) -> Instant:
        """Subtract elapsed seconds."""
        return self._unshift(seconds, TimeUnit.SECOND)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def diff(self, other: Comparable) -> Delta:
        """Return the calendar difference to another Instant or aware datetime.

        ``inverted`` on the result is True when this Instant is after
        ``other``.

        Raises:
            TypeError: If other is not an Instant or aware datetime.
        """
        from chronos.arithmetic.comparisons import diff

        return diff(self, other)

    def diff_from_format(
        self,
        text: str,
        fmt: str | None = None,
        timezone: str | None = None,
    ) -> Delta:
        """Parse a string with :meth:`from_format` and diff against it."""
        other = Instant.from_format(text, fmt, timezone, settings=self._settings)
        return self.diff(other)

    def day_diff(self, other: Comparable) -> int:
        """Return the whole number of days to another instant."""
        from chronos.arithmetic.comparisons import day_diff

        return day_diff(self, other)

    def is_past(self, other: Comparable | None = None) -> bool:
        """Check if this Instant is before ``other`` (default: now)."""
        from chronos.arithmetic.comparisons import is_past

        return is_past(self, other)

    def is_future(self, other: Comparable | None = None) -> bool:
        """Check if this Instant is after ``other`` (default: now)."""
        from chronos.arithmetic.comparisons import is_future

        return is_future(self, other)

    def is_same_day(self, other: Comparable) -> bool:
        """Check if ``other`` falls on the same local date."""
        from chronos.arithmetic.comparisons import is_same_day

        return is_same_day(self, other)

    def is_weekday(self) -> bool:
        """Check if this Instant falls on Monday through Friday."""
        from chronos.arithmetic.comparisons import is_weekday

        return is_weekday(self)

    def is_weekend(self) -> bool:
        """Check if this Instant falls on Saturday or Sunday."""
        from chronos.arithmetic.comparisons import is_weekend

        return is_weekend(self)

    def age(self, other: Comparable | None = None) -> int:
        """Return the whole years elapsed since this Instant, 0 if in the future."""
        from chronos.arithmetic.comparisons import age

        return age(self, other)

    def pretty_diff(
        self,
        lang: str | None = "en",
        depth: int = 0,
        other: Comparable | None = None,
    ) -> str:
        """Describe this Instant relative to ``other`` (default: now).

        Examples:
            >>> base = Instant.from_format("2024-03-15", "%Y-%m-%d")
            >>> base.sub_days(3).pretty_diff(other=base)
            '3 days ago'
            >>> base.add_days(1).pretty_diff("tr", other=base)
            'yarın'

        Raises:
            InvalidDepthError: If depth is negative.
            UnknownLanguageError: If the language is not allowed.
        """
        from chronos.format.relative import pretty_diff

        return pretty_diff(self, lang, depth, other)

    # -------------------------------------------------------------------------
    # Dunder methods
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Two Instants are equal if they represent the same moment."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt < other._dt

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt <= other._dt

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt > other._dt

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt >= other._dt

    def __hash__(self) -> int:
        """Hash by absolute moment, consistent with equality."""
        return hash(self._dt)

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        return f"Instant({self._dt.isoformat()!r}, timezone={self.timezone!r})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self._dt.isoformat()


__all__ = ["Instant"]
