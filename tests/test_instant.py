"""Tests for the Instant class."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from chronos.config import ChronosSettings, configure
from chronos.core.instant import Instant
from chronos.errors import (
    InvalidFormatError,
    InvalidTimestampError,
    InvalidTimezoneError,
    NoFormatConfiguredError,
    ParseError,
)

FMT = "%Y-%m-%d %H:%M:%S"


class TestInstantConstruction:
    """Test the Instant constructor."""

    def test_wraps_aware_datetime(self) -> None:
        """An aware datetime is kept as-is."""
        dt = datetime(2024, 1, 15, 14, 30, 45, tzinfo=ZoneInfo("Europe/Istanbul"))
        instant = Instant(dt)
        assert instant.datetime is dt
        assert instant.timezone == "Europe/Istanbul"

    def test_naive_datetime_uses_default_timezone(self) -> None:
        """A naive datetime is read in the configured timezone."""
        configure(default_timezone="Asia/Baku")
        instant = Instant(datetime(2024, 1, 15, 12, 0))
        assert instant.timezone == "Asia/Baku"
        assert instant.hour == "12"

    def test_naive_datetime_defaults_to_utc(self) -> None:
        """Without a configured timezone naive values are UTC."""
        assert Instant(datetime(2024, 1, 15)).timezone == "UTC"

    def test_none_means_now(self) -> None:
        """Instant() is the current moment."""
        before = datetime.now(tz=timezone.utc)
        instant = Instant()
        after = datetime.now(tz=timezone.utc)
        assert before <= instant.datetime <= after

    def test_rejects_non_datetime(self) -> None:
        """Only datetimes can be wrapped."""
        with pytest.raises(TypeError):
            Instant("2024-01-15")  # type: ignore[arg-type]

    def test_explicit_settings(self) -> None:
        """An Instant keeps the settings it was given."""
        settings = ChronosSettings(default_format="%d/%m/%Y", default_timezone="Asia/Baku")
        instant = Instant(datetime(2024, 1, 15), settings=settings)
        assert instant.settings is settings
        assert instant.timezone == "Asia/Baku"
        assert instant.format() == "15/01/2024"


class TestInstantNow:
    """Test Instant.now, yesterday and tomorrow."""

    def test_now_in_timezone(self) -> None:
        """now() accepts a zone identifier."""
        assert Instant.now("Europe/Istanbul").timezone == "Europe/Istanbul"

    def test_now_defaults_to_utc(self) -> None:
        """now() falls back to UTC."""
        assert Instant.now().timezone == "UTC"

    def test_now_uses_configured_timezone(self) -> None:
        """now() uses the configured default timezone."""
        configure(default_timezone="America/New_York")
        assert Instant.now().timezone == "America/New_York"

    def test_now_invalid_timezone(self) -> None:
        """An unknown zone raises InvalidTimezoneError."""
        with pytest.raises(InvalidTimezoneError):
            Instant.now("Not/AZone")

    def test_now_is_not_cached(self) -> None:
        """Every call returns a fresh moment."""
        first = Instant.now()
        second = Instant.now()
        assert second >= first
        assert second is not first

    def test_yesterday_and_tomorrow(self) -> None:
        """yesterday() and tomorrow() lie one day either side of now."""
        now = Instant.now()
        assert Instant.yesterday() < now < Instant.tomorrow()
        assert now.diff(Instant.tomorrow()).total_days in (0, 1)


class TestInstantFromFormat:
    """Test Instant.from_format."""

    def test_parse(self) -> None:
        """A matching string is parsed."""
        instant = Instant.from_format("2024-01-15 14:30:45", FMT)
        assert instant.format(FMT) == "2024-01-15 14:30:45"
        assert instant.timezone == "UTC"

    def test_parse_in_timezone(self) -> None:
        """The timezone argument sets the zone of the wall clock time."""
        instant = Instant.from_format("2024-01-15 00:00:00", FMT, "Europe/Istanbul")
        assert instant.timezone == "Europe/Istanbul"
        assert instant.timestamp == 1705266000

    def test_offset_wins_over_timezone(self) -> None:
        """A %z offset in the string takes precedence."""
        instant = Instant.from_format(
            "2024-01-15 12:00 +0300", "%Y-%m-%d %H:%M %z", "America/New_York"
        )
        assert instant.timestamp == 1705309200
        assert instant.datetime.utcoffset() == timedelta(hours=3)
        assert instant.hour == "12"

    def test_missing_components_default(self) -> None:
        """Components absent from the format take the strptime defaults."""
        instant = Instant.from_format("14:30", "%H:%M")
        assert instant.date() == "1900-01-01"
        assert instant.time() == "14:30:00"

    def test_default_format(self) -> None:
        """Without a format the configured default format is used."""
        configure(default_format="%d/%m/%Y")
        assert Instant.from_format("15/01/2024").date() == "2024-01-15"

    def test_no_format_configured(self) -> None:
        """Without a format or a default format parsing fails."""
        with pytest.raises(NoFormatConfiguredError):
            Instant.from_format("2024-01-15")

    @pytest.mark.parametrize("fmt", ["%Q", "%Y-%-m", "%", ""])
    def test_invalid_format(self, fmt: str) -> None:
        """Unsupported formats raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            Instant.from_format("2024", fmt)

    def test_invalid_timezone(self) -> None:
        """An unknown zone raises InvalidTimezoneError."""
        with pytest.raises(InvalidTimezoneError):
            Instant.from_format("2024-01-15", "%Y-%m-%d", "Not/AZone")

    @pytest.mark.parametrize(
        "text",
        ["2024-1-5", "15/01/2024", "2024-01-15 extra", "2024-02-30", ""],
    )
    def test_parse_failure(self, text: str) -> None:
        """Strings that do not match the format exactly raise ParseError."""
        with pytest.raises(ParseError):
            Instant.from_format(text, "%Y-%m-%d")

    def test_round_trip(self) -> None:
        """Formatting a parsed Instant reproduces the input."""
        for text, fmt in [
            ("2024-01-15 14:30:45", FMT),
            ("15.01.2024", "%d.%m.%Y"),
            ("Monday, January 15 2024", "%A, %B %d %Y"),
            ("2024-01-15T09:00:00+0400", "%Y-%m-%dT%H:%M:%S%z"),
        ]:
            assert Instant.from_format(text, fmt).format(fmt) == text

    def test_deprecated_alias(self) -> None:
        """create_from_format warns and delegates."""
        with pytest.warns(DeprecationWarning, match="from_format"):
            instant = Instant.create_from_format("2024-01-15", "%Y-%m-%d")
        assert instant.date() == "2024-01-15"


class TestInstantFromTimestamp:
    """Test Instant.from_timestamp."""

    def test_int(self) -> None:
        """An integer timestamp is converted."""
        instant = Instant.from_timestamp(1705329000)
        assert instant.format(FMT) == "2024-01-15 14:30:00"
        assert instant.timestamp == 1705329000

    def test_digit_string(self) -> None:
        """A digit string is accepted."""
        assert Instant.from_timestamp("1705329000").timestamp == 1705329000

    def test_in_timezone(self) -> None:
        """The result is expressed in the given zone."""
        instant = Instant.from_timestamp(1705329000, "Asia/Baku")
        assert instant.time() == "18:30:00"

    @pytest.mark.parametrize("value", [-1, 0, 3600, "abc", True, 1.5])
    def test_invalid(self, value) -> None:
        """Values that are not timestamps raise InvalidTimestampError."""
        with pytest.raises(InvalidTimestampError):
            Instant.from_timestamp(value)

    def test_overlong_digit_string(self) -> None:
        """A digit string too long to convert raises InvalidTimestampError."""
        with pytest.raises(InvalidTimestampError):
            Instant.from_timestamp("9" * 5000)

    def test_invalid_timezone(self) -> None:
        """An unknown zone raises InvalidTimezoneError."""
        with pytest.raises(InvalidTimezoneError):
            Instant.from_timestamp(1705329000, "Not/AZone")

    def test_deprecated_alias(self) -> None:
        """create_from_timestamp warns and delegates."""
        with pytest.warns(DeprecationWarning, match="from_timestamp"):
            instant = Instant.create_from_timestamp(1705329000)
        assert instant.timestamp == 1705329000


class TestInstantAccessors:
    """Test Instant accessors."""

    def test_components_are_padded_strings(self) -> None:
        """Components are zero-padded strings."""
        instant = Instant.from_format("2024-01-05 04:03:02", FMT)
        assert instant.year == "2024"
        assert instant.month == "01"
        assert instant.day == "05"
        assert instant.hour == "04"
        assert instant.minute == "03"
        assert instant.second == "02"

    def test_components_are_local(self) -> None:
        """Components follow the Instant's own zone."""
        instant = Instant.from_format("2024-01-15 22:00:00", FMT).to_timezone("Europe/Istanbul")
        assert instant.day == "16"
        assert instant.hour == "01"

    def test_weekday(self) -> None:
        """weekday is the ISO weekday."""
        assert Instant.from_format("2024-01-15", "%Y-%m-%d").weekday == 1
        assert Instant.from_format("2024-01-14", "%Y-%m-%d").weekday == 7

    def test_fixed_offset_timezone_name(self) -> None:
        """Fixed offsets without an identifier report their offset name."""
        instant = Instant.from_format("2024-01-15 +0300", "%Y-%m-%d %z")
        assert instant.timezone == "UTC+03:00"


class TestInstantFormatting:
    """Test Instant formatting helpers."""

    @pytest.fixture
    def instant(self) -> Instant:
        return Instant.from_format("2024-01-15 14:30:45", FMT)

    def test_format_requires_format(self, instant: Instant) -> None:
        """format() without a default raises NoFormatConfiguredError."""
        with pytest.raises(NoFormatConfiguredError):
            instant.format()

    def test_format_invalid(self, instant: Instant) -> None:
        """format() rejects unsupported directives."""
        with pytest.raises(InvalidFormatError):
            instant.format("%Q")

    def test_date_and_time(self, instant: Instant) -> None:
        """date() and time() use fixed layouts."""
        assert instant.date() == "2024-01-15"
        assert instant.date("%d.%m.%Y") == "15.01.2024"
        assert instant.time() == "14:30:45"
        assert instant.time(include_seconds=False) == "14:30"

    def test_day_name(self, instant: Instant) -> None:
        """day_name() is localized."""
        assert instant.day_name() == "Monday"
        assert instant.day_name("tr") == "Pazartesi"
        assert instant.day_name("az") == "Bazar ertəsi"

    def test_month_name(self, instant: Instant) -> None:
        """month_name() is localized."""
        assert instant.month_name() == "January"
        assert instant.month_name("tr") == "Ocak"
        assert instant.month_name("az") == "Yanvar"

    def test_pretty_date(self, instant: Instant) -> None:
        """pretty_date() renders the date in words."""
        assert instant.pretty_date() == "15 January 2024"
        assert instant.pretty_date("tr") == "15 Ocak 2024"
        assert instant.pretty_date(include_year=False) == "15 January"

    def test_pretty_print(self, instant: Instant) -> None:
        """pretty_print() appends the time."""
        assert instant.pretty_print() == "15 January 2024 14:30:45"
        assert instant.pretty_print("az", include_year=False, include_seconds=False) == (
            "15 Yanvar 14:30"
        )

    def test_to_timezone(self, instant: Instant) -> None:
        """to_timezone() keeps the moment and changes the wall clock."""
        converted = instant.to_timezone("Europe/Istanbul")
        assert converted == instant
        assert converted.time() == "17:30:45"
        assert converted.timezone == "Europe/Istanbul"
        assert instant.timezone == "UTC"

    def test_to_timezone_invalid(self, instant: Instant) -> None:
        """to_timezone() rejects unknown zones."""
        with pytest.raises(InvalidTimezoneError):
            instant.to_timezone("Not/AZone")

    def test_str_and_repr(self, instant: Instant) -> None:
        """str() is ISO 8601, repr() names the zone."""
        assert str(instant) == "2024-01-15T14:30:45+00:00"
        assert repr(instant) == "Instant('2024-01-15T14:30:45+00:00', timezone='UTC')"


class TestInstantEquality:
    """Test Instant equality, ordering and hashing."""

    def test_same_moment_in_different_zones(self) -> None:
        """Equality follows the absolute moment."""
        utc = Instant.from_format("2024-01-15 12:00:00", FMT)
        istanbul = utc.to_timezone("Europe/Istanbul")
        assert utc == istanbul
        assert hash(utc) == hash(istanbul)
        assert len({utc, istanbul}) == 1

    def test_ordering(self) -> None:
        """Instants order along the timeline."""
        earlier = Instant.from_format("2024-01-15 12:00:00", FMT)
        later = earlier.add_seconds()
        assert earlier < later
        assert earlier <= later
        assert later > earlier
        assert later >= earlier
        assert earlier != later

    def test_other_types(self) -> None:
        """Comparing with other types is not supported."""
        instant = Instant.from_format("2024-01-15", "%Y-%m-%d")
        assert instant != "2024-01-15"
        with pytest.raises(TypeError):
            _ = instant < "2024-01-15"  # type: ignore[operator]
