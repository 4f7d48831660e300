"""Tests for Instant comparisons and Delta."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from chronos.arithmetic.comparisons import diff, is_same_day
from chronos.core.delta import Delta, compute_delta
from chronos.core.instant import Instant
from chronos.units.timeunit import TimeUnit

FMT = "%Y-%m-%d %H:%M:%S"


def at(text: str, tz: str = "UTC") -> Instant:
    return Instant.from_format(text, FMT, tz)


class TestDelta:
    """Test the Delta value type."""

    def test_defaults_are_zero(self) -> None:
        """A default Delta is zero and not inverted."""
        delta = Delta()
        assert delta.is_zero
        assert not delta.inverted

    def test_magnitude(self) -> None:
        """magnitude() reads the field for a unit."""
        delta = Delta(years=1, months=2, seconds=5)
        assert delta.magnitude(TimeUnit.YEAR) == 1
        assert delta.magnitude(TimeUnit.MONTH) == 2
        assert delta.magnitude(TimeUnit.SECOND) == 5
        assert not delta.is_zero

    def test_negative_rejected(self) -> None:
        """Magnitudes are non-negative."""
        with pytest.raises(ValueError):
            Delta(days=-1)
        with pytest.raises(ValueError):
            Delta(total_days=-1)

    def test_reversed(self) -> None:
        """reversed() flips only the direction."""
        delta = Delta(years=1, days=3, total_days=368)
        flipped = delta.reversed()
        assert flipped.inverted
        assert flipped.years == 1
        assert flipped.total_days == 368
        assert flipped.reversed() == delta

    def test_compute_delta_drops_microseconds(self) -> None:
        """The sub-second remainder is dropped."""
        delta = compute_delta(
            datetime(2024, 1, 1, 0, 0, 0, 500_000),
            datetime(2024, 1, 1, 0, 0, 2, 0),
            False,
        )
        assert delta.seconds == 1


class TestDiff:
    """Test diff and day_diff."""

    def test_years_and_months(self) -> None:
        """diff breaks the difference into calendar units."""
        delta = at("2024-01-15 00:00:00").diff(at("2025-03-15 00:00:00"))
        assert (delta.years, delta.months, delta.days) == (1, 2, 0)
        assert not delta.inverted

    def test_all_units(self) -> None:
        """Every unit is reported."""
        delta = at("2023-01-12 08:00:00").diff(at("2024-03-15 12:30:15"))
        assert (delta.years, delta.months, delta.days) == (1, 2, 3)
        assert (delta.hours, delta.minutes, delta.seconds) == (4, 30, 15)

    def test_symmetry(self) -> None:
        """Swapping operands flips only the direction."""
        a = at("2024-01-15 10:00:00")
        b = at("2024-07-04 18:45:00")
        forward = a.diff(b)
        backward = b.diff(a)
        assert not forward.inverted
        assert backward.inverted
        assert forward.total_days == backward.total_days
        assert forward.hours == backward.hours

    def test_equal_instants(self) -> None:
        """Equal instants give a zero, non-inverted Delta."""
        a = at("2024-01-15 10:00:00")
        delta = a.diff(a)
        assert delta.is_zero
        assert not delta.inverted

    def test_other_zone_is_converted(self) -> None:
        """The same moment in another zone has no difference."""
        a = at("2024-01-15 00:00:00", "Europe/Istanbul")
        b = at("2024-01-14 21:00:00", "UTC")
        assert a.diff(b).is_zero

    def test_aware_datetime(self) -> None:
        """An aware datetime is accepted."""
        a = at("2024-01-15 00:00:00")
        delta = a.diff(datetime(2024, 1, 18, tzinfo=timezone.utc))
        assert delta.days == 3
        assert not delta.inverted

    def test_naive_datetime_rejected(self) -> None:
        """A naive datetime is ambiguous and rejected."""
        with pytest.raises(TypeError):
            at("2024-01-15 00:00:00").diff(datetime(2024, 1, 18))

    @pytest.mark.parametrize("other", ["2024-01-18", 1705329000, None])
    def test_other_types_rejected(self, other) -> None:
        """Only Instants and aware datetimes can be diffed."""
        with pytest.raises(TypeError):
            diff(at("2024-01-15 00:00:00"), other)

    def test_day_diff(self) -> None:
        """day_diff counts whole days across a leap February."""
        assert at("2024-01-01 00:00:00").day_diff(at("2024-03-01 00:00:00")) == 60
        assert at("2024-03-01 00:00:00").day_diff(at("2024-01-01 00:00:00")) == 60

    def test_diff_from_format(self) -> None:
        """diff_from_format parses the other side first."""
        delta = at("2024-01-15 00:00:00").diff_from_format("2024-02-15", "%Y-%m-%d")
        assert delta.months == 1
        assert not delta.inverted


class TestDirection:
    """Test is_past, is_future and age."""

    def test_past_and_future(self) -> None:
        """Direction is relative to the other instant."""
        earlier = at("2024-01-15 00:00:00")
        later = at("2024-01-16 00:00:00")
        assert earlier.is_past(later)
        assert not earlier.is_future(later)
        assert later.is_future(earlier)
        assert not later.is_past(earlier)

    def test_same_moment_is_neither(self) -> None:
        """An instant is neither past nor future relative to itself."""
        a = at("2024-01-15 00:00:00")
        assert not a.is_past(a)
        assert not a.is_future(a)

    def test_default_reference_is_now(self) -> None:
        """Without another instant, now is the reference."""
        assert at("2000-01-01 00:00:00").is_past()
        assert Instant.now().add_years(1).is_future()

    def test_age(self) -> None:
        """age counts whole years."""
        born = at("2000-03-15 00:00:00")
        assert born.age(at("2024-03-14 23:59:59")) == 23
        assert born.age(at("2024-03-15 00:00:00")) == 24

    def test_age_in_future_is_zero(self) -> None:
        """A future instant has age 0."""
        assert at("2030-01-01 00:00:00").age(at("2024-01-01 00:00:00")) == 0


class TestCalendarPredicates:
    """Test is_same_day, is_weekday and is_weekend."""

    def test_same_day(self) -> None:
        """Same local date is the same day."""
        assert at("2024-01-15 00:00:00").is_same_day(at("2024-01-15 23:59:59"))

    def test_same_day_of_month_in_other_month(self) -> None:
        """Year, month and day must all match."""
        assert not at("2024-01-15 00:00:00").is_same_day(at("2024-02-15 00:00:00"))
        assert not at("2024-01-15 00:00:00").is_same_day(at("2023-01-15 00:00:00"))

    def test_same_day_uses_own_zone(self) -> None:
        """The other instant is viewed in the first instant's zone."""
        istanbul = at("2024-01-15 01:00:00", "Europe/Istanbul")
        utc = at("2024-01-14 23:00:00", "UTC")
        assert istanbul.is_same_day(utc)
        assert not utc.is_same_day(at("2024-01-15 00:30:00", "UTC"))

    def test_same_day_function(self) -> None:
        """The function form accepts aware datetimes."""
        a = at("2024-01-15 12:00:00")
        assert is_same_day(a, datetime(2024, 1, 15, 3, tzinfo=timezone.utc))

    @pytest.mark.parametrize(
        "text,weekday",
        [
            ("2024-01-15 12:00:00", True),  # Monday
            ("2024-01-19 12:00:00", True),  # Friday
            ("2024-01-20 12:00:00", False),  # Saturday
            ("2024-01-21 12:00:00", False),  # Sunday
        ],
    )
    def test_weekday_weekend(self, text: str, weekday: bool) -> None:
        """Monday-Friday are weekdays, Saturday-Sunday the weekend."""
        instant = at(text)
        assert instant.is_weekday() is weekday
        assert instant.is_weekend() is not weekday

    def test_weekend_is_local(self) -> None:
        """The weekday follows the Instant's own zone."""
        friday_night = at("2024-01-19 22:30:00", "UTC")
        assert friday_night.is_weekday()
        assert friday_night.to_timezone("Asia/Baku").is_weekend()
