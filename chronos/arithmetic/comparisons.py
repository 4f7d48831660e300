"""Comparison operations for instants.

This module provides the canonical implementations behind the
comparison methods of :class:`~chronos.core.instant.Instant`.

Comparison Rules:
    - Direction is decided on the absolute timeline, so instants in
      different zones compare correctly.
    - Calendar magnitudes (years, months, days...) are measured on the
      wall clock of the first instant's zone; the second instant is
      converted into that zone first.
    - Predicates that default their reference point use "now" in the
      first instant's zone.

Supported Operations:
    - diff, day_diff: Calendar difference
    - is_past, is_future: Direction relative to a reference point
    - is_same_day: Same local calendar date
    - is_weekday, is_weekend: ISO weekday tests
    - age: Whole years elapsed
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Union

from chronos.core.delta import Delta, compute_delta

if TYPE_CHECKING:
    from chronos.core.instant import Instant

# Operand accepted wherever a second instant is expected
Comparable = Union["Instant", datetime]


def _as_datetime(value: Comparable) -> datetime:
    from chronos.core.instant import Instant

    if isinstance(value, Instant):
        return value.datetime
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError("cannot compare an Instant with a naive datetime")
        return value
    raise TypeError(f"cannot compare Instant with {type(value).__name__}")


def reference_point(instant: Instant, other: Comparable | None = None) -> Comparable:
    """Return ``other``, or now in the instant's zone when it is None."""
    if other is None:
        return instant._replace_datetime(datetime.now(tz=instant.datetime.tzinfo))
    return other


def diff(instant: Instant, other: Comparable) -> Delta:
    """Return the calendar difference between an instant and another.

    Args:
        instant: The first instant.
        other: An Instant or an aware datetime.

    Returns:
        Delta whose ``inverted`` flag is True when ``instant`` is after
        ``other``.

    Raises:
        TypeError: If ``other`` is not an Instant or aware datetime.

    Examples:
        >>> a = Instant.from_format("2024-01-15", "%Y-%m-%d")
        >>> b = Instant.from_format("2025-03-15", "%Y-%m-%d")
        >>> d = diff(a, b)
        >>> (d.years, d.months, d.inverted)
        (1, 2, False)
    """
    own = instant.datetime
    target = _as_datetime(other).astimezone(own.tzinfo)

    inverted = own > target
    start, end = (target, own) if inverted else (own, target)
    return compute_delta(
        start.replace(tzinfo=None),
        end.replace(tzinfo=None),
        inverted,
    )


def day_diff(instant: Instant, other: Comparable) -> int:
    """Return the whole number of days between two instants."""
    return diff(instant, other).total_days


def is_past(instant: Instant, other: Comparable | None = None) -> bool:
    """Check if an instant is before a reference point (default: now).

    An instant less than a second away from the reference is neither
    past nor future.
    """
    delta = diff(instant, reference_point(instant, other))
    return not delta.inverted and not delta.is_zero


def is_future(instant: Instant, other: Comparable | None = None) -> bool:
    """Check if an instant is after a reference point (default: now)."""
    return diff(instant, reference_point(instant, other)).inverted


def is_same_day(instant: Instant, other: Comparable) -> bool:
    """Check if two instants fall on the same local calendar date.

    The other instant is converted into the first instant's zone, then
    year, month and day must all match.
    """
    own = instant.datetime
    target = _as_datetime(other).astimezone(own.tzinfo)
    return own.date() == target.date()


def is_weekday(instant: Instant) -> bool:
    """Check if an instant falls on Monday through Friday."""
    return instant.weekday < 6


def is_weekend(instant: Instant) -> bool:
    """Check if an instant falls on Saturday or Sunday."""
    return instant.weekday >= 6


def age(instant: Instant, other: Comparable | None = None) -> int:
    """Return the whole years elapsed since an instant.

    Returns:
        Years between the instant and the reference point (default: now),
        or 0 if the instant is in the future.
    """
    reference = reference_point(instant, other)
    if is_future(instant, reference):
        return 0
    return diff(instant, reference).years


__all__ = [
    "reference_point",
    "diff",
    "day_diff",
    "is_past",
    "is_future",
    "is_same_day",
    "is_weekday",
    "is_weekend",
    "age",
]
