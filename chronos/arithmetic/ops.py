"""Shifting instants by calendar units.

This module provides the canonical implementations behind the
``Instant.add_*`` and ``Instant.sub_*`` methods.

Shifting rules:
    - YEAR, MONTH: calendar arithmetic on the local date. When the target
      month is shorter, the day is clamped to its last day
      (Jan 31 + 1 month = Feb 29 in 2024, Feb 28 in 2023).
    - DAY: the local date moves, the local time of day is kept, even
      across a daylight-saving change.
    - HOUR, MINUTE, SECOND: absolute elapsed time, so adding 24 hours
      across a daylight-saving change can land on a different local hour.

Examples:
    Instant(2024-01-31 10:00 UTC) + 1 month  -> 2024-02-29 10:00 UTC
    Instant(2024-03-30 12:00 Europe/Berlin) + 1 day -> 2024-03-31 12:00 CEST
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta

from chronos.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from chronos.core.instant import Instant


def shift_datetime(value: datetime, amount: int, unit: TimeUnit) -> datetime:
    """Shift an aware datetime by an amount of a unit.

    Args:
        value: Aware datetime to shift.
        amount: Number of units; negative values shift backwards.
        unit: The unit to shift by.

    Returns:
        A new aware datetime in the same zone.

    Raises:
        TypeError: If amount is not an integer.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be an integer, got {type(amount).__name__}")

    if unit is TimeUnit.YEAR:
        return value + relativedelta(years=amount)
    if unit is TimeUnit.MONTH:
        return value + relativedelta(months=amount)
    if unit is TimeUnit.DAY:
        return value + relativedelta(days=amount)

    # Fixed-length units move along the UTC timeline.
    zone = value.tzinfo
    seconds = amount * unit.to_seconds()
    shifted = value.astimezone(timezone.utc) + timedelta(seconds=seconds)
    return shifted.astimezone(zone)


def add(instant: Instant, amount: int, unit: TimeUnit) -> Instant:
    """Return a new Instant shifted forward by ``amount`` units.

    Examples:
        >>> add(Instant.from_format("2024-01-31", "%Y-%m-%d"), 1, TimeUnit.MONTH).date()
        '2024-02-29'
    """
    return instant._replace_datetime(shift_datetime(instant.datetime, amount, unit))


def subtract(instant: Instant, amount: int, unit: TimeUnit) -> Instant:
    """Return a new Instant shifted backward by ``amount`` units."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be an integer, got {type(amount).__name__}")
    return add(instant, -amount, unit)


__all__ = ["shift_datetime", "add", "subtract"]
