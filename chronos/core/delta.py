"""Delta: the calendar breakdown of the difference between two instants.

This module provides the Delta class and the function computing it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from dateutil.relativedelta import relativedelta

from chronos.units.timeunit import TimeUnit


@dataclass(frozen=True)
class Delta:
    """Calendar-unit difference between two instants.

    All magnitude fields are non-negative; the direction lives solely in
    ``inverted``. For ``a.diff(b)``, ``inverted`` is False when ``a`` is
    before (or equal to) ``b`` and True when ``a`` is after ``b``.

    Attributes:
        years: Whole years.
        months: Whole months after the years (0-11).
        days: Whole days after the months.
        hours: Whole hours after the days (0-23).
        minutes: Whole minutes after the hours (0-59).
        seconds: Whole seconds after the minutes (0-59).
        total_days: Whole days between the two instants.
        inverted: True if the first instant is after the second.

    Examples:
        >>> d = Delta(years=1, months=2, total_days=425)
        >>> d.is_zero
        False
        >>> d.magnitude(TimeUnit.MONTH)
        2
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    total_days: int = 0
    inverted: bool = False

    def __post_init__(self) -> None:
        for unit in TimeUnit:
            if getattr(self, unit.delta_field) < 0:
                raise ValueError(f"{unit.delta_field} must be non-negative")
        if self.total_days < 0:
            raise ValueError("total_days must be non-negative")

    def magnitude(self, unit: TimeUnit) -> int:
        """Return the magnitude of one unit."""
        return getattr(self, unit.delta_field)

    @property
    def is_zero(self) -> bool:
        """True if every unit magnitude is zero."""
        return all(self.magnitude(unit) == 0 for unit in TimeUnit)

    def reversed(self) -> Delta:
        """Return the same magnitudes with the direction flipped."""
        return Delta(
            years=self.years,
            months=self.months,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            total_days=self.total_days,
            inverted=not self.inverted,
        )


def compute_delta(start: datetime, end: datetime, inverted: bool) -> Delta:
    """Compute a Delta between two naive wall-clock datetimes.

    Args:
        start: The earlier wall-clock datetime.
        end: The later wall-clock datetime.
        inverted: Direction flag to store on the result.

    Returns:
        Delta with non-negative magnitudes. The sub-second remainder is
        dropped.
    """
    rd = relativedelta(end, start)
    return Delta(
        years=rd.years,
        months=rd.months,
        days=rd.days,
        hours=rd.hours,
        minutes=rd.minutes,
        seconds=rd.seconds,
        total_days=(end - start).days,
        inverted=inverted,
    )


__all__ = ["Delta", "compute_delta"]
