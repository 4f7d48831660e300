"""TimeUnit enumeration for calendar units.

This module provides the TimeUnit enum representing the calendar
units Chronos can shift by and report in a Delta, ordered from the
largest to the smallest.
"""

from __future__ import annotations

from enum import Enum

from chronos._internal.constants import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE


class TimeUnit(Enum):
    """Calendar units used for arithmetic and relative-time phrases.

    Members are declared from largest to smallest, which is also the
    order in which a Delta is walked when building a relative phrase.

    Examples:
        >>> TimeUnit.HOUR.plural
        'hours'

        >>> TimeUnit.MONTH.to_seconds() is None
        True

        >>> [unit.value for unit in TimeUnit][:2]
        ['year', 'month']
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def singular(self) -> str:
        """Phrase key used when the magnitude is exactly one."""
        return self.value

    @property
    def plural(self) -> str:
        """Phrase key used for every other magnitude."""
        return self.value + "s"

    @property
    def delta_field(self) -> str:
        """Name of the matching Delta attribute (``years``, ``days``...)."""
        return self.plural

    def phrase_key(self, magnitude: int) -> str:
        """Return the singular or plural phrase key for a magnitude.

        Args:
            magnitude: Non-negative amount of this unit.

        Returns:
            "year" for 1, "years" otherwise.
        """
        return self.singular if magnitude == 1 else self.plural

    def to_seconds(self) -> int | None:
        """Convert one unit to seconds.

        Returns:
            Seconds in one unit, or None for the variable-length units
            MONTH and YEAR.
        """
        conversions: dict[TimeUnit, int | None] = {
            TimeUnit.SECOND: 1,
            TimeUnit.MINUTE: SECONDS_PER_MINUTE,
            TimeUnit.HOUR: SECONDS_PER_HOUR,
            TimeUnit.DAY: SECONDS_PER_DAY,
            TimeUnit.MONTH: None,  # Variable length
            TimeUnit.YEAR: None,  # Variable length (leap years)
        }
        return conversions[self]


__all__ = ["TimeUnit"]
