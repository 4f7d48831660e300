"""Day enumeration for named weekdays.

This module provides the Day enum, whose values double as the phrase
keys under which weekday names are stored in the language tables.
"""

from __future__ import annotations

from enum import Enum


class Day(Enum):
    """Named day of the week, Monday first.

    Examples:
        >>> Day.from_number(1)
        <Day.MONDAY: 'Monday'>

        >>> Day.SATURDAY.is_weekend
        True

        >>> Day.FRIDAY.translate("tr")
        'Cuma'
    """

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_number(cls, iso_weekday: int) -> Day:
        """Return the Day for an ISO weekday number.

        Args:
            iso_weekday: 1 for Monday through 7 for Sunday.

        Raises:
            ValueError: If the number is outside 1-7.
        """
        if not 1 <= iso_weekday <= 7:
            raise ValueError(f"iso_weekday must be 1-7, got {iso_weekday}")
        return list(cls)[iso_weekday - 1]

    @property
    def number(self) -> int:
        """ISO weekday number (Monday=1, Sunday=7)."""
        return list(Day).index(self) + 1

    @property
    def is_weekend(self) -> bool:
        """True for Saturday and Sunday."""
        return self.number >= 6

    def translate(self, lang: str | None = None) -> str:
        """Return the localized day name.

        Args:
            lang: Language code, or None for the current language.

        Raises:
            UnknownLanguageError: If the language is not allowed.
            MissingKeyError: If the table lacks this day.
        """
        from chronos.i18n.translator import get_translator

        return get_translator().translate(self.value, lang).strip()


__all__ = ["Day"]
