"""Month enumeration for named months.

Month names are stored in the language tables as templates of the
form ``#days# January #years#`` so that a full date can be rendered in
each language's word order. A bare month name is obtained by blanking
both placeholders.
"""

from __future__ import annotations

from enum import Enum


class Month(Enum):
    """Named month of the year.

    Examples:
        >>> Month.from_number(2)
        <Month.FEBRUARY: 'February'>

        >>> Month.MARCH.translate("az")
        'Mart'
    """

    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    @classmethod
    def from_number(cls, month: int) -> Month:
        """Return the Month for a month number (1-12).

        Raises:
            ValueError: If the number is outside 1-12.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"month must be 1-12, got {month}")
        return list(cls)[month - 1]

    @property
    def number(self) -> int:
        """Month number, January=1."""
        return list(Month).index(self) + 1

    def translate(self, lang: str | None = None) -> str:
        """Return the localized month name without day or year."""
        return self.render(lang)

    def render(self, lang: str | None = None, day: str = "", year: str = "") -> str:
        """Render the month template with an optional day and year.

        Args:
            lang: Language code, or None for the current language.
            day: Text substituted for ``#days#``.
            year: Text substituted for ``#years#``.

        Returns:
            The rendered text with surrounding whitespace stripped.
        """
        from chronos.i18n.translator import get_translator

        text = get_translator().translate(
            self.value, lang, {"#days#": day, "#years#": year}
        )
        return " ".join(text.split())


__all__ = ["Month"]
