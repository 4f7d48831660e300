"""Phrase models for the Chronos translator.

Defines the phrase keys used by relative-time rendering and the
per-language table that maps keys to templates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PhraseKey(str, Enum):
    """Phrase keys every language table must provide.

    Unit keys come in singular/plural pairs; their templates carry a
    placeholder named after the key itself (``#years#`` in "years").
    Adverb keys carry a ``#time#`` placeholder for the joined unit phrases.
    """

    YEAR = "year"
    YEARS = "years"
    MONTH = "month"
    MONTHS = "months"
    DAY = "day"
    DAYS = "days"
    HOUR = "hour"
    HOURS = "hours"
    MINUTE = "minute"
    MINUTES = "minutes"
    SECOND = "second"
    SECONDS = "seconds"
    AGO = "ago"
    LATER = "later"
    SAME_TIME = "same-time"
    NOW = "now"
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"

    @property
    def placeholder(self) -> str:
        """The ``#key#`` token a unit template substitutes its magnitude into."""
        return f"#{self.value}#"


@dataclass
class LanguageTable:
    """Phrase templates for a single language.

    Attributes:
        language: Language code (e.g., "en", "tr").
        phrases: Mapping of phrase key to template string.
        source: File the table was loaded from, if any.
    """

    language: str
    phrases: dict[str, str] = field(default_factory=dict)
    source: str | None = None

    def get(self, key: str) -> str | None:
        """Return the template for a key, or None if absent."""
        return self.phrases.get(key)

    def has(self, key: str) -> bool:
        """Check if the table has a template for a key."""
        return key in self.phrases

    def missing_keys(self) -> list[str]:
        """Return the PhraseKey values this table does not define."""
        return [key.value for key in PhraseKey if key.value not in self.phrases]


__all__ = ["PhraseKey", "LanguageTable"]
