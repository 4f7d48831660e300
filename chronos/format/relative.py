"""Relative-time phrases ("3 days ago", "tomorrow").

The phrase is composed from a Delta in two steps. First the non-zero
units are rendered largest first ("1 year 2 months"), keeping as many
as the requested depth allows. Then the joined units are wrapped in an
adverb template ("#time# ago", "#time# later").

With the default depth of 0 a single unit is shown and the adverb is
replaced by a day-level word where one fits:

    ============================  ==========================
    difference                    adverb
    ============================  ==========================
    same day, under ~2 minutes    now
    same day, otherwise           today
    exactly one day back          yesterday
    exactly one day ahead         tomorrow
    ============================  ==========================

Examples:
    >>> base = Instant.from_format("2024-03-15 12:00:00", "%Y-%m-%d %H:%M:%S")
    >>> pretty_diff(base.sub_years(1).sub_months(2), depth=2, other=base)
    '1 year 2 months ago'
    >>> pretty_diff(base.sub_days(1), other=base)
    'yesterday'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronos._internal.constants import TIME_PLACEHOLDER
from chronos.arithmetic.comparisons import Comparable, diff, reference_point
from chronos.core.delta import Delta
from chronos.errors import InvalidDepthError
from chronos.i18n.models import PhraseKey
from chronos.i18n.translator import Translator, get_translator
from chronos.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from chronos.core.instant import Instant


def unit_phrases(
    delta: Delta,
    lang: str | None = None,
    depth: int = 0,
    translator: Translator | None = None,
) -> list[str]:
    """Render the non-zero units of a Delta, largest first.

    Args:
        delta: The difference to render.
        lang: Language code.
        depth: Maximum number of units; 0 means one.
        translator: Translator to use; defaults to the process-wide one.

    Returns:
        Rendered unit phrases such as ["1 year", "2 months"].
    """
    translator = translator or get_translator()
    limit = depth if depth > 0 else 1

    parts: list[str] = []
    for unit in TimeUnit:
        magnitude = delta.magnitude(unit)
        if magnitude <= 0:
            continue
        if len(parts) >= limit:
            break
        key = unit.phrase_key(magnitude)
        parts.append(translator.translate(key, lang, count=magnitude))
    return parts


def choose_adverb(delta: Delta, time_phrase: str, depth: int = 0) -> PhraseKey:
    """Pick the adverb key wrapping a relative phrase.

    Args:
        delta: The difference being rendered.
        time_phrase: The joined unit phrases.
        depth: The requested depth.

    Returns:
        One of AGO, LATER, SAME_TIME, NOW, TODAY, YESTERDAY, TOMORROW.
    """
    adverb = PhraseKey.LATER if delta.inverted else PhraseKey.AGO
    if not time_phrase:
        adverb = PhraseKey.SAME_TIME

    if depth == 0:
        if delta.total_days == 0:
            # Anything within 1m59s counts as now
            if delta.hours < 1 and delta.minutes <= 1 and delta.seconds <= 59:
                adverb = PhraseKey.NOW
            else:
                adverb = PhraseKey.TODAY
        elif delta.total_days == 1:
            adverb = PhraseKey.TOMORROW if delta.inverted else PhraseKey.YESTERDAY
    return adverb


def pretty_diff(
    instant: Instant,
    lang: str | None = "en",
    depth: int = 0,
    other: Comparable | None = None,
    translator: Translator | None = None,
) -> str:
    """Describe an instant relative to another in words.

    Args:
        instant: The instant to describe.
        lang: Language code; None uses the translator's current language.
        depth: Number of units to show. 0 shows one unit and enables the
            day-level words (now, today, yesterday, tomorrow).
        other: Reference point; defaults to now.
        translator: Translator to use; defaults to the process-wide one.

    Returns:
        The localized phrase, stripped of surrounding whitespace.

    Raises:
        InvalidDepthError: If depth is negative.
        UnknownLanguageError: If the language is not allowed.
        MissingKeyError: If the language table lacks a needed phrase.
    """
    if depth < 0:
        raise InvalidDepthError(f"depth cannot be lower than 0, got {depth}")

    translator = translator or get_translator()
    delta = diff(instant, reference_point(instant, other))

    time_phrase = " ".join(unit_phrases(delta, lang, depth, translator))
    adverb = choose_adverb(delta, time_phrase, depth)
    return translator.translate(adverb, lang, {TIME_PLACEHOLDER: time_phrase}).strip()


__all__ = ["unit_phrases", "choose_adverb", "pretty_diff"]
