"""Phrase translation for Chronos.

Provides phrase lookup and ``#placeholder#`` substitution for day names,
month names and relative-time phrases.

Main components:
- models: PhraseKey, LanguageTable
- loader: PhraseLoader and YAMLPhraseLoader
- translator: Translator service and the process-wide helpers
"""

from __future__ import annotations

from chronos.i18n.loader import PhraseLoader, YAMLPhraseLoader
from chronos.i18n.models import LanguageTable, PhraseKey
from chronos.i18n.translator import (
    Translator,
    get_translator,
    initialize,
    reset_translator,
    substitute,
    translate,
)

__all__ = [
    "PhraseKey",
    "LanguageTable",
    "PhraseLoader",
    "YAMLPhraseLoader",
    "Translator",
    "get_translator",
    "initialize",
    "reset_translator",
    "substitute",
    "translate",
]
