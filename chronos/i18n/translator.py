"""Translator service for phrase lookup and placeholder substitution.

Templates use ``#name#`` placeholders. A translation resolves the
language, looks the key up in that language's table and substitutes
the caller's values into the template.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

from chronos._internal.constants import ALLOWED_LANGUAGES, DEFAULT_LANGUAGE
from chronos.errors import MissingKeyError, UnknownLanguageError
from chronos.i18n.loader import PhraseLoader, YAMLPhraseLoader
from chronos.i18n.models import LanguageTable
from chronos.logging import get_module_logger

logger = get_module_logger()

Key = Union[str, Enum]


def _placeholder(name: str) -> str:
    name = str(name)
    if len(name) >= 2 and name.startswith("#") and name.endswith("#"):
        return name
    return f"#{name}#"


def substitute(template: str, substitutions: Mapping[str, Any] | None = None) -> str:
    """Replace ``#name#`` placeholders in a template.

    Substitution keys may be given with or without the surrounding
    hashes. Placeholders without a value are left untouched.

    Examples:
        >>> substitute("#years# years", {"#years#": 3})
        '3 years'
        >>> substitute("#time# ago", {"time": "2 days"})
        '2 days ago'
    """
    for name, value in (substitutions or {}).items():
        template = template.replace(_placeholder(name), str(value))
    return template


class Translator:
    """Service for translating phrase keys with placeholder substitution.

    Attributes:
        loader: PhraseLoader supplying language tables.
        allowed_languages: Language codes translations may use.
        default_language: Language used when no current language is set.
        language: Current language, or None to use the default.
        tables: Loaded LanguageTables keyed by language code.
    """

    def __init__(
        self,
        loader: PhraseLoader,
        allowed_languages: Iterable[str] = ALLOWED_LANGUAGES,
        default_language: str = DEFAULT_LANGUAGE,
        language: str | None = None,
    ):
        self.loader = loader
        self.allowed_languages: list[str] = list(allowed_languages)
        self.tables: dict[str, LanguageTable] = {}
        self.default_language = self._check_language(default_language)
        self.language = self._check_language(language) if language else None
        logger.debug(
            "initialized_translator",
            allowed_languages=self.allowed_languages,
            default_language=self.default_language,
        )

    @classmethod
    def from_settings(cls, settings: Any) -> Translator:
        """Build a translator from a ChronosSettings instance."""
        return cls(
            YAMLPhraseLoader(settings.lang_dir),
            allowed_languages=settings.allowed_languages,
            default_language=settings.default_language,
            language=settings.language,
        )

    @property
    def current_language(self) -> str:
        """The current language, falling back to the default language."""
        return self.language or self.default_language

    def initialize(
        self,
        lang: str | None = None,
        default_lang: str | None = None,
        allowed_languages: Iterable[str] | None = None,
        directory: str | Path | None = None,
    ) -> Translator:
        """Update the translator configuration in place.

        Arguments left as None keep their current value, so calling this
        repeatedly is safe.

        Raises:
            UnknownLanguageError: If ``lang`` or ``default_lang`` is not allowed.
        """
        if directory is not None:
            self.loader = YAMLPhraseLoader(directory)
            self.tables.clear()
        if allowed_languages:
            self.allowed_languages = list(allowed_languages)
        if default_lang:
            self.default_language = self._check_language(default_lang)
        if lang:
            self.language = self._check_language(lang)
        return self

    def translate(
        self,
        key: Key,
        lang: str | None = None,
        substitutions: Mapping[str, Any] | None = None,
        *,
        count: int | None = None,
    ) -> str:
        """Look up a phrase and substitute its placeholders.

        Caller substitutions are applied first; ``count`` is then
        substituted into the key's own placeholder (``#years#`` for
        "years").

        Args:
            key: Phrase key (string, PhraseKey, Day or Month).
            lang: Language code; defaults to the current language.
            substitutions: Mapping of placeholder to value.
            count: Magnitude for the key's own placeholder.

        Returns:
            The rendered phrase.

        Raises:
            UnknownLanguageError: If the language is not allowed or has no table.
            MissingKeyError: If the key has no template in the language.
        """
        key_name = key.value if isinstance(key, Enum) else str(key)
        language = self._check_language(lang or self.current_language)
        table = self.get_table(language)

        template = table.get(key_name)
        if template is None:
            logger.error("translation_not_found", key=key_name, language=language)
            raise MissingKeyError(f"Translation not found for key {key_name!r} in {language!r}")

        message = substitute(template, substitutions)
        if count is not None:
            message = message.replace(_placeholder(key_name), str(count))
        return message

    def has_phrase(self, key: Key, lang: str | None = None) -> bool:
        """Check if a phrase exists, without raising."""
        key_name = key.value if isinstance(key, Enum) else str(key)
        try:
            table = self.get_table(self._check_language(lang or self.current_language))
        except UnknownLanguageError:
            return False
        return table.has(key_name)

    def get_table(self, language: str) -> LanguageTable:
        """Return the table for a language, loading it on first use.

        Raises:
            UnknownLanguageError: If no table can be loaded for the language.
        """
        table = self.tables.get(language)
        if table is None:
            try:
                table = self.loader.load(language)
            except (FileNotFoundError, ValueError) as e:
                logger.error("phrase_table_unavailable", language=language, error=str(e))
                raise UnknownLanguageError(f"No phrase table for language {language!r}") from e
            self.tables[language] = table
        return table

    def reload(self) -> None:
        """Drop loaded tables so they are read again on next use."""
        self.tables.clear()
        clear_cache = getattr(self.loader, "clear_cache", None)
        if clear_cache is not None:
            clear_cache()
        logger.info("reloaded_phrase_tables")

    def _check_language(self, language: str) -> str:
        if language not in self.allowed_languages:
            logger.error(
                "unknown_language",
                language=language,
                allowed_languages=self.allowed_languages,
            )
            raise UnknownLanguageError(
                f"{language!r} is not an allowed language: {self.allowed_languages}"
            )
        return language


_translator: Translator | None = None


def get_translator() -> Translator:
    """Return the process-wide translator, creating it from the settings."""
    global _translator
    if _translator is None:
        from chronos.config import get_settings

        _translator = Translator.from_settings(get_settings())
    return _translator


def initialize(
    lang: str | None = None,
    default_lang: str | None = None,
    allowed_languages: Iterable[str] | None = None,
    directory: str | Path | None = None,
) -> Translator:
    """Set up the process-wide translator. Safe to call more than once."""
    return get_translator().initialize(lang, default_lang, allowed_languages, directory)


def translate(
    key: Key,
    lang: str | None = None,
    substitutions: Mapping[str, Any] | None = None,
    *,
    count: int | None = None,
) -> str:
    """Translate with the process-wide translator."""
    return get_translator().translate(key, lang, substitutions, count=count)


def reset_translator() -> None:
    """Drop the process-wide translator so it is rebuilt on next use."""
    global _translator
    _translator = None


__all__ = [
    "Translator",
    "substitute",
    "get_translator",
    "initialize",
    "translate",
    "reset_translator",
]
