"""Phrase table loading interface and implementations.

Defines the contract for loading language tables and provides the
YAML-based loader used for the tables shipped in ``chronos/lang``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import yaml

from chronos.i18n.models import LanguageTable
from chronos.logging import get_module_logger

logger = get_module_logger()


class PhraseLoader(ABC):
    """Abstract base for phrase table loaders."""

    @abstractmethod
    def load(self, language: str) -> LanguageTable:
        """Load the phrase table for a language.

        Args:
            language: Language code to load.

        Returns:
            LanguageTable with the loaded templates.

        Raises:
            FileNotFoundError: If no table exists for the language.
            ValueError: If the table format is invalid.
        """
        pass

    @abstractmethod
    def available_languages(self) -> list[str]:
        """Return the language codes this loader can supply."""
        pass


class YAMLPhraseLoader(PhraseLoader):
    """Loader for flat ``<language>.yml`` phrase files.

    Each file is a single mapping of phrase key to template::

        year: "#year# year"
        ago: "#time# ago"

    Attributes:
        directory: Path to the directory containing the YAML files.
        cache: Loaded tables keyed by language code.
    """

    def __init__(self, directory: str | Path, use_cache: bool = True):
        """Initialize the YAML phrase loader.

        Args:
            directory: Directory holding ``<language>.yml`` files.
            use_cache: Whether to keep loaded tables in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.directory = Path(directory)
        self.use_cache = use_cache
        self.cache: dict[str, LanguageTable] = {}

        if not self.directory.is_dir():
            raise ValueError(f"Phrase directory not found: {self.directory}")

        logger.debug(
            "initialized_yaml_loader",
            directory=str(self.directory),
            use_cache=use_cache,
        )

    def load(self, language: str) -> LanguageTable:
        """Load the phrase table for a language from ``<language>.yml``.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a flat mapping of strings.
        """
        if self.use_cache and language in self.cache:
            return self.cache[language]

        path = self.directory / f"{language}.yml"
        if not path.is_file():
            raise FileNotFoundError(
                f"No phrase table found for language {language} in {self.directory}"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=str(path), expected="dict")
            raise ValueError(f"Phrase file {path} must contain a mapping")

        table = LanguageTable(language=language, source=str(path))
        for key, template in data.items():
            if template is None:
                template = ""
            if not isinstance(template, (str, int, float)):
                logger.warning("invalid_phrase_format", file=str(path), key=str(key))
                continue
            table.phrases[str(key)] = str(template)

        missing = table.missing_keys()
        if missing:
            logger.warning("incomplete_phrase_table", language=language, missing=missing)

        logger.info("loaded_phrase_table", language=language, phrase_count=len(table.phrases))

        if self.use_cache:
            self.cache[language] = table
        return table

    def available_languages(self) -> list[str]:
        """Return the language codes that have a YAML file in the directory."""
        return sorted(path.stem for path in self.directory.glob("*.yml"))

    def clear_cache(self) -> None:
        """Clear all cached tables."""
        self.cache.clear()
        logger.info("cleared_phrase_cache")


__all__ = ["PhraseLoader", "YAMLPhraseLoader"]
