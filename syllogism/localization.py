"""
Localized sentence patterns and vocabulary.

Each language is a YAML document in ``i18n/<lang>.yaml``:

    name: English
    terms: [artists, bakers, ...]
    templates:
      all: "All {sub} are {obj}."
      ...

Lookups fall back to the default language and then to the raw key, so
incomplete translations degrade to visible text instead of failing.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from .errors import ConfigError, InvalidLanguageError
from .quantifier import QuantifierKind, VARIABLES

logger = logging.getLogger(__name__)

DEFAULT_I18N_DIR = Path(__file__).parent / "i18n"
DEFAULT_LANG = "en"

SUBJECT_PLACEHOLDER = "{sub}"
OBJECT_PLACEHOLDER = "{obj}"

MIN_TERMS = len(VARIABLES)


def pattern_key(kind: QuantifierKind) -> str:
    return f"templates.{kind.value}"


class Localization:
    """
    Translation tables for all configured languages.

    Args:
        tables: Mapping from language code to its parsed table
        default_lang: Language used when a key is missing
    """

    def __init__(self, tables: Mapping[str, Dict[str, Any]], default_lang: str = DEFAULT_LANG):
        if default_lang not in tables:
            raise ConfigError(f"Default language {default_lang!r} has no translation table")
        self._tables: Dict[str, Dict[str, Any]] = {lang: dict(table or {}) for lang, table in tables.items()}
        self.default_lang = default_lang

    @classmethod
    def from_directory(cls, directory: Optional[Union[str, Path]] = None,
                       default_lang: str = DEFAULT_LANG) -> 'Localization':
        """Load every ``*.yaml`` file in a directory, keyed by file stem."""
        directory = Path(directory) if directory is not None else DEFAULT_I18N_DIR
        tables = {}
        for path in sorted(directory.glob("*.yaml")):
            with open(path, encoding="utf-8") as f:
                try:
                    table = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ConfigError(f"Error parsing {path}: {e}") from e
            if table is not None and not isinstance(table, dict):
                raise ConfigError(f"{path} must contain a mapping")
            tables[path.stem] = table or {}
        logger.info("Loaded translations for %s from %s", ", ".join(tables) or "no languages", directory)
        return cls(tables, default_lang=default_lang)

    @property
    def languages(self) -> Dict[str, str]:
        """Language code -> display name."""
        return {lang: table.get("name", lang) for lang, table in self._tables.items()}

    def is_supported(self, lang: str) -> bool:
        return lang in self._tables

    def require_language(self, lang: str) -> str:
        """Return ``lang`` unchanged, or raise InvalidLanguageError."""
        if not self.is_supported(lang):
            raise InvalidLanguageError(lang, sorted(self._tables))
        return lang

    def _resolve(self, lang: str, parts: List[str]) -> Optional[Any]:
        value: Any = self._tables.get(lang)
        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return None
        return value

    def translate(self, lang: str, key: str) -> str:
        """
        Resolve a dotted key such as ``templates.all``.

        Falls back to the default language, then to the key itself.
        """
        parts = key.split(".")
        value = self._resolve(lang, parts)
        if not isinstance(value, str):
            value = self._resolve(self.default_lang, parts)
            if isinstance(value, str):
                logger.warning("Missing %r for %r, using %r", key, lang, self.default_lang)
        if not isinstance(value, str):
            logger.warning("Missing %r for %r and default language, using raw key", key, lang)
            return key
        return value

    def lookup_pattern(self, lang: str, kind: QuantifierKind) -> str:
        """Sentence pattern with ``{sub}``/``{obj}`` placeholders for a kind."""
        return self.translate(lang, pattern_key(kind))

    def _terms(self, lang: str) -> List[str]:
        terms = self._resolve(lang, ["terms"])
        if not isinstance(terms, list):
            return []
        return list(dict.fromkeys(str(t) for t in terms if t))

    def lookup_vocabulary(self, lang: str) -> List[str]:
        """
        Candidate terms for the three variables.

        Returns the language's terms when it has at least three distinct
        ones, else the default language's, else the variable names.
        """
        terms = self._terms(lang)
        if len(terms) >= MIN_TERMS:
            return terms
        terms = self._terms(self.default_lang)
        if len(terms) >= MIN_TERMS:
            logger.warning("Vocabulary for %r incomplete, using %r", lang, self.default_lang)
            return terms
        logger.warning("No usable vocabulary for %r, using variable names", lang)
        return [v.value for v in VARIABLES]
