"""
Localized keyword tables
Maps each grammar keyword category to the literal prefixes used by one language
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

import yaml

from featurespec.parser.errors import KeywordDatasetError, UnknownLanguageError
from featurespec.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_LANGUAGES_FILE = Path(__file__).resolve().parent.parent / 'data' / 'languages.yaml'


class KeywordCategory(Enum):
    FEATURE = "Feature"
    BACKGROUND = "Background"
    SCENARIO = "Scenario"
    SCENARIO_OUTLINE = "ScenarioOutline"
    GIVEN = "Given"
    AND = "And"
    WHEN = "When"
    THEN = "Then"
    EXAMPLES = "Examples"


LanguageEntry = Dict[KeywordCategory, Tuple[str, ...]]


class KeywordDataset:
    """Validated, in-memory keyword dataset keyed by language code"""

    def __init__(self, languages: Dict[str, LanguageEntry]):
        self._languages = languages

    @classmethod
    def from_dict(cls, data: Mapping) -> 'KeywordDataset':
        """Build a dataset from {code: {category name: prefix or [prefixes]}}"""
        if not isinstance(data, Mapping):
            raise KeywordDatasetError("Keyword dataset must be a mapping of language codes")

        languages = {}
        for code, categories in data.items():
            if not isinstance(categories, Mapping):
                raise KeywordDatasetError(f"Language '{code}' must map categories to prefixes")

            entry = {}
            for name, candidates in categories.items():
                try:
                    category = KeywordCategory(name)
                except ValueError:
                    raise KeywordDatasetError(f"Unknown keyword category '{name}' in language '{code}'")

                if isinstance(candidates, str):
                    candidates = [candidates]
                if not isinstance(candidates, list):
                    raise KeywordDatasetError(f"Prefixes for {code}.{name} must be a string or a list")
                for candidate in candidates:
                    if not isinstance(candidate, str) or not candidate.strip():
                        raise KeywordDatasetError(f"Empty or non-string prefix in {code}.{name}: {candidate!r}")

                entry[category] = tuple(candidates)
            languages[str(code)] = entry

        return cls(languages)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'KeywordDataset':
        """Load a dataset from a YAML file"""
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        dataset = cls.from_dict(data or {})
        logger.debug(f"Loaded keywords for {len(dataset.languages())} languages from {path}")
        return dataset

    @classmethod
    def default(cls) -> 'KeywordDataset':
        """Dataset shipped with the package"""
        return cls.from_yaml(DEFAULT_LANGUAGES_FILE)

    def languages(self) -> List[str]:
        return sorted(self._languages)

    def entry(self, language: str) -> Optional[LanguageEntry]:
        return self._languages.get(language)

    def __contains__(self, language: str) -> bool:
        return language in self._languages


class KeywordTable:
    """Keyword prefixes of a single language"""

    def __init__(self, language: str, entry: LanguageEntry):
        self.language = language
        self._entry = entry

    @classmethod
    def load(cls, dataset: KeywordDataset, language: str) -> 'KeywordTable':
        """Select the table for a language code; unknown codes fail immediately"""
        entry = dataset.entry(language)
        if entry is None:
            raise UnknownLanguageError(language, dataset.languages())
        return cls(language, entry)

    def candidates(self, category: KeywordCategory) -> Tuple[str, ...]:
        return self._entry.get(category, ())

    def _match(self, line: str, category: KeywordCategory) -> Optional[str]:
        """First candidate the left-trimmed line starts with, ignoring case"""
        text = line.lstrip()
        for candidate in self.candidates(category):
            if text[:len(candidate)].lower() == candidate.lower():
                return candidate
        return None

    def matches(self, line: str, category: KeywordCategory) -> bool:
        return self._match(line, category) is not None

    def strip(self, line: str, category: KeywordCategory) -> str:
        """Text following the matched keyword, trimmed; empty when nothing matches"""
        candidate = self._match(line, category)
        if candidate is None:
            return ''
        return line.lstrip()[len(candidate):].strip()
