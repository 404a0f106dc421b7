# -*- coding: utf-8 -*-
"""
LocForge Dataset Model

The localization dataset: an ordered collection of translation entries,
looked up by key or by original source text.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Any

import locforge_config as config
from locforge_enums import Language
from locforge_logger import get_logger

logger = get_logger("models.dataset")


@dataclass
class TranslationEntry:
    """
    One row of the dataset.

    Attributes:
        key (str): Unique lookup token, e.g. "LOC_TITLE_412".
        source_text (str): The original-language string.
        translations (Dict[str, str]): Language code -> translated text.
    """
    key: str
    source_text: str
    translations: Dict[str, str] = field(default_factory=dict)

    def get_translation(self, language_code: str) -> Optional[str]:
        return self.translations.get(language_code.upper())

    def set_translation(self, language_code: str, text: str):
        self.translations[language_code.upper()] = text

    def text_for(self, language: Language) -> str:
        """Text to display for a language, falling back to the source text."""
        if language.code == config.SOURCE_LANGUAGE:
            return self.source_text
        translated = self.translations.get(language.code)
        if not translated:
            return self.source_text
        return translated

    def missing_languages(self, language_codes: Iterable[str]) -> List[str]:
        return [code for code in language_codes if not self.translations.get(code.upper())]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "source_text": self.source_text,
            "translations": dict(self.translations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TranslationEntry':
        translations = data.get("translations") or {}
        return cls(
            key=str(data["key"]),
            source_text=str(data.get("source_text", "")),
            translations={str(k).upper(): str(v) for k, v in translations.items() if v is not None},
        )


class LocalizationDataset:
    """
    Ordered sequence of TranslationEntry records.

    Lookups return the first entry in insertion order. add() appends without
    checking uniqueness; callers consult find_by_key() first. The two dicts
    below only remember the first position of each key and source text.
    """

    def __init__(self, entries: Optional[Iterable[TranslationEntry]] = None):
        self._entries: List[TranslationEntry] = []
        self._key_index: Dict[str, TranslationEntry] = {}
        self._source_index: Dict[str, TranslationEntry] = {}
        self.dirty = False

        for entry in entries or ():
            self._append(entry)

    def _append(self, entry: TranslationEntry):
        self._entries.append(entry)
        self._key_index.setdefault(entry.key, entry)
        self._source_index.setdefault(entry.source_text, entry)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def find_by_key(self, key: str) -> Optional[TranslationEntry]:
        return self._key_index.get(key)

    def find_by_source_text(self, text: str) -> Optional[TranslationEntry]:
        return self._source_index.get(text)

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add(self, entry: TranslationEntry):
        """Append an entry. Does not check key uniqueness."""
        self._append(entry)
        self.dirty = True
        logger.debug(f"Entry added: {entry.key}")

    def mark_dirty(self):
        self.dirty = True

    def mark_clean(self):
        self.dirty = False

    # =========================================================================
    # ACCESS
    # =========================================================================

    @property
    def entries(self) -> List[TranslationEntry]:
        """Entries in insertion order (copy of the list)."""
        return list(self._entries)

    def keys(self) -> List[str]:
        return [entry.key for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranslationEntry]:
        return iter(list(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._key_index

    def __repr__(self):
        return f"<LocalizationDataset entries={len(self._entries)} dirty={self.dirty}>"
