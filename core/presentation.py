
from dataclasses import dataclass
from typing import Iterable, List

from core.key_generator import looks_like_key
from interfaces.i_content import ITextComponent
from locforge_enums import Language
from locforge_logger import get_logger
from models.content_tree import ContentScene
from models.dataset import LocalizationDataset

logger = get_logger("core.presentation")


@dataclass
class LocalizedItem:
    component: ITextComponent
    key: str


class PresentationResolver:
    """
    Swaps the visible text of keyed components when the language changes.

    Components are cached once (cache_components) while they still display
    their keys; later writes replace the key with language text, so the cache
    is the only place the key is remembered.
    """

    def __init__(self, dataset: LocalizationDataset, language: Language = Language.SOURCE):
        self.dataset = dataset
        self._language = language
        self._items: List[LocalizedItem] = []

    @property
    def current_language(self) -> Language:
        return self._language

    @property
    def items(self) -> List[LocalizedItem]:
        return list(self._items)

    def cache_components(self, scenes: Iterable[ContentScene]) -> int:
        self._items.clear()
        for scene in scenes:
            for component in scene.find_text_components():
                text = component.get_text()
                if looks_like_key(text):
                    self._items.append(LocalizedItem(component=component, key=text))

        logger.info(f"Localization: Found {len(self._items)} localized items.")
        return len(self._items)

    def set_language(self, language: Language) -> int:
        """Apply a language to every cached component; returns how many were updated."""
        self._language = language
        return self.update_all_text()

    def update_all_text(self) -> int:
        updated = 0
        for item in self._items:
            entry = self.dataset.find_by_key(item.key)
            if entry is None:
                logger.debug(f"No entry for key {item.key}; left as is")
                continue
            item.component.set_text(entry.text_for(self._language))
            updated += 1
        return updated
