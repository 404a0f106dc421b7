
from abc import ABC, abstractmethod
from typing import List

# Engine API version - increment if breaking changes occur
LOCFORGE_ENGINE_API_VERSION = 1


class ITranslationEngine(ABC):
    """
    Interface for translation engines.

    An engine performs exactly one source -> target translation per call and
    reports failure by raising TranslationError (or a subclass). It never
    returns partial text.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    def requires_credential(self) -> bool:
        return True

    @abstractmethod
    def translate(self,
                  text: str,
                  source_lang: str,
                  target_lang: str,
                  credential: str,
                  timeout: float = 30) -> str:
        """
        Translate one text.

        Args:
            text: Source text (never empty here)
            source_lang: Source language code, e.g. "EN"
            target_lang: Target language code, e.g. "ES"
            credential: API key, may be empty for engines without one
            timeout: Seconds before the call is treated as a transport failure

        Returns:
            Translated text

        Raises:
            TranslationError: on any failure
        """
        pass

    def get_supported_languages(self) -> List[str]:
        return ["EN", "ES", "FR", "DE", "IT", "PT", "JA", "RU"]
