
from typing import List

import locforge_config as config
from interfaces.i_plugin import ITranslationEngine


class DummyEngine(ITranslationEngine):
    """
    Offline engine for dry runs and tests: prefixes the text with the target code.
    """

    def __init__(self, prefix_format: str = "[{lang}] "):
        self.prefix_format = prefix_format

    @property
    def id(self) -> str:
        return "locforge.engine.dummy"

    @property
    def name(self) -> str:
        return "Dummy Engine (Test)"

    @property
    def requires_credential(self) -> bool:
        return False

    def translate(self, text: str, source_lang: str, target_lang: str,
                  credential: str, timeout: float = config.REQUEST_TIMEOUT_SECONDS) -> str:
        return f"{self.prefix_format.format(lang=target_lang)}{text}"

    def get_supported_languages(self) -> List[str]:
        return ["EN", "ES", "FR", "DE"]
