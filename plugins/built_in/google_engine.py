
from typing import List

import locforge_config as config
from interfaces.i_plugin import ITranslationEngine
from locforge_exceptions import NetworkError, TranslationError
from locforge_logger import get_logger

logger = get_logger("plugin.google")


class GoogleTranslateEngine(ITranslationEngine):
    """
    Google Translate (Free) engine using deep-translator. Needs no credential.
    """

    @property
    def id(self) -> str:
        return "locforge.engine.google_free"

    @property
    def name(self) -> str:
        return "Google Translate (Free)"

    @property
    def requires_credential(self) -> bool:
        return False

    def translate(self, text: str, source_lang: str, target_lang: str,
                  credential: str, timeout: float = config.REQUEST_TIMEOUT_SECONDS) -> str:
        from deep_translator import GoogleTranslator
        from deep_translator.exceptions import BaseError, RequestError, TooManyRequests
        import requests

        try:
            translator = GoogleTranslator(source=source_lang.lower(), target=target_lang.lower())
            translated = translator.translate(text)
        except (RequestError, TooManyRequests, requests.RequestException) as e:
            raise NetworkError(f"Google Translate request failed: {e}", text, target_lang) from e
        except BaseError as e:
            logger.error(f"Google Translation failed: {e}")
            raise TranslationError(f"Google Translate failed: {e}", text, target_lang) from e

        if not translated:
            raise TranslationError("Google Translate returned an empty result", text, target_lang)
        return translated

    def get_supported_languages(self) -> List[str]:
        return ["EN", "ES", "FR", "DE", "IT", "PT", "RU", "JA", "TR"]
