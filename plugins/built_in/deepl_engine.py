
from typing import Any, Dict, List

import requests

import locforge_config as config
from interfaces.i_plugin import ITranslationEngine
from locforge_exceptions import NetworkError, ResponseParseError, TranslationError
from locforge_logger import get_logger

logger = get_logger("plugin.deepl")


def select_endpoint(auth_key: str) -> str:
    """Free-tier keys end with ':fx'; every other key targets the full API."""
    if auth_key.endswith(config.DEEPL_FREE_KEY_SUFFIX):
        return config.DEEPL_API_URL_FREE
    return config.DEEPL_API_URL_PRO


class DeepLEngine(ITranslationEngine):
    """
    DeepL translation over its v2 REST API (form-encoded POST).
    """

    @property
    def id(self) -> str:
        return "locforge.engine.deepl"

    @property
    def name(self) -> str:
        return "DeepL"

    def translate(self, text: str, source_lang: str, target_lang: str,
                  credential: str, timeout: float = config.REQUEST_TIMEOUT_SECONDS) -> str:
        url = select_endpoint(credential)
        form = {
            "auth_key": credential,
            "text": text,
            "target_lang": target_lang,
            "source_lang": source_lang,
        }

        try:
            response = requests.post(url, data=form, timeout=timeout)
        except requests.Timeout as e:
            raise NetworkError(f"DeepL request timed out after {timeout}s", text, target_lang) from e
        except requests.RequestException as e:
            raise NetworkError(f"DeepL request failed: {e}", text, target_lang) from e

        if not response.ok:
            logger.error(f"DeepL Error: {response.status_code} | Response: {response.text[:200]}")
            raise TranslationError(f"DeepL returned HTTP {response.status_code}", text, target_lang,
                                   status_code=response.status_code)

        return self._parse_response(response, text, target_lang)

    def _parse_response(self, response: requests.Response, text: str, target_lang: str) -> str:
        try:
            payload: Dict[str, Any] = response.json()
        except ValueError as e:
            raise ResponseParseError(f"Failed to parse DeepL response: {e}", text, target_lang) from e

        translations = payload.get("translations") if isinstance(payload, dict) else None
        if not isinstance(translations, list) or not translations:
            raise ResponseParseError("DeepL response carries no translations", text, target_lang)

        first = translations[0]
        translated = first.get("text") if isinstance(first, dict) else None
        if not isinstance(translated, str):
            raise ResponseParseError("DeepL translation has no text", text, target_lang)
        return translated

    def get_supported_languages(self) -> List[str]:
        return ["EN", "ES", "FR", "DE", "IT", "PT", "NL", "PL", "RU", "JA", "ZH", "TR"]
