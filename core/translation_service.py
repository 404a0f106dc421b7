
from typing import Optional

import locforge_config as config
from core.plugin_manager import EngineRegistry
from interfaces.i_plugin import ITranslationEngine
from locforge_exceptions import ConfigurationError
from locforge_logger import get_logger

logger = get_logger("core.translation_service")


class TranslationService:
    """
    Translation Client. Handles:
    1. Pre-condition short-circuit (empty text / empty credential)
    2. Engine selection
    3. Delegation of exactly one source -> target call

    Failures surface as TranslationError (NetworkError, ResponseParseError).
    Batching over several target languages is the caller's job.
    """

    def __init__(self, engine: Optional[ITranslationEngine] = None,
                 engine_id: str = config.DEFAULT_ENGINE_ID,
                 source_language: str = config.SOURCE_LANGUAGE,
                 timeout: float = config.REQUEST_TIMEOUT_SECONDS):
        if engine is None:
            engine = EngineRegistry().get_engine(engine_id)
            if engine is None:
                raise ConfigurationError(f"Unknown translation engine: {engine_id}",
                                         details={'available': EngineRegistry().engine_ids()})
        self.engine = engine
        self.source_language = source_language
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: dict) -> 'TranslationService':
        return cls(engine_id=settings.get("active_engine", config.DEFAULT_ENGINE_ID),
                   timeout=settings.get("request_timeout", config.REQUEST_TIMEOUT_SECONDS))

    @property
    def requires_credential(self) -> bool:
        return self.engine.requires_credential

    def translate(self, text: str, target_language: str, credential: str) -> str:
        """
        Translate text into target_language.

        Empty text, or an empty credential for an engine that needs one, is
        returned unchanged without any remote call.

        Raises:
            TranslationError: transport, status or parse failure
        """
        if not text:
            return text
        if not credential and self.engine.requires_credential:
            return text

        target = target_language.upper()
        logger.debug(f"[{self.engine.name}] {self.source_language} -> {target}: {text[:40]!r}")
        return self.engine.translate(text, self.source_language, target, credential or "",
                                     timeout=self.timeout)
