
from typing import List, Optional

from interfaces.i_plugin import ITranslationEngine
from locforge_logger import get_logger

logger = get_logger("core.plugin_manager")


class EngineRegistry:
    """
    Registry of translation engines, keyed by engine id.

    Built-in engines are registered on first use; custom engines can be added
    with register().
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(EngineRegistry, cls).__new__(cls)
            cls._instance.engines = {}  # id -> instance
            cls._instance._initialized = False
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    def initialize(self):
        if self._initialized:
            return

        from plugins.built_in.deepl_engine import DeepLEngine
        from plugins.built_in.google_engine import GoogleTranslateEngine
        from plugins.built_in.dummy_engine import DummyEngine

        for engine in (DeepLEngine(), GoogleTranslateEngine(), DummyEngine()):
            self.register(engine)

        self._initialized = True
        logger.debug(f"EngineRegistry initialized. {len(self.engines)} engines.")

    def register(self, engine: ITranslationEngine):
        if engine.id in self.engines:
            logger.warning(f"Engine ID collision: {engine.id}. Ignoring duplicate.")
            return
        logger.debug(f"Registering engine: {engine.name} ({engine.id})")
        self.engines[engine.id] = engine

    def get_engine(self, engine_id: str) -> Optional[ITranslationEngine]:
        self.initialize()
        return self.engines.get(engine_id)

    def get_all_engines(self) -> List[ITranslationEngine]:
        self.initialize()
        return list(self.engines.values())

    def engine_ids(self) -> List[str]:
        return [engine.id for engine in self.get_all_engines()]
