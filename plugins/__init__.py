# -*- coding: utf-8 -*-
"""
LocForge Plugin Package

Translation engines behind the Translation Client. Custom engines implement
interfaces.i_plugin.ITranslationEngine and are registered with
core.plugin_manager.EngineRegistry.
"""

from plugins.built_in.deepl_engine import DeepLEngine
from plugins.built_in.google_engine import GoogleTranslateEngine
from plugins.built_in.dummy_engine import DummyEngine

__all__ = [
    'DeepLEngine',
    'GoogleTranslateEngine',
    'DummyEngine',
]
