# -*- coding: utf-8 -*-
"""
LocForge Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
from pathlib import Path
from typing import List

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from interfaces.i_plugin import ITranslationEngine
from locforge_exceptions import TranslationError


class RecordingEngine(ITranslationEngine):
    """Engine double: records every call and fails for chosen languages."""

    def __init__(self, fail_languages=(), requires_credential=True):
        self.calls: List[tuple] = []
        self.fail_languages = {code.upper() for code in fail_languages}
        self._requires_credential = requires_credential

    @property
    def id(self) -> str:
        return "test.engine.recording"

    @property
    def name(self) -> str:
        return "Recording Engine"

    @property
    def requires_credential(self) -> bool:
        return self._requires_credential

    def translate(self, text, source_lang, target_lang, credential, timeout=30):
        self.calls.append((text, source_lang, target_lang, credential))
        if target_lang in self.fail_languages:
            raise TranslationError("HTTP 503", text, target_lang, status_code=503)
        return f"{text} ({target_lang.lower()})"


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file into tmp_path and clear the env credential."""
    import locforge_config as config
    settings_dir = tmp_path / "settings"
    monkeypatch.setattr(config, "SETTINGS_DIR", settings_dir)
    monkeypatch.setattr(config, "SETTINGS_FILE_PATH", settings_dir / "settings.json")
    monkeypatch.delenv(config.AUTH_KEY_ENV_VAR, raising=False)
    return settings_dir / "settings.json"


@pytest.fixture
def settings(tmp_path):
    from locforge_settings import get_default_settings
    data = get_default_settings()
    data["dataset_path"] = str(tmp_path / "localization_data.json")
    data["auth_key"] = "test-key:fx"
    return data


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def sample_scene():
    """Scene with plain and rich text, a nested inactive node and a keyed node."""
    from models.content_tree import ContentScene, ContentNode, LabelText, RichText

    canvas = ContentNode(name="Canvas")
    title = canvas.add_child(ContentNode(name="Title", component=LabelText("Welcome")))
    menu = canvas.add_child(ContentNode(name="Menu"))
    menu.add_child(ContentNode(name="Play Button", component=RichText("Play Game")))
    menu.add_child(ContentNode(name="Hidden", component=LabelText("Secret Level"), active=False))
    menu.add_child(ContentNode(name="Spacer", component=LabelText("   ")))
    title.add_child(ContentNode(name="Keyed", component=LabelText("LOC_ALREADY_12")))

    return ContentScene(name="Main Menu", roots=[canvas])


@pytest.fixture
def sample_dataset():
    from models.dataset import LocalizationDataset, TranslationEntry
    return LocalizationDataset([
        TranslationEntry(key="LOC_A", source_text="Hello", translations={"ES": "Hola", "FR": "Bonjour"}),
        TranslationEntry(key="LOC_B", source_text="World", translations={"ES": "Mundo"}),
    ])


@pytest.fixture
def dataset_store(tmp_path):
    from core.dataset_store import DatasetStore
    return DatasetStore(tmp_path / "localization_data.json")


# =============================================================================
# TRANSLATION FIXTURES
# =============================================================================

@pytest.fixture
def recording_engine():
    return RecordingEngine()


@pytest.fixture
def translator(recording_engine):
    from core.translation_service import TranslationService
    return TranslationService(engine=recording_engine)


@pytest.fixture
def reconciliation_engine(translator, dataset_store):
    from core.reconciliation import ReconciliationEngine
    dataset = dataset_store.create()
    return ReconciliationEngine(dataset, translator, dataset_store)


# =============================================================================
# TEMP FILE FIXTURES
# =============================================================================

@pytest.fixture
def scene_file(tmp_path) -> Path:
    """Scene document on disk."""
    import json
    path = tmp_path / "scenes" / "main_menu.json"
    path.parent.mkdir()
    path.write_text(json.dumps({
        "name": "MainMenu",
        "nodes": [
            {"name": "Canvas", "children": [
                {"name": "Title", "text": {"kind": "label", "value": "Welcome"}},
                {"name": "Start", "text": {"kind": "rich_text", "value": "Start"}},
            ]},
        ],
    }), encoding='utf-8')
    return path


@pytest.fixture
def scripts_dir(tmp_path) -> Path:
    """Source tree with a gameplay script, an editor script and the tooling itself."""
    root = tmp_path / "Scripts"
    (root / "Gameplay").mkdir(parents=True)
    (root / "Editor").mkdir()
    (root / "Tools" / "Localization").mkdir(parents=True)

    (root / "Gameplay" / "Hud.cs").write_text('\n'.join([
        'using UnityEngine;',
        '// "Skip me"',
        'public class Hud {',
        '    Debug.Log("Skip me too");',
        '    var x = "Keep This";',
        '    label.text = "Game Over" + "OK" + "Score";',
        '    tag = "Player";',
        '}',
    ]), encoding='utf-8')
    (root / "Editor" / "Inspector.cs").write_text('var t = "Editor Only";', encoding='utf-8')
    (root / "Tools" / "Localization" / "Scanner.cs").write_text('var t = "Tool Text";', encoding='utf-8')
    (root / "Gameplay" / "notes.txt").write_text('"Not a script"', encoding='utf-8')
    return root
