# -*- coding: utf-8 -*-
"""
LocForge Localization Controller

Operator-facing controls, each a thin pass-through into the pipeline:
- Create / load the dataset
- Scan scenes and scripts
- Process & translate scene findings
- Add a single reviewed script string
- Replace scene text with keys (and undo it)
- Preview a language
"""

from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import locforge_settings as settings_io
from core.dataset_store import DatasetStore
from core.presentation import PresentationResolver
from core.reconciliation import ReconciliationEngine, ReconcileReport
from core.translation_service import TranslationService
from locforge_enums import Language
from locforge_exceptions import MissingDatasetError
from locforge_logger import get_logger
from models.content_tree import ContentScene, load_scene, save_scene
from models.dataset import LocalizationDataset, TranslationEntry
from models.findings import ScanFinding, ScriptFinding
from scanner.script_scanner import ScriptScanner
from scanner.tree_scanner import TreeScanner

logger = get_logger("controllers.localization")


class LocalizationController:
    """
    Session state of one localization run: settings, dataset, loaded scenes
    and the findings of the last scans.
    """

    def __init__(self,
                 settings: Optional[dict] = None,
                 store: Optional[DatasetStore] = None,
                 translator: Optional[TranslationService] = None):
        self.settings = settings if settings is not None else settings_io.load_settings()
        self.store = store or DatasetStore(self.settings["dataset_path"])
        self.translator = translator or TranslationService.from_settings(self.settings)

        self.dataset: Optional[LocalizationDataset] = None
        self.scenes: List[ContentScene] = []
        self.scan_results: List[ScanFinding] = []
        self.script_results: List[ScriptFinding] = []

        self.engine = ReconciliationEngine(None, self.translator, self.store)
        self._data_loaded = False

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    @property
    def credential(self) -> str:
        return self.settings.get("auth_key") or ""

    @property
    def target_languages(self) -> List[str]:
        return list(self.settings["target_languages"])

    def set_credential(self, auth_key: str, persist: bool = True):
        self.settings["auth_key"] = (auth_key or "").strip()
        if persist:
            settings_io.save_settings(self.settings)

    # =========================================================================
    # DATASET
    # =========================================================================

    def load_data(self) -> Optional[LocalizationDataset]:
        try:
            self.dataset = self.store.load()
        except MissingDatasetError:
            logger.info(f"No dataset at {self.store.path}.")
            self.dataset = None
        self._data_loaded = True
        self.engine.dataset = self.dataset
        return self.dataset

    def _ensure_data(self):
        """Load the dataset on first use by an operation that needs it."""
        if not self._data_loaded:
            self.load_data()

    def create_data_file(self) -> LocalizationDataset:
        self.dataset = self.store.create()
        self._data_loaded = True
        self.engine.dataset = self.dataset
        return self.dataset

    # =========================================================================
    # SCANNING
    # =========================================================================

    def open_scenes(self, paths: Iterable[Union[str, Path]]) -> List[ContentScene]:
        self.scenes = [load_scene(path) for path in paths]
        return self.scenes

    def scan_scene(self) -> List[ScanFinding]:
        scanner = TreeScanner(self.settings.get("include_scene_in_key", False))
        self.scan_results = []
        for scene in self.scenes:
            self.scan_results.extend(scanner.scan(scene))
        logger.info(f"Scanned {len(self.scan_results)} items.")
        return self.scan_results

    def scan_scripts(self, root: Union[str, Path]) -> List[ScriptFinding]:
        self.script_results = ScriptScanner().scan(root)
        logger.info(f"Scanned scripts. Found {len(self.script_results)} strings.")
        return self.script_results

    # =========================================================================
    # DATASET UPDATES
    # =========================================================================

    def process_and_translate(self, cancel_token: Any = None) -> ReconcileReport:
        self._ensure_data()
        report = self.engine.reconcile(self.scan_results, self.credential,
                                       self.target_languages, cancel_token=cancel_token)
        if not report.canceled:
            self.scan_results = []
        return report

    def add_to_data(self, text: str) -> Optional[TranslationEntry]:
        self._ensure_data()
        return self.engine.add_text(text, self.credential, self.target_languages)

    def add_script_finding(self, index: int) -> Optional[TranslationEntry]:
        """Promote the script finding at index (as listed by the last script scan)."""
        if not 0 <= index < len(self.script_results):
            raise IndexError(f"No script finding #{index}")
        return self.add_to_data(self.script_results[index].matched_string)

    def fill_missing(self, cancel_token: Any = None) -> ReconcileReport:
        self._ensure_data()
        return self.engine.fill_missing_translations(self.credential, self.target_languages,
                                                     cancel_token=cancel_token)

    # =========================================================================
    # WRITE-BACK / PRESENTATION
    # =========================================================================

    def replace_scene_text(self, save: bool = True) -> int:
        """Re-scan the open scenes and write keys into every resolvable component."""
        self._ensure_data()
        findings = self.scan_scene()
        count = self.engine.resolve(findings)
        if save and count:
            for scene in self.scenes:
                save_scene(scene)
        return count

    def undo_replace(self) -> int:
        return self.engine.undo_last_resolve()

    def preview(self, language: Language) -> PresentationResolver:
        self._ensure_data()
        if self.dataset is None:
            raise MissingDatasetError("No localization dataset loaded.", file_path=str(self.store.path))
        resolver = PresentationResolver(self.dataset)
        resolver.cache_components(self.scenes)
        resolver.set_language(language)
        return resolver
