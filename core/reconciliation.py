# -*- coding: utf-8 -*-
"""
Reconciliation Engine

Merges scan findings into the localization dataset (forward flow) and writes
keys back into scanned components (reverse flow).

Forward:  finding -> key -> dataset lookup -> translate per language -> add -> save
Reverse:  finding -> lookup by key, then by text -> write key into component
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Union

from core.dataset_store import DatasetStore
from core.key_generator import generate_key
from core.translation_service import TranslationService
from interfaces.i_content import ITextComponent
from locforge_exceptions import MissingCredentialError, MissingDatasetError, TranslationError
from locforge_logger import get_logger
from models.dataset import LocalizationDataset, TranslationEntry
from models.findings import ScanFinding, ScriptFinding
from models.text_undo import TextUndoManager

logger = get_logger("core.reconciliation")

Finding = Union[ScanFinding, ScriptFinding]


@dataclass
class TranslationFailure:
    key: str
    language: str
    error: str


@dataclass
class ReconcileReport:
    """Outcome of a reconcile / fill pass."""
    added: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    failures: List[TranslationFailure] = field(default_factory=list)
    canceled: bool = False

    @property
    def added_count(self) -> int:
        return len(self.added)

    def summary(self) -> str:
        text = (f"added={len(self.added)} skipped={len(self.skipped)} "
                f"updated={len(self.updated)} failed_translations={len(self.failures)}")
        if self.canceled:
            text += " (canceled)"
        return text


def finding_key(finding: Finding) -> str:
    """Key for a finding: the suggested key, or one derived from the literal."""
    if isinstance(finding, ScanFinding):
        return finding.suggested_key
    return generate_key(finding.matched_string, finding.matched_string)


def finding_text(finding: Finding) -> str:
    if isinstance(finding, ScanFinding):
        return finding.text
    return finding.matched_string


def _is_canceled(cancel_token: Any) -> bool:
    return cancel_token is not None and hasattr(cancel_token, 'is_set') and cancel_token.is_set()


class ReconciliationEngine:
    """
    Orchestrates dataset updates for one editing session.

    The engine is the single writer of the dataset. Findings are processed one
    at a time; translation calls for a finding run in language order.
    """

    def __init__(self,
                 dataset: Optional[LocalizationDataset],
                 translator: TranslationService,
                 store: Optional[DatasetStore] = None,
                 undo_manager: Optional[TextUndoManager] = None):
        self.dataset = dataset
        self.translator = translator
        self.store = store
        self.undo_manager = undo_manager or TextUndoManager()

    # =========================================================================
    # PRECONDITIONS
    # =========================================================================

    def _require_dataset(self) -> LocalizationDataset:
        if self.dataset is None:
            raise MissingDatasetError("No localization dataset loaded. Create or load one first.",
                                      file_path=str(self.store.path) if self.store else None)
        return self.dataset

    def _require_credential(self, credential: Optional[str]):
        if not credential and self.translator.requires_credential:
            raise MissingCredentialError(f"Please enter an API key for {self.translator.engine.name}.")

    def _persist(self):
        if self.store is not None and self.dataset is not None:
            self.store.save(self.dataset)

    # =========================================================================
    # FORWARD FLOW
    # =========================================================================

    def _translate_into(self, entry: TranslationEntry, languages: Sequence[str],
                        credential: str, report: ReconcileReport) -> int:
        """Translate entry.source_text into each language; returns successes."""
        succeeded = 0
        for language in languages:
            try:
                translated = self.translator.translate(entry.source_text, language, credential)
            except TranslationError as e:
                logger.warning(f"Translation failed for {entry.key} [{language}]: {e}")
                report.failures.append(TranslationFailure(entry.key, language.upper(), str(e)))
                continue
            entry.set_translation(language, translated)
            succeeded += 1
        return succeeded

    def reconcile(self,
                  findings: Iterable[Finding],
                  credential: str,
                  target_languages: Sequence[str],
                  cancel_token: Any = None) -> ReconcileReport:
        """
        Add every finding without a dataset entry, translated into target_languages.

        Re-running over the same findings adds nothing and issues no calls.

        Raises:
            MissingDatasetError / MissingCredentialError: before any remote call
            DatasetSaveError: when persisting the batch fails

        Entries added before any other error are still saved before it
        propagates.
        """
        dataset = self._require_dataset()
        self._require_credential(credential)

        report = ReconcileReport()
        try:
            for finding in findings:
                if _is_canceled(cancel_token):
                    report.canceled = True
                    logger.info("Reconcile canceled by caller.")
                    break

                key = finding_key(finding)
                text = finding_text(finding)
                existing = dataset.find_by_key(key)
                if existing is not None:
                    if existing.source_text != text:
                        logger.debug(f"Key collision on {key}: {existing.source_text!r} vs {text!r}. Skipping.")
                    report.skipped.append(key)
                    continue

                entry = TranslationEntry(key=key, source_text=text)
                self._translate_into(entry, target_languages, credential, report)
                dataset.add(entry)
                report.added.append(key)
        finally:
            # Entries added before an unexpected error are kept
            if dataset.dirty:
                self._persist()

        logger.info(f"Reconcile finished: {report.summary()}")
        return report

    def add_text(self,
                 text: str,
                 credential: str,
                 target_languages: Sequence[str]) -> Optional[TranslationEntry]:
        """
        Promote one reviewed string (usually a script finding) to an entry.

        Without a credential the entry is added untranslated. The dataset is
        saved after the addition.

        Returns:
            The new entry, or None when its key already exists
        """
        dataset = self._require_dataset()
        key = generate_key(text, text)
        if dataset.find_by_key(key) is not None:
            logger.info(f"Already in dataset: {key}")
            return None

        entry = TranslationEntry(key=key, source_text=text)
        if credential or not self.translator.requires_credential:
            self._translate_into(entry, target_languages, credential, ReconcileReport())
        else:
            logger.warning("No API Key, skipping translation.")

        dataset.add(entry)
        self._persist()
        logger.info(f"Added {text!r} to data as {key}.")
        return entry

    def fill_missing_translations(self,
                                  credential: str,
                                  target_languages: Sequence[str],
                                  cancel_token: Any = None) -> ReconcileReport:
        """Translate the languages that existing entries still lack."""
        dataset = self._require_dataset()
        self._require_credential(credential)

        report = ReconcileReport()
        try:
            for entry in dataset:
                if _is_canceled(cancel_token):
                    report.canceled = True
                    break

                missing = entry.missing_languages(target_languages)
                if not missing:
                    report.skipped.append(entry.key)
                    continue

                if self._translate_into(entry, missing, credential, report):
                    dataset.mark_dirty()
                    report.updated.append(entry.key)
        finally:
            if dataset.dirty:
                self._persist()

        logger.info(f"Fill missing finished: {report.summary()}")
        return report

    # =========================================================================
    # REVERSE FLOW
    # =========================================================================

    def set_display_text(self, component: ITextComponent, text: str):
        """Single mutation point for write-back; recorded for undo."""
        self.undo_manager.record(component)
        component.set_text(text)

    def resolve(self, findings: Iterable[ScanFinding]) -> int:
        """
        Replace each finding's displayed text with its entry key.

        Returns:
            Number of components rewritten
        """
        dataset = self._require_dataset()
        count = 0

        self.undo_manager.begin("Localize Text")
        try:
            for finding in findings:
                entry = dataset.find_by_key(finding.suggested_key)
                if entry is None:
                    # Key inputs may have changed while the text did not
                    entry = dataset.find_by_source_text(finding.text)

                if entry is None:
                    logger.warning(f"Could not find entry for: '{finding.text}'. "
                                   f"Suggested Key was: {finding.suggested_key}")
                    continue

                component = finding.component
                if component is None:
                    logger.warning(f"Component at '{finding.node_path}' is gone; "
                                   f"cannot write {entry.key}")
                    continue

                self.set_display_text(component, entry.key)
                count += 1
        finally:
            self.undo_manager.end()

        logger.info(f"Replaced {count} texts with keys.")
        return count

    def undo_last_resolve(self) -> int:
        return self.undo_manager.restore()
