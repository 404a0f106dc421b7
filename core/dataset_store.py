
import json
import os
import tempfile
from pathlib import Path
from typing import Union

import locforge_config as config
from locforge_exceptions import DatasetLoadError, DatasetSaveError, MissingDatasetError
from locforge_logger import get_logger
from models.dataset import LocalizationDataset, TranslationEntry

logger = get_logger("core.dataset_store")


class DatasetStore:
    """
    JSON persistence for the localization dataset.

    File layout:
        {"version": 1, "entries": [{"key": ..., "source_text": ..., "translations": {...}}]}
    """

    def __init__(self, path: Union[str, Path] = config.DEFAULT_DATASET_PATH):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def create(self) -> LocalizationDataset:
        """Create an empty dataset file. An existing file is loaded instead."""
        if self.exists():
            logger.info(f"Dataset already exists: {self.path}")
            return self.load()
        dataset = LocalizationDataset()
        self.save(dataset)
        logger.info(f"Created dataset: {self.path}")
        return dataset

    def load(self) -> LocalizationDataset:
        if not self.exists():
            raise MissingDatasetError("Localization dataset not found. Create it first.",
                                      file_path=str(self.path))
        try:
            with self.path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DatasetLoadError(f"Could not read dataset: {e}", file_path=str(self.path)) from e

        if isinstance(data, list):
            # Bare list of records
            records = data
        elif isinstance(data, dict) and isinstance(data.get("entries", []), list):
            version = data.get("version", config.DATASET_FORMAT_VERSION)
            if not isinstance(version, int) or version > config.DATASET_FORMAT_VERSION:
                raise DatasetLoadError(f"Unsupported dataset version: {version}", file_path=str(self.path))
            records = data.get("entries", [])
        else:
            raise DatasetLoadError("Dataset format is invalid", file_path=str(self.path))

        try:
            dataset = LocalizationDataset(TranslationEntry.from_dict(record) for record in records)
        except (KeyError, TypeError, AttributeError) as e:
            raise DatasetLoadError(f"Invalid dataset record: {e}", file_path=str(self.path)) from e

        logger.debug(f"Dataset loaded: {len(dataset)} entries from {self.path}")
        return dataset

    def save(self, dataset: LocalizationDataset):
        """Write the dataset atomically (temp file + replace)."""
        payload = {
            "version": config.DATASET_FORMAT_VERSION,
            "entries": [entry.to_dict() for entry in dataset],
        }
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=self.path.parent,
                                             prefix=f".{self.path.name}.", suffix=".tmp",
                                             delete=False) as f:
                tmp_name = f.name
                json.dump(payload, f, indent=4, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise DatasetSaveError(f"Could not save dataset: {e}", file_path=str(self.path)) from e

        dataset.mark_clean()
        logger.info(f"Dataset saved: {len(dataset)} entries -> {self.path}")
