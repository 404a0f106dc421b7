# -*- coding: utf-8 -*-
"""
LocForge Models Package

Data models used by the pipeline: the localization dataset, scan findings,
the content tree of scene documents and write-back undo snapshots.
"""

from models.dataset import LocalizationDataset, TranslationEntry
from models.findings import ScanFinding, ScriptFinding
from models.content_tree import ContentScene, ContentNode, LabelText, RichText
from models.text_undo import TextUndoManager

__all__ = [
    'LocalizationDataset', 'TranslationEntry',
    'ScanFinding', 'ScriptFinding',
    'ContentScene', 'ContentNode', 'LabelText', 'RichText',
    'TextUndoManager',
]
