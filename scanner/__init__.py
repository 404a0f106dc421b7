# -*- coding: utf-8 -*-
"""
LocForge Scanner Package

Scanners that discover translatable text, using the Strategy pattern:
one strategy for structured scene trees, one for source-text files.
"""

from scanner.base import BaseScanner, ScannerStrategy
from scanner.patterns import ScriptPatterns
from scanner.tree_scanner import TreeScanner, scan_tree, scan_scenes
from scanner.script_scanner import ScriptScanner, scan_source_files

__all__ = [
    'BaseScanner',
    'ScannerStrategy',
    'ScriptPatterns',
    'TreeScanner',
    'ScriptScanner',
    'scan_tree',
    'scan_scenes',
    'scan_source_files',
]
