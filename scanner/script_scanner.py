# -*- coding: utf-8 -*-
"""
Script Scanner

Lists quoted string literals found in source files as review candidates.
Findings never carry a key; promoting one to the dataset is an explicit,
separate step.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

import locforge_config as config
from locforge_logger import get_logger
from models.findings import ScriptFinding
from scanner.base import BaseScanner
from scanner.patterns import ScriptPatterns

logger = get_logger("scanner.script")


class ScriptScanner(BaseScanner):
    """
    Scanner for source-text files.

    Known lossy heuristics: any line containing a logging marker is skipped
    entirely, and escaped quotes end a literal early.

    Exclusion markers are matched against the full resolved path, so scanning
    from inside an excluded directory still skips it. A marker that happens to
    occur in a parent directory name excludes the whole tree.
    """

    def __init__(self,
                 extensions: Iterable[str] = config.SCRIPT_FILE_EXTENSIONS,
                 exclude_markers: Iterable[str] = config.SCRIPT_EXCLUDE_MARKERS):
        super().__init__()
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.exclude_markers = tuple(exclude_markers)

    def scan(self, root: Union[str, Path]) -> List[ScriptFinding]:
        self.reset()
        root_path = Path(root)

        if not root_path.is_dir():
            logger.error(f"Script scan: directory not found: {root_path}")
            return []

        for file_path in self._iter_source_files(root_path):
            self._scan_file(file_path)

        logger.info(f"Scanned scripts under {root_path}: {len(self._findings)} strings")
        return self.last_findings

    def _iter_source_files(self, root_path: Path) -> List[Path]:
        files = []
        resolved_root = root_path.resolve()
        for path in sorted(root_path.rglob('*')):
            if not path.is_file() or path.suffix.lower() not in self.extensions:
                continue
            if ScriptPatterns.is_excluded_path(
                    (resolved_root / path.relative_to(root_path)).as_posix(), self.exclude_markers):
                logger.debug(f"Skipping excluded file: {path}")
                continue
            files.append(path)
        return files

    def _read_lines(self, file_path: Path) -> Optional[List[str]]:
        try:
            # Universal newlines: only \r, \n and \r\n end a line
            with file_path.open('r', encoding='utf-8-sig', newline=None) as f:
                return [line.rstrip('\n') for line in f]
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {file_path}: {e}")
            return None

    def _scan_file(self, file_path: Path):
        lines = self._read_lines(file_path)
        if lines is None:
            return

        for line_number, line in enumerate(lines, start=1):
            if ScriptPatterns.is_comment_line(line):
                continue
            if ScriptPatterns.is_log_line(line):
                continue

            for literal in ScriptPatterns.extract_literals(line.strip()):
                if ScriptPatterns.is_candidate(literal):
                    self._findings.append(ScriptFinding(
                        file_path=str(file_path),
                        line_number=line_number,
                        matched_string=literal,
                    ))


def scan_source_files(root: Union[str, Path],
                      extensions: Iterable[str] = config.SCRIPT_FILE_EXTENSIONS,
                      exclude_markers: Iterable[str] = config.SCRIPT_EXCLUDE_MARKERS) -> List[ScriptFinding]:
    """Scan every source file under root."""
    return ScriptScanner(extensions, exclude_markers).scan(root)
