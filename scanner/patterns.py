# -*- coding: utf-8 -*-
"""
Script Scanner Patterns

Centralized patterns and line filters for extracting string literals from
source files.
"""

import re
from typing import Iterable

import locforge_config as config


class ScriptPatterns:
    """
    Collection of patterns for scanning source text.

    Organized by category:
    - Literal extraction (double-quoted strings)
    - Line filters (comments, logging calls)
    - Literal filters (stoplist, minimum length)
    """

    # =========================================================================
    # LITERAL EXTRACTION
    # =========================================================================

    # Everything between two double quotes. Escaped quotes are not handled:
    # "say \"hi\"" yields "say \" as the first literal.
    STRING_LITERAL = re.compile(r'"([^"]*)"')

    # =========================================================================
    # LINE FILTERS
    # =========================================================================

    COMMENT_PREFIXES = config.SCRIPT_COMMENT_PREFIXES
    LOG_MARKERS = config.SCRIPT_LOG_MARKERS

    # =========================================================================
    # LITERAL FILTERS
    # =========================================================================

    IGNORED_STRINGS = config.SCRIPT_IGNORED_STRINGS
    MIN_LITERAL_LENGTH = config.SCRIPT_MIN_LITERAL_LENGTH

    @classmethod
    def is_comment_line(cls, line: str) -> bool:
        """Check if a line is a line comment or opens a block comment."""
        return line.strip().startswith(tuple(cls.COMMENT_PREFIXES))

    @classmethod
    def is_log_line(cls, line: str) -> bool:
        return any(marker in line for marker in cls.LOG_MARKERS)

    @classmethod
    def extract_literals(cls, line: str) -> list:
        return cls.STRING_LITERAL.findall(line)

    @classmethod
    def is_candidate(cls, literal: str) -> bool:
        """Check if an extracted literal is worth showing for review."""
        if not literal:
            return False
        if literal in cls.IGNORED_STRINGS:
            return False
        return len(literal) >= cls.MIN_LITERAL_LENGTH

    @staticmethod
    def is_excluded_path(path: str, markers: Iterable[str]) -> bool:
        """Check if a path belongs to editor code or the tooling itself."""
        return any(marker in path for marker in markers)
