# -*- coding: utf-8 -*-
"""
Base Scanner Classes

Abstract base class and Strategy protocol shared by the scanners.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Protocol

from locforge_logger import get_logger

logger = get_logger("scanner.base")


class ScannerStrategy(Protocol):
    """
    Protocol for scanner strategies.

    Using Protocol allows structural subtyping without explicit inheritance.
    """

    def scan(self, source: Any) -> List[Any]:
        """
        Scan a source for translatable text.

        Args:
            source: Scene document or directory path

        Returns:
            List of findings in discovery order
        """
        ...


class BaseScanner(ABC):
    """
    Abstract base class for scanners.

    Holds the findings list of the current pass; scan() resets it.
    """

    def __init__(self):
        self._findings: List[Any] = []

    @abstractmethod
    def scan(self, source: Any) -> List[Any]:
        """Scan a source into findings."""
        pass

    @property
    def last_findings(self) -> List[Any]:
        return list(self._findings)

    def reset(self):
        """Reset scanner state for a new pass."""
        self._findings = []
