# -*- coding: utf-8 -*-
"""
Content Interfaces

Protocol for the text-bearing components of an external content tree.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ITextComponent(Protocol):
    """
    A presentable component that displays a single piece of text.

    Scanners read through get_text(); write-back and presentation write
    through set_text(). Concrete components live outside the pipeline.
    """

    def get_text(self) -> str:
        """Return the currently displayed text."""
        ...

    def set_text(self, value: str) -> None:
        """Replace the displayed text."""
        ...
