"""
LocForge Enum Definitions

Type-safe enums for display languages and text component kinds.
"""

from enum import Enum


class Language(str, Enum):
    """Display languages selectable at presentation time."""
    SOURCE = 'EN'
    SPANISH = 'ES'
    FRENCH = 'FR'

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> 'Language':
        """Resolve a language from its code ('es') or member name ('spanish')."""
        normalized = (code or '').strip().upper()
        for member in cls:
            if member.value == normalized or member.name == normalized:
                return member
        raise ValueError(f"Unknown language: {code!r}")


class ComponentKind(str, Enum):
    """Text component kinds found in scene documents."""
    LABEL = 'label'
    RICH_TEXT = 'rich_text'
