# -*- coding: utf-8 -*-
"""
LocForge Scan Findings

Ephemeral results of a scan pass, discarded once reviewed or processed.
"""

import weakref
from dataclasses import dataclass, field
from typing import Optional

from interfaces.i_content import ITextComponent


@dataclass
class ScanFinding:
    """
    A translatable text found in a scene.

    The component is held through a weak reference: the scene owns it, the
    finding only keeps a handle to write a key back later.

    Attributes:
        scene_name (str): Name of the containing scene document.
        node_path (str): Slash-separated path of the node inside the scene.
        node_name (str): Name of the node hosting the component.
        text (str): Displayed text at scan time.
        suggested_key (str): Key derived from the node name and the text.
    """
    scene_name: str
    node_path: str
    node_name: str
    text: str
    suggested_key: str
    _component_ref: Optional[weakref.ref] = field(default=None, repr=False, compare=False)

    @classmethod
    def create(cls, scene_name: str, node_path: str, node_name: str, text: str,
               suggested_key: str, component: ITextComponent) -> 'ScanFinding':
        return cls(
            scene_name=scene_name,
            node_path=node_path,
            node_name=node_name,
            text=text,
            suggested_key=suggested_key,
            _component_ref=weakref.ref(component),
        )

    @property
    def component(self) -> Optional[ITextComponent]:
        """The live component, or None when the scene no longer holds it."""
        if self._component_ref is None:
            return None
        return self._component_ref()


@dataclass(frozen=True)
class ScriptFinding:
    """A quoted literal found in a source file. Never carries a key."""
    file_path: str
    line_number: int
    matched_string: str

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line_number}"
