# -*- coding: utf-8 -*-
"""
LocForge Text Undo Manager

Snapshot capture and restore for text write-back (resolve) batches.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from interfaces.i_content import ITextComponent
from locforge_logger import get_logger
logger = get_logger("models.text_undo")


@dataclass
class TextState:
    """Text of a single component before the batch touched it."""
    component: ITextComponent
    text: str


@dataclass
class UndoSnapshot:
    """Snapshot of every component written during one batch."""
    label: str
    states: List[TextState] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    def component_count(self) -> int:
        return len(self.states)


class TextUndoManager:
    """
    Records text writes so the last batch can be reverted.

    Stack depth is 1: a finished batch that wrote anything replaces the
    previous snapshot; an empty batch leaves it in place.
    Only the first write to a component within a batch is recorded.
    """

    def __init__(self):
        self._snapshot: Optional[UndoSnapshot] = None
        self._pending: Optional[UndoSnapshot] = None

    def begin(self, label: str = "Localize Text") -> UndoSnapshot:
        self._pending = UndoSnapshot(label=label)
        return self._pending

    def end(self):
        pending, self._pending = self._pending, None
        if pending is None:
            return
        if pending.component_count() == 0:
            logger.debug(f"[TextUndoManager] '{pending.label}' wrote nothing; keeping previous snapshot")
            return
        self._snapshot = pending
        logger.debug(f"[TextUndoManager] '{pending.label}' captured "
                     f"{pending.component_count()} components")

    def record(self, component: ITextComponent):
        """Remember the component's text before it is overwritten."""
        if self._pending is None:
            return
        if any(state.component is component for state in self._pending.states):
            return
        self._pending.states.append(TextState(component=component, text=component.get_text()))

    def has_undo(self) -> bool:
        return self._snapshot is not None and self._snapshot.component_count() > 0

    def get_snapshot(self) -> Optional[UndoSnapshot]:
        return self._snapshot

    def restore(self) -> int:
        """
        Restore the components of the last batch.

        Returns:
            Number of components restored (0 when there is nothing to undo)
        """
        if not self.has_undo():
            logger.warning("[TextUndoManager] No snapshot to restore")
            return 0

        snapshot = self._snapshot
        for state in snapshot.states:
            state.component.set_text(state.text)

        logger.info(f"[TextUndoManager] Restored {snapshot.component_count()} components "
                    f"('{snapshot.label}')")
        self.clear()
        return snapshot.component_count()

    def clear(self):
        self._snapshot = None
        self._pending = None
