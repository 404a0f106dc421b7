# -*- coding: utf-8 -*-
"""
Unit tests for TextUndoManager.
"""

from models.content_tree import LabelText
from models.text_undo import TextUndoManager


class TestTextUndoManager:
    """Tests for TextUndoManager functionality."""

    def test_record_outside_batch_is_ignored(self):
        mgr = TextUndoManager()
        mgr.record(LabelText("Hello"))
        assert mgr.has_undo() is False

    def test_capture_and_restore(self):
        mgr = TextUndoManager()
        first, second = LabelText("One"), LabelText("Two")

        mgr.begin("Localize Text")
        for component, key in ((first, "LOC_ONE_1"), (second, "LOC_TWO_2")):
            mgr.record(component)
            component.set_text(key)
        mgr.end()

        snapshot = mgr.get_snapshot()
        assert snapshot.label == "Localize Text"
        assert snapshot.component_count() == 2

        assert mgr.restore() == 2
        assert (first.get_text(), second.get_text()) == ("One", "Two")
        assert mgr.has_undo() is False

    def test_only_first_write_recorded(self):
        mgr = TextUndoManager()
        component = LabelText("Original")

        mgr.begin()
        mgr.record(component)
        component.set_text("First")
        mgr.record(component)
        component.set_text("Second")
        mgr.end()

        mgr.restore()
        assert component.get_text() == "Original"

    def test_new_batch_replaces_snapshot(self):
        mgr = TextUndoManager()
        a, b = LabelText("A"), LabelText("B")

        mgr.begin()
        mgr.record(a)
        a.set_text("LOC_A_1")
        mgr.end()

        mgr.begin()
        mgr.record(b)
        b.set_text("LOC_B_1")
        mgr.end()

        assert mgr.restore() == 1
        assert a.get_text() == "LOC_A_1"
        assert b.get_text() == "B"

    def test_restore_without_snapshot(self):
        assert TextUndoManager().restore() == 0

    def test_empty_batch_keeps_snapshot(self):
        mgr = TextUndoManager()
        component = LabelText("Original")

        mgr.begin()
        mgr.record(component)
        component.set_text("LOC_ORIGINAL_1")
        mgr.end()

        mgr.begin()
        mgr.end()

        assert mgr.has_undo()
        assert mgr.restore() == 1
        assert component.get_text() == "Original"
