# -*- coding: utf-8 -*-
"""
Tests for the Key Generator

Determinism, key format, truncation and the key-likeness heuristic.
"""

import re

import pytest

from core.key_generator import (
    KEY_PATTERN,
    generate_key,
    looks_like_key,
    sanitize_hint,
    stable_text_hash,
    tree_key_hint,
)


class TestGenerateKey:
    """Tests for generate_key()."""

    def test_same_inputs_same_key(self):
        assert generate_key("Play Game", "Start Button") == generate_key("Play Game", "Start Button")

    def test_known_value_is_stable_across_runs(self):
        """The suffix comes from MD5, not from the salted builtin hash()."""
        bucket = stable_text_hash("Hello") % 1000
        assert bucket == int("8b1a9953c4611296a827abf8c47804d7", 16) % 1000
        assert generate_key("Hello", "Title") == f"LOC_TITLE_{bucket}"

    def test_hint_is_uppercased_and_runs_collapsed(self):
        key = generate_key("x", "main menu -- play!!")
        assert key.startswith("LOC_MAIN_MENU_PLAY_")

    def test_distinct_texts_rarely_collide(self):
        texts = [f"Sentence number {i}" for i in range(200)]
        keys = {generate_key(text, "Label") for text in texts}
        # 200 texts into 1000 buckets: about 18 collisions expected
        assert len(keys) > 150

    @pytest.mark.parametrize("text,hint", [
        ("Hello", "Title"),
        ("Hello", "a very long hint that keeps going and going forever"),
        ("Ünïcödé", "Ünïcödé"),
        ("", ""),
        ("!!!", "!!!"),
        ("Press Start", "   leading and trailing   "),
    ])
    def test_key_format(self, text, hint):
        key = generate_key(text, hint)
        assert KEY_PATTERN.match(key), key
        stem, suffix = key.rsplit("_", 1)
        assert len(stem) <= 30
        assert 0 <= int(suffix) <= 999

    def test_truncation_keeps_suffix(self):
        text = "A long line of dialogue"
        key = generate_key(text, text * 5)
        stem, suffix = key.rsplit("_", 1)
        assert len(stem) <= 30
        assert int(suffix) == stable_text_hash(text) % 1000

    def test_truncation_does_not_leave_double_separator(self):
        # "LOC_" + 25 chars + "_" lands the cut right after a separator
        hint = "A" * 25 + " " + "B" * 10
        key = generate_key("text", hint)
        assert "__" not in key
        assert key.startswith("LOC_" + "A" * 25 + "_")

    def test_empty_hint_uses_placeholder(self):
        assert generate_key("Hi", "???").startswith("LOC_TEXT_")


class TestHelpers:
    """Tests for the smaller helpers."""

    def test_sanitize_hint(self):
        assert sanitize_hint("Play Button (1)") == "PLAY_BUTTON_1"

    def test_tree_key_hint_without_scene(self):
        assert tree_key_hint("Title", "Main Menu") == "Title"

    def test_tree_key_hint_with_scene(self):
        assert tree_key_hint("Title", "Main Menu", include_scene=True) == "Main Menu_Title"

    @pytest.mark.parametrize("text,expected", [
        ("LOC_FOO_12", True),
        ("LOC_FOO BAR", False),
        ("LOC_FOO\tBAR", False),
        ("loc_foo_12", False),
        ("Hello", False),
        ("", False),
    ])
    def test_looks_like_key(self, text, expected):
        assert looks_like_key(text) is expected

    def test_generated_keys_look_like_keys(self):
        assert looks_like_key(generate_key("Some text", "Node"))
