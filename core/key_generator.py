# -*- coding: utf-8 -*-
"""
Key Generator

Deterministic derivation of LOC_ lookup keys from a naming hint and the text.

    generate_key("Play Game", "Start Button")  ->  "LOC_START_BUTTON_<0-999>"

The numeric suffix is a content hash bucket (modulo 1000). Two different
texts sharing a hint collide once in a thousand; collisions are not resolved
here and the dataset treats a colliding key as already present.
"""

import hashlib
import re

import locforge_config as config

_INVALID_KEY_CHARS = re.compile(r'[^A-Z0-9]+')
_WHITESPACE = re.compile(r'\s')

KEY_PATTERN = re.compile(r'^LOC_[A-Z0-9_]+_[0-9]{1,3}$')


def stable_text_hash(text: str) -> int:
    """Hash of the UTF-8 text that is identical across interpreter runs."""
    digest = hashlib.md5(text.encode('utf-8')).hexdigest()
    return int(digest, 16)


def sanitize_hint(hint: str) -> str:
    """Uppercase the hint and collapse every run of non [A-Z0-9] chars into '_'."""
    cleaned = _INVALID_KEY_CHARS.sub('_', (hint or '').upper()).strip('_')
    return cleaned or config.KEY_EMPTY_HINT


def generate_key(text: str, hint: str) -> str:
    """
    Build the lookup key for a text.

    Args:
        text: The source text; only its hash is used
        hint: Naming hint (node name, or the text itself for script findings)

    Returns:
        Key such as "LOC_MAIN_TITLE_87"
    """
    stem = config.LOC_KEY_PREFIX + sanitize_hint(hint)
    # Truncate before the suffix so the suffix always survives
    stem = stem[:config.KEY_STEM_MAX_LENGTH].rstrip('_')
    bucket = stable_text_hash(text or '') % config.KEY_HASH_BUCKETS
    return f"{stem}_{bucket}"


def looks_like_key(text: str) -> bool:
    """True for text that is already a key: LOC_ prefix and no whitespace."""
    if not text or not text.startswith(config.LOC_KEY_PREFIX):
        return False
    return _WHITESPACE.search(text) is None


def tree_key_hint(node_name: str, scene_name: str = "", include_scene: bool = False) -> str:
    """Naming hint for a node found in a scene."""
    if include_scene and scene_name:
        return f"{scene_name}_{node_name}"
    return node_name
