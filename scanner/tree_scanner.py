# -*- coding: utf-8 -*-
"""
Tree Scanner

Walks a scene document depth-first (pre-order) and reports every text
component whose text is not yet a key.
"""

from typing import Iterable, List

import locforge_config as config
from core.key_generator import generate_key, looks_like_key, tree_key_hint
from locforge_logger import get_logger
from models.content_tree import ContentScene
from models.findings import ScanFinding
from scanner.base import BaseScanner

logger = get_logger("scanner.tree")


class TreeScanner(BaseScanner):
    """
    Scanner for structured UI trees.

    Inactive nodes are visited like active ones. Identical text on several
    nodes yields one finding per node.
    """

    def __init__(self, include_scene_in_key: bool = config.DEFAULT_INCLUDE_SCENE_IN_KEY):
        super().__init__()
        self.include_scene_in_key = include_scene_in_key

    def scan(self, scene: ContentScene) -> List[ScanFinding]:
        self.reset()

        for node_path, node in scene.walk():
            component = node.component
            if component is None:
                continue

            text = component.get_text()
            if not text or not text.strip():
                continue
            if looks_like_key(text):
                continue

            hint = tree_key_hint(node.name, scene.name, self.include_scene_in_key)
            self._findings.append(ScanFinding.create(
                scene_name=scene.name,
                node_path=node_path,
                node_name=node.name,
                text=text,
                suggested_key=generate_key(text, hint),
                component=component,
            ))

        logger.debug(f"Scanned scene '{scene.name}': {len(self._findings)} findings")
        return self.last_findings


def scan_tree(scene: ContentScene, include_scene_in_key: bool = config.DEFAULT_INCLUDE_SCENE_IN_KEY) -> List[ScanFinding]:
    """Scan one scene document."""
    return TreeScanner(include_scene_in_key).scan(scene)


def scan_scenes(scenes: Iterable[ContentScene],
                include_scene_in_key: bool = config.DEFAULT_INCLUDE_SCENE_IN_KEY) -> List[ScanFinding]:
    """Scan several scene documents, concatenating findings in order."""
    scanner = TreeScanner(include_scene_in_key)
    findings: List[ScanFinding] = []
    for scene in scenes:
        findings.extend(scanner.scan(scene))
    return findings
