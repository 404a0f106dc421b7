# -*- coding: utf-8 -*-
"""
LocForge Content Tree Model

In-memory model of a UI scene document: a tree of named nodes, each hosting
at most one text component. Two component kinds exist (plain labels and
rich-text labels); both satisfy ITextComponent.

Scene documents are stored as JSON:

    {
        "name": "MainMenu",
        "nodes": [
            {"name": "Title", "active": true,
             "text": {"kind": "label", "value": "Play"},
             "children": [...]}
        ]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from interfaces.i_content import ITextComponent
from locforge_enums import ComponentKind
from locforge_exceptions import SceneLoadError, SceneError
from locforge_logger import get_logger

logger = get_logger("models.content_tree")

PATH_SEPARATOR = "/"


@dataclass(eq=False)
class LabelText:
    """Plain text label."""
    text: str = ""

    kind = ComponentKind.LABEL

    def get_text(self) -> str:
        return self.text

    def set_text(self, value: str) -> None:
        self.text = value


@dataclass(eq=False)
class RichText:
    """Rich-text label (markup-capable text renderer)."""
    text: str = ""
    rich: bool = True

    kind = ComponentKind.RICH_TEXT

    def get_text(self) -> str:
        return self.text

    def set_text(self, value: str) -> None:
        self.text = value


_COMPONENT_TYPES = {
    ComponentKind.LABEL: LabelText,
    ComponentKind.RICH_TEXT: RichText,
}


@dataclass(eq=False)
class ContentNode:
    """A node in a scene. Inactive nodes are still part of the tree."""
    name: str
    component: Optional[ITextComponent] = None
    children: List['ContentNode'] = field(default_factory=list)
    active: bool = True

    def add_child(self, child: 'ContentNode') -> 'ContentNode':
        self.children.append(child)
        return child


@dataclass(eq=False)
class ContentScene:
    """A scene document: a name and its root nodes."""
    name: str
    roots: List[ContentNode] = field(default_factory=list)
    source_path: Optional[str] = None

    def walk(self) -> Iterator[Tuple[str, ContentNode]]:
        """Depth-first pre-order traversal yielding (node_path, node)."""
        for root in self.roots:
            yield from _walk(root, root.name)

    def find_text_components(self) -> List[ITextComponent]:
        return [node.component for _, node in self.walk() if node.component is not None]

    def find(self, node_path: str) -> Optional[ContentNode]:
        for path, node in self.walk():
            if path == node_path:
                return node
        return None


def _walk(node: ContentNode, path: str) -> Iterator[Tuple[str, ContentNode]]:
    yield path, node
    for child in node.children:
        yield from _walk(child, f"{path}{PATH_SEPARATOR}{child.name}")


# =============================================================================
# SERIALIZATION
# =============================================================================

def _component_from_dict(data: Dict[str, Any]) -> ITextComponent:
    if not isinstance(data, dict):
        raise SceneError(f"'text' must be an object, got {type(data).__name__}")
    try:
        kind = ComponentKind(data.get("kind", ComponentKind.LABEL.value))
    except (TypeError, ValueError):
        raise SceneError(f"Unknown text component kind: {data.get('kind')!r}")
    value = data.get("value", "")
    if not isinstance(value, str):
        raise SceneError(f"Text value must be a string, got {type(value).__name__}")
    return _COMPONENT_TYPES[kind](text=value)


def _node_from_dict(data: Dict[str, Any]) -> ContentNode:
    if not isinstance(data, dict) or "name" not in data:
        raise SceneError("Every node needs a 'name'")
    text = data.get("text")
    children = data.get("children", [])
    if not isinstance(children, list):
        raise SceneError(f"'children' of node {data['name']!r} must be a list")
    return ContentNode(
        name=str(data["name"]),
        component=_component_from_dict(text) if text is not None else None,
        children=[_node_from_dict(child) for child in children],
        active=bool(data.get("active", True)),
    )


def _node_to_dict(node: ContentNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {"name": node.name, "active": node.active}
    if node.component is not None:
        kind = getattr(node.component, "kind", ComponentKind.LABEL)
        data["text"] = {"kind": ComponentKind(kind).value, "value": node.component.get_text()}
    if node.children:
        data["children"] = [_node_to_dict(child) for child in node.children]
    return data


def scene_from_dict(data: Dict[str, Any], source_path: Optional[str] = None) -> ContentScene:
    if not isinstance(data, dict):
        raise SceneError("Scene document must be a JSON object")
    name = data.get("name") or (Path(source_path).stem if source_path else "Untitled")
    nodes = data.get("nodes", [])
    if not isinstance(nodes, list):
        raise SceneError("'nodes' must be a list")
    return ContentScene(
        name=str(name),
        roots=[_node_from_dict(node) for node in nodes],
        source_path=source_path,
    )


def scene_to_dict(scene: ContentScene) -> Dict[str, Any]:
    return {"name": scene.name, "nodes": [_node_to_dict(root) for root in scene.roots]}


def load_scene(path: Union[str, Path]) -> ContentScene:
    """Load a scene document from disk."""
    path = Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise SceneLoadError("Scene file not found", file_path=str(path))
    except (OSError, json.JSONDecodeError) as e:
        raise SceneLoadError(f"Could not read scene file: {e}", file_path=str(path)) from e

    try:
        scene = scene_from_dict(data, source_path=str(path))
    except SceneError as e:
        raise SceneLoadError(f"Malformed scene document: {e.message}", file_path=str(path)) from e

    logger.debug(f"Scene loaded: {scene.name} ({path})")
    return scene


def save_scene(scene: ContentScene, path: Union[str, Path, None] = None):
    """Write a scene document back to disk (defaults to where it was loaded from)."""
    target = Path(path or scene.source_path or f"{scene.name}.json")
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open('w', encoding='utf-8') as f:
        json.dump(scene_to_dict(scene), f, indent=4, ensure_ascii=False)
    logger.debug(f"Scene saved: {scene.name} ({target})")
