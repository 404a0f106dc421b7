# -*- coding: utf-8 -*-
"""
Tests for the content tree model and scene documents.
"""

import json

import pytest

from interfaces.i_content import ITextComponent
from locforge_enums import ComponentKind
from locforge_exceptions import SceneLoadError
from models.content_tree import LabelText, RichText, load_scene, save_scene


class TestComponents:

    @pytest.mark.parametrize("component_cls", [LabelText, RichText])
    def test_components_satisfy_protocol(self, component_cls):
        component = component_cls("Hi")
        assert isinstance(component, ITextComponent)
        component.set_text("Bye")
        assert component.get_text() == "Bye"

    def test_kinds(self):
        assert LabelText().kind is ComponentKind.LABEL
        assert RichText().kind is ComponentKind.RICH_TEXT


class TestSceneDocuments:

    def test_load_scene(self, scene_file):
        scene = load_scene(scene_file)
        assert scene.name == "MainMenu"
        assert [path for path, _ in scene.walk()] == ["Canvas", "Canvas/Title", "Canvas/Start"]
        assert isinstance(scene.find("Canvas/Start").component, RichText)
        assert scene.find("Canvas/Missing") is None

    def test_save_round_trip_keeps_kinds(self, scene_file):
        scene = load_scene(scene_file)
        scene.find("Canvas/Title").component.set_text("LOC_TITLE_1")
        save_scene(scene)

        data = json.loads(scene_file.read_text(encoding='utf-8'))
        title, start = data["nodes"][0]["children"]
        assert title["text"] == {"kind": "label", "value": "LOC_TITLE_1"}
        assert start["text"]["kind"] == "rich_text"

    def test_name_defaults_to_file_stem(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text(json.dumps({"nodes": []}), encoding='utf-8')
        assert load_scene(path).name == "options"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SceneLoadError):
            load_scene(tmp_path / "nope.json")

    @pytest.mark.parametrize("payload", [
        "{broken",
        json.dumps({"nodes": [{"text": {"value": "no name"}}]}),
        json.dumps({"nodes": [{"name": "A", "text": {"kind": "sprite", "value": "x"}}]}),
        json.dumps({"nodes": "not a list"}),
        json.dumps({"nodes": [{"name": "A", "children": None}]}),
        json.dumps({"nodes": [{"name": "A", "children": {"name": "B"}}]}),
        json.dumps({"nodes": [{"name": "A", "text": "Play"}]}),
        json.dumps({"nodes": [{"name": "A", "text": {"kind": ["label"], "value": "x"}}]}),
        json.dumps(["not", "an", "object"]),
    ])
    def test_malformed_documents(self, tmp_path, payload):
        path = tmp_path / "bad.json"
        path.write_text(payload, encoding='utf-8')
        with pytest.raises(SceneLoadError):
            load_scene(path)
