# -*- coding: utf-8 -*-
"""
Tests for settings loading, validation and persistence.
"""

import json

import pytest

import locforge_config as config
from locforge_exceptions import SettingsSaveError
from locforge_settings import get_default_settings, load_settings, save_settings


class TestLoadSettings:

    def test_defaults_when_missing(self, isolated_settings):
        assert not isolated_settings.exists()
        assert load_settings() == get_default_settings()

    def test_corrupt_file_falls_back(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text("{not json", encoding='utf-8')
        assert load_settings() == get_default_settings()

    def test_non_dict_falls_back(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text("[1, 2]", encoding='utf-8')
        assert load_settings() == get_default_settings()

    def test_invalid_fields_replaced(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(json.dumps({
            "auth_key": 42,
            "target_languages": [],
            "request_timeout": -1,
            "include_scene_in_key": "yes",
        }), encoding='utf-8')

        settings = load_settings()
        defaults = get_default_settings()
        assert settings["auth_key"] == ""
        assert settings["target_languages"] == defaults["target_languages"]
        assert settings["request_timeout"] == defaults["request_timeout"]
        assert settings["include_scene_in_key"] is False

    def test_language_codes_normalized(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(json.dumps({"target_languages": ["es", " fr "]}), encoding='utf-8')
        assert load_settings()["target_languages"] == ["ES", "FR"]

    def test_env_overrides_stored_key(self, isolated_settings, monkeypatch):
        save_settings({**get_default_settings(), "auth_key": "stored"})
        monkeypatch.setenv(config.AUTH_KEY_ENV_VAR, " from-env:fx ")
        assert load_settings()["auth_key"] == "from-env:fx"


class TestSaveSettings:

    def test_round_trip(self, isolated_settings):
        data = get_default_settings()
        data["auth_key"] = "abc"
        data["target_languages"] = ["FR"]
        save_settings(data)

        assert isolated_settings.is_file()
        assert load_settings() == data

    def test_unserializable_raises(self, isolated_settings):
        data = get_default_settings()
        data["auth_key"] = object()
        with pytest.raises(SettingsSaveError):
            save_settings(data)
