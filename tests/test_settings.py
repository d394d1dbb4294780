"""Tests for invoke-java.json loading."""

import json

import pytest

from invoke_java.errors import SettingsError
from invoke_java.settings import default_settings, load_settings, settings_path


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "invoke-java.json") == default_settings()


def test_partial_file_is_filled_with_defaults(tmp_path):
    path = tmp_path / "invoke-java.json"
    path.write_text(json.dumps({"heap_size": "2g", "java_arguments": ["-ea"]}), encoding="utf-8")
    settings = load_settings(path)
    assert settings["heap_size"] == "2g"
    assert settings["java_arguments"] == ["-ea"]
    assert settings["class_path"] == []
    assert settings["launcher"] is None


def test_malformed_json_is_an_error(tmp_path):
    path = tmp_path / "invoke-java.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SettingsError, match="invoke-java.json"):
        load_settings(path)


@pytest.mark.parametrize("content", [
    [],
    {"class_path": "/one.jar"},
    {"java_arguments": [1, 2]},
    {"heap_size": 512},
])
def test_wrong_shapes_are_errors(tmp_path, content):
    path = tmp_path / "invoke-java.json"
    path.write_text(json.dumps(content), encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_settings_path(tmp_path):
    assert settings_path(tmp_path) == tmp_path / "invoke-java.json"
