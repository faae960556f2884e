"""Tests for editor settings."""

import pytest
from pydantic import ValidationError

from flowbuilder.config import ConfigError, EditorSettings, load_settings


class TestEditorSettings:
    def test_defaults(self):
        settings = EditorSettings()
        assert settings.notification_delay == 3.0
        assert (settings.drop_offset_x, settings.drop_offset_y) == (100, 50)
        assert settings.clear_policy == "token"

    def test_deadline_policy_selectable(self):
        assert EditorSettings(clear_policy="deadline").clear_policy == "deadline"

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            EditorSettings(colour="blue")

    def test_rejects_negative_delay(self):
        with pytest.raises(ValidationError):
            EditorSettings(notification_delay=-1)


class TestLoadSettings:
    def test_none_gives_defaults(self):
        assert load_settings(None) == EditorSettings()

    def test_example_file(self, examples_dir):
        settings = load_settings(examples_dir / "settings.yaml")
        assert settings.notification_delay == 5
        assert settings.clear_policy == "deadline"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_settings(path) == EditorSettings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_settings(tmp_path / "missing.yaml")
        assert str(exc_info.value).startswith("File not found")
        assert exc_info.value.path.endswith("missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("clear_policy: [")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- 1\n")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("clear_policy: never\n")
        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        assert "clear_policy" in str(exc_info.value)
