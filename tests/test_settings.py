"""
Unit tests for LocalizationSettings.
"""
import pytest
from pathlib import Path

from language_manager.config.settings import LocalizationSettings


class TestLocalizationSettings:
    """Test YAML loading and environment overrides."""

    def test_defaults(self):
        settings = LocalizationSettings.load()
        assert settings.resource_root == Path("_AppConfig/resources")
        assert settings.default_culture is None
        assert settings.store == "json"
        assert settings.cache_size == 32
        assert settings.log_level == "INFO"

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = LocalizationSettings.load(tmp_path / "missing.yaml")
        assert settings.store == "json"

    def test_load_yaml(self, tmp_path):
        config = tmp_path / "localization.yaml"
        config.write_text(
            "resource_root: resources\n"
            "default_culture: de-DE\n"
            "cache_size: 8\n"
            "log_level: DEBUG\n",
            encoding="utf-8",
        )

        settings = LocalizationSettings.load(config)

        assert settings.resource_root == tmp_path / "resources"
        assert settings.default_culture == "de-DE"
        assert settings.cache_size == 8
        assert settings.log_level == "DEBUG"

    def test_absolute_resource_root_kept(self, tmp_path):
        root = tmp_path / "elsewhere"
        config = tmp_path / "localization.yaml"
        config.write_text(f"resource_root: {root.as_posix()}\n", encoding="utf-8")

        assert LocalizationSettings.load(config).resource_root == root

    def test_empty_file(self, tmp_path):
        config = tmp_path / "localization.yaml"
        config.write_text("", encoding="utf-8")
        assert LocalizationSettings.load(config).cache_size == 32

    def test_unknown_keys_rejected(self, tmp_path):
        config = tmp_path / "localization.yaml"
        config.write_text("colour: blue\n", encoding="utf-8")
        with pytest.raises(ValueError, match="colour"):
            LocalizationSettings.load(config)

    def test_malformed_yaml_rejected(self, tmp_path):
        config = tmp_path / "localization.yaml"
        config.write_text("resource_root: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError):
            LocalizationSettings.load(config)

    def test_non_mapping_rejected(self, tmp_path):
        config = tmp_path / "localization.yaml"
        config.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            LocalizationSettings.load(config)

    @pytest.mark.parametrize("cache_size", [0, -1, "big"])
    def test_invalid_cache_size(self, cache_size):
        with pytest.raises(ValueError):
            LocalizationSettings(cache_size=cache_size)

    def test_environment_overrides(self, tmp_path, monkeypatch):
        config = tmp_path / "localization.yaml"
        config.write_text("default_culture: de-DE\n", encoding="utf-8")
        monkeypatch.setenv("LANGUAGE_MANAGER_RESOURCE_ROOT", str(tmp_path / "env"))
        monkeypatch.setenv("LANGUAGE_MANAGER_CULTURE", "fr-FR")

        settings = LocalizationSettings.load(config)

        assert settings.resource_root == tmp_path / "env"
        assert settings.default_culture == "fr-FR"

    def test_load_memory_resources(self, tmp_path):
        """Test that in-memory resource sets can be declared in YAML."""
        config = tmp_path / "localization.yaml"
        config.write_text(
            "store: memory\n"
            "resources:\n"
            "  Login:\n"
            "    \"\": {Default: DEFAULT}\n"
            "    de-DE: {Default: GERMANY}\n",
            encoding="utf-8",
        )

        settings = LocalizationSettings.load(config)

        assert settings.store == "memory"
        assert settings.resources == {
            "Login": {"": {"Default": "DEFAULT"}, "de-DE": {"Default": "GERMANY"}},
        }

    def test_resources_must_be_mapping(self):
        with pytest.raises(ValueError):
            LocalizationSettings(resources=["Login"])
