import pytest
from bundle_settings import load
from bundle_settings.utils.config_loader import ConfigLoader
from bundle_settings.utils.exceptions import ConfigurationLoadError
from conftest import EXPECTED_EXCLUSIONS


@pytest.fixture
def write_yaml(tmp_path):
    def _write(content, name="packaging.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


class TestConfigLoader:
    """Tests for loading packaging settings from YAML and the environment."""

    def test_defaults_without_sources(self):
        assert ConfigLoader.load_settings() == load()

    def test_lists_replace_defaults(self, write_yaml):
        path = write_yaml(
            "packaging:\n"
            "  ignore:\n"
            "    - base_path: node_modules\n"
            "    - .DS_Store\n"
        )
        settings = ConfigLoader.load_settings(config_path=path)
        assert settings.exclusions() == ["node_modules", ".DS_Store"]
        assert settings.root_exclusions() == ["node_modules"]
        # executables untouched by the override keep their default
        assert settings.executables() == ["artisan"]

    def test_config_path_from_environment(self, write_yaml, monkeypatch):
        path = write_yaml("packaging:\n  executables:\n    - bin/console\n")
        monkeypatch.setenv(ConfigLoader.CONFIG_ENV, str(path))
        assert ConfigLoader.load_settings().executables() == ["bin/console"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv(ConfigLoader.EXECUTABLES_ENV, "artisan, bin/worker")
        monkeypatch.setenv(ConfigLoader.EXTRA_IGNORE_ENV, ".DS_Store,,phpunit.xml")
        settings = ConfigLoader.load_settings()
        assert settings.executables() == ["artisan", "bin/worker"]
        assert settings.exclusions() == EXPECTED_EXCLUSIONS + [".DS_Store", "phpunit.xml"]
        assert not settings.is_rooted(".DS_Store")

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text(f"{ConfigLoader.EXECUTABLES_ENV}=bin/console\n", encoding="utf-8")
        settings = ConfigLoader.load_settings(env_file=env_file)
        assert settings.executables() == ["bin/console"]

    def test_empty_file_keeps_defaults(self, write_yaml):
        path = write_yaml("")
        assert ConfigLoader.load_settings(config_path=path) == load()

    def test_duplicates_are_logged_not_removed(self, write_yaml, caplog):
        path = write_yaml("packaging:\n  ignore: [.env, .env]\n")
        with caplog.at_level("WARNING", logger="bundle_settings.config_loader"):
            settings = ConfigLoader.load_settings(config_path=path)
        assert settings.exclusions() == [".env", ".env"]
        assert "Duplicate packaging.ignore entries: .env" in caplog.text

    def test_load_config_returns_mapping(self):
        config = ConfigLoader.load_config()
        assert config == load().to_dict()


class TestConfigLoaderErrors:
    """Every malformed or missing source surfaces as ConfigurationLoadError."""

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ConfigurationLoadError, match="not found"):
            ConfigLoader.load_config(config_path=tmp_path / "missing.yaml")

    def test_missing_env_file(self, tmp_path):
        with pytest.raises(ConfigurationLoadError, match="Environment file"):
            ConfigLoader.load_config(env_file=tmp_path / "missing.env")

    def test_invalid_yaml(self, write_yaml):
        path = write_yaml("packaging: [unclosed\n")
        with pytest.raises(ConfigurationLoadError, match="YAML"):
            ConfigLoader.load_config(config_path=path)

    def test_non_mapping_document(self, write_yaml):
        path = write_yaml("- vendor\n")
        with pytest.raises(ConfigurationLoadError):
            ConfigLoader.load_config(config_path=path)

    def test_wrong_list_type(self, write_yaml):
        path = write_yaml("packaging:\n  executables: artisan\n")
        with pytest.raises(ConfigurationLoadError, match="must be a list"):
            ConfigLoader.load_config(config_path=path)


def test_example_config_loads():
    from pathlib import Path
    example = Path(__file__).resolve().parents[1] / "config" / "packaging.example.yaml"
    settings = ConfigLoader.load_settings(config_path=example)
    assert settings.exclusions()[:5] == EXPECTED_EXCLUSIONS[:5]
    assert settings.is_rooted("node_modules")
    assert settings.name_exclusions() == EXPECTED_EXCLUSIONS[5:]
    assert settings.executables() == ["artisan"]
