# ABOUTME: Tests for environment-driven application configuration
# ABOUTME: Each test runs from an empty directory so no stray .env file leaks in

import pytest

from design_intel.config import DEFAULT_OUTPUT_DIR, PROJECT_ROOT, Config, get_config, reload_config


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in (
        "DESIGN_INTEL_SOURCE_DIR",
        "SALVADOR_DATA",
        "DESIGN_INTEL_OUTPUT_DIR",
        "DESIGN_INTEL_BUNDLE_VERSION",
        "DESIGN_INTEL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    monkeypatch.undo()
    reload_config()


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.output_dir == DEFAULT_OUTPUT_DIR
        assert config.bundle_version == "1.0.0"
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.source_dir.parts[-3:] == ("salvador", "intelligence", "data")

    def test_prefixed_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DESIGN_INTEL_SOURCE_DIR", str(tmp_path / "corpus"))
        monkeypatch.setenv("DESIGN_INTEL_OUTPUT_DIR", str(tmp_path / "out"))
        monkeypatch.setenv("DESIGN_INTEL_BUNDLE_VERSION", "2.0.0")

        config = Config()

        assert config.source_dir == tmp_path / "corpus"
        assert config.output_dir == tmp_path / "out"
        assert config.bundle_version == "2.0.0"

    def test_legacy_source_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SALVADOR_DATA", str(tmp_path / "legacy"))
        assert Config().source_dir == tmp_path / "legacy"

    def test_prefixed_variable_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SALVADOR_DATA", str(tmp_path / "legacy"))
        monkeypatch.setenv("DESIGN_INTEL_SOURCE_DIR", str(tmp_path / "preferred"))
        assert Config().source_dir == tmp_path / "preferred"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("DESIGN_INTEL_BUNDLE_VERSION=3.1.4\n", encoding="utf-8")
        assert Config().bundle_version == "3.1.4"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("DESIGN_INTEL_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            Config()


class TestGlobalConfig:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_picks_up_changes(self, monkeypatch):
        get_config()
        monkeypatch.setenv("DESIGN_INTEL_BUNDLE_VERSION", "9.9.9")
        assert reload_config().bundle_version == "9.9.9"
        assert get_config().bundle_version == "9.9.9"

    def test_reload_recovers_once_invalid_environment_is_restored(self, monkeypatch):
        monkeypatch.setenv("DESIGN_INTEL_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            reload_config()

        monkeypatch.undo()
        assert reload_config().log_level == "INFO"


class TestDefaultLocations:
    def test_output_dir_defaults_under_checkout_root(self):
        assert DEFAULT_OUTPUT_DIR == PROJECT_ROOT / "bundles"
        assert (PROJECT_ROOT / "pyproject.toml").is_file()
