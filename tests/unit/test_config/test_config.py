"""
Unit tests for configuration loading.
"""

import pytest
import yaml

from hashbench.core.config import (
    AppConfig,
    DEFAULT_SIPHASH_KEY,
    get_config,
    reload_config,
    set_config,
)
from hashbench.core.exceptions import ConfigurationError


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))
    return path


class TestAppConfig:
    """Test cases for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.benchmark.siphash_key == DEFAULT_SIPHASH_KEY
        assert config.benchmark.siphash_key_bytes == bytes(range(16))
        assert config.benchmark.max_runs == 1_000_000
        assert config.logging.level == "INFO"
        assert config.reporting.show_summary is True

    def test_from_yaml_nested_sections(self, temp_dir):
        path = write_yaml(temp_dir / "config.yaml", {
            "app": {"name": "Custom", "environment": "test"},
            "benchmark": {"max_runs": 50, "siphash_key": "ff" * 16},
            "logging": {"level": "DEBUG", "file": str(temp_dir / "x.log")},
            "reporting": {"show_summary": False},
        })

        config = AppConfig.from_yaml(path)

        assert config.name == "Custom"
        assert config.environment == "test"
        assert config.benchmark.max_runs == 50
        assert config.benchmark.siphash_key_bytes == b"\xff" * 16
        assert config.logging.level == "DEBUG"
        assert config.reporting.show_summary is False

    def test_from_yaml_empty_file(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")

        assert AppConfig.from_yaml(path) == AppConfig()

    def test_from_yaml_missing_file(self, temp_dir):
        with pytest.raises(ConfigurationError, match="Failed to read configuration file"):
            AppConfig.from_yaml(temp_dir / "nope.yaml")

    def test_from_yaml_unknown_key(self, temp_dir):
        path = write_yaml(temp_dir / "bad.yaml", {"benchmark": {"warmup": 3}})

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            AppConfig.from_yaml(path)

    @pytest.mark.parametrize("key", ["zz" * 16, "00" * 8, "00" * 17])
    def test_rejects_bad_siphash_key(self, temp_dir, key):
        path = write_yaml(temp_dir / "bad.yaml", {"benchmark": {"siphash_key": key}})

        with pytest.raises(ConfigurationError, match="SipHash key"):
            AppConfig.from_yaml(path)

    def test_rejects_non_positive_max_runs(self, temp_dir):
        path = write_yaml(temp_dir / "bad.yaml", {"benchmark": {"max_runs": 0}})

        with pytest.raises(ConfigurationError, match="max_runs"):
            AppConfig.from_yaml(path)

    def test_rejects_unknown_log_level(self, temp_dir):
        path = write_yaml(temp_dir / "bad.yaml", {"logging": {"level": "CHATTY"}})

        with pytest.raises(ConfigurationError, match="Unknown log level"):
            AppConfig.from_yaml(path)

    def test_env_overrides(self, temp_dir, monkeypatch):
        monkeypatch.setenv("HASHBENCH_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("HASHBENCH_SIPHASH_KEY", "11" * 16)
        monkeypatch.setenv("HASHBENCH_DEBUG", "true")
        monkeypatch.setenv("HASHBENCH_ENVIRONMENT", "ci")
        path = write_yaml(temp_dir / "config.yaml", {"logging": {"level": "INFO"}})

        config = AppConfig.from_yaml(path)

        assert config.logging.level == "ERROR"
        assert config.benchmark.siphash_key == "11" * 16
        assert config.debug is True
        assert config.environment == "ci"


class TestGlobalConfig:
    """Test cases for the cached configuration instance."""

    def test_get_config_without_file_uses_defaults(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)

        assert get_config() == AppConfig()

    def test_env_overrides_apply_without_config_file(self, temp_dir, monkeypatch):
        """With no config file the built-in defaults still honour HASHBENCH_* variables."""
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("HASHBENCH_SIPHASH_KEY", "ff" * 16)
        monkeypatch.setenv("HASHBENCH_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("HASHBENCH_DEBUG", "1")

        config = get_config()

        assert config.benchmark.siphash_key_bytes == b"\xff" * 16
        assert config.logging.level == "DEBUG"
        assert config.debug is True

    def test_bad_env_override_without_config_file(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("HASHBENCH_SIPHASH_KEY", "not-hex")

        with pytest.raises(ConfigurationError, match="SipHash key"):
            get_config()

    def test_get_config_is_cached(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)

        assert get_config() is get_config()

    def test_get_config_reads_default_path(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        (temp_dir / "config").mkdir()
        write_yaml(temp_dir / "config" / "default.yaml", {"app": {"name": "From Default"}})

        assert get_config().name == "From Default"

    def test_set_and_reload(self, temp_dir):
        custom = AppConfig(name="Injected")
        set_config(custom)
        assert get_config() is custom

        path = write_yaml(temp_dir / "other.yaml", {"app": {"name": "Reloaded"}})
        assert reload_config(path).name == "Reloaded"
        assert get_config().name == "Reloaded"
