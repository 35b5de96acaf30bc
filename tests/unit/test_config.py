"""
Unit tests for configuration loading.
"""

import json
import pytest

from redefine import config as config_module
from redefine.config import RedefineConfig, get_config, load_config, set_config


class TestRedefineConfig:
    """Test RedefineConfig creation."""

    def test_defaults(self):
        config = RedefineConfig()
        assert config.log_level == "WARNING"
        assert config.trace_values is False
        assert config.strict_lifecycle is True

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("REDEFINE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("REDEFINE_TRACE_VALUES", "true")
        monkeypatch.setenv("REDEFINE_STRICT_LIFECYCLE", "0")

        config = RedefineConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.trace_values is True
        assert config.strict_lifecycle is False

    def test_from_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("REDEFINE_TRACE_VALUES", raising=False)
        path = tmp_path / "redefine.json"
        path.write_text(json.dumps({
            "trace_values": True,
            "unknown": 1,
        }))

        config = RedefineConfig.from_file(str(path))

        assert config.trace_values is True
        assert not hasattr(config, "unknown")

    def test_from_missing_file_uses_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REDEFINE_LOG_LEVEL", "ERROR")
        config = RedefineConfig.from_file(str(tmp_path / "absent.json"))
        assert config.log_level == "ERROR"

    def test_to_dict(self):
        d = RedefineConfig(trace_values=True).to_dict()
        assert d["trace_values"] is True
        assert d["strict_lifecycle"] is True
        assert "settings" not in d


class TestGlobalConfig:
    """Test load_config / get_config."""

    def test_load_explicit_file(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"strict_lifecycle": False}))

        config = load_config(str(path))

        assert config.strict_lifecycle is False
        assert get_config() is config

    def test_load_from_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "redefine.json").write_text(json.dumps({"log_level": "INFO"}))
        monkeypatch.chdir(tmp_path)

        assert load_config().log_level == "INFO"

    def test_get_config_loads_lazily(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        set_config(None)

        config = get_config()

        assert isinstance(config, RedefineConfig)
        assert config_module._config is config
