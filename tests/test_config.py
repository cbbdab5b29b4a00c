"""Tests for common/config.py: schema defaults, env overrides and validation."""

import pytest

from common.config import Config, CONFIG_SCHEMA
from common.errors import ConfigError


def _config(values=None):
    # Config.__new__ returns the singleton; build an isolated instance instead
    cfg = object.__new__(Config)
    cfg._config = values or {}
    return cfg


class TestConfigSchemaDefaults:
    def test_schema_has_database_path(self):
        _type, default = CONFIG_SCHEMA["database.sqlite_path"]
        assert default == "data/detector.db"
        assert _type is str

    def test_schema_history_limits(self):
        assert CONFIG_SCHEMA["history.default_limit"] == (int, 20)
        assert CONFIG_SCHEMA["history.max_limit"] == (int, 100)

    def test_schema_content_cap(self):
        assert CONFIG_SCHEMA["detector.max_content_length"] == (int, 50_000)

    def test_schema_llm_defaults(self):
        assert CONFIG_SCHEMA["llm.provider"][1] == "auto"
        assert CONFIG_SCHEMA["llm.max_tokens"][1] == 100
        assert CONFIG_SCHEMA["llm.temperature"][1] == 0.1

    def test_schema_types_are_valid(self):
        valid_types = {str, int, float, bool, None}
        for key, (t, _default) in CONFIG_SCHEMA.items():
            assert t in valid_types or t is None, f"Invalid type for {key}: {t}"


class TestConfigGet:
    def test_get_returns_schema_default_when_no_config(self, monkeypatch):
        monkeypatch.delenv("DETECTOR_DB_PATH", raising=False)
        cfg = _config()
        assert cfg.get("database.sqlite_path") == "data/detector.db"
        assert cfg.get("history.max_limit") == 100

    def test_get_caller_default_overrides_schema(self, monkeypatch):
        monkeypatch.delenv("DETECTOR_DB_PATH", raising=False)
        cfg = _config()
        assert cfg.get("database.sqlite_path", "/custom/path.db") == "/custom/path.db"

    def test_get_config_value_overrides_all(self, monkeypatch):
        monkeypatch.setenv("DETECTOR_DB_PATH", "/from/env.db")
        cfg = _config({"database": {"sqlite_path": "/from/config.db"}})
        assert cfg.get("database.sqlite_path", "/caller/default") == "/from/config.db"

    def test_env_override_beats_schema(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-env")
        cfg = _config()
        assert cfg.get("llm.anthropic_api_key") == "sk-ant-env"

    def test_empty_env_var_is_ignored(self, monkeypatch):
        monkeypatch.setenv("DETECTOR_LLM_PROVIDER", "")
        cfg = _config()
        assert cfg.get("llm.provider") == "auto"

    def test_get_unknown_key_returns_none(self):
        assert _config().get("nonexistent.key") is None

    def test_get_unknown_key_returns_caller_default(self):
        assert _config().get("nonexistent.key", "fallback") == "fallback"


class TestConfigRequire:
    def test_require_present(self):
        cfg = _config({"llm": {"anthropic_model": "claude-x"}})
        assert cfg.require("llm.anthropic_model") == "claude-x"

    def test_require_missing_raises(self, monkeypatch):
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
        with pytest.raises(ConfigError) as exc:
            _config().require("llm.openrouter_api_key")
        assert exc.value.key == "llm.openrouter_api_key"


class TestConfigValidate:
    def test_validate_clean_config(self):
        cfg = _config({"database": {"sqlite_path": "data/test.db"}})
        assert cfg.validate() == []

    def test_validate_type_mismatch(self):
        cfg = _config({"history": {"max_limit": "lots"}})
        warnings = cfg.validate()
        assert any("max_limit" in w for w in warnings)

    def test_validate_accepts_int_for_float(self):
        cfg = _config({"llm": {"timeout_seconds": 10}})
        assert cfg.validate() == []
