import json
import os
from pathlib import Path
from typing import Dict, Any

from common.errors import ConfigError
from common.logging.logger import get_logger

logger = get_logger("config")

# Centralized default values for all config keys used across the codebase.
# Each entry: (type, default_value)
# Types: str, int, float, bool, None (any)
CONFIG_SCHEMA: Dict[str, tuple] = {
    # Paths
    "paths.logs_dir":                   (str,   "logs"),

    # Database
    "database.sqlite_path":             (str,   "data/detector.db"),
    "database.timeout_seconds":         (float, 30.0),

    # Detector
    "detector.max_content_length":      (int,   50_000),
    "detector.preview_chars":           (int,   150),

    # History queries
    "history.default_limit":            (int,   20),
    "history.max_limit":                (int,   100),

    # LLM
    "llm.provider":                     (str,   "auto"),
    "llm.anthropic_api_key":            (str,   None),
    "llm.anthropic_model":              (str,   "claude-sonnet-4-5-20250929"),
    "llm.openrouter_api_key":           (str,   None),
    "llm.openrouter_model":             (str,   "openai/gpt-4o-mini"),
    "llm.timeout_seconds":              (float, 20.0),
    "llm.max_tokens":                   (int,   100),
    "llm.temperature":                  (float, 0.1),
}

# Keys that may also come from the environment (API keys, deployment paths)
ENV_OVERRIDES: Dict[str, str] = {
    "llm.anthropic_api_key":    "ANTHROPIC_API_KEY",
    "llm.openrouter_api_key":   "OPENROUTER_API_KEY",
    "llm.provider":             "DETECTOR_LLM_PROVIDER",
    "database.sqlite_path":     "DETECTOR_DB_PATH",
    "paths.logs_dir":           "DETECTOR_LOG_DIR",
}


class Config:
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self):
        config_path = Path(os.environ.get("DETECTOR_CONFIG", "config.json"))
        if not config_path.exists():
            self._config = {}
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(str(config_path), f"unreadable: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(str(config_path), "top level must be a JSON object")

        self._config = loaded
        logger.info(f"Loaded configuration from {config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Gets a config value by dot-separated key.

        Lookup order:
        1. Value from config.json (if present and not None)
        2. Environment variable listed in ENV_OVERRIDES (if set and non-empty)
        3. Caller-provided default (if not None)
        4. Schema default from CONFIG_SCHEMA
        5. None
        """
        value = self._get_raw(key)
        if value is not None:
            return value

        env_name = ENV_OVERRIDES.get(key)
        if env_name and os.environ.get(env_name):
            return os.environ[env_name]

        if default is not None:
            return default

        schema_entry = CONFIG_SCHEMA.get(key)
        if schema_entry is not None:
            return schema_entry[1]

        return None

    def validate(self) -> list:
        """
        Validates the loaded config against CONFIG_SCHEMA.

        Returns a list of warning strings for type mismatches.
        Does NOT raise -- config.json values always take precedence.
        """
        warnings = []
        for key, (expected_type, _default) in CONFIG_SCHEMA.items():
            if expected_type is None:
                continue
            value = self._get_raw(key)
            if value is None:
                continue
            # ints are acceptable where floats are expected
            if expected_type is float and isinstance(value, int) and not isinstance(value, bool):
                continue
            if not isinstance(value, expected_type):
                warnings.append(
                    f"Config '{key}': expected {expected_type.__name__}, "
                    f"got {type(value).__name__} ({value!r})"
                )
        for w in warnings:
            logger.warning(w)
        return warnings

    def _get_raw(self, key: str) -> Any:
        """Gets value from config.json without env or schema fallback."""
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return None
            if value is None:
                return None
        return value

    def require(self, key: str) -> Any:
        """
        Requires a config value to be set in config.json or the environment.

        Raises ConfigError if missing.
        """
        value = self.get(key)
        if value is None:
            logger.error(f"Missing required config key: {key}")
            raise ConfigError(key)
        return value


# Global accessor
config = Config()
