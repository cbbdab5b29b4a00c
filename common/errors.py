"""
Exception hierarchy for the detector.

Every failure the pipeline can surface derives from DetectorError so callers
(the HTTP layer, the CLI) can catch at the granularity they need:

- ValidationError: the request is unusable; rejected before hashing.
- ModelFailure: a configured provider could not score one request.
  Never escapes the judgment port.
- StoreError: the persistence layer failed; fatal to that request.
- ConfigError: startup configuration is inconsistent.
- HeuristicError: signal coverage is inconsistent (a programming defect).
"""


class DetectorError(Exception):
    """Base exception for all detector errors."""


class ValidationError(DetectorError):
    """Raised when an analyze or history request fails input validation."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid '{field}': {reason}")


class ModelFailure(DetectorError):
    """Raised by a model judge that could not produce a score."""

    def __init__(self, provider: str, detail: str):
        self.provider = provider
        self.detail = detail
        super().__init__(f"Model provider '{provider}' failed: {detail}")


class StoreError(DetectorError):
    """Raised when a SQLite read or write fails."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        super().__init__(f"Store error [{operation}]: {detail}")


class ConfigError(DetectorError):
    """Raised when a configuration key is missing or invalid."""

    def __init__(self, key: str, reason: str = "missing or None"):
        self.key = key
        super().__init__(f"Configuration error for '{key}': {reason}")


class HeuristicError(DetectorError):
    """Raised when extractor output does not cover the signal set exactly."""
