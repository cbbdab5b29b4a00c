import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

_MAX_BYTES = 10 * 1024 * 1024  # 10MB
_BACKUP_COUNT = 5
_CONSOLE_FMT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JsonFormatter(logging.Formatter):
    """
    Formatter that writes each LogRecord as one JSON line.
    """
    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def _default_log_dir() -> str:
    # Read straight from the environment; common.config imports this module.
    return os.environ.get("DETECTOR_LOG_DIR", "logs")


def setup_logger(
    name: str,
    log_dir: str = None,
    level: int = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """
    Sets up a logger with a JSON-lines file handler and a console handler.

    Args:
        name: Name of the logger (also the log file stem)
        log_dir: Directory to store log files; defaults to $DETECTOR_LOG_DIR or ./logs
        level: Logging level
        console_output: Whether to output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    log_path = Path(log_dir or _default_log_dir())
    file_error = None
    try:
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / f"{name}.jsonl",
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
        )
        file_handler.setFormatter(JsonFormatter())
        logger.addHandler(file_handler)
    except OSError as e:
        file_error = e

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FMT))
        logger.addHandler(console_handler)

    if file_error is not None:
        logger.warning(f"File logging disabled for {name}: {file_error}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """Convenience function to get a logger with default settings"""
    return setup_logger(name)
