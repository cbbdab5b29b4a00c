"""Tests for common/logging/logger.py."""

import json
import logging
import logging.handlers
import sys

from common.logging.logger import JsonFormatter, setup_logger


class TestSetupLogger:
    def test_writes_json_lines(self, tmp_path):
        logger = setup_logger("test_json_lines", log_dir=str(tmp_path), console_output=False)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        line = (tmp_path / "test_json_lines.jsonl").read_text().strip().splitlines()[-1]
        record = json.loads(line)
        assert record["message"] == "hello"
        assert record["level"] == "INFO"

    def test_handlers_added_once(self, tmp_path):
        first = setup_logger("test_handlers_once", log_dir=str(tmp_path))
        count = len(first.handlers)
        second = setup_logger("test_handlers_once", log_dir=str(tmp_path))
        assert second is first
        assert len(second.handlers) == count

    def test_unwritable_log_dir_warns(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        logger = setup_logger("test_unwritable_dir", log_dir=str(blocker / "logs"))
        assert not any(
            isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
        )
        assert any(
            "File logging disabled" in r.getMessage() and r.levelname == "WARNING"
            for r in caplog.records
        )


class TestJsonFormatter:
    def test_includes_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )
        payload = json.loads(JsonFormatter().format(record))
        assert "ValueError: bad" in payload["exception"]
