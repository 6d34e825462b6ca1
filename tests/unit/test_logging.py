"""Tests for logging setup."""

import json
import sys

import pytest
from loguru import logger

import settings.logging as log_settings


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path / "logs")
    yield tmp_path / "logs"
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    def test_file_sink_writes_json_lines(self, log_dir):
        log_settings.setup_logging("INFO", to_file=True)
        logger.debug("Discarded ballot: {}", "u12")
        logger.remove()

        files = list(log_dir.glob("merit_awards_*.jsonl"))
        assert len(files) == 1
        records = [json.loads(line)["record"] for line in files[0].read_text().splitlines()]
        assert [r["message"] for r in records] == [f"Logging to {log_dir}", "Discarded ballot: u12"]
        assert records[1]["level"]["name"] == "DEBUG"

    def test_console_only(self, log_dir):
        log_settings.setup_logging("INFO", to_file=False)
        logger.info("hello")
        assert not log_dir.exists()
