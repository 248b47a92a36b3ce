"""Tests for shared/logging.py."""

import logging

import pytest

import shared.logging as app_logging


@pytest.fixture
def root_logger(monkeypatch):
    """Let configure_logging run again and undo its handlers afterwards."""
    monkeypatch.setattr(app_logging, "_configured", False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestConfigureLogging:
    def test_level(self, root_logger):
        app_logging.configure_logging("WARNING")
        assert root_logger.level == logging.WARNING

    def test_files(self, root_logger, tmp_path):
        app_logging.configure_logging("INFO", log_dir=str(tmp_path / "logs"))

        logging.getLogger("tests.logging").info("routine event")
        logging.getLogger("tests.logging").error("broken event")
        for handler in root_logger.handlers:
            handler.flush()

        combined = (tmp_path / "logs" / "combined.log").read_text()
        errors = (tmp_path / "logs" / "error.log").read_text()
        assert "routine event" in combined and "broken event" in combined
        assert "broken event" in errors and "routine event" not in errors
        assert " | ERROR | tests.logging | broken event" in errors

    def test_second_call_is_noop(self, root_logger):
        app_logging.configure_logging("INFO")
        count = len(root_logger.handlers)
        app_logging.configure_logging("DEBUG")
        assert len(root_logger.handlers) == count
        assert root_logger.level == logging.INFO
