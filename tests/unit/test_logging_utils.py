"""Tests for CLI logging setup."""

import logging

import pytest

from todosync.cli.logging_utils import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """setup_logging() handler configuration."""

    def test_console_level_from_argument(self, restore_root_logger, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        setup_logging("info")

        console = [
            h for h in restore_root_logger.handlers if not isinstance(h, logging.FileHandler)
        ]
        assert console[0].level == logging.INFO
        assert (tmp_path / "todosync.log").exists()

    def test_env_level(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("TODOSYNC_LOG_LEVEL", "ERROR")
        setup_logging(log_file=None)

        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.handlers[0].level == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self, restore_root_logger):
        setup_logging("chatty", log_file=None)

        assert restore_root_logger.handlers[0].level == logging.WARNING
        assert logging.getLogger("todosync").level == logging.DEBUG
