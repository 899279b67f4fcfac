# File: tests/utils/test_logging_config.py
"""Tests for the logging setup."""

import logging
import os

import pytest

from deck_designer.utils.logging_config import DeckDesignerLogger, get_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_trace_level_is_registered():
    assert logging.getLevelName(DeckDesignerLogger.TRACE_LEVEL) == "TRACE"


def test_get_logger_adds_trace_method():
    logger = get_logger("deck_designer.tests", level=DeckDesignerLogger.TRACE_LEVEL)
    assert logger.level == DeckDesignerLogger.TRACE_LEVEL
    assert callable(logger.trace)


def test_configure_writes_log_file(tmp_path, restore_root_logger):
    log_file = DeckDesignerLogger.configure(debug_mode=True, log_dir=str(tmp_path))
    assert os.path.dirname(log_file) == str(tmp_path)
    assert os.path.basename(log_file).startswith("deck_designer_")

    get_logger("deck_designer.tests").debug("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    with open(log_file) as f:
        assert "written to file" in f.read()


def test_configure_levels(tmp_path, restore_root_logger):
    DeckDesignerLogger.configure(debug_mode=False, log_dir=str(tmp_path))
    assert logging.getLogger().level == logging.INFO


def test_reconfigure_replaces_handlers(tmp_path, restore_root_logger):
    DeckDesignerLogger.configure(log_dir=str(tmp_path))
    DeckDesignerLogger.configure(log_dir=str(tmp_path))
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert sum(isinstance(h, logging.FileHandler) for h in handlers) == 1
