"""
Unit tests for logging setup.
"""

import logging

import pytest

from core.logger import configure_logging


@pytest.fixture
def bare_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_installs_single_stdout_handler(bare_root_logger):
    configure_logging("debug")

    assert len(bare_root_logger.handlers) == 1
    assert bare_root_logger.level == logging.DEBUG


def test_repeated_calls_keep_existing_handlers(bare_root_logger):
    configure_logging("info")
    handlers = bare_root_logger.handlers[:]

    configure_logging("warning")

    assert bare_root_logger.handlers == handlers
    assert bare_root_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(bare_root_logger):
    configure_logging("chatty")

    assert bare_root_logger.level == logging.INFO
