"""Tests for logging setup."""

import logging
import sys

import pytest

from fastrandom.utils.logging import LOG_FORMAT, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    systems = logging.getLogger("fastrandom.systems")
    saved = (list(root.handlers), root.level, systems.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    systems.setLevel(saved[2])


def test_single_stdout_handler(restore_logging):
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert handler.stream is sys.stdout
    assert handler.formatter._fmt == LOG_FORMAT
    assert root.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(restore_logging):
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO


def test_generator_level_override(restore_logging):
    setup_logging("DEBUG", generator_level="WARNING")
    assert logging.getLogger("fastrandom.systems").level == logging.WARNING
    setup_logging("DEBUG")
    assert logging.getLogger("fastrandom.systems").level == logging.NOTSET
