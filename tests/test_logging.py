"""
Tests for titlelink.logging.
"""

import logging

from titlelink.logging import ConsoleFormatter, setup_logging


def test_setup_logging_accepts_level_names():
    logger = setup_logging("DEBUG", name="titlelink.test_a")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, ConsoleFormatter)


def test_unknown_level_name_falls_back_to_info():
    assert setup_logging("LOUD", name="titlelink.test_b").level == logging.INFO


def test_setup_logging_is_idempotent():
    setup_logging(name="titlelink.test_c")
    logger = setup_logging(name="titlelink.test_c")
    assert len(logger.handlers) == 1


def test_console_format():
    record = logging.LogRecord("titlelink.x", logging.WARNING, __file__, 1, "Giving up on %s", ("X",), None)
    line = ConsoleFormatter().format(record)
    assert "[WARNING ] titlelink.x: Giving up on X" in line
