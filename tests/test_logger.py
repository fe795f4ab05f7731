import logging
import sys

from genfp.logger import get_logger, logger, setup_logger


def test_default_logger_configured_once():
    assert logger.name == "genfp"
    assert len(logger.handlers) == 1
    assert logger.propagate is False

    again = setup_logger()
    assert again is logger
    assert len(again.handlers) == 1


def test_setup_logger_custom_level_and_stream():
    custom = setup_logger("genfp-test-custom", level="debug", format_string="%(message)s")
    try:
        assert custom.level == logging.DEBUG
        handler = custom.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout
        assert handler.formatter._fmt == "%(message)s"
    finally:
        custom.handlers.clear()


def test_get_logger_children():
    assert get_logger() is logger
    child = get_logger("validation")
    assert child.name == "genfp.validation"
    assert child.parent is logger
