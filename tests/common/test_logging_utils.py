"""
Tests for common.logging_utils
"""

import io
import logging

import pytest

from grading_toolkit.common.logging_utils import PACKAGE_LOGGER, configure_logging, detach_handler


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if getattr(handler, "_grading_toolkit", False):
            logger.removeHandler(handler)
    logger.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configure_when_called_twice_then_single_handler(self, package_logger):
        configure_logging()
        configure_logging()
        tagged = [h for h in package_logger.handlers if getattr(h, "_grading_toolkit", False)]
        assert len(tagged) == 1

    def test_configure_when_verbose_then_debug_level(self, package_logger):
        configure_logging(verbose=True)
        assert package_logger.level == logging.DEBUG
        configure_logging(verbose=False)
        assert package_logger.level == logging.INFO

    def test_configure_when_stream_then_module_records_written(self, package_logger):
        stream = io.StringIO()
        handler = configure_logging(stream=stream)

        logging.getLogger("grading_toolkit.scoring.extractor").info("hello")

        assert stream.getvalue() == "INFO: hello\n"
        detach_handler(handler)
        assert handler not in package_logger.handlers
