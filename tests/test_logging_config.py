"""
Tests for Logging Configuration.
"""
import logging

import pytest

from profilecalc.config_loader import LoggingConfig
from profilecalc.logging_config import ROOT_LOGGER, get_logger, setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestLogging:
    def test_file_handler(self, tmp_path):
        """File handler writes the configured format."""
        log_file = tmp_path / 'logs' / 'calc.log'
        logger = setup_logging('DEBUG', log_file=str(log_file), console=False)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        get_logger('calculator').info('member computed')
        logger.handlers[0].flush()

        content = log_file.read_text(encoding='utf-8')
        assert 'INFO' in content
        assert 'profilecalc.calculator' in content
        assert 'member computed' in content

    def test_repeated_setup_replaces_handlers(self):
        """Setup is idempotent."""
        setup_logging('INFO')
        logger = setup_logging('WARNING')

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_from_config(self):
        """LoggingConfig drives level and handlers."""
        logger = setup_logging_from_config(LoggingConfig(level='ERROR', console=False))

        assert logger.level == logging.ERROR
        assert logger.handlers == []

    def test_debug_quiets_plotting_libraries(self):
        """DEBUG leaves matplotlib at WARNING."""
        setup_logging('DEBUG', console=False)
        assert logging.getLogger('matplotlib').level == logging.WARNING

    def test_get_logger(self):
        """Child loggers sit under the package logger."""
        assert get_logger().name == 'profilecalc'
        assert get_logger('section_plot').name == 'profilecalc.section_plot'
