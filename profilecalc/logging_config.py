"""
Logging configuration for profilecalc.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT_LOGGER = "profilecalc"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that flood DEBUG output while figures are drawn
NOISY_LOGGERS = ("matplotlib", "PIL")


def _build_handlers(log_file: Optional[str], console: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Configure the profilecalc logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file; parent directories are created
        console: Whether to log to stdout

    Returns:
        The profilecalc logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    for handler in _build_handlers(log_file, console):
        logger.addHandler(handler)

    if logger.level <= logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    return logger


def setup_logging_from_config(config) -> logging.Logger:
    """Configure logging from a LoggingConfig."""
    return setup_logging(level=config.level, log_file=config.file, console=config.console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the profilecalc namespace; the root one when name is None."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)
