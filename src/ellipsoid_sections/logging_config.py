"""
Logging Configuration
Attaches handlers to the 'ellipsoid_sections' namespace logger.

Diagnostics go to stderr by default so that report or JSON output written
to stdout stays machine-readable. The library never calls this on import;
hosts and the CLI do.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "ellipsoid_sections"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to also write the log to.
        stream: Console stream; sys.stderr when omitted.

    Returns:
        The configured 'ellipsoid_sections' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated calls replace handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [
        logging.StreamHandler(stream if stream is not None else sys.stderr)
    ]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized (level=%s).", logging.getLevelName(level))
    return logger
