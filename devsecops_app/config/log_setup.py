"""Logging setup for the service process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
PACKAGE_LOGGER_NAME = "devsecops_app"


def config_configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger.

    Calling this more than once only updates the level, so repeated
    bootstrap in tests does not duplicate output.

    Args:
        level: Level name such as `INFO` or `DEBUG`.

    Returns:
        logging.Logger: Configured package logger.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
