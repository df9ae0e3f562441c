"""
Logging setup for the csp package.

The package only ever logs through loggers below `LOGGER_NAME`, and the
package logger has a `NullHandler`, so nothing is printed unless the
application configures logging (or calls `configure_logging`).
"""

import logging

LOGGER_NAME = 'csp'

LOG_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s] %(message)s'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name=None):
    """
    Get the logger for a module of this package.

    Args:
        name: The module's `__name__`. Names outside the package are
            nested under it.

    Returns:
        A `logging.Logger`.
    """
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + '.'):
        name = '{}.{}'.format(LOGGER_NAME, name)
    return logging.getLogger(name)


def configure_logging(level=logging.INFO):
    """
    Print the package's log records to stderr.

    Meant for scripts and interactive use. Calling it again only changes
    the level.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger
