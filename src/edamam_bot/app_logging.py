"""Logging configuration helpers."""

import logging

LOGGER_NAME = "edamam_bot"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

# httpx logs every request URL at INFO, and the Edamam URL carries app_key.
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Set up the bot logger and return it.

    The stream handler is attached once; later calls only change the level.
    Third-party HTTP loggers are held at WARNING whatever the bot level is.
    """
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
