"""Logging setup shared by the desktop and web entry points."""
import logging

LOGGER_NAME = "roster_manager"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the application logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level name, e.g. "INFO" or "DEBUG"

    Returns:
        The application logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
