import logging
import sys

from .config import Config


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure logging for the filemeta server.

    Logs go to stderr because stdout carries the MCP stdio transport.

    Args:
        level: Level name for the filemeta logger, defaults to Config.LOG_LEVEL

    Returns:
        The configured package logger
    """
    level = level or Config.LOG_LEVEL

    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # keep third-party libraries quiet
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
    root.addHandler(handler)

    logger = logging.getLogger("filemeta")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.debug("Logging is set up.")
    return logger
