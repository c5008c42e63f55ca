"""
Logging setup shared by SkyColor and the uvicorn server.

Records below WARNING go to stdout, WARNING and above to stderr. The same
handler pair is attached to the "skycolor" logger and to uvicorn's loggers,
so request logs and application logs share one format and one LOG_LEVEL.
"""

import logging
import sys
from typing import Iterable

from skycolor.config import LOG_LEVEL

APP_LOGGER = "skycolor"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a threshold level."""

    def __init__(self, threshold: int):
        super().__init__()
        self.threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.threshold


def build_handlers() -> list[logging.Handler]:
    """stdout handler for DEBUG/INFO, stderr handler for WARNING+."""
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(BelowLevelFilter(logging.WARNING))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
    return [stdout_handler, stderr_handler]


def setup_logging(
    level: str | int = LOG_LEVEL,
    server_loggers: Iterable[str] = SERVER_LOGGERS,
) -> logging.Logger:
    """
    Route the application and server loggers through one handler pair.

    Called once at import and again from the FastAPI lifespan, because uvicorn
    installs its own handlers when it starts. Repeated calls replace handlers
    instead of stacking them.

    Args:
        level: Level name or number applied to every configured logger
        server_loggers: Extra logger names to bring under the same handlers

    Returns:
        The "skycolor" logger
    """
    handlers = build_handlers()

    for name in (APP_LOGGER, *server_loggers):
        target = logging.getLogger(name)
        target.setLevel(level)
        target.handlers = list(handlers)
        target.propagate = False

    return logging.getLogger(APP_LOGGER)


# Global logger instance
logger = setup_logging()
