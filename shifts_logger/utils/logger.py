"""로깅 설정 모듈.

Logging setup shared by the API server, the seed script and the console client.
Modules call `get_logger(__name__)`; the first call configures the root
logger from settings.LOG_LEVEL.
"""

import logging
import sys

from shifts_logger.config import settings

LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

# Root handler marker, so repeated setup never stacks handlers
HANDLER_NAME: str = "shifts_logger"

# httpx logs every request at INFO, which would interleave with the console menus
_QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def configure_logging(level: str | None = None) -> None:
    """Install the stdout handler on the root logger.

    Calling it again only re-applies the level. Handlers installed by
    others (uvicorn, pytest's capture) are left in place.

    Args:
        level: Level name; defaults to settings.LOG_LEVEL
    """
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures logging on first use."""
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        configure_logging()
    return logging.getLogger(name)
