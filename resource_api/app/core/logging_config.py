"""
Logging for the Resource API.

Every module logs through ``logging.getLogger(__name__)``, so all
service messages land under the ``resource_api`` logger.
``setup_logging`` gives that logger its own handlers, built from
``Settings``: a console handler, and a file handler when ``LOG_FILE``
is set.  The root logger is left alone, which keeps uvicorn's and the
test runner's handlers out of the way.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

SERVICE_LOGGER = "resource_api"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so a later call can replace them.
_OWNED = "_resource_api_handler"


def _build_handlers(config: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        log_path = Path(config.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(config: Settings) -> logging.Logger:
    """Configure the ``resource_api`` logger from ``config``.

    Handlers from an earlier call are closed and replaced, so calling
    this once per ``create_app`` never stacks duplicates and a new
    level or log file takes effect.  Unknown level names fall back to
    ``INFO``.  Records do not propagate to the root logger.
    """
    logger = logging.getLogger(SERVICE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    logger.propagate = False

    formatter = logging.Formatter(fmt=config.log_format, datefmt=DATE_FORMAT)
    for handler in _build_handlers(config):
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    return logger
