"""
Logging setup for the ``cinebase_api`` logger hierarchy.

Every module logs through ``logging.getLogger(__name__)``, so all
application records land under the ``cinebase_api`` logger.  Only that
logger is configured here; the root logger and uvicorn's own
``uvicorn``/``uvicorn.access`` loggers are left alone.  The handler
uses uvicorn's ``DefaultFormatter`` so application lines (seeded
counts, created movies, rejected requests) read like the server's
lines when the API is started through ``run.py``::

    INFO:     2026-10-19 10:00:00 cinebase_api.app.main: Initial movies: 1
    INFO:     Uvicorn running on http://0.0.0.0:3000

Records still propagate to the root logger, so tools that listen
there (pytest's ``caplog``, an external log shipper) keep seeing them.
"""

import logging
from pathlib import Path
from typing import Optional

from uvicorn.logging import DefaultFormatter


APP_LOGGER = "cinebase_api"

LOG_FORMAT = "%(levelprefix)s %(asctime)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_handler(logger: logging.Logger, handler_type: type, path: Optional[Path] = None) -> bool:
    for handler in logger.handlers:
        if type(handler) is not handler_type:
            continue
        if path is None or Path(getattr(handler, "baseFilename", "")) == path:
            return True
    return False


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the ``cinebase_api`` logger and return it.

    The level is (re)applied on every call so a later ``create_app``
    picks up a changed ``LOG_LEVEL``.  Handlers are only added once:
    one console handler, plus one file handler per distinct
    ``logfile``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Optional file to mirror the console output to, resolved
        relative to the current working directory.  Written without
        colour codes.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not _has_handler(logger, logging.StreamHandler):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DefaultFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_handler(logger, logging.FileHandler, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(
                DefaultFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT, use_colors=False)
            )
            logger.addHandler(file_handler)

    return logger
