import logging
import sys
from pathlib import Path
from typing import Optional

from cosine_ann.config import DEFAULT_LOG_LEVEL

PACKAGE_LOGGER = "cosine_ann"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_file: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure console (and optionally file) output for ``name``.

    Library modules only create loggers; handlers are attached here, once,
    by the application. Calling again only changes the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel((level or DEFAULT_LOG_LEVEL).upper())

    if logger.handlers:
        return logger

    _attach(logger, logging.StreamHandler(sys.stdout))
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(path))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the package namespace, so ``setup_logger()`` covers it."""
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
