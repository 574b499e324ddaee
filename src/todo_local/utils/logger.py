"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "todo_local"
_LOG_FILE = "todo-local.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children.

    The ``todo_local`` logger gets its rotating file handler on first call;
    module loggers created with ``logging.getLogger(__name__)`` inside the
    package write through it from then on.
    """
    global _logger
    if _logger is None:
        _logger = _configure()
    if name is None or name == _APP_NAME:
        return _logger
    return _logger.getChild(name.removeprefix(f"{_APP_NAME}."))


def set_level(level: str | int) -> None:
    """Change the level of the application logger."""
    get_logger().setLevel(level)


def _configure() -> logging.Logger:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger
