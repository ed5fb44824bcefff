"""Logging setup for the huecycle command line and preview host."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

__all__ = ["setup_logging", "get_log_path"]

_DEFAULT_LOG_DIR = Path.home() / ".huecycle" / "logs"
_LOG_FILE_NAME = "huecycle.log"
_NOISY_LOGGERS: tuple[str, ...] = ("asyncio", "qasync")
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_CONFIGURED = False
_LOG_PATH: Path | None = None


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    to_file: bool = True,
    console: bool = True,
    force: bool = False,
) -> Path | None:
    """Configure root logging; returns the log file path when file logging is on.

    One-shot commands (``--list``, ``--stylesheet``) pass ``to_file=False`` so
    that printing a stylesheet never touches the home directory.
    """

    global _CONFIGURED, _LOG_PATH
    if _CONFIGURED and not force:
        return _LOG_PATH

    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = []
    log_path: Path | None = None

    if to_file:
        target_dir = Path(log_dir or os.environ.get("HUECYCLE_LOG_DIR") or _DEFAULT_LOG_DIR).expanduser()
        target_dir.mkdir(parents=True, exist_ok=True)
        log_path = target_dir / _LOG_FILE_NAME
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=500_000, backupCount=2, encoding="utf-8"
        )
        handlers.append(file_handler)

    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers or [logging.NullHandler()], force=True)
    logging.captureWarnings(True)
    quiet_level = max(level, logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    _CONFIGURED = True
    _LOG_PATH = log_path
    return log_path


def get_log_path() -> Path | None:
    """Return the active log file, if file logging was configured."""

    return _LOG_PATH
