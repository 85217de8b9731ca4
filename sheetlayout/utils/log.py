"""Logging helpers for the sheetlayout package."""

# Module responsibilities:
# - Centralize logging configuration with file + stream handlers.
# - Provide get_logger() that ensures directories exist and configuration occurs once.

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_BASE = Path.home() / "SheetLayout" / "logs"
LOG_DIR_ENV = "SHEETLAYOUT_LOG_DIR"
ROOT_LOGGER_NAME = "sheetlayout"
_LOG_CONFIGURED = False


def _resolve_log_dir(log_dir: Optional[Path] = None) -> Optional[Path]:
    """Resolve the log directory, ensuring existence; None when it cannot be created."""
    env_dir = os.environ.get(LOG_DIR_ENV)
    target = log_dir or (Path(env_dir) if env_dir else DEFAULT_LOG_BASE)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return target


def _configure_logging(log_dir: Optional[Path] = None) -> None:
    """Configure the package logger once with rotating file + console handlers."""
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.INFO)

    directory = _resolve_log_dir(log_dir)
    if directory is not None:
        file_handler = logging.handlers.RotatingFileHandler(
            directory / "sheetlayout.log", maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.INFO)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)
    root_logger.propagate = False

    _LOG_CONFIGURED = True


def get_logger(name: str, log_dir: Optional[Path] = None) -> logging.Logger:
    """Return a package-scoped logger.

    Args:
        name: Logger name suffix appended to the package root logger namespace.
        log_dir: Optional override for the logging directory.

    Returns:
        Configured logger scoped under ``sheetlayout``.
    """

    _configure_logging(log_dir)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)
