# src/denomkit/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for applications that
embed the engine. Library modules only ever call logging.getLogger(__name__);
an embedding application calls setup_logging (or setup_logging_from_settings)
once at startup to decide where those records go.

Files that USE this module:
- Embedding applications (setup_logging function for logging initialization)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- denomkit.shared.validators (validate_log_level for level names)
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

from denomkit.shared.validators import validate_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "denomkit.log"

PathLike = Union[str, Path]


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    if not validate_log_level(level):
        raise ValueError(f"Unknown log level: {level!r}")
    return logging.getLevelName(level.strip().upper())


def _stdout_wanted(stdout: Optional[bool]) -> bool:
    # Off under systemd/supervisor, which capture output themselves
    if stdout is not None:
        return stdout
    return os.environ.get("DENOMKIT_LOG_STDOUT", "true").lower() == "true"


def _log_file_path(log_file: Optional[PathLike], log_dir: Optional[PathLike]) -> Optional[Path]:
    """Where file logging goes; log_dir wins over log_file. Creates the parent directory."""
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _build_handlers(stdout: bool, log_file_path: Optional[Path], max_bytes: int, backup_count: int) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if stdout:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file_path is not None:
        handlers.append(RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        ))
    if not handlers:
        # Records must go somewhere
        handlers.append(logging.StreamHandler(sys.stdout))
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level=logging.INFO,
    log_file: Optional[PathLike] = None,
    log_dir: Optional[PathLike] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    stdout: Optional[bool] = None,
) -> None:
    """
    Configure application-wide logging.

    Replaces any handlers already on the root logger, so calling it again
    reconfigures logging rather than adding to it.

    Args:
        level: Logging level as int or level name (default: logging.INFO)
        log_file: Optional path to a rotating log file
        log_dir: Optional directory for a rotating denomkit.log; takes precedence over log_file
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)
        stdout: Log to stdout; None reads DENOMKIT_LOG_STDOUT (default: true)

    Raises:
        ValueError: If level is a name logging does not know
    """
    numeric_level = _resolve_level(level)
    log_file_path = _log_file_path(log_file, log_dir)
    handlers = _build_handlers(_stdout_wanted(stdout), log_file_path, max_bytes, backup_count)

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: %s, level=%s",
        f"file={log_file_path}" if log_file_path is not None else "stdout",
        logging.getLevelName(numeric_level),
    )


def setup_logging_from_settings(settings) -> None:
    """
    Configure logging from a Settings instance.

    Args:
        settings: denomkit.config.Settings (or anything with the same log_* fields)
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        stdout=settings.log_stdout,
    )
