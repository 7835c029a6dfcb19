"""Logging for svcgen: every module logs under the ``svcgen`` logger."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from .api.config.get_home_dir import get_home_dir

ROOT_LOGGER = "svcgen"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Logger under the svcgen namespace; accepts a module ``__name__`` or a short name."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get("SVCGEN_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r} (expected DEBUG, INFO, WARNING or ERROR)")
    return resolved


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Send svcgen log records to a log file and stderr.

    Only the ``svcgen`` logger is configured; the root logger is left alone.
    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name or number (default SVCGEN_LOG_LEVEL, else INFO)
        log_file: Optional path to log file (default ~/.svcgen/svcgen.log)
        format_string: Optional custom format string
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(_resolve_level(level))

    if log_file is None:
        log_file = get_home_dir("svcgen.log")
    log_file.parent.mkdir(parents=True, exist_ok=True)

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
    for handler in (logging.FileHandler(log_file), logging.StreamHandler(sys.stderr)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
