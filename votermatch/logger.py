"""
Logging setup for votermatch.

Every module logger gets a rich console handler (INFO, or DEBUG with
DEBUG=1 / --debug) and, unless LOG_TO_FILE=0, a per-run log file in the
logs directory that always records DEBUG, including the per-match lines.

Usage:
    from votermatch.logger import get_logger
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .config import get_config

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# One log file per process run, shared by all module loggers
_run_log_file: Optional[Path] = None
_loggers: dict[str, logging.Logger] = {}


def _console_level(debug: bool) -> int:
    return logging.DEBUG if debug else logging.INFO


def _log_file(log_dir: Path) -> Path:
    global _run_log_file
    if _run_log_file is None or _run_log_file.parent != log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        _run_log_file = log_dir / f"votermatch_{datetime.now():%Y%m%d_%H%M%S}.log"
    return _run_log_file


def setup_logger(
    name: str = "votermatch",
    log_dir: Optional[Path] = None,
    debug: Optional[bool] = None,
    log_to_file: Optional[bool] = None
) -> logging.Logger:
    """
    Attach console and file handlers to the named logger.

    Arguments left as None come from the global config. A logger that
    already has handlers is returned unchanged.
    """
    config = get_config()
    debug = config.debug if debug is None else debug
    log_dir = config.logs_dir if log_dir is None else log_dir
    log_to_file = config.log_to_file if log_to_file is None else log_to_file

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    # Handlers filter; the logger itself lets everything through
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console = RichHandler(rich_tracebacks=True, show_path=False)
    console.setLevel(_console_level(debug))
    logger.addHandler(console)

    if log_to_file:
        file_handler = logging.FileHandler(_log_file(log_dir), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "votermatch") -> logging.Logger:
    """Return the cached logger for `name`, configuring it on first use."""
    if name not in _loggers:
        _loggers[name] = setup_logger(name)
    return _loggers[name]


def set_console_level(debug: bool) -> None:
    """
    Switch console output of every cached logger between INFO and DEBUG.

    Module loggers are created at import time, before command-line flags
    are parsed, so --debug has to be applied afterwards.
    """
    for logger in _loggers.values():
        for handler in logger.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(_console_level(debug))
