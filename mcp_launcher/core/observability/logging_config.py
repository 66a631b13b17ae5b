"""
Logging configuration — central setup for the launcher.

Called by main.py at startup, and again by the launch use case when
``--verbose`` is passed. Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Levels are resolved in precedence order:
    --verbose  >  MCP_LAUNCHER_LOG_LEVEL env var  >  WARNING (default)

Optional file output via MCP_LAUNCHER_LOG_FILE / MCP_LAUNCHER_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)

# ── Format strings ──────────────────────────────────────────────

# WARNING: bare message
_FMT_MINIMAL = "%(message)s"

# INFO (--verbose): time and logger name
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG: file:line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

# Log file: always full detail
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

# Handlers added by setup_logging(), closed when it runs again
_installed: list[logging.Handler] = []

LEVEL_ENV = "MCP_LAUNCHER_LOG_LEVEL"
FILE_ENV = "MCP_LAUNCHER_LOG_FILE"
FILE_LEVEL_ENV = "MCP_LAUNCHER_LOG_FILE_LEVEL"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure Python logging for the entire process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.
    """
    numeric_level = _parse_level(level)

    # ── Console handler (stderr) ────────────────────────────────
    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    # ── Root logger ─────────────────────────────────────────────
    root = logging.getLogger()
    for handler in _installed:
        handler.close()
    _installed.clear()
    root.handlers.clear()
    root.addHandler(console)
    _installed.append(console)

    effective_level = numeric_level
    file_error: OSError | None = None

    # ── File handler (optional) ─────────────────────────────────
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level

        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            # Console-only; a bad log file must not stop the launch
            file_error = e
        else:
            effective_level = min(effective_level, file_level)
            fh.setLevel(file_level)
            fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
            root.addHandler(fh)
            _installed.append(fh)

    root.setLevel(effective_level)

    if file_error is not None:
        logger.warning("Cannot open log file %s: %s", log_file, file_error)

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False


def setup_logging_from_env(verbose: bool = False) -> None:
    """Configure logging from MCP_LAUNCHER_LOG_* env vars.

    ``verbose`` raises the console level to at least INFO.
    """
    level = os.environ.get(LEVEL_ENV, "WARNING")
    if verbose and _parse_level(level) > logging.INFO:
        level = "INFO"

    setup_logging(
        level=level,
        log_file=os.environ.get(FILE_ENV),
        log_file_level=os.environ.get(FILE_LEVEL_ENV),
    )


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
