"""
Logging configuration — set up once by the CLI.

Every module that does ``logger = logging.getLogger(__name__)``
inherits this config.  The CLI surface stays at ``--config`` and
``--output``, so levels come from the environment:

    PORTABLE_ENV_LOG_LEVEL       console level (default WARNING)
    PORTABLE_ENV_LOG_FILE        optional log file
    PORTABLE_ENV_LOG_FILE_LEVEL  level for the file (default: console level)
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "PORTABLE_ENV_LOG_LEVEL"
ENV_LOG_FILE = "PORTABLE_ENV_LOG_FILE"
ENV_LOG_FILE_LEVEL = "PORTABLE_ENV_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

# Console at WARNING and above: the script list is the real output
_FMT_PLAIN = "%(message)s"

# Console at INFO/DEBUG, and every log file
_FMT_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure Python logging for the process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to ``level``.

    Raises:
        OSError: ``log_file`` can't be opened.  Root handlers are left
            untouched in that case.
    """
    console_level = _parse_level(level)
    handlers: list[logging.Handler] = [_console_handler(console_level)]
    effective_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DETAILED, datefmt=_DATEFMT_FILE))
        handlers.append(fh)
        effective_level = min(effective_level, file_level)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(effective_level)

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False


def setup_logging_from_env(environ: Mapping[str, str] | None = None) -> None:
    """Configure logging from ``PORTABLE_ENV_LOG_*`` variables."""
    env = os.environ if environ is None else environ
    setup_logging(
        level=env.get(ENV_LOG_LEVEL, "WARNING"),
        log_file=env.get(ENV_LOG_FILE) or None,
        log_file_level=env.get(ENV_LOG_FILE_LEVEL) or None,
    )


def _console_handler(level: int) -> logging.Handler:
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    if level <= logging.INFO:
        console.setFormatter(logging.Formatter(_FMT_DETAILED, datefmt=_DATEFMT_CONSOLE))
    else:
        console.setFormatter(logging.Formatter(_FMT_PLAIN))
    return console


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
