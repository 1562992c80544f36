"""
Script output — layout, stale-file cleanup and writing.

Layout under the output root::

    cmd/env_<profile>.bat
    bash/env_<profile>.sh
    ps/env_<profile>.ps1

Only files whose first line carries ``GENERATED_MARKER`` are ever
deleted, so hand-written ``env_*`` scripts next to generated ones are safe.
"""

from __future__ import annotations

import logging
from pathlib import Path

from portable_env.core.errors import OutputWriteError
from portable_env.core.models.dialect import ALL_DIALECTS, Dialect
from portable_env.core.models.template import GENERATED_MARKER, GeneratedFile

logger = logging.getLogger(__name__)

SCRIPT_PREFIX = "env_"

# The marker sits on line 1; never read further than this looking for it.
_FIRST_LINE_LIMIT = 4096


# ── Layout ──────────────────────────────────────────────────────


def script_filename(profile_name: str, dialect: Dialect) -> str:
    """File name of a profile's script (``env_ant.sh``)."""
    return f"{SCRIPT_PREFIX}{profile_name}{dialect.spec.extension}"


def script_relative_path(profile_name: str, dialect: Dialect) -> Path:
    """Script path relative to the output root (``bash/env_ant.sh``)."""
    return Path(dialect.spec.subdir) / script_filename(profile_name, dialect)


def script_output_path(output_root: Path, profile_name: str, dialect: Dialect) -> Path:
    """Script path under *output_root*."""
    return Path(output_root) / script_relative_path(profile_name, dialect)


# ── Cleanup ─────────────────────────────────────────────────────


def _first_line(path: Path) -> str:
    with path.open("r", encoding="utf-8", errors="replace", newline="") as fh:
        return fh.readline(_FIRST_LINE_LIMIT)


def is_generated_script(path: Path) -> bool:
    """Whether *path* is a script this tool generated.

    Unreadable files are treated as hand-written.
    """
    if not path.name.startswith(SCRIPT_PREFIX) or not path.is_file():
        return False
    try:
        return GENERATED_MARKER in _first_line(path)
    except OSError as e:
        logger.debug("Cannot read %s, keeping it: %s", path, e)
        return False


def clean_stale_scripts(output_root: Path) -> list[Path]:
    """Delete previously generated scripts from every dialect directory.

    Args:
        output_root: Root holding the ``cmd/``, ``bash/``, ``ps/`` directories.

    Returns:
        Paths of the removed files.

    Raises:
        OutputWriteError: If a generated file cannot be removed.
    """
    removed: list[Path] = []

    for dialect in ALL_DIALECTS:
        directory = Path(output_root) / dialect.spec.subdir
        if not directory.is_dir():
            continue

        for path in sorted(directory.glob(f"{SCRIPT_PREFIX}*")):
            if not is_generated_script(path):
                continue
            try:
                path.unlink()
            except OSError as e:
                raise OutputWriteError(path, f"cannot remove stale script: {e}") from e
            logger.info("Removed stale script: %s", path)
            removed.append(path)

    return removed


# ── Write ───────────────────────────────────────────────────────


def write_generated_file(output_root: Path, generated: GeneratedFile) -> Path:
    """Write a ``GeneratedFile`` under *output_root*.

    Line terminators are written exactly as generated (CRLF stays CRLF
    on every platform).

    Returns:
        The written path.

    Raises:
        OutputWriteError: If the directory or file cannot be written.
    """
    target = script_output_path(output_root, generated.profile, generated.dialect)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(target, f"couldn't create dir {target.parent}: {e}") from e

    try:
        with target.open("w", encoding="utf-8", newline="") as fh:
            fh.write(generated.content)
    except OSError as e:
        raise OutputWriteError(target, str(e)) from e

    logger.info("Wrote %s script: %s", generated.dialect.value, target)
    return target
