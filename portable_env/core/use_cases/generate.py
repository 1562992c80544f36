"""
Generate use case — compile every profile for every dialect and write them.

All scripts are compiled before anything touches the output directory,
so a bad value in one profile never leaves a half-regenerated tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from portable_env.core.config.loader import load_config
from portable_env.core.models.dialect import ALL_DIALECTS, Dialect
from portable_env.core.models.profile import Configuration
from portable_env.core.models.template import GeneratedFile
from portable_env.core.services.generators.profile_script import generate_profile_script
from portable_env.core.services.output import clean_stale_scripts, write_generated_file

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of one generation run."""

    config_path: Path
    output_root: Path
    profile_count: int = 0
    written: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)


def compile_configuration(
    config: Configuration,
    dialects: tuple[Dialect, ...] = ALL_DIALECTS,
) -> list[GeneratedFile]:
    """Compile every (profile, dialect) pair, in file order.

    Raises:
        MalformedPlaceholderError: On the first bad value.
    """
    files: list[GeneratedFile] = []
    for profile in config.profiles.values():
        for dialect in dialects:
            files.append(generate_profile_script(profile, dialect))
    logger.debug("Compiled %d scripts for %d profiles", len(files), len(config.profiles))
    return files


def run_generate(config_path: Path, output_root: Path) -> GenerateResult:
    """Load the configuration and regenerate all activation scripts.

    Args:
        config_path: Path to portable_env.toml.
        output_root: Directory receiving ``cmd/``, ``bash/`` and ``ps/``.

    Returns:
        GenerateResult listing written and removed files.

    Raises:
        PortableEnvError: On any failure; the run stops at the first one.
    """
    config_path = Path(config_path)
    output_root = Path(output_root)
    result = GenerateResult(config_path=config_path, output_root=output_root)

    config = load_config(config_path)
    result.profile_count = len(config.profiles)

    files = compile_configuration(config)

    result.removed = clean_stale_scripts(output_root)
    for generated in files:
        result.written.append(write_generated_file(output_root, generated))

    logger.info(
        "Generated %d scripts for %d profiles in %s (%d stale removed)",
        len(result.written), result.profile_count, output_root, len(result.removed),
    )
    return result
