"""
portable_env — CLI entrypoint.

Usage:
    portable-env
    portable-env --config=tools/portable_env.toml --output=scripts
    python -m portable_env.main --help
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from portable_env.core.config.loader import CONFIG_FILE
from portable_env.core.errors import PortableEnvError
from portable_env.core.observability.logging_config import setup_logging_from_env


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=f"./{CONFIG_FILE}",
    show_default=True,
    help="Location of the config file.",
)
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Where to put output script directories.",
)
def cli(config_path: Path, output_dir: Path) -> None:
    """Generate cmd, bash and PowerShell activation scripts from portable_env.toml."""
    try:
        setup_logging_from_env()
    except OSError as e:
        click.secho(f"❌ couldn't set up logging: {e}", fg="red", err=True)
        sys.exit(1)

    from portable_env.core.use_cases.generate import run_generate

    try:
        result = run_generate(config_path=config_path, output_root=output_dir)
    except PortableEnvError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    for path in result.written:
        click.echo(f"   ✓ {path}")

    click.echo()
    click.secho(
        f"✅ {len(result.written)} scripts for {result.profile_count} profiles → {output_dir}",
        fg="green",
        bold=True,
    )
    if result.removed:
        click.echo(f"   Removed {len(result.removed)} stale scripts")


if __name__ == "__main__":
    cli()
