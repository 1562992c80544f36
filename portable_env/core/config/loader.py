"""
Configuration loader — reads portable_env.toml into domain models.

Reads TOML (or YAML, chosen by file suffix), validates every record in
one pass, and returns a typed ``Configuration``.  Raw records are plain
string mappings; they become ``MutationRecord`` / ``IncludeRecord``
here and nowhere else.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from portable_env.core.errors import (
    ConfigMalformedError,
    ConfigNotFoundError,
    ConfigUnreadableError,
    MissingFieldError,
    UnknownCommandError,
)
from portable_env.core.models.profile import (
    Configuration,
    IncludeRecord,
    MutationKind,
    MutationRecord,
    Profile,
)

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "portable_env.toml"

# Profiles sit under this table; a document without it (as a table) is the table itself.
SCRIPTS_KEY = "scripts"

_YAML_SUFFIXES = (".yml", ".yaml")

# Either separator, since the scripts are used on Windows
_NAME_SEPARATORS = ("/", "\\")

# command → keys the record must carry (besides "command")
_REQUIRED_KEYS: dict[str, tuple[str, ...]] = {
    "env": ("key", "value", "mode"),
    "source": ("env",),
}


def load_config(path: Path) -> Configuration:
    """Load and validate a configuration file.

    Args:
        path: Path to the TOML (or YAML) configuration.

    Returns:
        Validated Configuration.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigUnreadableError(f"couldn't read {path}: {e}") from e

    data = _parse_document(raw, path)
    config = parse_config(data, source=str(path))

    logger.info("Loaded %d profiles from %s", len(config.profiles), path)
    return config


def _parse_document(raw: str, path: Path) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigMalformedError(f"Invalid YAML in {path}: {e}") from e

    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigMalformedError(f"Invalid TOML in {path}: {e}") from e


def parse_config(data: Any, source: str = "<config>") -> Configuration:
    """Validate an already-parsed document into a ``Configuration``.

    Raises:
        ConfigError: On the first invalid profile or record.
    """
    if not isinstance(data, dict):
        raise ConfigMalformedError(
            f"Expected a mapping in {source}, got {type(data).__name__}"
        )

    # A flat document may hold a profile called "scripts"; that one is a list.
    wrapped = data.get(SCRIPTS_KEY)
    scripts = wrapped if isinstance(wrapped, dict) else data

    profiles: dict[str, Profile] = {}
    for name, records in scripts.items():
        profiles[str(name)] = _parse_profile(str(name), records)

    config = Configuration(profiles=profiles)
    _check_includes(config)
    return config


def _check_profile_name(name: str) -> None:
    """Profile names become ``env_<name>.<ext>`` inside a dialect directory."""
    if not name:
        raise ConfigMalformedError("Profile names must not be empty")
    if any(sep in name for sep in _NAME_SEPARATORS) or name in (".", ".."):
        raise ConfigMalformedError(
            f"profile '{name}': name must be a plain file name "
            "(no path separators, not '.' or '..')"
        )


def _parse_profile(name: str, records: Any) -> Profile:
    _check_profile_name(name)
    if not isinstance(records, list):
        raise ConfigMalformedError(
            f"profile '{name}': expected a list of records, got {type(records).__name__}"
        )

    entries = [
        _parse_record(record, f"profile '{name}' record {i}")
        for i, record in enumerate(records)
    ]
    return Profile(name=name, entries=tuple(entries))


def _parse_record(record: Any, where: str) -> MutationRecord | IncludeRecord:
    """Turn one raw string mapping into a typed entry."""
    if not isinstance(record, dict):
        raise ConfigMalformedError(f"{where}: expected a mapping, got {type(record).__name__}")

    if "command" not in record:
        raise MissingFieldError("command", where)

    command = record["command"]
    required = _REQUIRED_KEYS.get(command) if isinstance(command, str) else None
    if required is None:
        raise UnknownCommandError(str(command), where)

    for key in required:
        if key not in record:
            raise MissingFieldError(key, where)

    for key in ("command", *required):
        if not isinstance(record[key], str):
            raise ConfigMalformedError(
                f"{where}: field '{key}' must be a string, got {type(record[key]).__name__}"
            )

    # Variable and profile names; values may be empty.
    for key in ("key", "env"):
        if key in required and not record[key]:
            raise ConfigMalformedError(f"{where}: field '{key}' must not be empty")

    extra = sorted(set(record) - {"command", *required})
    if extra:
        logger.warning("%s: ignoring unknown fields: %s", where, ", ".join(extra))

    try:
        if command == "source":
            return IncludeRecord(env=record["env"])
        return MutationRecord(
            key=record["key"],
            value=record["value"],
            mode=MutationKind.from_token(record["mode"], where),
        )
    except ValidationError as e:
        raise ConfigMalformedError(f"{where}: {e}") from e


def _check_includes(config: Configuration) -> None:
    """Every included profile must be defined in the same configuration."""
    for profile in config.profiles.values():
        for target in profile.includes:
            if config.get_profile(target) is None:
                raise ConfigMalformedError(
                    f"profile '{profile.name}' sources unknown profile '{target}'"
                )
