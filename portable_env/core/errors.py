"""
Exception hierarchy for portable_env.

Every failure is fatal: nothing catches these except the CLI, which
prints the message and exits non-zero.  Messages carry the profile,
dialect and offending value wherever they are known.
"""

from __future__ import annotations

from pathlib import Path


class PortableEnvError(Exception):
    """Base class for all portable_env errors."""


# ── Configuration ───────────────────────────────────────────────


class ConfigError(PortableEnvError):
    """Raised when the configuration is missing or invalid."""


class ConfigNotFoundError(ConfigError):
    """The configuration file does not exist."""


class ConfigUnreadableError(ConfigError):
    """The configuration file exists but cannot be read."""


class ConfigMalformedError(ConfigError):
    """The configuration is structurally invalid."""


class UnknownMutationKindError(ConfigError):
    """A record's ``mode`` is not a known mutation kind."""

    def __init__(self, token: str, where: str = "") -> None:
        self.token = token
        prefix = f"{where}: " if where else ""
        super().__init__(
            f"{prefix}invalid mod type: {token!r} "
            "(expected PREPEND_PATH, APPEND_PATH, SET or PATH)"
        )


class UnknownCommandError(ConfigError):
    """A record's ``command`` is neither ``env`` nor ``source``."""

    def __init__(self, command: str, where: str = "") -> None:
        self.command = command
        prefix = f"{where}: " if where else ""
        super().__init__(f"{prefix}invalid command type: {command!r} (expected env or source)")


class MissingFieldError(ConfigError):
    """A record lacks a required key."""

    def __init__(self, field: str, where: str = "") -> None:
        self.field = field
        prefix = f"{where}: " if where else ""
        super().__init__(f"{prefix}missing required field {field!r}")


# ── Compilation ─────────────────────────────────────────────────


class MalformedPlaceholderError(PortableEnvError):
    """A value has unbalanced ``%`` placeholder delimiters."""

    def __init__(
        self,
        value: str,
        *,
        profile: str | None = None,
        dialect: str | None = None,
    ) -> None:
        self.value = value
        self.profile = profile
        self.dialect = dialect

        context = []
        if profile is not None:
            context.append(f"profile {profile!r}")
        if dialect is not None:
            context.append(f"dialect {dialect}")
        where = f" ({', '.join(context)})" if context else ""
        super().__init__(f"incorrect % string in: {value!r}{where}")


# ── Output ──────────────────────────────────────────────────────


class OutputWriteError(PortableEnvError):
    """A generated script could not be written (or a stale one removed)."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"couldn't write {path}: {reason}")
