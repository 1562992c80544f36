"""
Profile model — named, ordered sequences of environment mutations.

Loaded from portable_env.toml, a configuration maps profile names to
their entries.  Each entry is either a mutation of one variable or an
include of another profile's script.  Entry order is significant and
never changed.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from portable_env.core.errors import UnknownMutationKindError


class MutationKind(StrEnum):
    """How a value is combined with the variable's prior value."""

    PREPEND_PATH = "PREPEND_PATH"
    APPEND_PATH = "APPEND_PATH"
    SET = "SET"
    PATH = "PATH"  # replace, treating the value as a filesystem path

    @classmethod
    def from_token(cls, token: str, where: str = "") -> MutationKind:
        """Map a raw configuration token to a kind.

        Raises:
            UnknownMutationKindError: If the token is not a known kind.
        """
        try:
            return cls(token)
        except ValueError:
            raise UnknownMutationKindError(token, where) from None


class MutationRecord(BaseModel):
    """Set, extend or replace one environment variable."""

    model_config = ConfigDict(frozen=True)

    command: Literal["env"] = "env"
    key: str
    value: str
    mode: MutationKind


class IncludeRecord(BaseModel):
    """Activate another profile first, by sourcing its script."""

    model_config = ConfigDict(frozen=True)

    command: Literal["source"] = "source"
    env: str


ProfileEntry = Annotated[
    Union[MutationRecord, IncludeRecord],
    Field(discriminator="command"),
]


class Profile(BaseModel):
    """A named profile and its ordered entries."""

    model_config = ConfigDict(frozen=True)

    name: str
    entries: tuple[ProfileEntry, ...] = ()

    @property
    def includes(self) -> list[str]:
        """Names of the profiles this one sources, in order."""
        return [e.env for e in self.entries if isinstance(e, IncludeRecord)]


class Configuration(BaseModel):
    """All profiles of one configuration file, in file order."""

    model_config = ConfigDict(frozen=True)

    profiles: dict[str, Profile] = Field(default_factory=dict)

    def get_profile(self, name: str) -> Profile | None:
        """Look up a profile by name."""
        return self.profiles.get(name)
