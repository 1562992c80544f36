"""
Dialect model — the target shells that activation scripts are emitted for.

Every dialect-specific detail lives in one table of ``DialectSpec``
records keyed by ``Dialect``.  Generators look syntax up here instead of
branching on the dialect, so adding a shell means adding one row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Dialect(StrEnum):
    """Target shell dialects."""

    CMD = "cmd"
    BASH = "bash"
    POWERSHELL = "powershell"

    @property
    def spec(self) -> DialectSpec:
        """Syntactic parameters for this dialect."""
        return DIALECTS[self]


@dataclass(frozen=True)
class DialectSpec:
    """Syntactic parameters of one shell dialect.

    Format strings use ``str.format`` fields:

        reference_format   {name}
        assignment_format  {name}, {value}
        include_format     {filename}
        set_value_format   {value}
        path_format        {path}
    """

    comment_prefix: str
    line_terminator: str
    separator: str               # path-list separator
    subdir: str                  # output subdirectory
    extension: str               # output file extension, with dot
    reference_format: str
    assignment_format: str
    include_format: str
    set_value_format: str = "{value}"
    path_format: str = "{path}"
    escape_dollar_in_paths: bool = False
    native_placeholders: bool = False  # %NAME% is already this dialect's syntax

    def line(self, text: str) -> str:
        """Terminate a line of script text."""
        return text + self.line_terminator

    def comment(self, text: str) -> str:
        """A full comment line."""
        return self.line(f"{self.comment_prefix} {text}")


# ── Dispatch table ──────────────────────────────────────────────

DIALECTS: dict[Dialect, DialectSpec] = {
    Dialect.CMD: DialectSpec(
        comment_prefix="REM",
        line_terminator="\r\n",
        separator=";",
        subdir="cmd",
        extension=".bat",
        reference_format="%{name}%",
        assignment_format="set {name}={value}",
        include_format="call %~dp0\\{filename}",
        native_placeholders=True,
    ),
    Dialect.BASH: DialectSpec(
        comment_prefix="#",
        line_terminator="\n",
        separator=":",
        subdir="bash",
        extension=".sh",
        reference_format="${{{name}}}",
        assignment_format="export {name}={value}",
        include_format="source {filename}",
        set_value_format="'{value}'",
        path_format='`cygpath -p  "{path}"`',
        escape_dollar_in_paths=True,
    ),
    Dialect.POWERSHELL: DialectSpec(
        comment_prefix="#",
        line_terminator="\r\n",
        separator=";",
        subdir="ps",
        extension=".ps1",
        reference_format="${{env:{name}}}",
        assignment_format='$env:{name}="{value}"',
        include_format=". {filename}",
    ),
}

# Order in which scripts are generated for each profile.
ALL_DIALECTS: tuple[Dialect, ...] = (Dialect.CMD, Dialect.BASH, Dialect.POWERSHELL)
