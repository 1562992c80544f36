"""
Path adaptation — make a Windows path literal usable from each shell.

cmd and PowerShell take native paths as-is.  Bash (MSYS / Cygwin) runs
the value through ``cygpath -p`` at activation time, which also handles
``;``-separated path lists.
"""

from __future__ import annotations

from portable_env.core.models.dialect import Dialect


def escape_shell_dollars(path: str) -> str:
    """Escape ``$`` so the shell does not expand it before cygpath runs."""
    return path.replace("$", "\\$")


def adapt_path(path: str, dialect: Dialect) -> str:
    """Convert a path literal into a form *dialect*'s runtime consumes."""
    spec = dialect.spec
    if spec.escape_dollar_in_paths:
        path = escape_shell_dollars(path)
    return spec.path_format.format(path=path)
