"""
Profile script generator — compile a profile into an activation script.

The script opens with a marker comment, then carries one line per entry
in configuration order: an assignment for each mutation, a
source/call/dot-include of the sibling script for each include.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path, PurePath

from portable_env.core.errors import MalformedPlaceholderError
from portable_env.core.models.dialect import Dialect
from portable_env.core.models.profile import IncludeRecord, MutationRecord, Profile
from portable_env.core.models.template import GENERATED_MARKER, GeneratedFile
from portable_env.core.services.generators.mutation import compile_mutation
from portable_env.core.services.output import script_relative_path

# (profile name, dialect) → path of that profile's script
OutputPathResolver = Callable[[str, Dialect], Path]


def marker_line(profile_name: str, dialect: Dialect) -> str:
    """The first line of every generated script."""
    return dialect.spec.comment(f"{GENERATED_MARKER} {profile_name}")


def include_line(filename: str, dialect: Dialect) -> str:
    """Statement that runs a sibling script in the current shell."""
    spec = dialect.spec
    return spec.line(spec.include_format.format(filename=filename))


def compile_profile(
    entries: Iterable[MutationRecord | IncludeRecord],
    profile_name: str,
    dialect: Dialect,
    output_path_resolver: OutputPathResolver,
) -> str:
    """Compile a profile's entries into the full script body.

    Args:
        entries: Ordered profile entries.
        profile_name: Name of the profile being compiled.
        dialect: Target dialect.
        output_path_resolver: Maps (profile, dialect) to a script path.
            Only the file name is used for includes: sibling scripts sit
            in the same directory.

    Returns:
        Script text, starting with the marker comment line.

    Raises:
        MalformedPlaceholderError: With profile and dialect attached.
    """
    lines = [marker_line(profile_name, dialect)]

    for entry in entries:
        if isinstance(entry, IncludeRecord):
            target = output_path_resolver(entry.env, dialect)
            lines.append(include_line(PurePath(target).name, dialect))
            continue

        try:
            lines.append(compile_mutation(entry, dialect))
        except MalformedPlaceholderError as e:
            raise MalformedPlaceholderError(
                e.value, profile=profile_name, dialect=dialect.value,
            ) from None

    return "".join(lines)


def generate_profile_script(
    profile: Profile,
    dialect: Dialect,
    output_path_resolver: OutputPathResolver | None = None,
) -> GeneratedFile:
    """Compile *profile* for *dialect* into a ``GeneratedFile``.

    The file's path is relative to the output root.  With no resolver,
    includes resolve through the standard output layout.
    """
    resolver = output_path_resolver or script_relative_path
    content = compile_profile(profile.entries, profile.name, dialect, resolver)

    return GeneratedFile(
        path=script_relative_path(profile.name, dialect).as_posix(),
        content=content,
        profile=profile.name,
        dialect=dialect,
        reason=f"Activation script for profile '{profile.name}' ({dialect.value})",
    )
