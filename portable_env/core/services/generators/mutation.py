"""
Mutation compiler — one environment mutation → one line of script.

The mutation-kind logic is written once; every dialect difference comes
from its ``DialectSpec``.
"""

from __future__ import annotations

from portable_env.core.models.dialect import Dialect
from portable_env.core.models.profile import MutationKind, MutationRecord
from portable_env.core.services.generators.paths import adapt_path
from portable_env.core.services.generators.placeholders import rewrite_placeholders


def native_reference(name: str, dialect: Dialect) -> str:
    """Reference to the current value of variable *name* (``${PATH}``)."""
    return dialect.spec.reference_format.format(name=name)


def compile_mutation_value(
    name: str,
    raw_value: str,
    kind: MutationKind,
    dialect: Dialect,
) -> str:
    """Build the right-hand side of the assignment for one mutation.

    Raises:
        MalformedPlaceholderError: If *raw_value* has an unclosed placeholder.
    """
    spec = dialect.spec
    value = rewrite_placeholders(raw_value, dialect)

    if kind is MutationKind.PREPEND_PATH:
        return adapt_path(value, dialect) + spec.separator + native_reference(name, dialect)
    if kind is MutationKind.APPEND_PATH:
        return native_reference(name, dialect) + spec.separator + adapt_path(value, dialect)
    if kind is MutationKind.SET:
        return spec.set_value_format.format(value=value)
    if kind is MutationKind.PATH:
        return adapt_path(value, dialect)

    raise ValueError(f"Unhandled mutation kind: {kind!r}")


def compile_mutation_line(
    name: str,
    raw_value: str,
    kind: MutationKind,
    dialect: Dialect,
) -> str:
    """Full assignment statement, including the line terminator."""
    spec = dialect.spec
    value = compile_mutation_value(name, raw_value, kind, dialect)
    return spec.line(spec.assignment_format.format(name=name, value=value))


def compile_mutation(record: MutationRecord, dialect: Dialect) -> str:
    """Compile a parsed ``MutationRecord``."""
    return compile_mutation_line(record.key, record.value, record.mode, dialect)
