"""
Placeholder rewriting — translate ``%NAME%`` into each dialect's syntax.

Configuration values use the batch-file placeholder ``%NAME%`` for
"the current value of NAME" on every platform.  For ``cmd`` that is
already native; bash and PowerShell get ``${NAME}`` / ``${env:NAME}``.
``%%`` stands for a literal percent sign.
"""

from __future__ import annotations

from portable_env.core.errors import MalformedPlaceholderError
from portable_env.core.models.dialect import Dialect

_DELIMITER = "%"


def rewrite_placeholders(value: str, dialect: Dialect) -> str:
    """Rewrite every ``%NAME%`` placeholder in *value* for *dialect*.

    Segments between delimiters alternate literal / placeholder, starting
    with literal.  An empty placeholder segment yields a literal ``%``.

    Args:
        value: Raw configuration value.
        dialect: Target dialect.

    Returns:
        The value with placeholders in native reference syntax.

    Raises:
        MalformedPlaceholderError: If a placeholder is left open.  A
            trailing ``%`` closing an empty placeholder is accepted.
    """
    spec = dialect.spec
    if spec.native_placeholders or not value:
        return value

    segments = value.split(_DELIMITER)
    parts: list[str] = []
    for index, segment in enumerate(segments):
        if index % 2 == 0:
            parts.append(segment)
        elif not segment:
            parts.append(_DELIMITER)
        else:
            parts.append(spec.reference_format.format(name=segment))

    # An even segment count means the last placeholder never closed.
    if len(segments) % 2 == 0 and not value.endswith(_DELIMITER):
        raise MalformedPlaceholderError(value, dialect=dialect.value)

    return "".join(parts)
