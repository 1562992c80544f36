"""
Generated file model — produced by the script generator.
"""

from __future__ import annotations

from pydantic import BaseModel

from portable_env.core.models.dialect import Dialect

# First-line token identifying files this tool generated (and may delete).
GENERATED_MARKER = "portable_env:generated"


class GeneratedFile(BaseModel):
    """An activation script ready to be written.

    Attributes:
        path:     Path relative to the output root (``bash/env_ant.sh``).
        content:  Full script text, with the dialect's line terminators.
        profile:  Profile the script activates.
        dialect:  Shell dialect the script is written in.
        reason:   Why this file was generated.
    """

    path: str
    content: str
    profile: str
    dialect: Dialect
    reason: str = ""
