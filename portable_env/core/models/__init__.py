"""
Domain models for portable_env.

All models are re-exported here for convenient access:

    from portable_env.core.models import Dialect, MutationKind, MutationRecord, Profile
"""

from portable_env.core.models.dialect import ALL_DIALECTS, DIALECTS, Dialect, DialectSpec
from portable_env.core.models.profile import (
    Configuration,
    IncludeRecord,
    MutationKind,
    MutationRecord,
    Profile,
    ProfileEntry,
)
from portable_env.core.models.template import GeneratedFile

__all__ = [
    # dialect.py
    "ALL_DIALECTS",
    "DIALECTS",
    "Dialect",
    "DialectSpec",
    # profile.py
    "Configuration",
    "IncludeRecord",
    "MutationKind",
    "MutationRecord",
    "Profile",
    "ProfileEntry",
    # template.py
    "GeneratedFile",
]
