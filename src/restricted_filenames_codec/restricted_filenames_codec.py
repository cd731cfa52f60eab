"""Public API: re-exports all public symbols from the package.

The package ``__init__.py`` re-exports everything from here via
``from .restricted_filenames_codec import *``.
"""

from __future__ import annotations

# Flags: restriction rules and substitute characters
from .flags import (
    ALL_FLAGS,
    FLAG_NAMES,
    QUOTE_CHAR,
    RULES,
    RULES_BY_FLAG,
    STANDARD_FLAGS,
    EncodeFlag,
    Rule,
    RuleKind,
    rules_for,
)

# Policy: reversible encode / decode
from .policy import STANDARD, EncodingPolicy

# Registry: per-backend policies
from .registry import (
    AMAZON_CLOUD_DRIVE,
    B2,
    BASE,
    BOX,
    DISPLAY,
    DRIVE,
    DROPBOX,
    GOOGLE_CLOUD_STORAGE,
    JOTTA_CLOUD,
    KOOFR,
    LOCAL_UNIX,
    LOCAL_WINDOWS,
    MEGA,
    ONE_DRIVE,
    OPEN_DRIVE,
    PCLOUD,
    default_local,
    lookup,
    names,
)

__all__ = [
    # Flags
    "EncodeFlag",
    "Rule",
    "RuleKind",
    "RULES",
    "RULES_BY_FLAG",
    "FLAG_NAMES",
    "ALL_FLAGS",
    "STANDARD_FLAGS",
    "QUOTE_CHAR",
    "rules_for",
    # Policy
    "EncodingPolicy",
    "STANDARD",
    # Registry functions
    "lookup",
    "names",
    "default_local",
    # Registry policies
    "BASE",
    "DISPLAY",
    "LOCAL_UNIX",
    "LOCAL_WINDOWS",
    "AMAZON_CLOUD_DRIVE",
    "B2",
    "BOX",
    "DRIVE",
    "DROPBOX",
    "GOOGLE_CLOUD_STORAGE",
    "JOTTA_CLOUD",
    "KOOFR",
    "MEGA",
    "ONE_DRIVE",
    "OPEN_DRIVE",
    "PCLOUD",
]
