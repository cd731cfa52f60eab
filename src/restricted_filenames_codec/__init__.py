__all__ = (  # noqa: F405
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
)

from .restricted_filenames_codec import *  # noqa: F403
