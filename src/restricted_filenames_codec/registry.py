"""Predefined encoding policies per storage backend.

Each backend constant documents the restriction it works around.  Names are
looked up case-insensitively with :func:`lookup`; unknown names give ``None``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from types import MappingProxyType

from .flags import STANDARD_FLAGS, EncodeFlag
from .policy import EncodingPolicy

logger = logging.getLogger(__name__)

# Only the zero byte and slash.
BASE: EncodingPolicy = EncodingPolicy(EncodeFlag.ZERO | EncodeFlag.SLASH)

# Internal encoding for logging and output.
DISPLAY: EncodingPolicy = EncodingPolicy(STANDARD_FLAGS)

LOCAL_UNIX: EncodingPolicy = BASE

# Windows naming conventions: ``<>:"|?*\`` and control characters are
# forbidden, names can't end with a period or space.  Invalid UTF-8 can't be
# converted to UTF-16.
LOCAL_WINDOWS: EncodingPolicy = EncodingPolicy(
    BASE.flags
    | EncodeFlag.WIN
    | EncodeFlag.BACK_SLASH
    | EncodeFlag.CTL
    | EncodeFlag.RIGHT_SPACE
    | EncodeFlag.RIGHT_PERIOD
    | EncodeFlag.INVALID_UTF8
)

# JSON API, which doesn't handle invalid UTF-8.
AMAZON_CLOUD_DRIVE: EncodingPolicy = EncodingPolicy(BASE.flags | EncodeFlag.INVALID_UTF8)

B2: EncodingPolicy = EncodingPolicy(
    DISPLAY.flags | EncodeFlag.BACK_SLASH | EncodeFlag.INVALID_UTF8
)

# Box rejects non-printable ASCII, "/" and "\" and trailing spaces.  Leading
# spaces work fine.
BOX: EncodingPolicy = EncodingPolicy(
    DISPLAY.flags | EncodeFlag.BACK_SLASH | EncodeFlag.RIGHT_SPACE | EncodeFlag.INVALID_UTF8
)

# "/" is a valid name character in Drive.
DRIVE: EncodingPolicy = EncodingPolicy(EncodeFlag.INVALID_UTF8)

# "/" and "\" are invalid; trailing spaces and DEL don't work either.
DROPBOX: EncodingPolicy = EncodingPolicy(
    BASE.flags
    | EncodeFlag.BACK_SLASH
    | EncodeFlag.DEL
    | EncodeFlag.RIGHT_SPACE
    | EncodeFlag.INVALID_UTF8
)

GOOGLE_CLOUD_STORAGE: EncodingPolicy = EncodingPolicy(BASE.flags | EncodeFlag.INVALID_UTF8)

# XML API, which doesn't handle invalid UTF-8.
JOTTA_CLOUD: EncodingPolicy = EncodingPolicy(DISPLAY.flags | EncodeFlag.INVALID_UTF8)

KOOFR: EncodingPolicy = EncodingPolicy(
    DISPLAY.flags | EncodeFlag.BACK_SLASH | EncodeFlag.INVALID_UTF8
)

MEGA: EncodingPolicy = EncodingPolicy(BASE.flags | EncodeFlag.INVALID_UTF8)

# The Windows rules plus "#" and "%", a leading space and a leading tilde
# (folder names can't begin with "~").
ONE_DRIVE: EncodingPolicy = EncodingPolicy(
    DISPLAY.flags
    | EncodeFlag.BACK_SLASH
    | EncodeFlag.HASH_PERCENT
    | EncodeFlag.LEFT_SPACE
    | EncodeFlag.LEFT_TILDE
    | EncodeFlag.RIGHT_PERIOD
    | EncodeFlag.RIGHT_SPACE
    | EncodeFlag.WIN
    | EncodeFlag.INVALID_UTF8
)

# The Windows punctuation, and names can't begin or end with ASCII whitespace.
OPEN_DRIVE: EncodingPolicy = EncodingPolicy(
    BASE.flags
    | EncodeFlag.WIN
    | EncodeFlag.LEFT_CRLFHTVT
    | EncodeFlag.RIGHT_CRLFHTVT
    | EncodeFlag.BACK_SLASH
    | EncodeFlag.LEFT_SPACE
    | EncodeFlag.RIGHT_SPACE
    | EncodeFlag.INVALID_UTF8
)

PCLOUD: EncodingPolicy = EncodingPolicy(BASE.flags | EncodeFlag.INVALID_UTF8)

# Resolved at lookup time, see ``default_local``.
_LOCAL_NAME: str = "local"

_POLICIES: Mapping[str, EncodingPolicy] = MappingProxyType(
    {
        "base": BASE,
        "display": DISPLAY,
        "amazonclouddrive": AMAZON_CLOUD_DRIVE,
        "b2": B2,
        "box": BOX,
        "drive": DRIVE,
        "dropbox": DROPBOX,
        "googlecloudstorage": GOOGLE_CLOUD_STORAGE,
        "jottacloud": JOTTA_CLOUD,
        "koofr": KOOFR,
        "local-unix": LOCAL_UNIX,
        "local-windows": LOCAL_WINDOWS,
        "mega": MEGA,
        "onedrive": ONE_DRIVE,
        "opendrive": OPEN_DRIVE,
        "pcloud": PCLOUD,
    }
)

_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "unix": "local-unix",
        "windows": "local-windows",
    }
)

_NAMES: tuple[str, ...] = (
    "base",
    "display",
    "amazonclouddrive",
    "b2",
    "box",
    "drive",
    "dropbox",
    "googlecloudstorage",
    "jottacloud",
    "koofr",
    "local-unix",
    "local-windows",
    _LOCAL_NAME,
    "mega",
    "onedrive",
    "opendrive",
    "pcloud",
)


def default_local(platform: str | None = None) -> EncodingPolicy:
    """Return the local filesystem policy for *platform* (default: ``sys.platform``)."""
    if platform is None:
        platform = sys.platform
    if platform == "win32":
        return LOCAL_WINDOWS
    return LOCAL_UNIX


def lookup(name: str) -> EncodingPolicy | None:
    """Return the policy registered for backend *name*, or ``None``.

    The match is case-insensitive; ``"local"`` resolves to the current
    platform's policy.
    """
    key = name.lower()
    key = _ALIASES.get(key, key)
    if key == _LOCAL_NAME:
        return default_local()
    policy = _POLICIES.get(key)
    if policy is None:
        logger.debug("No encoding registered for backend %r", name)
    return policy


def names() -> tuple[str, ...]:
    """Return the backend names accepted by :func:`lookup`, without aliases."""
    return _NAMES
