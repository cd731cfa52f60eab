"""Restriction rules that make up an encoding policy.

This module contains no encoding logic, only the data describing each rule:
which characters (or bytes) trigger it, where in a name segment it applies,
and which character it is replaced with.

Substitutes follow rclone's encoding tables: fullwidth forms for
Windows-forbidden punctuation, Unicode Control Pictures for control
characters, and a quote character followed by two hex digits for bytes that
are not valid UTF-8.

Rule kinds:
  1. ``CONTENT`` rules replace every occurrence of their triggers.
  2. ``LEFT`` / ``RIGHT`` rules replace only the first / last character.
  3. ``BYTES`` escapes undecodable bytes (``surrogateescape`` code points).
"""

from __future__ import annotations

import enum
import functools
import operator
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


class EncodeFlag(enum.IntFlag):
    """One bit per restriction rule."""

    ZERO = 1 << 0
    SLASH = 1 << 1
    WIN = 1 << 2
    BACK_SLASH = 1 << 3
    HASH_PERCENT = 1 << 4
    DEL = 1 << 5
    CTL = 1 << 6
    LEFT_SPACE = 1 << 7
    LEFT_PERIOD = 1 << 8
    LEFT_TILDE = 1 << 9
    LEFT_CRLFHTVT = 1 << 10
    RIGHT_SPACE = 1 << 11
    RIGHT_PERIOD = 1 << 12
    RIGHT_CRLFHTVT = 1 << 13
    INVALID_UTF8 = 1 << 14


class RuleKind(enum.Enum):
    """Where in a segment a rule looks for its triggers."""

    CONTENT = "content"
    LEFT = "left"
    RIGHT = "right"
    BYTES = "bytes"


@dataclass(frozen=True)
class Rule:
    """A single restriction: trigger -> substitute, applied per *kind*."""

    flag: EncodeFlag
    name: str
    kind: RuleKind
    mapping: Mapping[str, str]

    @property
    def triggers(self) -> frozenset[str]:
        return frozenset(self.mapping)

    @property
    def substitutes(self) -> frozenset[str]:
        return frozenset(self.mapping.values())


# ---------------------------------------------------------------------------
# Substitute characters (rclone-compatible)
# ---------------------------------------------------------------------------

# Prefix for literal substitutes already present in a name and for byte escapes.
QUOTE_CHAR: str = "\u201b"  # ‛ SINGLE HIGH-REVERSED-9 QUOTATION MARK

_WIN_CHAR_MAP: dict[str, str] = {
    "<": "\uff1c",  # ＜ FULLWIDTH LESS-THAN SIGN
    ">": "\uff1e",  # ＞ FULLWIDTH GREATER-THAN SIGN
    ":": "\uff1a",  # ： FULLWIDTH COLON
    '"': "\uff02",  # ＂ FULLWIDTH QUOTATION MARK
    "?": "\uff1f",  # ？ FULLWIDTH QUESTION MARK
    "*": "\uff0a",  # ＊ FULLWIDTH ASTERISK
    "|": "\uff5c",  # ｜ FULLWIDTH VERTICAL LINE
}

_HASH_PERCENT_CHAR_MAP: dict[str, str] = {
    "#": "\uff03",  # ＃ FULLWIDTH NUMBER SIGN
    "%": "\uff05",  # ％ FULLWIDTH PERCENT SIGN
}

# ASCII control characters 0x00-0x1F -> Unicode Control Pictures U+2400-U+241F.
_CONTROL_CHAR_MAP: dict[str, str] = {chr(c): chr(0x2400 + c) for c in range(0x00, 0x20)}

_CRLFHTVT_CHAR_MAP: dict[str, str] = {c: _CONTROL_CHAR_MAP[c] for c in "\t\n\v\r"}

NUL_REPLACEMENT: str = "\u2400"  # ␀ SYMBOL FOR NULL
SLASH_REPLACEMENT: str = "\uff0f"  # ／ FULLWIDTH SOLIDUS
BACK_SLASH_REPLACEMENT: str = "\uff3c"  # ＼ FULLWIDTH REVERSE SOLIDUS
DEL_REPLACEMENT: str = "\u2421"  # ␡ SYMBOL FOR DELETE
SPACE_REPLACEMENT: str = "\u2420"  # ␠ SYMBOL FOR SPACE
PERIOD_REPLACEMENT: str = "\uff0e"  # ． FULLWIDTH FULL STOP
TILDE_REPLACEMENT: str = "\uff5e"  # ～ FULLWIDTH TILDE

# Undecodable bytes 0x80-0xFF as produced by the ``surrogateescape`` handler.
_INVALID_BYTE_MAP: dict[str, str] = {
    chr(0xDC00 + b): f"{QUOTE_CHAR}{b:02X}" for b in range(0x80, 0x100)
}


def _rule(flag: EncodeFlag, name: str, kind: RuleKind, mapping: dict[str, str]) -> Rule:
    return Rule(flag=flag, name=name, kind=kind, mapping=MappingProxyType(mapping))


# Evaluation order: content rules, then boundary rules, then byte escaping.
RULES: tuple[Rule, ...] = (
    _rule(EncodeFlag.ZERO, "Zero", RuleKind.CONTENT, {"\x00": NUL_REPLACEMENT}),
    _rule(EncodeFlag.SLASH, "Slash", RuleKind.CONTENT, {"/": SLASH_REPLACEMENT}),
    _rule(EncodeFlag.WIN, "Win", RuleKind.CONTENT, _WIN_CHAR_MAP),
    _rule(EncodeFlag.BACK_SLASH, "BackSlash", RuleKind.CONTENT, {"\\": BACK_SLASH_REPLACEMENT}),
    _rule(EncodeFlag.DEL, "Del", RuleKind.CONTENT, {"\x7f": DEL_REPLACEMENT}),
    _rule(EncodeFlag.CTL, "Ctl", RuleKind.CONTENT, _CONTROL_CHAR_MAP),
    _rule(EncodeFlag.HASH_PERCENT, "HashPercent", RuleKind.CONTENT, _HASH_PERCENT_CHAR_MAP),
    _rule(EncodeFlag.LEFT_SPACE, "LeftSpace", RuleKind.LEFT, {" ": SPACE_REPLACEMENT}),
    _rule(EncodeFlag.LEFT_PERIOD, "LeftPeriod", RuleKind.LEFT, {".": PERIOD_REPLACEMENT}),
    _rule(EncodeFlag.LEFT_TILDE, "LeftTilde", RuleKind.LEFT, {"~": TILDE_REPLACEMENT}),
    _rule(EncodeFlag.LEFT_CRLFHTVT, "LeftCrLfHtVt", RuleKind.LEFT, _CRLFHTVT_CHAR_MAP),
    _rule(EncodeFlag.RIGHT_SPACE, "RightSpace", RuleKind.RIGHT, {" ": SPACE_REPLACEMENT}),
    _rule(EncodeFlag.RIGHT_PERIOD, "RightPeriod", RuleKind.RIGHT, {".": PERIOD_REPLACEMENT}),
    _rule(EncodeFlag.RIGHT_CRLFHTVT, "RightCrLfHtVt", RuleKind.RIGHT, _CRLFHTVT_CHAR_MAP),
    _rule(EncodeFlag.INVALID_UTF8, "InvalidUtf8", RuleKind.BYTES, _INVALID_BYTE_MAP),
)

RULES_BY_FLAG: Mapping[EncodeFlag, Rule] = MappingProxyType({r.flag: r for r in RULES})

# Display names (lower-cased) as used in flag lists like ``"Slash,Win,InvalidUtf8"``.
FLAG_NAMES: Mapping[str, EncodeFlag] = MappingProxyType({r.name.lower(): r.flag for r in RULES})

ALL_FLAGS: EncodeFlag = functools.reduce(operator.or_, (r.flag for r in RULES), EncodeFlag(0))

# The internal display form: NUL, slash, control characters and DEL.
STANDARD_FLAGS: EncodeFlag = EncodeFlag.ZERO | EncodeFlag.SLASH | EncodeFlag.CTL | EncodeFlag.DEL


def rules_for(flags: EncodeFlag) -> tuple[Rule, ...]:
    """Return the rules active in *flags*, in evaluation order."""
    return tuple(r for r in RULES if r.flag & flags)
