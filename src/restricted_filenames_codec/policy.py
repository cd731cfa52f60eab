"""Reversible encoding of filenames under a set of restriction rules.

An :class:`EncodingPolicy` combines :class:`~.flags.EncodeFlag` bits into one
transform.  ``encode`` maps any name to a name acceptable to a backend and
``decode`` restores the original exactly.

The encoding pipeline for a single name segment:
  1. Content rules replace every trigger character; the quote character and
     literal substitutes of active content rules are quoted.
  2. Boundary rules look at the first and last character left untouched by
     step 1 and replace (or quote) it.
  3. Bytes that are not valid UTF-8 are escaped as ``QUOTE_CHAR`` + hex.

Decoding parses quotes and byte escapes, reverses content substitutes and
then reverses boundary substitutes on the first and last token.  Decoding a
string that was not produced by the same policy is undefined; it never
raises.

Policies are immutable and their lookup tables are never mutated after
construction, so a single instance can be shared freely between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .flags import (
    FLAG_NAMES,
    QUOTE_CHAR,
    RULES,
    STANDARD_FLAGS,
    EncodeFlag,
    RuleKind,
    rules_for,
)

logger = logging.getLogger(__name__)

PATH_SEPARATOR: str = "/"


@dataclass(frozen=True)
class EncodingPolicy:
    """An immutable set of restriction rules with ``encode`` / ``decode``."""

    flags: EncodeFlag = EncodeFlag(0)

    # Lookup tables derived from *flags* once, in ``__post_init__``.
    _content: dict[str, str] = field(init=False, repr=False, compare=False)
    _content_rev: dict[str, str] = field(init=False, repr=False, compare=False)
    _left: dict[str, str] = field(init=False, repr=False, compare=False)
    _left_rev: dict[str, str] = field(init=False, repr=False, compare=False)
    _right: dict[str, str] = field(init=False, repr=False, compare=False)
    _right_rev: dict[str, str] = field(init=False, repr=False, compare=False)
    _bytes: dict[str, str] = field(init=False, repr=False, compare=False)
    _bytes_rev: dict[str, str] = field(init=False, repr=False, compare=False)
    _quotable: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = EncodeFlag(self.flags)
        tables: dict[RuleKind, dict[str, str]] = {kind: {} for kind in RuleKind}
        for rule in rules_for(flags):
            tables[rule.kind].update(rule.mapping)

        content = tables[RuleKind.CONTENT]
        left = tables[RuleKind.LEFT]
        right = tables[RuleKind.RIGHT]
        escapes = tables[RuleKind.BYTES]

        setattr_ = object.__setattr__
        setattr_(self, "flags", flags)
        setattr_(self, "_content", content)
        setattr_(self, "_content_rev", _reverse(content))
        setattr_(self, "_left", left)
        setattr_(self, "_left_rev", _reverse(left))
        setattr_(self, "_right", right)
        setattr_(self, "_right_rev", _reverse(right))
        setattr_(self, "_bytes", escapes)
        setattr_(self, "_bytes_rev", _reverse(escapes))
        quotable = {QUOTE_CHAR, *content.values(), *left.values(), *right.values()}
        setattr_(self, "_quotable", frozenset(quotable))

    # -- flags ---------------------------------------------------------------

    def has(self, flag: EncodeFlag) -> bool:
        """Return ``True`` if every bit of *flag* is active in this policy."""
        return bool(flag) and (self.flags & flag) == flag

    def __str__(self) -> str:
        names = [rule.name for rule in RULES if rule.flag & self.flags]
        return ",".join(names) if names else "None"

    @classmethod
    def parse(cls, text: str) -> EncodingPolicy:
        """Build a policy from a comma separated flag list like ``"Slash,Win"``.

        Names are matched case-insensitively.  ``""`` and ``"None"`` give the
        empty policy.

        Raises:
            ValueError: If a name is not a known flag.
        """
        flags = EncodeFlag(0)
        for part in text.split(","):
            name = part.strip().lower()
            if not name or name == "none":
                continue
            try:
                flags |= FLAG_NAMES[name]
            except KeyError:
                raise ValueError(f"Unknown encoding flag: {part.strip()!r}") from None
        logger.debug("Parsed encoding flags %r as %s", text, flags)
        return cls(flags)

    # -- names ---------------------------------------------------------------

    def encode(self, name: str | bytes) -> str:
        """Encode a single name segment.

        *name* may be ``bytes``; it is decoded as UTF-8 with
        ``surrogateescape`` so that invalid bytes survive the round trip.
        """
        if isinstance(name, bytes):
            name = name.decode("utf-8", "surrogateescape")
        if not name or not self.flags:
            return name

        # tokens[i] is the encoded form of name[i], or None while untouched.
        tokens: list[str | None] = [None] * len(name)
        self._encode_content(name, tokens)
        self._encode_edges(name, tokens)
        if self._bytes:
            for i, char in enumerate(name):
                if tokens[i] is None and char in self._bytes:
                    tokens[i] = self._bytes[char]

        return "".join(char if token is None else token for char, token in zip(name, tokens))

    def decode(self, name: str) -> str:
        """Decode a single name segment produced by :meth:`encode`."""
        if not name or not self.flags:
            return name

        chars: list[str] = []
        untouched: list[bool] = []
        i = 0
        end = len(name)
        while i < end:
            char = name[i]
            if char == QUOTE_CHAR and i + 1 < end:
                following = name[i + 1]
                if following in self._quotable:
                    chars.append(following)
                    untouched.append(False)
                    i += 2
                    continue
                escape = name[i : i + 3]
                if escape in self._bytes_rev:
                    chars.append(self._bytes_rev[escape])
                    untouched.append(False)
                    i += 3
                    continue
            if char in self._content_rev:
                chars.append(self._content_rev[char])
                untouched.append(False)
            else:
                chars.append(char)
                untouched.append(True)
            i += 1

        if untouched[0] and chars[0] in self._left_rev:
            chars[0] = self._left_rev[chars[0]]
            untouched[0] = False
        if untouched[-1] and chars[-1] in self._right_rev:
            chars[-1] = self._right_rev[chars[-1]]

        return "".join(chars)

    def decode_bytes(self, name: str) -> bytes:
        """Decode *name* and return the original bytes."""
        return self.decode(name).encode("utf-8", "surrogateescape")

    # -- paths ---------------------------------------------------------------

    def encode_path(self, path: str | bytes) -> str:
        """Encode every ``/`` separated segment of *path* independently."""
        if isinstance(path, bytes):
            path = path.decode("utf-8", "surrogateescape")
        return PATH_SEPARATOR.join(self.encode(segment) for segment in path.split(PATH_SEPARATOR))

    def decode_path(self, path: str) -> str:
        """Decode every ``/`` separated segment of *path* independently."""
        return PATH_SEPARATOR.join(self.decode(segment) for segment in path.split(PATH_SEPARATOR))

    # -- conversion from / to the standard display form -------------------------

    def from_standard_name(self, name: str) -> str:
        """Convert a name in ``STANDARD`` form to this policy's form."""
        return self.encode(STANDARD.decode(name))

    def to_standard_name(self, name: str) -> str:
        """Convert a name in this policy's form to ``STANDARD`` form."""
        return STANDARD.encode(self.decode(name))

    def from_standard_path(self, path: str) -> str:
        """Like :meth:`from_standard_name`, per ``/`` separated segment."""
        return PATH_SEPARATOR.join(
            self.from_standard_name(segment) for segment in path.split(PATH_SEPARATOR)
        )

    def to_standard_path(self, path: str) -> str:
        """Like :meth:`to_standard_name`, per ``/`` separated segment."""
        return PATH_SEPARATOR.join(
            self.to_standard_name(segment) for segment in path.split(PATH_SEPARATOR)
        )

    # -- internals -----------------------------------------------------------

    def _encode_content(self, name: str, tokens: list[str | None]) -> None:
        """Replace content triggers; quote the quote char and literal substitutes."""
        for i, char in enumerate(name):
            if char in self._content:
                tokens[i] = self._content[char]
            elif char == QUOTE_CHAR:
                tokens[i] = QUOTE_CHAR + QUOTE_CHAR
            elif char in self._content_rev:
                tokens[i] = QUOTE_CHAR + char

    def _encode_edges(self, name: str, tokens: list[str | None]) -> None:
        """Replace (or quote) the first and last character if still untouched.

        On a one-character segment the left rules run first and win.
        """
        for index, table, reverse in (
            (0, self._left, self._left_rev),
            (len(name) - 1, self._right, self._right_rev),
        ):
            if tokens[index] is not None:
                continue
            char = name[index]
            if char in table:
                tokens[index] = table[char]
            elif char in reverse:
                tokens[index] = QUOTE_CHAR + char


def _reverse(table: dict[str, str]) -> dict[str, str]:
    """Invert a trigger -> substitute table."""
    return {substitute: trigger for trigger, substitute in table.items()}


STANDARD: EncodingPolicy = EncodingPolicy(STANDARD_FLAGS)
