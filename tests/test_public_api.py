"""Tests that the public API is accessible from the top-level package."""

from __future__ import annotations


class TestPublicAPI:
    def test_flag_types_importable(self) -> None:
        from restricted_filenames_codec import (
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

        assert len(RULES) == len(EncodeFlag) == 15
        assert len(RULES_BY_FLAG) == 15
        assert len(FLAG_NAMES) == 15
        assert ALL_FLAGS & STANDARD_FLAGS == STANDARD_FLAGS
        assert QUOTE_CHAR == "\u201b"
        assert isinstance(RULES[0], Rule)
        assert RuleKind.CONTENT.value == "content"
        assert callable(rules_for)

    def test_policy_importable(self) -> None:
        from restricted_filenames_codec import STANDARD, EncodingPolicy

        assert isinstance(STANDARD, EncodingPolicy)
        assert str(STANDARD) == "Zero,Slash,Del,Ctl"

    def test_registry_functions_importable(self) -> None:
        from restricted_filenames_codec import default_local, lookup, names

        assert callable(lookup)
        assert callable(default_local)
        assert "onedrive" in names()

    def test_registry_policies_importable(self) -> None:
        from restricted_filenames_codec import (
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
            EncodingPolicy,
        )

        for policy in (
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
        ):
            assert isinstance(policy, EncodingPolicy)

    def test_all_is_complete(self) -> None:
        import restricted_filenames_codec

        expected = {
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
            "EncodingPolicy",
            "STANDARD",
            "lookup",
            "names",
            "default_local",
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
        }
        actual = set(restricted_filenames_codec.__all__)
        assert actual == expected

    def test_all_names_resolve(self) -> None:
        import restricted_filenames_codec

        for name in restricted_filenames_codec.__all__:
            assert hasattr(restricted_filenames_codec, name)
