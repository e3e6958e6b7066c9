"""Tests for tag indexing, unescaping and typed lookups."""

from __future__ import annotations

import pytest

from twitchwire.errors import TagParseError
from twitchwire.wire.tags import ParsedTag, parse_flag, parse_u64, unescape_tag_value
from twitchwire.wire.tokenizer import tokenize


def _tags(blob: str):
    return tokenize(f"@{blob} :tmi.twitch.tv PING").tags()


class TestUnescape:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain", "plain"),
            ("a\\sb", "a b"),
            ("semi\\:colon", "semi:colon"),
            ("back\\\\slash", "back\\slash"),
            ("cr\\rlf\\n", "cr\rlf\n"),
            ("\\\\s", "\\s"),
            ("unknown\\x", "unknownx"),
            ("dangling\\", "dangling"),
        ],
    )
    def test_unescape(self, raw: str, expected: str) -> None:
        assert unescape_tag_value(raw) == expected


class TestScalarParsers:
    def test_parse_u64(self) -> None:
        assert parse_u64("0") == 0
        assert parse_u64("18446744073709551615") == 2**64 - 1

    @pytest.mark.parametrize("value", ["", "-1", "+1", " 1", "1_000", "18446744073709551616", "١٢"])
    def test_parse_u64_rejects(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_u64(value)

    def test_parse_flag(self) -> None:
        assert parse_flag("1") is True
        assert parse_flag("true") is True
        assert parse_flag("0") is False
        assert parse_flag("false") is False
        with pytest.raises(ValueError):
            parse_flag("yes")


class TestTagIndex:
    def test_lookup(self) -> None:
        tags = _tags("a=1;b=two;c=")
        assert len(tags) == 3
        assert tags.get("a") == "1"
        assert tags.get("b") == "two"
        assert tags.get("c") == ""
        assert tags.get("missing") is None
        assert "b" in tags
        assert "z" not in tags

    def test_bare_key_has_empty_value(self) -> None:
        tags = _tags("flag;k=v")
        assert tags.get("flag") == ""
        assert tags.get("k") == "v"

    def test_empty_pieces_are_skipped(self) -> None:
        tags = _tags("a=1;;b=2;")
        assert list(tags) == [("a", "1"), ("b", "2")]

    def test_value_keeps_later_equals(self) -> None:
        assert _tags("k=a=b").get("k") == "a=b"

    def test_duplicate_keys_first_wins(self) -> None:
        tags = _tags("k=first;k=second")
        assert tags.get("k") == "first"
        assert tags.to_dict() == {"k": "first"}
        assert len(tags) == 2

    def test_get_stays_escaped(self) -> None:
        tags = _tags("display-name=a\\sb")
        assert tags.get("display-name") == "a\\sb"
        assert tags.get_unescaped("display-name") == "a b"
        assert tags.get_unescaped("missing") is None

    def test_no_tags(self) -> None:
        tags = tokenize("PING").tags()
        assert tags.is_empty()
        assert tags.to_dict() == {}


class TestTypedLookups:
    def test_get_parsed_tri_state(self) -> None:
        tags = _tags("good=42;bad=x")
        assert tags.get_parsed("missing", parse_u64) is None

        good = tags.get_parsed("good", parse_u64)
        assert good is not None and good.ok
        assert good.unwrap() == 42

        bad = tags.get_parsed("bad", parse_u64)
        assert bad is not None and not bad.ok
        assert isinstance(bad.error, TagParseError)
        assert bad.error.key == "bad"
        assert bad.error.value == "x"
        with pytest.raises(TagParseError):
            bad.unwrap()
        assert bad.value_or(7) == 7

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1", True), ("0", False), ("", False), ("true", False), ("11", False)],
    )
    def test_get_as_bool_only_accepts_one(self, value: str, expected: bool) -> None:
        assert _tags(f"mod={value}").get_as_bool("mod") is expected

    def test_get_as_bool_absent(self) -> None:
        assert _tags("a=1").get_as_bool("mod") is False

    def test_parsed_tag_equality(self) -> None:
        assert ParsedTag(value=1) == ParsedTag(value=1)
        assert ParsedTag(error=TagParseError("k", "v", "r")) == ParsedTag(
            error=TagParseError("k", "v", "r")
        )
