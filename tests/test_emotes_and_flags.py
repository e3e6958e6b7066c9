"""Tests for emote and AutoMod flag decoding."""

from __future__ import annotations

import pytest

from twitchwire.twitch.emotes import Emote, parse_emotes
from twitchwire.twitch.flags import Flag, Score, ScoreType, parse_flags
from twitchwire.twitch.ranges import MsgRange


class TestMsgRange:
    def test_parse(self) -> None:
        assert MsgRange.parse("0-4") == MsgRange(0, 4)
        assert MsgRange.parse("3-3") == MsgRange(3, 3)
        assert str(MsgRange(6, 10)) == "6-10"

    def test_custom_separator(self) -> None:
        assert MsgRange.parse("1:2", separator=":") == MsgRange(1, 2)

    @pytest.mark.parametrize("text", ["4", "5-2", "a-b", "0-65536", "-1-2", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            MsgRange.parse(text)

    def test_upper_bound(self) -> None:
        assert MsgRange.parse("0-65535").end == 65535


class TestEmotes:
    def test_single(self) -> None:
        assert parse_emotes("25:8-13") == [Emote(25, (MsgRange(8, 13),))]

    def test_multiple(self) -> None:
        assert parse_emotes("25:0-5,14-19/1902:21-25") == [
            Emote(25, (MsgRange(0, 5), MsgRange(14, 19))),
            Emote(1902, (MsgRange(21, 25),)),
        ]

    def test_bad_range_is_dropped(self) -> None:
        assert parse_emotes("25:0-5,9-2,14-19") == [
            Emote(25, (MsgRange(0, 5), MsgRange(14, 19))),
        ]

    def test_bad_id_drops_entry(self) -> None:
        assert parse_emotes("emotesv2_abc:0-4/25:6-10") == [Emote(25, (MsgRange(6, 10),))]

    def test_empty(self) -> None:
        assert parse_emotes("") == []

    def test_to_dict(self) -> None:
        assert Emote(25, (MsgRange(0, 4),)).to_dict() == {"id": 25, "ranges": [(0, 4)]}


class TestScore:
    def test_parse(self) -> None:
        assert Score.parse("A.6") == Score(ScoreType.AGGRESSION, 6)
        assert Score.parse("I.0") == Score(ScoreType.IDENTITY, 0)
        assert str(Score(ScoreType.PROFANITY, 3)) == "P.3"

    @pytest.mark.parametrize("text", ["X.3", "P", "P.10", "P.a", "P."])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Score.parse(text)


class TestFlags:
    def test_single(self) -> None:
        assert parse_flags("4-8:P.3") == [
            Flag(MsgRange(4, 8), (Score(ScoreType.PROFANITY, 3),)),
        ]

    def test_multiple_scores(self) -> None:
        assert parse_flags("9-12:A.6/I.6") == [
            Flag(MsgRange(9, 12), (Score(ScoreType.AGGRESSION, 6), Score(ScoreType.IDENTITY, 6))),
        ]

    def test_multiple_flags(self) -> None:
        flags = parse_flags("0-3:P.6,10-12:P.6")
        assert [f.range for f in flags] == [MsgRange(0, 3), MsgRange(10, 12)]

    def test_flag_without_scores(self) -> None:
        assert parse_flags("0-10:") == [Flag(MsgRange(0, 10))]

    def test_bad_score_dropped_alone(self) -> None:
        assert parse_flags("1-2:Q.1/S.2") == [Flag(MsgRange(1, 2), (Score(ScoreType.SEXUAL, 2),))]

    def test_to_dict(self) -> None:
        flag = Flag(MsgRange(4, 8), (Score(ScoreType.PROFANITY, 3),))
        assert flag.to_dict() == {"range": (4, 8), "scores": ["P.3"]}
