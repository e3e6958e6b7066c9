"""Tests for Color, FollowersOnly, SubPlan and NoticeType."""

from __future__ import annotations

from datetime import timedelta

import pytest

from twitchwire.twitch.color import TWITCH_PRESET_COLORS, Color
from twitchwire.twitch.followers_only import FollowersOnly, FollowersOnlyMode
from twitchwire.twitch.notice import NoticeKind, NoticeType, SubPlan, SubPlanKind


class TestColor:
    def test_hex(self) -> None:
        color = Color.parse("#59517B")
        assert (color.r, color.g, color.b) == (0x59, 0x51, 0x7B)
        assert str(color) == "#59517B"
        assert color.rgb == 0x59517B

    def test_lowercase_hex(self) -> None:
        assert Color.parse("#ff00aa") == Color(0xFF, 0x00, 0xAA)

    def test_empty_is_white(self) -> None:
        assert Color.parse("") == Color.default() == Color(255, 255, 255)

    @pytest.mark.parametrize("text", ["BlueViolet", "blue_violet", "blueviolet", "Blue Violet"])
    def test_preset_names(self, text: str) -> None:
        color = Color.parse(text)
        assert color.rgb == 0x8A2BE2
        assert color.name == "blue_violet"

    def test_all_presets_round_trip_names(self) -> None:
        for name, rgb in TWITCH_PRESET_COLORS.items():
            assert Color(*rgb).name == name

    @pytest.mark.parametrize("text", ["#12345", "#GGGGGG", "#1234567", "chartreuse", "#"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Color.parse(text)

    def test_channel_bounds(self) -> None:
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color.from_rgb(0x1000000)


class TestFollowersOnly:
    def test_disabled(self) -> None:
        mode = FollowersOnly.parse("-1")
        assert mode.mode is FollowersOnlyMode.DISABLED
        assert not mode.is_enabled
        assert mode.as_duration() is None

    def test_all(self) -> None:
        mode = FollowersOnly.parse("0")
        assert mode == FollowersOnly.all()
        assert mode.is_enabled
        assert mode.as_duration() == timedelta(0)

    def test_limit_in_days(self) -> None:
        mode = FollowersOnly.parse("10")
        assert mode == FollowersOnly.limit(timedelta(days=10))
        assert mode.as_duration() == timedelta(seconds=10 * 86400)
        assert str(mode) == "10"

    @pytest.mark.parametrize("text", ["", "-2", "abc", "1.5", "99999999999"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            FollowersOnly.parse(text)


class TestSubPlan:
    @pytest.mark.parametrize(
        ("text", "kind", "tier"),
        [
            ("Prime", SubPlanKind.PRIME, None),
            ("1000", SubPlanKind.TIER1, 1),
            ("2000", SubPlanKind.TIER2, 2),
            ("3000", SubPlanKind.TIER3, 3),
        ],
    )
    def test_known(self, text: str, kind: SubPlanKind, tier: int | None) -> None:
        plan = SubPlan.parse(text)
        assert plan.kind is kind
        assert plan.tier == tier
        assert str(plan) == text

    def test_unknown_is_kept(self) -> None:
        plan = SubPlan.parse("4000")
        assert plan.is_unknown
        assert plan.text == "4000"


class TestNoticeType:
    def test_known(self) -> None:
        assert NoticeType.parse("resub").kind is NoticeKind.RESUB
        assert NoticeType.parse("bitsbadgetier").kind is NoticeKind.BITS_BADGE_TIER
        assert NoticeType.parse("anongiftpaidupgrade").kind is NoticeKind.ANON_GIFT_PAID_UPGRADE

    def test_unknown_is_kept(self) -> None:
        notice = NoticeType.parse("announcement")
        assert notice.is_unknown
        assert str(notice) == "announcement"
