"""Twitch-specific value types decoded from tag values."""

from .badge import BADGE_GRAMMAR, Badge, BadgeInfo, BadgeKind, parse_badges  # noqa: F401
from .color import TWITCH_PRESET_COLORS, Color  # noqa: F401
from .emotes import EMOTE_GRAMMAR, Emote, parse_emotes  # noqa: F401
from .flags import FLAG_GRAMMAR, Flag, Score, ScoreType, parse_flags  # noqa: F401
from .followers_only import FollowersOnly, FollowersOnlyMode  # noqa: F401
from .notice import NoticeKind, NoticeType, SubPlan, SubPlanKind  # noqa: F401
from .ranges import MsgRange  # noqa: F401

__all__ = [
    "BADGE_GRAMMAR",
    "Badge",
    "BadgeInfo",
    "BadgeKind",
    "parse_badges",
    "TWITCH_PRESET_COLORS",
    "Color",
    "EMOTE_GRAMMAR",
    "Emote",
    "parse_emotes",
    "FLAG_GRAMMAR",
    "Flag",
    "Score",
    "ScoreType",
    "parse_flags",
    "FollowersOnly",
    "FollowersOnlyMode",
    "NoticeKind",
    "NoticeType",
    "SubPlan",
    "SubPlanKind",
    "MsgRange",
]
