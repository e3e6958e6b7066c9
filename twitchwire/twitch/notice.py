"""Value types carried by USERNOTICE tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SubPlanKind(Enum):
    PRIME = "Prime"
    TIER1 = "1000"
    TIER2 = "2000"
    TIER3 = "3000"
    UNKNOWN = "unknown"


_SUB_PLANS = {kind.value: kind for kind in SubPlanKind if kind is not SubPlanKind.UNKNOWN}


@dataclass(frozen=True, slots=True)
class SubPlan:
    """A subscription plan (``msg-param-sub-plan``).

    ``Prime`` and the three paid tiers (``1000``, ``2000``, ``3000``) are
    known; anything else is kept verbatim under ``UNKNOWN`` so future plans
    still come through.
    """

    kind: SubPlanKind
    text: str

    @classmethod
    def parse(cls, text: str) -> SubPlan:
        return cls(_SUB_PLANS.get(text, SubPlanKind.UNKNOWN), text)

    @property
    def tier(self) -> int | None:
        """Paid tier number (1-3); ``None`` for Prime and unknown plans."""
        if self.kind in (SubPlanKind.TIER1, SubPlanKind.TIER2, SubPlanKind.TIER3):
            return int(self.kind.value) // 1000
        return None

    @property
    def is_unknown(self) -> bool:
        return self.kind is SubPlanKind.UNKNOWN

    def __str__(self) -> str:
        return self.text


class NoticeKind(Enum):
    SUB = "sub"
    RESUB = "resub"
    SUB_GIFT = "subgift"
    ANON_SUB_GIFT = "anonsubgift"
    SUB_MYSTERY_GIFT = "submysterygift"
    GIFT_PAID_UPGRADE = "giftpaidupgrade"
    REWARD_GIFT = "rewardgift"
    ANON_GIFT_PAID_UPGRADE = "anongiftpaidupgrade"
    RAID = "raid"
    UNRAID = "unraid"
    RITUAL = "ritual"
    BITS_BADGE_TIER = "bitsbadgetier"
    UNKNOWN = "unknown"


_NOTICE_KINDS = {kind.value: kind for kind in NoticeKind if kind is not NoticeKind.UNKNOWN}


@dataclass(frozen=True, slots=True)
class NoticeType:
    """The kind of a USERNOTICE (its ``msg-id`` tag)."""

    kind: NoticeKind
    text: str

    @classmethod
    def parse(cls, text: str) -> NoticeType:
        return cls(_NOTICE_KINDS.get(text, NoticeKind.UNKNOWN), text)

    @property
    def is_unknown(self) -> bool:
        return self.kind is NoticeKind.UNKNOWN

    def __str__(self) -> str:
        return self.text


__all__ = ["SubPlan", "SubPlanKind", "NoticeType", "NoticeKind"]
