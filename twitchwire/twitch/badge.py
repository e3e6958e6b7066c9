"""Chat badges.

The ``badges`` (and ``badge-info``) tags list ``name/data`` entries separated
by commas, e.g. ``broadcaster/1,subscriber/3012,bits/100``. Badges nobody
taught us about (custom or event badges) decode as ``BadgeKind.UNKNOWN``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..wire.attribution import AttributionGrammar, parse_attributions
from ..wire.tags import parse_u64

_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF

# TIER, a literal 0, then at least two digits of MONTHS: "3001" -> (3, 1)
_TIER_SUBSCRIBER = re.compile(r"(\d+?)0(\d{2,})")


class BadgeKind(Enum):
    ADMIN = "admin"
    BROADCASTER = "broadcaster"
    MODERATOR = "moderator"
    STAFF = "staff"
    TURBO = "turbo"
    PREMIUM = "premium"
    VIP = "vip"
    PARTNER = "partner"
    GLOBAL_MOD = "global_mod"
    BITS = "bits"
    TIER_SUBSCRIBER = "tier_subscriber"
    NO_TIER_SUBSCRIBER = "no_tier_subscriber"
    UNKNOWN = "unknown"


# Badges that only ever appear as "<name>/1"
_SIMPLE_BADGES = {
    kind.value: kind
    for kind in (
        BadgeKind.ADMIN,
        BadgeKind.BROADCASTER,
        BadgeKind.MODERATOR,
        BadgeKind.STAFF,
        BadgeKind.TURBO,
        BadgeKind.PREMIUM,
        BadgeKind.VIP,
        BadgeKind.PARTNER,
        BadgeKind.GLOBAL_MOD,
    )
}


@dataclass(frozen=True, slots=True)
class Badge:
    """A badge owned by the user.

    Attributes:
        kind: Which badge this is.
        name: Badge name as sent on the wire.
        count: Bits for ``BITS``, months for subscriber badges, the trailing
            number for ``UNKNOWN`` and ``1`` otherwise.
        tier: Subscription tier, only for ``TIER_SUBSCRIBER``.
    """

    kind: BadgeKind
    name: str
    count: int = 1
    tier: int | None = None

    @classmethod
    def simple(cls, kind: BadgeKind) -> Badge:
        return cls(kind, kind.value)

    @classmethod
    def bits(cls, amount: int) -> Badge:
        return cls(BadgeKind.BITS, "bits", amount)

    @classmethod
    def tier_subscriber(cls, tier: int, months: int) -> Badge:
        return cls(BadgeKind.TIER_SUBSCRIBER, "subscriber", months, tier)

    @classmethod
    def no_tier_subscriber(cls, months: int) -> Badge:
        return cls(BadgeKind.NO_TIER_SUBSCRIBER, "subscriber", months)

    @classmethod
    def unknown(cls, name: str, count: int) -> Badge:
        return cls(BadgeKind.UNKNOWN, name, count)

    @classmethod
    def from_parts(cls, name: str, data: str) -> Badge:
        """Interpret one ``name/data`` pair.

        Raises:
            ValueError: If ``data`` is not numeric.
        """
        if name == "bits":
            return cls.bits(parse_u64(data))
        if name == "subscriber":
            badge = _parse_subscriber(data)
            if badge is not None:
                return badge
        elif name in _SIMPLE_BADGES and data == "1":
            return cls.simple(_SIMPLE_BADGES[name])
        return cls.unknown(name, parse_u64(data))

    @classmethod
    def parse(cls, text: str) -> Badge:
        name, sep, data = text.partition("/")
        if not sep:
            raise ValueError(f"badge without data: {text!r}")
        return cls.from_parts(_parse_name(name), data)

    @property
    def months(self) -> int | None:
        return self.count if self.is_subscriber else None

    @property
    def is_subscriber(self) -> bool:
        return self.kind in (BadgeKind.TIER_SUBSCRIBER, BadgeKind.NO_TIER_SUBSCRIBER)

    def __str__(self) -> str:
        if self.kind is BadgeKind.TIER_SUBSCRIBER:
            return f"subscriber/{self.tier}0{self.count:02}"
        return f"{self.name}/{self.count}"


# Badge metadata shares the badge grammar ("subscriber/8").
BadgeInfo = Badge


def _parse_subscriber(data: str) -> Badge | None:
    match = _TIER_SUBSCRIBER.fullmatch(data)
    if match:
        tier, months = int(match.group(1)), int(match.group(2))
        if tier <= _U8_MAX and months <= _U32_MAX:
            return Badge.tier_subscriber(tier, months)
    months = parse_u64(data)
    if months <= _U32_MAX:
        return Badge.no_tier_subscriber(months)
    return None


def _parse_name(text: str) -> str:
    if not text:
        raise ValueError("empty badge name")
    return text


def _parse_data(text: str) -> str:
    # Kept as text: subscriber data is zero padded ("3001").
    parse_u64(text)
    return text


def _build_badge(name: str, data: list[str]) -> Badge:
    if not data:
        raise ValueError(f"badge {name!r} has no data")
    return Badge.from_parts(name, data[0])


BADGE_GRAMMAR: AttributionGrammar[str, str, Badge] = AttributionGrammar(
    entry_separator=",",
    reference_separator="/",
    attribute_separator=None,
    parse_reference=_parse_name,
    parse_attribute=_parse_data,
    build=_build_badge,
)


def parse_badges(value: str | None) -> list[Badge]:
    return parse_attributions(value, BADGE_GRAMMAR)


__all__ = ["Badge", "BadgeInfo", "BadgeKind", "BADGE_GRAMMAR", "parse_badges"]
