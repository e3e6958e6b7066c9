"""Followers-only room mode (the ROOMSTATE ``followers-only`` tag)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from ..constants import SECONDS_PER_DAY
from ..wire.tags import parse_u64


class FollowersOnlyMode(Enum):
    DISABLED = "disabled"
    ALL = "all"
    LIMIT = "limit"


@dataclass(frozen=True, slots=True)
class FollowersOnly:
    """Whether followers-only mode is on and for how long one must follow.

    Wire values: ``-1`` disabled, ``0`` every follower may talk, ``N > 0``
    only those following for at least N days.
    """

    mode: FollowersOnlyMode
    duration: timedelta | None = None

    @classmethod
    def disabled(cls) -> FollowersOnly:
        return cls(FollowersOnlyMode.DISABLED)

    @classmethod
    def all(cls) -> FollowersOnly:
        return cls(FollowersOnlyMode.ALL)

    @classmethod
    def limit(cls, duration: timedelta) -> FollowersOnly:
        return cls(FollowersOnlyMode.LIMIT, duration)

    @classmethod
    def parse(cls, text: str) -> FollowersOnly:
        """Parse the tag value.

        Raises:
            ValueError: For anything but ``-1`` or a non-negative integer.
        """
        if text == "-1":
            return cls.disabled()
        days = parse_u64(text)
        if days == 0:
            return cls.all()
        if days > timedelta.max.days:
            raise ValueError(f"followers-only duration too large: {text!r}")
        return cls.limit(timedelta(seconds=days * SECONDS_PER_DAY))

    @property
    def is_enabled(self) -> bool:
        return self.mode is not FollowersOnlyMode.DISABLED

    def as_duration(self) -> timedelta | None:
        """``None`` when disabled, zero for all followers, else the limit."""
        if self.mode is FollowersOnlyMode.DISABLED:
            return None
        if self.mode is FollowersOnlyMode.ALL:
            return timedelta(0)
        return self.duration

    def __str__(self) -> str:
        if self.mode is FollowersOnlyMode.DISABLED:
            return "-1"
        if self.mode is FollowersOnlyMode.ALL:
            return "0"
        return str(int(self.duration.total_seconds()) // SECONDS_PER_DAY)  # type: ignore[union-attr]


__all__ = ["FollowersOnly", "FollowersOnlyMode"]
