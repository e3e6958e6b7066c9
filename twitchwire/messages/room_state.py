from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from ..twitch.followers_only import FollowersOnly
from ..wire.buffer import ByteRange
from ..wire.tags import ParsedTag
from ..wire.tokenizer import ROOM_STATE, IrcMessage
from .base import Message


@dataclass(frozen=True, slots=True)
class RoomState(Message):
    """A channel's chat settings.

    Sent in full on join; afterwards only the tags that changed are present.
    """

    COMMAND = ROOM_STATE

    channel_range: ByteRange

    @classmethod
    def from_irc(cls, msg: IrcMessage) -> Self:
        return cls(**cls._base_fields(msg), channel_range=msg.expect_arg_index(0))

    @property
    def channel(self) -> str:
        return self.raw.slice(self.channel_range)

    def is_emote_only(self) -> bool:
        return self.tags().get_as_bool("emote-only")

    def followers_only(self) -> ParsedTag[FollowersOnly] | None:
        return self._parsed("followers-only", FollowersOnly.parse)

    def is_followers_only(self) -> bool:
        """True for any valid mode other than disabled."""
        parsed = self.followers_only()
        return parsed is not None and parsed.ok and parsed.unwrap().is_enabled

    def is_r9k(self) -> bool:
        return self.tags().get_as_bool("r9k")

    def room_id(self) -> ParsedTag[int] | None:
        return self._u64("room-id")

    def slow_mode(self) -> int | None:
        """Seconds between messages; ``None`` unless slow mode is active."""
        parsed = self._u64("slow")
        if parsed is None or not parsed.ok:
            return None
        delay = parsed.unwrap()
        return delay if delay > 0 else None

    def is_subs_only(self) -> bool:
        return self.tags().get_as_bool("subs-only")

    def _fields_dict(self) -> dict[str, Any]:
        followers = self.followers_only()
        return {
            "channel": self.channel,
            "emote_only": self.is_emote_only(),
            "followers_only": str(followers.value) if followers is not None and followers.ok else None,
            "r9k": self.is_r9k(),
            "slow": self.slow_mode(),
            "subs_only": self.is_subs_only(),
        }


__all__ = ["RoomState"]
