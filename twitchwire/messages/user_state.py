from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from ..wire.buffer import ByteRange
from ..wire.tokenizer import USER_STATE, IrcMessage
from .base import Message, UserTagsMixin, parse_emote_sets


@dataclass(frozen=True, slots=True)
class UserState(UserTagsMixin, Message):
    """The connected user's state in a channel, sent on join and after each message."""

    COMMAND = USER_STATE

    channel_range: ByteRange

    @classmethod
    def from_irc(cls, msg: IrcMessage) -> Self:
        return cls(**cls._base_fields(msg), channel_range=msg.expect_arg_index(0))

    @property
    def channel(self) -> str:
        return self.raw.slice(self.channel_range)

    def emote_sets(self) -> frozenset[int]:
        return parse_emote_sets(self.tags().get("emote-sets"))

    def is_moderator(self) -> bool:
        return self.tags().get_as_bool("mod")

    def _fields_dict(self) -> dict[str, Any]:
        return {
            "channel": self.channel,
            "emote_sets": sorted(self.emote_sets()),
            "moderator": self.is_moderator(),
            **self._user_fields(),
        }


__all__ = ["UserState"]
