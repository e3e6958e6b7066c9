from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from ..twitch.badge import BadgeKind
from ..wire.buffer import ByteRange
from ..wire.tags import ParsedTag
from ..wire.tokenizer import WHISPER, IrcMessage
from .base import Message, UserTagsMixin


@dataclass(frozen=True, slots=True)
class Whisper(UserTagsMixin, Message):
    """A private message between two users.

    The recipient argument is not kept; a whisper is always addressed to
    the connected user.
    """

    COMMAND = WHISPER

    name_range: ByteRange
    data_range: ByteRange

    @classmethod
    def from_irc(cls, msg: IrcMessage) -> Self:
        return cls(
            **cls._base_fields(msg),
            name_range=msg.expect_nick(),
            data_range=msg.expect_data_index(),
        )

    @property
    def name(self) -> str:
        """Login of the sender."""
        return self.raw.slice(self.name_range)

    @property
    def data(self) -> str:
        return self.raw.slice(self.data_range)

    def is_staff(self) -> bool:
        return self._any_badge(BadgeKind.STAFF)

    def is_turbo(self) -> bool:
        return self._any_badge(BadgeKind.TURBO)

    def is_global_moderator(self) -> bool:
        return self._any_badge(BadgeKind.GLOBAL_MOD)

    def tmi_sent_ts(self) -> ParsedTag[int] | None:
        return self._u64("tmi-sent-ts")

    def user_id(self) -> ParsedTag[int] | None:
        return self._u64("user-id")

    def _fields_dict(self) -> dict[str, Any]:
        return {"name": self.name, "data": self.data, **self._user_fields()}


__all__ = ["Whisper"]
