from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

from ..constants import CTCP_ACTION, CTCP_MARKER
from ..errors.internal import MalformedCtcp
from ..twitch.badge import BadgeKind
from ..wire.buffer import ByteRange
from ..wire.tags import ParsedTag
from ..wire.tokenizer import PRIVMSG, IrcMessage
from .base import Message, UserTagsMixin

_CTCP_BYTE = ord(CTCP_MARKER)


class CtcpKind(Enum):
    ACTION = "action"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Ctcp:
    """The CTCP command wrapped around a PRIVMSG payload.

    Only ``ACTION`` (sent by ``/me``) means anything on Twitch; any other
    command is reported as ``UNKNOWN`` with its text.
    """

    kind: CtcpKind
    command: str

    @classmethod
    def from_command(cls, command: str) -> Ctcp:
        if command == CTCP_ACTION:
            return cls(CtcpKind.ACTION, command)
        return cls(CtcpKind.UNKNOWN, command)


def split_ctcp(msg: IrcMessage, data: ByteRange) -> tuple[ByteRange, ByteRange | None]:
    """Separate a ``\\x01COMMAND payload\\x01`` wrapper from the visible data.

    Returns the visible data range and the CTCP command range (``None`` for
    ordinary text). The payload after the first space is kept verbatim.

    Raises:
        MalformedCtcp: If the wrapped text has no space after its command.
    """
    buf = msg.raw
    if data.is_empty():
        return data, None
    if buf.byte_at(data.start) != _CTCP_BYTE or buf.byte_at(data.end - 1) != _CTCP_BYTE:
        return data, None

    inner_start = data.start + 1
    inner_end = max(data.end - 1, inner_start)
    space = buf.find(b" ", inner_start, inner_end)
    if space == -1:
        raise MalformedCtcp(
            "CTCP payload has no space after its command",
            data={"command": msg.command},
        )
    return ByteRange(space + 1, inner_end), ByteRange(inner_start, space)


@dataclass(frozen=True, slots=True)
class Privmsg(UserTagsMixin, Message):
    """A chat message sent by a user to a channel."""

    COMMAND = PRIVMSG

    name_range: ByteRange
    channel_range: ByteRange
    data_range: ByteRange
    ctcp_range: ByteRange | None = None

    @classmethod
    def from_irc(cls, msg: IrcMessage) -> Self:
        fields = cls._base_fields(msg)
        data, ctcp = split_ctcp(msg, msg.expect_data_index())
        return cls(
            **fields,
            name_range=msg.expect_nick(),
            channel_range=msg.expect_arg_index(0),
            data_range=data,
            ctcp_range=ctcp,
        )

    @property
    def name(self) -> str:
        """Login of the user who sent this message."""
        return self.raw.slice(self.name_range)

    @property
    def channel(self) -> str:
        return self.raw.slice(self.channel_range)

    @property
    def data(self) -> str:
        """The message text, with any CTCP wrapper removed."""
        return self.raw.slice(self.data_range)

    def ctcp(self) -> Ctcp | None:
        command = self._slice(self.ctcp_range)
        return None if command is None else Ctcp.from_command(command)

    def is_action(self) -> bool:
        """Whether this message was sent with ``/me``."""
        ctcp = self.ctcp()
        return ctcp is not None and ctcp.kind is CtcpKind.ACTION

    def bits(self) -> ParsedTag[int] | None:
        """How many bits were cheered with this message."""
        return self._u64("bits")

    def is_broadcaster(self) -> bool:
        return self._any_badge(BadgeKind.BROADCASTER)

    def is_moderator(self) -> bool:
        return self._any_badge(BadgeKind.MODERATOR)

    def is_vip(self) -> bool:
        return self._any_badge(BadgeKind.VIP)

    def is_subscriber(self) -> bool:
        return self._any_badge(BadgeKind.TIER_SUBSCRIBER, BadgeKind.NO_TIER_SUBSCRIBER)

    def is_staff(self) -> bool:
        return self._any_badge(BadgeKind.STAFF)

    def is_turbo(self) -> bool:
        return self._any_badge(BadgeKind.TURBO)

    def is_global_moderator(self) -> bool:
        return self._any_badge(BadgeKind.GLOBAL_MOD)

    def room_id(self) -> ParsedTag[int] | None:
        return self._u64("room-id")

    def tmi_sent_ts(self) -> ParsedTag[int] | None:
        """Milliseconds since the epoch when Twitch received the message."""
        return self._u64("tmi-sent-ts")

    def user_id(self) -> ParsedTag[int] | None:
        return self._u64("user-id")

    def id(self) -> str | None:
        return self.tags().get("id")

    def custom_reward_id(self) -> str | None:
        """Id of the channel-points reward that triggered this message.

        Twitch offers no API to resolve it to a name; it looks like a UUID.
        """
        return self.tags().get("custom-reward-id")

    def msg_id(self) -> str | None:
        """Highlight kind, e.g. ``highlighted-message``."""
        return self.tags().get("msg-id")

    def _fields_dict(self) -> dict[str, Any]:
        ctcp = self.ctcp()
        return {
            "name": self.name,
            "channel": self.channel,
            "data": self.data,
            "ctcp": None if ctcp is None else ctcp.command,
            **self._user_fields(),
        }


__all__ = ["Privmsg", "Ctcp", "CtcpKind", "split_ctcp"]
