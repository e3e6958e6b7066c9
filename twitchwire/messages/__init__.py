"""Typed records for the Twitch commands the decoder understands."""

from .base import Message, UserTagsMixin, parse_emote_sets  # noqa: F401
from .global_user_state import GlobalUserState  # noqa: F401
from .privmsg import Ctcp, CtcpKind, Privmsg  # noqa: F401
from .room_state import RoomState  # noqa: F401
from .user_notice import UserNotice  # noqa: F401
from .user_state import UserState  # noqa: F401
from .whisper import Whisper  # noqa: F401

RECORD_TYPES: dict[str, type[Message]] = {
    record.COMMAND: record
    for record in (Privmsg, Whisper, UserState, RoomState, UserNotice, GlobalUserState)
}

__all__ = [
    "RECORD_TYPES",
    "Message",
    "UserTagsMixin",
    "parse_emote_sets",
    "GlobalUserState",
    "Ctcp",
    "CtcpKind",
    "Privmsg",
    "RoomState",
    "UserNotice",
    "UserState",
    "Whisper",
]
