"""Decoder for the Twitch dialect of IRC.

Lines are tokenized without copying into ``IrcMessage`` views, then
converted into typed records (``Privmsg``, ``Whisper``, ``UserState``,
``RoomState``, ``UserNotice``, ``GlobalUserState``) whose tag-backed fields
decode on access.
"""

from .config import DecoderSettings  # noqa: F401
from .errors import (  # noqa: F401
    CommandMismatch,
    DecodeError,
    InternalError,
    LineTooLong,
    MessageError,
    MissingField,
    TagParseError,
    TokenizeError,
)
from .messages import (  # noqa: F401
    RECORD_TYPES,
    Ctcp,
    CtcpKind,
    GlobalUserState,
    Message,
    Privmsg,
    RoomState,
    UserNotice,
    UserState,
    Whisper,
)
from .stream import (  # noqa: F401
    DecodeResult,
    LineBuffer,
    adecode,
    decode,
    decode_any,
    iter_decode,
)
from .wire import Buffer, ByteRange, IrcMessage, ParsedTag, Tags, tokenize  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "DecoderSettings",
    "CommandMismatch",
    "DecodeError",
    "InternalError",
    "LineTooLong",
    "MessageError",
    "MissingField",
    "TagParseError",
    "TokenizeError",
    "RECORD_TYPES",
    "Ctcp",
    "CtcpKind",
    "GlobalUserState",
    "Message",
    "Privmsg",
    "RoomState",
    "UserNotice",
    "UserState",
    "Whisper",
    "DecodeResult",
    "LineBuffer",
    "adecode",
    "decode",
    "decode_any",
    "iter_decode",
    "Buffer",
    "ByteRange",
    "IrcMessage",
    "ParsedTag",
    "Tags",
    "tokenize",
]
