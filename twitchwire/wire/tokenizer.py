"""IRC line tokenizer.

Splits ``[@tags] [:prefix] COMMAND [middle ...] [:trailing]`` into byte
ranges over the line's buffer. Nothing is copied; the parts are sliced out
on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..errors.internal import (
    CommandMismatch,
    EmptyMessage,
    InvalidEncoding,
    MalformedCommand,
    MalformedPrefix,
    MalformedTags,
    MissingField,
)
from .buffer import Buffer, ByteRange
from .tags import TagIndices, Tags

PRIVMSG = "PRIVMSG"
WHISPER = "WHISPER"
USER_STATE = "USERSTATE"
ROOM_STATE = "ROOMSTATE"
USER_NOTICE = "USERNOTICE"
GLOBAL_USER_STATE = "GLOBALUSERSTATE"

_SPACE = 0x20
_AT = 0x40
_COLON = 0x3A
_CR = 0x0D
_LF = 0x0A


@dataclass(frozen=True, slots=True)
class IrcMessage:
    """One tokenized line: a buffer plus the ranges of its parts."""

    raw: Buffer
    command_range: ByteRange
    tags_range: ByteRange | None = None
    prefix_range: ByteRange | None = None
    args: tuple[ByteRange, ...] = ()
    data_range: ByteRange | None = None
    line_range: ByteRange | None = None

    @property
    def command(self) -> str:
        return self.raw.slice(self.command_range)

    @property
    def prefix(self) -> str | None:
        return None if self.prefix_range is None else self.raw.slice(self.prefix_range)

    @property
    def data(self) -> str | None:
        return None if self.data_range is None else self.raw.slice(self.data_range)

    @property
    def line(self) -> str:
        """The line text without any trailing CR/LF."""
        if self.line_range is None:
            return self.raw.text()
        return self.raw.slice(self.line_range)

    def arg(self, index: int) -> str | None:
        if 0 <= index < len(self.args):
            return self.raw.slice(self.args[index])
        return None

    def nick_range(self) -> ByteRange | None:
        """Range of the nick in a ``nick!user@host`` prefix.

        A prefix without ``!`` names a server and has no nick.
        """
        if self.prefix_range is None:
            return None
        bang = self.raw.find(b"!", self.prefix_range.start, self.prefix_range.end)
        if bang == -1:
            return None
        return ByteRange(self.prefix_range.start, bang)

    @property
    def nick(self) -> str | None:
        span = self.nick_range()
        return None if span is None else self.raw.slice(span)

    def parse_tags(self) -> TagIndices:
        if self.tags_range is None:
            return TagIndices.empty()
        return TagIndices.parse(self.raw, self.tags_range)

    def tags(self) -> Tags:
        return Tags(self.raw, self.parse_tags())

    def expect_command(self, expected: str) -> None:
        actual = self.command
        if actual != expected:
            raise CommandMismatch(expected, actual)

    def expect_nick(self) -> ByteRange:
        span = self.nick_range()
        if span is None:
            raise MissingField("nick", self.command)
        return span

    def expect_arg_index(self, index: int) -> ByteRange:
        if index >= len(self.args):
            raise MissingField(f"arg[{index}]", self.command)
        return self.args[index]

    def expect_data_index(self) -> ByteRange:
        if self.data_range is None:
            raise MissingField("data", self.command)
        return self.data_range

    def into_owned(self) -> IrcMessage:
        return replace(self, raw=self.raw.into_owned())

    def to_dict(self) -> dict[str, object]:
        return {
            "raw": self.line,
            "command": self.command,
            "prefix": self.prefix,
            "args": [self.raw.slice(a) for a in self.args],
            "data": self.data,
            "tags": self.tags().to_dict(),
        }


def _trim_line_end(buf: Buffer) -> int:
    end = len(buf)
    while end > 0 and buf.byte_at(end - 1) in (_CR, _LF):
        end -= 1
    return end


def _skip_spaces(buf: Buffer, pos: int, end: int) -> int:
    while pos < end and buf.byte_at(pos) == _SPACE:
        pos += 1
    return pos


def _is_valid_command(token: memoryview) -> bool:
    raw = token.tobytes()
    if raw.isalpha():
        return True
    return len(raw) == 3 and raw.isdigit()


def tokenize_buffer(buf: Buffer) -> IrcMessage:
    """Tokenize the line held by ``buf``.

    Raises:
        TokenizeError: One of ``EmptyMessage``, ``MalformedTags``,
            ``MalformedPrefix``, ``MalformedCommand`` or ``InvalidEncoding``.
    """
    if not buf.is_valid_utf8():
        raise InvalidEncoding("Line is not valid UTF-8")

    end = _trim_line_end(buf)
    pos = _skip_spaces(buf, 0, end)
    line_start = pos
    if pos >= end:
        raise EmptyMessage()

    tags_range = None
    if buf.byte_at(pos) == _AT:
        space = buf.find(b" ", pos + 1, end)
        if space == -1:
            raise MalformedTags(
                "Tag section is not terminated by a space", data={"offset": pos}
            )
        tags_range = ByteRange(pos + 1, space)
        pos = _skip_spaces(buf, space + 1, end)

    prefix_range = None
    if pos < end and buf.byte_at(pos) == _COLON:
        space = buf.find(b" ", pos + 1, end)
        if space == -1:
            raise MalformedPrefix(
                "Prefix is not terminated by a space", data={"offset": pos}
            )
        prefix_range = ByteRange(pos + 1, space)
        pos = _skip_spaces(buf, space + 1, end)

    if pos >= end:
        raise EmptyMessage("Line has no command", data={"offset": pos})

    command_end = buf.find(b" ", pos, end)
    if command_end == -1:
        command_end = end
    command_range = ByteRange(pos, command_end)
    if not _is_valid_command(buf.slice_bytes(command_range)):
        raise MalformedCommand(
            f"Invalid command token {buf.slice(command_range)!r}",
            data={"offset": pos},
        )

    args: list[ByteRange] = []
    data_range = None
    pos = command_end
    while True:
        pos = _skip_spaces(buf, pos, end)
        if pos >= end:
            break
        if buf.byte_at(pos) == _COLON:
            data_range = ByteRange(pos + 1, end)
            break
        token_end = buf.find(b" ", pos, end)
        if token_end == -1:
            token_end = end
        args.append(ByteRange(pos, token_end))
        pos = token_end

    return IrcMessage(
        raw=buf,
        command_range=command_range,
        tags_range=tags_range,
        prefix_range=prefix_range,
        args=tuple(args),
        data_range=data_range,
        line_range=ByteRange(line_start, end),
    )


def tokenize(line: str | bytes | bytearray | memoryview) -> IrcMessage:
    """Tokenize one wire line (CRLF optional).

    ``bytes`` input is borrowed. ``str`` input is encoded into an owned
    buffer, and mutable ``bytearray``/``memoryview`` input is copied.
    """
    return tokenize_buffer(Buffer.from_line(line))


__all__ = [
    "IrcMessage",
    "tokenize",
    "tokenize_buffer",
    "PRIVMSG",
    "WHISPER",
    "USER_STATE",
    "ROOM_STATE",
    "USER_NOTICE",
    "GLOBAL_USER_STATE",
]
