"""Shared machinery of the typed message records.

A record is one ``Buffer``, the line's ``TagIndices`` and the ``ByteRange``
of every field the protocol guarantees. Everything else is looked up from
the tags each time it is asked for; nothing is cached, so a record stays
immutable and can be shared freely.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Self, TypeVar

from ..constants import DEFAULT_EMOTE_SET
from ..wire.buffer import Buffer, ByteRange
from ..wire.tags import ParsedTag, TagIndices, Tags, parse_u64
from ..wire.tokenizer import IrcMessage, tokenize
from ..twitch.badge import Badge, BadgeKind, parse_badges
from ..twitch.color import Color
from ..twitch.emotes import Emote, parse_emotes
from ..twitch.flags import Flag, parse_flags

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Message:
    """Base of every record type; ``COMMAND`` names the IRC command decoded."""

    COMMAND: ClassVar[str] = ""

    raw: Buffer
    tag_indices: TagIndices
    line_range: ByteRange

    @classmethod
    def from_irc(cls, msg: IrcMessage) -> Self:
        """Build the record from a tokenized line.

        Raises:
            MessageError: If the command differs or a required field is missing.
        """
        raise NotImplementedError

    @classmethod
    def parse(cls, line: str | bytes | bytearray | memoryview) -> Self:
        return cls.from_irc(tokenize(line))

    @classmethod
    def _base_fields(cls, msg: IrcMessage) -> dict[str, Any]:
        msg.expect_command(cls.COMMAND)
        return {
            "raw": msg.raw,
            "tag_indices": msg.parse_tags(),
            "line_range": msg.line_range or ByteRange(0, len(msg.raw)),
        }

    @property
    def line(self) -> str:
        """The source line, without its CR/LF."""
        return self.raw.slice(self.line_range)

    @property
    def is_owned(self) -> bool:
        return self.raw.is_owned

    def tags(self) -> Tags:
        return Tags(self.raw, self.tag_indices)

    def has_tags(self) -> bool:
        return not self.tag_indices.is_empty()

    def into_owned(self) -> Self:
        """Copy the backing bytes; every range stays valid as is."""
        return replace(self, raw=self.raw.into_owned())

    def _slice(self, span: ByteRange | None) -> str | None:
        return None if span is None else self.raw.slice(span)

    def _parsed(self, key: str, parser: Callable[[str], T]) -> ParsedTag[T] | None:
        return self.tags().get_parsed(key, parser)

    def _u64(self, key: str) -> ParsedTag[int] | None:
        return self.tags().get_parsed(key, parse_u64)

    def _fields_dict(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Plain field-name to value mapping for interchange."""
        return {
            "command": self.COMMAND,
            "raw": self.line,
            "tags": self.tags().to_dict(),
            **self._fields_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Rebuild a record from ``to_dict`` output by decoding its ``raw`` line."""
        raw = data.get("raw")
        if not isinstance(raw, str):
            raise ValueError("record mapping needs a 'raw' line")
        return cls.parse(raw)


class UserTagsMixin:
    """Accessors for the tags Twitch attaches to messages sent by a user."""

    __slots__ = ()

    tags: Callable[[], Tags]

    def badge_info(self) -> list[Badge]:
        """Badge metadata, e.g. the exact months of a ``subscriber`` badge."""
        return parse_badges(self.tags().get("badge-info"))

    def badges(self) -> list[Badge]:
        return parse_badges(self.tags().get("badges"))

    def color(self) -> ParsedTag[Color] | None:
        """The user's color, if set."""
        return self.tags().get_parsed("color", Color.parse)

    def display_name(self) -> str | None:
        """The user's display name, if set.

        Users may change the casing of their name (``foo`` shows as
        ``FOO``); when they never did, the tag is absent or empty.
        """
        return self.tags().get_unescaped("display-name")

    def emotes(self) -> list[Emote]:
        return parse_emotes(self.tags().get("emotes"))

    def flags(self) -> list[Flag]:
        return parse_flags(self.tags().get("flags"))

    def _any_badge(self, *kinds: BadgeKind) -> bool:
        return any(badge.kind in kinds for badge in self.badges())

    def _user_fields(self) -> dict[str, Any]:
        color = self.color()
        return {
            "display_name": self.display_name(),
            "color": str(color.value) if color is not None and color.ok else None,
            "badges": [str(b) for b in self.badges()],
            "badge_info": [str(b) for b in self.badge_info()],
            "emotes": [e.to_dict() for e in self.emotes()],
            "flags": [f.to_dict() for f in self.flags()],
        }


def parse_emote_sets(value: str | None) -> frozenset[int]:
    """Decode ``emote-sets``; never empty, the global set ``0`` is the default."""
    sets: set[int] = set()
    if value:
        for piece in value.split(","):
            try:
                sets.add(parse_u64(piece))
            except ValueError:
                continue
    return frozenset(sets) if sets else frozenset({DEFAULT_EMOTE_SET})


__all__ = ["Message", "UserTagsMixin", "parse_emote_sets"]
