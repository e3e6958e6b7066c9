"""Tag index and typed tag lookups.

The ``@k=v;k2=v2`` blob is scanned once into ordered ``(key, value)`` byte
ranges. Values stay escaped in the index; ``unescape_tag_value`` decodes them
for accessors that need real text.

Duplicate keys resolve to the first occurrence for every lookup.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..errors.internal import TagParseError
from .buffer import Buffer, ByteRange

T = TypeVar("T")

_ESCAPES = {
    "s": " ",
    "r": "\r",
    "n": "\n",
    ":": ":",
    "\\": "\\",
}

_U64_MAX = 2**64 - 1


def unescape_tag_value(value: str) -> str:
    """Decode IRCv3 tag escapes.

    An unknown escape yields the escaped character itself and a dangling
    backslash at the end is dropped.
    """
    if "\\" not in value:
        return value
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            break
        out.append(_ESCAPES.get(nxt, nxt))
    return "".join(out)


def parse_u64(value: str) -> int:
    """Parse an unsigned 64-bit integer, ASCII digits only.

    ``int()`` would also accept signs, whitespace and underscores; the wire
    never carries those in numeric tags.
    """
    if not value or not value.isascii() or not value.isdigit():
        raise ValueError(f"not an unsigned integer: {value!r}")
    number = int(value)
    if number > _U64_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def parse_flag(value: str) -> bool:
    if value in ("1", "true"):
        return True
    if value in ("0", "false"):
        return False
    raise ValueError(f"not a boolean flag: {value!r}")


@dataclass(frozen=True, slots=True)
class ParsedTag(Generic[T]):
    """A present tag's parse outcome: either ``value`` or ``error``.

    An absent tag is represented by ``None`` at the call site, so together
    the three states are absent / invalid / valid.
    """

    value: T | None = None
    error: TagParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried ``TagParseError``."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class TagIndices:
    """Ordered ``(key, value)`` ranges of one line's tag blob."""

    entries: tuple[tuple[ByteRange, ByteRange], ...] = ()

    @classmethod
    def empty(cls) -> TagIndices:
        return cls()

    @classmethod
    def parse(cls, buf: Buffer, blob: ByteRange) -> TagIndices:
        entries: list[tuple[ByteRange, ByteRange]] = []
        pos = blob.start
        while pos <= blob.end:
            semi = buf.find(b";", pos, blob.end)
            piece_end = blob.end if semi == -1 else semi
            if piece_end > pos:
                eq = buf.find(b"=", pos, piece_end)
                if eq == -1:
                    entries.append((ByteRange(pos, piece_end), ByteRange(piece_end, piece_end)))
                else:
                    entries.append((ByteRange(pos, eq), ByteRange(eq + 1, piece_end)))
            if semi == -1:
                break
            pos = semi + 1
        return cls(tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def is_empty(self) -> bool:
        return not self.entries


class Tags:
    """Lookups over a ``TagIndices`` and the buffer it points into."""

    __slots__ = ("_buf", "_indices")

    def __init__(self, buf: Buffer, indices: TagIndices) -> None:
        self._buf = buf
        self._indices = indices

    def _find(self, key: str) -> ByteRange | None:
        needle = key.encode("utf-8")
        for key_range, value_range in self._indices.entries:
            if self._buf.slice_bytes(key_range) == needle:
                return value_range
        return None

    def __contains__(self, key: str) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for key_range, value_range in self._indices.entries:
            yield self._buf.slice(key_range), self._buf.slice(value_range)

    def is_empty(self) -> bool:
        return self._indices.is_empty()

    def get(self, key: str) -> str | None:
        """Raw (still escaped) value of ``key``; ``""`` for a bare key."""
        span = self._find(key)
        return None if span is None else self._buf.slice(span)

    def get_unescaped(self, key: str) -> str | None:
        value = self.get(key)
        return None if value is None else unescape_tag_value(value)

    def get_parsed(self, key: str, parser: Callable[[str], T]) -> ParsedTag[T] | None:
        """Parse ``key`` with ``parser``.

        Returns ``None`` when the tag is absent. A ``ValueError`` from the
        parser is captured as a ``TagParseError`` inside the result.
        """
        value = self.get(key)
        if value is None:
            return None
        try:
            return ParsedTag(value=parser(value))
        except ValueError as e:
            return ParsedTag(error=TagParseError(key, value, str(e)))

    def get_as_bool(self, key: str) -> bool:
        return self.get(key) == "1"

    def to_dict(self) -> dict[str, str]:
        """Raw values keyed by tag name, first occurrence winning."""
        out: dict[str, str] = {}
        for key, value in self:
            out.setdefault(key, value)
        return out


__all__ = [
    "ParsedTag",
    "TagIndices",
    "Tags",
    "parse_flag",
    "parse_u64",
    "unescape_tag_value",
]
