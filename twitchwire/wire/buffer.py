"""Byte ranges and the owned-or-borrowed line storage they index into.

Every decoded field is kept as a ``ByteRange`` into one ``Buffer``. A
borrowed buffer references the caller's immutable ``bytes`` through a
``memoryview`` and never copies it; an owned buffer holds a private ``bytes``
object. Because records only store offsets, switching storage never requires
re-parsing.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ByteRange:
    """Half-open ``[start, end)`` byte offsets into a ``Buffer``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid byte range {self.start}..{self.end}")

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end


class Buffer:
    """Immutable view over the UTF-8 bytes of one wire line."""

    __slots__ = ("_data", "_view", "_owned")

    def __init__(self, data: bytes, *, owned: bool) -> None:
        if not isinstance(data, bytes):
            raise TypeError(f"Buffer needs bytes, got {type(data).__name__}")
        self._data = data
        self._view = memoryview(data)
        self._owned = owned

    @classmethod
    def borrowed(cls, data: bytes) -> Buffer:
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: bytes | bytearray | memoryview) -> Buffer:
        return cls(bytes(data), owned=True)

    @classmethod
    def from_line(cls, line: str | bytes | bytearray | memoryview) -> Buffer:
        """Wrap ``line`` without copying where Python allows it.

        Only ``bytes`` is borrowed. ``str`` has no byte addressing, so it is
        encoded once and the result is owned. ``bytearray`` and ``memoryview``
        can change under a record, so they are copied into owned storage.
        """
        if isinstance(line, str):
            return cls(line.encode("utf-8"), owned=True)
        if isinstance(line, bytes):
            return cls.borrowed(line)
        if isinstance(line, (bytearray, memoryview)):
            return cls.owned(line)
        raise TypeError(f"cannot decode a line of type {type(line).__name__}")

    @property
    def is_owned(self) -> bool:
        return self._owned

    def into_owned(self) -> Buffer:
        """Return a buffer over a private copy of the bytes.

        An owned buffer is already private and immutable, so it is returned
        as is.
        """
        if self._owned:
            return self
        return Buffer(bytes(self._view), owned=True)

    def __len__(self) -> int:
        return len(self._view)

    def find(self, needle: bytes, start: int = 0, end: int | None = None) -> int:
        if end is None:
            end = len(self._view)
        return self._data.find(needle, start, end)

    def byte_at(self, index: int) -> int:
        return self._view[index]

    def is_ascii(self) -> bool:
        return self._data.isascii()

    def is_valid_utf8(self) -> bool:
        if self._data.isascii():
            return True
        try:
            str(self._view, "utf-8")
        except UnicodeDecodeError:
            return False
        return True

    def slice(self, span: ByteRange) -> str:
        """Decode the bytes covered by ``span``.

        Raises:
            IndexError: If ``span`` reaches past the end of the buffer.
        """
        if span.end > len(self._view):
            raise IndexError(f"range {span.start}..{span.end} outside buffer of {len(self._view)}")
        return str(self._view[span.start : span.end], "utf-8")

    def slice_bytes(self, span: ByteRange) -> memoryview:
        return self._view[span.start : span.end]

    def text(self) -> str:
        return str(self._view, "utf-8")

    def to_bytes(self) -> bytes:
        return bytes(self._view)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self._view == other._view

    def __hash__(self) -> int:
        return hash(self._view.tobytes())

    def __repr__(self) -> str:
        kind = "owned" if self._owned else "borrowed"
        return f"Buffer({kind}, {self.to_bytes()!r})"


__all__ = ["ByteRange", "Buffer"]
