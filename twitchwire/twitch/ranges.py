"""Character ranges used by the emote and flag tags."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import MSG_RANGE_MAX
from ..wire.tags import parse_u64


@dataclass(frozen=True, slots=True, order=True)
class MsgRange:
    """``start-end`` character positions within a message's text."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str, separator: str = "-") -> MsgRange:
        start_text, sep, end_text = text.partition(separator)
        if not sep:
            raise ValueError(f"range without separator: {text!r}")
        start, end = parse_u64(start_text), parse_u64(end_text)
        if end > MSG_RANGE_MAX:
            raise ValueError(f"range past {MSG_RANGE_MAX}: {text!r}")
        if start > end:
            raise ValueError(f"range start after end: {text!r}")
        return cls(start, end)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


__all__ = ["MsgRange"]
