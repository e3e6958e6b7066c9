"""Decoding entry points and the line stream layer.

``decode`` and ``decode_any`` turn one line into a record. ``LineBuffer``
splits raw socket chunks into lines, and ``iter_decode`` / ``adecode`` run a
sequence of lines through the decoder, yielding one ``DecodeResult`` per
line so a bad line never stops the stream.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from .config.settings import DecoderSettings
from .errors.handling import log_error
from .errors.internal import DecodeError, LineTooLong
from .logs.logger import logger
from .messages import RECORD_TYPES, Message
from .wire.tokenizer import IrcMessage, tokenize

M = TypeVar("M", bound=Message)

LineInput = str | bytes | bytearray | memoryview
StreamItem = LineInput | LineTooLong


def decode(line: LineInput, record_type: type[M]) -> M:
    """Decode ``line`` as ``record_type``.

    Raises:
        TokenizeError: If the line is not a well-formed IRC line.
        MessageError: If the line is not a valid ``record_type``.
    """
    return record_type.parse(line)


def decode_any(line: LineInput) -> Message | IrcMessage:
    """Decode ``line`` into the record registered for its command.

    Commands without a record type come back as the bare ``IrcMessage``.
    """
    msg = tokenize(line)
    record_type = RECORD_TYPES.get(msg.command)
    if record_type is None:
        return msg
    return record_type.from_irc(msg)


@dataclass(frozen=True, slots=True)
class DecodeResult(Generic[M]):
    """Outcome of decoding one stream line: a record or the error it raised."""

    line: str
    record: M | IrcMessage | None = None
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> M | IrcMessage:
        if self.error is not None:
            raise self.error
        if self.record is None:
            raise ValueError(f"no record or error for line {self.line!r}")
        return self.record


class LineBuffer:
    """Accumulates chunks and hands back complete lines.

    Lines end at ``\\n``; a preceding ``\\r`` is removed unless
    ``strip_line_endings`` is off. Blank lines are skipped. A line longer
    than ``max_line_length`` is dropped and reported as ``LineTooLong``, and
    an unterminated tail past that limit is discarded as it arrives.
    """

    def __init__(self, settings: DecoderSettings | None = None) -> None:
        self.settings = settings or DecoderSettings.from_env()
        self._pending = bytearray()
        self._discarded = 0

    @property
    def pending(self) -> int:
        """Bytes held for the unterminated line."""
        return len(self._pending)

    def feed(self, chunk: str | bytes | bytearray) -> list[bytes | LineTooLong]:
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        self._pending += chunk
        limit = self.settings.max_line_length
        out: list[bytes | LineTooLong] = []
        while (newline := self._pending.find(b"\n")) != -1:
            line = bytes(self._pending[:newline])
            del self._pending[: newline + 1]
            item = self._finish_line(line, limit)
            if item is not None:
                out.append(item)
        # A trailing CR may belong to a CRLF split across chunks.
        tail = len(self._pending)
        if self.settings.strip_line_endings and self._pending.endswith(b"\r"):
            tail -= 1
        if tail > limit:
            self._discarded += len(self._pending)
            self._pending.clear()
        return out

    def flush(self) -> list[bytes | LineTooLong]:
        """Return the unterminated tail as a final line, e.g. at end of input."""
        if not self._pending and not self._discarded:
            return []
        line = bytes(self._pending)
        self._pending.clear()
        item = self._finish_line(line, self.settings.max_line_length)
        return [] if item is None else [item]

    def _finish_line(self, line: bytes, limit: int) -> bytes | LineTooLong | None:
        if self.settings.strip_line_endings and line.endswith(b"\r"):
            line = line[:-1]
        length = self._discarded + len(line)
        self._discarded = 0
        if length > limit:
            return LineTooLong(length, limit)
        if not line.strip():
            return None
        return line


def _line_text(item: LineInput) -> str:
    if isinstance(item, str):
        return item.rstrip("\r\n")
    return bytes(item).decode("utf-8", errors="replace").rstrip("\r\n")


def _decode_item(
    item: StreamItem,
    record_type: type[M] | None,
    settings: DecoderSettings,
) -> DecodeResult[M]:
    if isinstance(item, LineTooLong):
        if settings.log_decode_errors:
            log_error("Dropped oversized line", item)
        return DecodeResult(line="", error=item)

    text = _line_text(item)
    if settings.log_raw_lines:
        logger.log_event("stream", "raw", level=logging.DEBUG, raw=text)
    try:
        if record_type is None:
            record = decode_any(item)
            if isinstance(record, IrcMessage):
                logger.log_event(
                    "stream", "unknown_command", level=logging.DEBUG, name=record.command
                )
        else:
            record = decode(item, record_type)
    except DecodeError as e:
        if settings.log_decode_errors:
            log_error("Failed to decode line", e, {"line": text})
        return DecodeResult(line=text, error=e)
    return DecodeResult(line=text, record=record)


def iter_decode(
    lines: Iterable[StreamItem],
    record_type: type[M] | None = None,
    settings: DecoderSettings | None = None,
) -> Iterator[DecodeResult[M]]:
    """Lazily decode ``lines``, one result per line.

    With ``record_type`` every line must be that record; without it each
    line goes through ``decode_any``. Items may also be the ``LineTooLong``
    markers produced by ``LineBuffer``.
    """
    settings = settings or DecoderSettings.from_env()
    count = errors = 0
    for item in lines:
        result = _decode_item(item, record_type, settings)
        count += 1
        errors += not result.ok
        yield result
    logger.log_event("stream", "finished", level=logging.DEBUG, count=count, errors=errors)


async def adecode(
    lines: AsyncIterable[StreamItem],
    record_type: type[M] | None = None,
    settings: DecoderSettings | None = None,
) -> AsyncIterator[DecodeResult[M]]:
    """Async counterpart of ``iter_decode`` for lines read from a socket."""
    settings = settings or DecoderSettings.from_env()
    count = errors = 0
    async for item in lines:
        result = _decode_item(item, record_type, settings)
        count += 1
        errors += not result.ok
        yield result
    logger.log_event("stream", "finished", level=logging.DEBUG, count=count, errors=errors)


__all__ = [
    "DecodeResult",
    "LineBuffer",
    "adecode",
    "decode",
    "decode_any",
    "iter_decode",
]
