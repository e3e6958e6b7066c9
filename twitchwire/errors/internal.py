"""Centralized decode error hierarchy.

These exceptions provide semantic categories for everything that can go wrong
while turning one wire line into a record. They all derive from
``InternalError`` so callers can catch a single base and still inspect the
structured ``data`` attached by the raising site.

Classes:
  InternalError      – Base for all package errors.
  DecodeError        – Base for failures that reject a whole line.
  TokenizeError      – The line could not be split into IRC parts.
  MessageError       – The parts do not form the requested record.
  LineTooLong        – The stream layer refused an oversized line.
  TagParseError      – One tag value failed to parse (carried, not raised).
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all package errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class DecodeError(InternalError):
    """A line was rejected as a whole."""


class TokenizeError(DecodeError):
    """The line does not have the ``[@tags] [:prefix] COMMAND args`` shape."""


class EmptyMessage(TokenizeError):
    """The line is blank or carries no command token."""

    def __init__(
        self,
        message: str = "Empty message",
        *,
        data: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message, data=data)


class MalformedTags(TokenizeError):
    """The ``@`` tag blob is not terminated by a space."""


class MalformedPrefix(TokenizeError):
    """The ``:`` prefix is not terminated by a space."""


class MalformedCommand(TokenizeError):
    """The command token is neither a word nor a 3-digit numeric."""


class InvalidEncoding(TokenizeError):
    """The line is not valid UTF-8."""


class MessageError(DecodeError):
    """A tokenized line cannot be turned into the requested record type."""


class CommandMismatch(MessageError):
    """The line carries a different command than the record expects.

    Attributes:
        expected: Command the record type decodes.
        actual: Command found on the line.
    """

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            f"Expected command {expected!r}, got {actual!r}",
            data={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class MissingField(MessageError):
    """A protocol-guaranteed field is absent from the line."""

    def __init__(self, field: str, command: str) -> None:
        super().__init__(
            f"{command} is missing required field {field!r}",
            data={"field": field, "command": command},
        )
        self.field = field
        self.command = command


class MalformedCtcp(MessageError):
    """A ``\\x01``-wrapped payload has no space after its CTCP command."""


class LineTooLong(DecodeError):
    """A buffered line exceeded the configured maximum length."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            f"Line of {length} bytes exceeds limit of {limit}",
            data={"length": length, "limit": limit},
        )
        self.length = length
        self.limit = limit


class TagParseError(InternalError):
    """A present tag value could not be parsed into the requested type.

    Never raised while building a record; it travels inside ``ParsedTag`` so
    one bad tag does not hide the rest of the message.
    """

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(
            f"Cannot parse tag {key!r} from {value!r}: {reason}",
            data={"key": key, "value": value},
        )
        self.key = key
        self.value = value
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagParseError):
            return NotImplemented
        return (self.key, self.value, self.reason) == (
            other.key,
            other.value,
            other.reason,
        )

    def __hash__(self) -> int:
        return hash((self.key, self.value, self.reason))


__all__ = [
    "InternalError",
    "DecodeError",
    "TokenizeError",
    "EmptyMessage",
    "MalformedTags",
    "MalformedPrefix",
    "MalformedCommand",
    "InvalidEncoding",
    "MessageError",
    "CommandMismatch",
    "MissingField",
    "MalformedCtcp",
    "LineTooLong",
    "TagParseError",
]
