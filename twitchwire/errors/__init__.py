"""Error hierarchy and error reporting helpers."""

from .handling import classify_error, log_error
from .internal import (
    CommandMismatch,
    DecodeError,
    EmptyMessage,
    InternalError,
    InvalidEncoding,
    LineTooLong,
    MalformedCommand,
    MalformedCtcp,
    MalformedPrefix,
    MalformedTags,
    MessageError,
    MissingField,
    TagParseError,
    TokenizeError,
)

__all__ = [
    "classify_error",
    "log_error",
    "CommandMismatch",
    "DecodeError",
    "EmptyMessage",
    "InternalError",
    "InvalidEncoding",
    "LineTooLong",
    "MalformedCommand",
    "MalformedCtcp",
    "MalformedPrefix",
    "MalformedTags",
    "MessageError",
    "MissingField",
    "TagParseError",
    "TokenizeError",
]
