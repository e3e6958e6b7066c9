"""Wire-level decoding: buffers, tokenizer, tag index and attribution engine."""

from .attribution import AttributionGrammar, iter_attributions, parse_attributions  # noqa: F401
from .buffer import Buffer, ByteRange  # noqa: F401
from .tags import (  # noqa: F401
    ParsedTag,
    TagIndices,
    Tags,
    parse_flag,
    parse_u64,
    unescape_tag_value,
)
from .tokenizer import IrcMessage, tokenize, tokenize_buffer  # noqa: F401

__all__ = [
    "AttributionGrammar",
    "iter_attributions",
    "parse_attributions",
    "Buffer",
    "ByteRange",
    "ParsedTag",
    "TagIndices",
    "Tags",
    "parse_flag",
    "parse_u64",
    "unescape_tag_value",
    "IrcMessage",
    "tokenize",
    "tokenize_buffer",
]
