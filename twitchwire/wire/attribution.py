"""Decoding of tag values that attach attributes to a reference.

Several Twitch tags pack a list of entries, each being one reference plus
some attributes, for example ``emotes=25:0-4,6-10/1902:12-16`` or
``flags=4-8:P.3/A.6``. They differ only in their separators and in how the
pieces parse, so one engine is driven by an ``AttributionGrammar``.

Decoding is lenient: tag content is free text from the network, so a bad
entry is dropped on its own and a bad attribute is dropped without losing
its entry.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")
A = TypeVar("A")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AttributionGrammar(Generic[R, A, T]):
    """Separators and parse functions of one entry grammar.

    Attributes:
        entry_separator: Splits the tag value into entries.
        reference_separator: Splits an entry once into reference and attributes.
        attribute_separator: Splits the attribute text; ``None`` keeps it whole.
        parse_reference: Parses the reference text, raising ``ValueError``.
        parse_attribute: Parses one attribute text, raising ``ValueError``.
        build: Assembles the entry; a ``ValueError`` drops the entry.
    """

    entry_separator: str
    reference_separator: str
    attribute_separator: str | None
    parse_reference: Callable[[str], R]
    parse_attribute: Callable[[str], A]
    build: Callable[[R, list[A]], T]

    def split_attributes(self, text: str) -> list[str]:
        if not text:
            return []
        if self.attribute_separator is None:
            return [text]
        return text.split(self.attribute_separator)

    def parse_entry(self, entry: str) -> T | None:
        ref_text, _, attr_text = entry.partition(self.reference_separator)
        try:
            reference = self.parse_reference(ref_text)
        except ValueError:
            return None

        attributes: list[A] = []
        for piece in self.split_attributes(attr_text):
            try:
                attributes.append(self.parse_attribute(piece))
            except ValueError:
                continue

        try:
            return self.build(reference, attributes)
        except ValueError:
            return None


def iter_attributions(value: str, grammar: AttributionGrammar[R, A, T]) -> Iterator[T]:
    """Yield each entry of ``value`` that decodes, in order of appearance."""
    for entry in value.split(grammar.entry_separator):
        item = grammar.parse_entry(entry)
        if item is not None:
            yield item


def parse_attributions(value: str | None, grammar: AttributionGrammar[R, A, T]) -> list[T]:
    """Decode every surviving entry; an absent or empty value gives ``[]``."""
    if not value:
        return []
    return list(iter_attributions(value, grammar))


__all__ = ["AttributionGrammar", "iter_attributions", "parse_attributions"]
