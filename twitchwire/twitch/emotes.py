"""Emotes are little pictograms used in-line in Twitch messages.

The ``emotes`` tag lists them as ``id:range1,range2/id2:range1,...``, where
each range locates one occurrence in the message text:

    "testing Kappa"        ->  25:8-13
    "Kappa testing Kappa"  ->  25:0-5,14-19
"""

from __future__ import annotations

from dataclasses import dataclass

from ..wire.attribution import AttributionGrammar, parse_attributions
from ..wire.tags import parse_u64
from .ranges import MsgRange


@dataclass(frozen=True, slots=True)
class Emote:
    """An emote id and every range where it occurs, e.g. ``Kappa = 25``."""

    id: int
    ranges: tuple[MsgRange, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "ranges": [r.as_tuple() for r in self.ranges]}


def _build_emote(emote_id: int, ranges: list[MsgRange]) -> Emote:
    return Emote(emote_id, tuple(ranges))


EMOTE_GRAMMAR: AttributionGrammar[int, MsgRange, Emote] = AttributionGrammar(
    entry_separator="/",
    reference_separator=":",
    attribute_separator=",",
    parse_reference=parse_u64,
    parse_attribute=MsgRange.parse,
    build=_build_emote,
)


def parse_emotes(value: str | None) -> list[Emote]:
    return parse_attributions(value, EMOTE_GRAMMAR)


__all__ = ["Emote", "EMOTE_GRAMMAR", "parse_emotes"]
