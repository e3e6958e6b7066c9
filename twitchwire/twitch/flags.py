"""AutoMod flags.

Twitch runs its AutoMod analysis over every message and may attach a
``flags`` tag. Each flag is a character range of the offending term plus
zero or more scores shaped ``TYPE.SEVERITY``:

    "50K LMAOO"      ->  4-8:P.3
    "I have a spaz"  ->  9-12:A.6/I.6
    "LMAO Poki wtf"  ->  0-3:P.6,10-12:P.6

Types: A aggression, I identity language, P profanity, S sexual language.
Links and some other terms are flagged without a score.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..constants import SCORE_SEVERITY_MAX
from ..wire.attribution import AttributionGrammar, parse_attributions
from .ranges import MsgRange


class ScoreType(Enum):
    AGGRESSION = "A"
    IDENTITY = "I"
    PROFANITY = "P"
    SEXUAL = "S"


@dataclass(frozen=True, slots=True)
class Score:
    """One AutoMod score such as ``A.6``."""

    type: ScoreType
    severity: int

    @classmethod
    def parse(cls, text: str) -> Score:
        type_text, sep, severity_text = text.partition(".")
        if not sep:
            raise ValueError(f"score without separator: {text!r}")
        try:
            score_type = ScoreType(type_text)
        except ValueError:
            raise ValueError(f"unknown score type: {type_text!r}") from None
        if len(severity_text) != 1 or not severity_text.isdigit():
            raise ValueError(f"severity outside 0-{SCORE_SEVERITY_MAX}: {severity_text!r}")
        return cls(score_type, int(severity_text))

    def __str__(self) -> str:
        return f"{self.type.value}.{self.severity}"


@dataclass(frozen=True, slots=True)
class Flag:
    """A flagged term and the scores assigned to it."""

    range: MsgRange
    scores: tuple[Score, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"range": self.range.as_tuple(), "scores": [str(s) for s in self.scores]}


def _build_flag(span: MsgRange, scores: list[Score]) -> Flag:
    return Flag(span, tuple(scores))


FLAG_GRAMMAR: AttributionGrammar[MsgRange, Score, Flag] = AttributionGrammar(
    entry_separator=",",
    reference_separator=":",
    attribute_separator="/",
    parse_reference=MsgRange.parse,
    parse_attribute=Score.parse,
    build=_build_flag,
)


def parse_flags(value: str | None) -> list[Flag]:
    return parse_attributions(value, FLAG_GRAMMAR)


__all__ = ["ScoreType", "Score", "Flag", "FLAG_GRAMMAR", "parse_flags"]
