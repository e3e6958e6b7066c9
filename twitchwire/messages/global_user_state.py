from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from ..twitch.badge import Badge, parse_badges
from ..twitch.color import Color
from ..wire.tokenizer import GLOBAL_USER_STATE, IrcMessage
from .base import Message, parse_emote_sets


@dataclass(frozen=True, slots=True)
class GlobalUserState(Message):
    """Sent once after login with the connected user's global state.

    Twitch also sends it without any tags when the tags capability was not
    requested; check ``has_tags()`` before trusting the defaults.
    """

    COMMAND = GLOBAL_USER_STATE

    @classmethod
    def from_irc(cls, msg: IrcMessage) -> Self:
        return cls(**cls._base_fields(msg))

    def emote_sets(self) -> frozenset[int]:
        """Available emote sets; always contains at least ``0``."""
        return parse_emote_sets(self.tags().get("emote-sets"))

    def color(self) -> Color:
        """The user's color. White when unset or unreadable."""
        parsed = self._parsed("color", Color.parse)
        if parsed is None or not parsed.ok:
            return Color.default()
        return parsed.unwrap()

    def user_id(self) -> str | None:
        return self.tags().get("user-id")

    def display_name(self) -> str | None:
        return self.tags().get_unescaped("display-name")

    def badges(self) -> list[Badge]:
        return parse_badges(self.tags().get("badges"))

    def badge_info(self) -> list[Badge]:
        return parse_badges(self.tags().get("badge-info"))

    def _fields_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id(),
            "display_name": self.display_name(),
            "color": str(self.color()),
            "emote_sets": sorted(self.emote_sets()),
            "badges": [str(b) for b in self.badges()],
        }


__all__ = ["GlobalUserState"]
