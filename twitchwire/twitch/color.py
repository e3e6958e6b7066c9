"""User chat colors.

The ``color`` tag carries ``#RRGGBB``; an empty value means the user never
picked one and Twitch renders them white. The fifteen preset names accepted
by the ``/color`` command are also understood.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass

from ..constants import DEFAULT_COLOR_RGB

TWITCH_PRESET_COLORS: Mapping[str, tuple[int, int, int]] = {
    "blue": (0x00, 0x00, 0xFF),
    "blue_violet": (0x8A, 0x2B, 0xE2),
    "cadet_blue": (0x5F, 0x9E, 0xA0),
    "chocolate": (0xD2, 0x69, 0x1E),
    "coral": (0xFF, 0x7F, 0x50),
    "dodger_blue": (0x1E, 0x90, 0xFF),
    "firebrick": (0xB2, 0x22, 0x22),
    "golden_rod": (0xDA, 0xA5, 0x20),
    "green": (0x00, 0x80, 0x00),
    "hot_pink": (0xFF, 0x69, 0xB4),
    "orange_red": (0xFF, 0x45, 0x00),
    "red": (0xFF, 0x00, 0x00),
    "sea_green": (0x2E, 0x8B, 0x57),
    "spring_green": (0x00, 0xFF, 0x7F),
    "yellow_green": (0x9A, 0xCD, 0x32),
}

_HEX_DIGITS = frozenset(string.hexdigits)
_PRESET_BY_RGB = {rgb: name for name, rgb in TWITCH_PRESET_COLORS.items()}


def _normalize_preset_name(text: str) -> str:
    """Fold ``BlueViolet``, ``blue_violet`` and ``blueviolet`` together."""
    return text.replace("_", "").replace(" ", "").lower()


_PRESET_LOOKUP = {_normalize_preset_name(name): name for name in TWITCH_PRESET_COLORS}


@dataclass(frozen=True, slots=True)
class Color:
    """A 24-bit RGB color."""

    r: int = DEFAULT_COLOR_RGB[0]
    g: int = DEFAULT_COLOR_RGB[1]
    b: int = DEFAULT_COLOR_RGB[2]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"color channel out of range: {channel}")

    @classmethod
    def default(cls) -> Color:
        return cls()

    @classmethod
    def from_rgb(cls, rgb: int) -> Color:
        if not 0 <= rgb <= 0xFFFFFF:
            raise ValueError(f"rgb value out of range: {rgb:#x}")
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``#RRGGBB`` or a preset name; ``""`` is the default white.

        Raises:
            ValueError: For anything else.
        """
        text = text.strip()
        if not text:
            return cls.default()
        if text.startswith("#"):
            digits = text[1:]
            if len(digits) != 6 or any(c not in _HEX_DIGITS for c in digits):
                raise ValueError(f"invalid hex color: {text!r}")
            return cls.from_rgb(int(digits, 16))
        preset = _PRESET_LOOKUP.get(_normalize_preset_name(text))
        if preset is None:
            raise ValueError(f"unknown color: {text!r}")
        return cls(*TWITCH_PRESET_COLORS[preset])

    @property
    def rgb(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    @property
    def name(self) -> str | None:
        """Preset name when the color is one of the presets."""
        return _PRESET_BY_RGB.get((self.r, self.g, self.b))

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


__all__ = ["Color", "TWITCH_PRESET_COLORS"]
