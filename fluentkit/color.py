"""RGBA colour value and opacity helper."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _qround(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue", "alpha"):
            value = getattr(self, channel)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{channel} must be an integer in 0..255, got {value!r}")

    def rgba(self) -> int:
        """Return the colour packed as 0xAARRGGBB."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_rgba(cls, value: int) -> "Color":
        """Build a colour from a packed 0xAARRGGBB integer."""
        value &= 0xFFFFFFFF
        return cls(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
            alpha=(value >> 24) & 0xFF,
        )

    @property
    def name(self) -> str:
        """The colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


def with_opacity(color: Color, opacity: float) -> Color:
    """Return ``color`` with its alpha replaced by ``opacity`` scaled to 0..255."""
    alpha = _qround(opacity * 255) & 0xFF
    return Color.from_rgba((alpha << 24) | (color.rgba() & 0xFFFFFF))