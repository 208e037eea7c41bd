"""A rectangle with individually rounded corners and an optional border."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import List, NamedTuple, Union

from .color import Color
from .observable import Observable, Property


class PenStyle(IntEnum):
    NO_PEN = 0
    SOLID_LINE = 1
    DASH_LINE = 2
    DOT_LINE = 3
    DASH_DOT_LINE = 4
    DASH_DOT_DOT_LINE = 5
    CUSTOM_DASH_LINE = 6


class MoveTo(NamedTuple):
    x: float
    y: float


class LineTo(NamedTuple):
    x: float
    y: float


class ArcTo(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    start_angle: float
    sweep_angle: float


PathCommand = Union[MoveTo, LineTo, ArcTo]


class Rectangle(Observable):
    """Corner radii are given as [top-left, top-right, bottom-right, bottom-left]."""

    color = Property(Color(255, 255, 255))
    radius = Property([0, 0, 0, 0])
    border_width = Property(0.0)
    border_color = Property(Color(0, 0, 0))
    border_style = Property(PenStyle.SOLID_LINE)
    dash_pattern = Property([])

    def border_valid(self) -> bool:
        """Whether a border is drawn: width rounds to at least 1 and fill is visible."""
        rounded = int(math.floor(self.border_width + 0.5))
        return rounded >= 1 and self.color.alpha > 0

    @property
    def uses_dash_pattern(self) -> bool:
        return self.border_style in (PenStyle.DASH_LINE, PenStyle.CUSTOM_DASH_LINE)

    def outline(self, width: float, height: float) -> List[PathCommand]:
        """The closed outline, traced counter-clockwise from the bottom-right corner."""
        left, top, right, bottom = 0.0, 0.0, float(width), float(height)
        if self.border_valid():
            half = self.border_width / 2.0
            left, top, right, bottom = left + half, top + half, right - half, bottom - half
        r = (list(self.radius) + [0, 0, 0, 0])[:4] if len(self.radius) < 4 else list(self.radius)
        return [
            MoveTo(right, bottom - r[2]),
            LineTo(right, top + r[1]),
            ArcTo(right - r[1] * 2, top, r[1] * 2, r[1] * 2, 0, 90),
            LineTo(left + r[0], top),
            ArcTo(left, top, r[0] * 2, r[0] * 2, 90, 90),
            LineTo(left, bottom - r[3]),
            ArcTo(left, bottom - r[3] * 2, r[3] * 2, r[3] * 2, 180, 90),
            LineTo(right - r[2], bottom),
            ArcTo(right - r[2] * 2, bottom - r[2] * 2, r[2] * 2, r[2] * 2, 270, 90),
        ]