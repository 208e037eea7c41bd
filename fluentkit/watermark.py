"""Layout of a rotated text watermark tiled over an area."""

from __future__ import annotations

import math
from typing import List, NamedTuple, Tuple

from .color import Color
from .observable import Observable, Property


def _qround(value: float) -> int:
    return int(math.floor(value + 0.5))


class Tile(NamedTuple):
    """One copy of the text: its centre and rotation in degrees."""

    center_x: float
    center_y: float
    angle: int


class Watermark(Observable):
    """Watermark settings; ``tiles`` lays out the repeated text."""

    text = Property("")
    gap = Property((100, 100))
    offset = Property((50, 50))
    text_color = Property(Color(222, 222, 222, 222))
    rotate = Property(22)
    text_size = Property(16)

    def __init__(self, text: str = "", gap: Tuple[int, int] = (100, 100)) -> None:
        self.text = text
        self.gap = gap
        self.offset = (gap[0] // 2, gap[1] // 2)
        self.z = 9999

    def tiles(
        self, width: float, height: float, text_width: float, text_height: float
    ) -> List[Tile]:
        """Place the text, measured as ``text_width`` by ``text_height``, over the area."""
        step_x = _qround(text_width + self.gap[0])
        step_y = _qround(text_height + self.gap[1])
        if step_x <= 0 or step_y <= 0:
            raise ValueError("text size plus gap must be positive in both directions")
        columns = _qround(width / step_x + 1)
        rows = _qround(height / step_y + 1)
        return [
            Tile(
                step_x * c + self.offset[0] + text_width / 2.0,
                step_y * r + self.offset[1] + text_height / 2.0,
                self.rotate,
            )
            for c in range(columns)
            for r in range(rows)
        ]