"""Typography presets for the Fluent type ramp."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .observable import Observable, Property


class FontWeight(IntEnum):
    """Common font weights on the 100..900 scale."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    NORMAL = 400
    MEDIUM = 500
    DEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


@dataclass(frozen=True)
class Font:
    """A font description: family, pixel size and weight."""

    family: str
    pixel_size: int
    weight: int = FontWeight.NORMAL
    bold: bool = False


def default_family() -> str:
    """The family used by default on the current platform."""
    if sys.platform == "win32":
        return "微软雅黑"
    if sys.platform == "darwin":
        return "Helvetica"
    return "Sans Serif"


class TextStyle(Observable):
    """The named fonts of the type ramp, all sharing one family."""

    family = Property("")
    caption = Property(None)
    body = Property(None)
    body_strong = Property(None)
    subtitle = Property(None)
    title = Property(None)
    title_large = Property(None)
    display = Property(None)

    def __init__(self, family: Optional[str] = None) -> None:
        family = default_family() if family is None else family
        self.family = family
        self.caption = Font(family, 12)
        self.body = Font(family, 13)
        self.body_strong = Font(family, 13, FontWeight.DEMI_BOLD)
        self.subtitle = Font(family, 20, FontWeight.DEMI_BOLD)
        self.title = Font(family, 28, FontWeight.DEMI_BOLD)
        self.title_large = Font(family, 40, FontWeight.DEMI_BOLD)
        self.display = Font(family, 68, FontWeight.DEMI_BOLD)