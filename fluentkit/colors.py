"""The Fluent colour palette and accent colour ramps."""

from __future__ import annotations

import functools
from typing import Optional

from .color import Color, with_opacity
from .observable import Observable, Property


class AccentColor(Observable):
    """Seven shades of one accent colour, darkest to lightest."""

    darkest = Property(None)
    darker = Property(None)
    dark = Property(None)
    normal = Property(None)
    light = Property(None)
    lighter = Property(None)
    lightest = Property(None)

    def __init__(
        self,
        darkest: Optional[Color] = None,
        darker: Optional[Color] = None,
        dark: Optional[Color] = None,
        normal: Optional[Color] = None,
        light: Optional[Color] = None,
        lighter: Optional[Color] = None,
        lightest: Optional[Color] = None,
    ) -> None:
        self.darkest = darkest
        self.darker = darker
        self.dark = dark
        self.normal = normal
        self.light = light
        self.lighter = lighter
        self.lightest = lightest


def create_accent_color(primary_color: Color) -> AccentColor:
    """Derive an accent ramp from one colour by varying its opacity."""
    dark = with_opacity(primary_color, 0.9)
    light = with_opacity(primary_color, 0.9)
    darker = with_opacity(dark, 0.8)
    lighter = with_opacity(light, 0.8)
    return AccentColor(
        darkest=with_opacity(darker, 0.7),
        darker=darker,
        dark=dark,
        normal=primary_color,
        light=light,
        lighter=lighter,
        lightest=with_opacity(lighter, 0.7),
    )


def _ramp(*shades: tuple) -> AccentColor:
    return AccentColor(*(Color(*rgb) for rgb in shades))


class Colors(Observable):
    """The fixed greys and accent ramps of the palette."""

    transparent = Property(Color(0, 0, 0, 0))
    black = Property(Color(0, 0, 0))
    white = Property(Color(255, 255, 255))
    grey10 = Property(Color(250, 249, 248))
    grey20 = Property(Color(243, 242, 241))
    grey30 = Property(Color(237, 235, 233))
    grey40 = Property(Color(225, 223, 221))
    grey50 = Property(Color(210, 208, 206))
    grey60 = Property(Color(200, 198, 196))
    grey70 = Property(Color(190, 185, 184))
    grey80 = Property(Color(179, 176, 173))
    grey90 = Property(Color(161, 159, 157))
    grey100 = Property(Color(151, 149, 146))
    grey110 = Property(Color(138, 136, 134))
    grey120 = Property(Color(121, 119, 117))
    grey130 = Property(Color(96, 94, 92))
    grey140 = Property(Color(72, 70, 68))
    grey150 = Property(Color(59, 58, 57))
    grey160 = Property(Color(50, 49, 48))
    grey170 = Property(Color(41, 40, 39))
    grey180 = Property(Color(37, 36, 35))
    grey190 = Property(Color(32, 31, 30))
    grey200 = Property(Color(27, 26, 25))
    grey210 = Property(Color(22, 21, 20))
    grey220 = Property(Color(17, 16, 15))
    yellow = Property(None)
    orange = Property(None)
    red = Property(None)
    magenta = Property(None)
    purple = Property(None)
    blue = Property(None)
    teal = Property(None)
    green = Property(None)

    def __init__(self) -> None:
        self.yellow = _ramp(
            (249, 168, 37), (251, 192, 45), (253, 212, 53), (255, 235, 59),
            (255, 238, 88), (255, 241, 118), (255, 245, 155),
        )
        self.orange = _ramp(
            (153, 61, 7), (172, 68, 8), (209, 88, 10), (247, 99, 12),
            (248, 122, 48), (249, 145, 84), (250, 192, 106),
        )
        self.red = _ramp(
            (143, 10, 21), (162, 11, 24), (185, 13, 28), (232, 17, 35),
            (236, 64, 79), (238, 88, 101), (240, 107, 118),
        )
        self.magenta = _ramp(
            (111, 0, 79), (160, 7, 108), (181, 13, 125), (227, 0, 140),
            (234, 77, 168), (238, 110, 193), (241, 140, 213),
        )
        self.purple = _ramp(
            (44, 15, 118), (61, 15, 153), (78, 17, 174), (104, 33, 122),
            (123, 76, 157), (141, 110, 189), (158, 142, 217),
        )
        self.blue = _ramp(
            (0, 74, 131), (0, 84, 148), (0, 102, 180), (0, 120, 212),
            (38, 140, 220), (76, 160, 224), (96, 171, 228),
        )
        self.teal = _ramp(
            (0, 110, 91), (0, 124, 103), (0, 151, 125), (0, 178, 148),
            (38, 189, 164), (77, 201, 180), (96, 207, 188),
        )
        self.green = _ramp(
            (9, 76, 9), (12, 93, 12), (14, 111, 14), (16, 124, 16),
            (39, 137, 57), (76, 156, 76), (106, 173, 106),
        )

    def create_accent_color(self, primary_color: Color) -> AccentColor:
        """Derive an accent ramp from ``primary_color``."""
        return create_accent_color(primary_color)


@functools.lru_cache(maxsize=None)
def default_colors() -> Colors:
    """The shared palette instance."""
    return Colors()