"""Light/dark theme state and the colours derived from it."""

from __future__ import annotations

import math
import threading
from enum import IntEnum
from typing import Callable, Optional

from .color import Color
from .colors import Colors, default_colors
from .observable import Observable, Property
from .tools import get_wallpaper_file_path


def _qround(value: float) -> int:
    return int(math.floor(value + 0.5))


class DarkMode(IntEnum):
    SYSTEM = 0
    LIGHT = 1
    DARK = 2


def is_system_dark(window_color: Color) -> bool:
    """True when the relative luminance of the window colour is at most half."""
    luminance = (
        window_color.red * 0.2126 + window_color.green * 0.7152 + window_color.blue * 0.0722
    )
    return luminance <= 255.0 / 2


class Theme(Observable):
    """Theme settings; the derived colours follow ``dark`` and ``accent_color``."""

    accent_color = Property(None)
    primary_color = Property(None)
    background_color = Property(None)
    divider_color = Property(None)
    window_background_color = Property(None)
    window_active_background_color = Property(None)
    font_primary_color = Property(None)
    font_secondary_color = Property(None)
    font_tertiary_color = Property(None)
    item_normal_color = Property(None)
    frame_color = Property(None)
    frame_active_color = Property(None)
    item_hover_color = Property(None)
    item_press_color = Property(None)
    item_check_color = Property(None)
    desktop_image_path = Property("")
    dark_mode = Property(DarkMode.LIGHT)
    native_text = Property(False)
    animation_enabled = Property(True)
    blur_behind_window_enabled = Property(False)

    def __init__(self, colors: Optional[Colors] = None, system_dark: bool = False) -> None:
        self.wallpaper_provider: Callable[[], str] = get_wallpaper_file_path
        self._lock = threading.Lock()
        self._system_dark = bool(system_dark)
        palette = colors if colors is not None else default_colors()
        self.accent_color = palette.blue
        self.dark_mode = DarkMode.LIGHT
        self.native_text = False
        self.animation_enabled = True
        self.desktop_image_path = ""
        self.blur_behind_window_enabled = False
        self.refresh_colors()
        self.signal("dark_mode_changed").connect(lambda: self.signal("dark_changed").emit())
        self.signal("dark_changed").connect(self.refresh_colors)
        self.signal("accent_color_changed").connect(self.refresh_colors)
        self.signal("blur_behind_window_enabled_changed").connect(self.check_update_desktop_image)

    @property
    def dark(self) -> bool:
        """Whether the effective appearance is dark."""
        if self.dark_mode == DarkMode.DARK:
            return True
        if self.dark_mode == DarkMode.SYSTEM:
            return self._system_dark
        return False

    @property
    def system_dark(self) -> bool:
        return self._system_dark

    def set_system_dark(self, value: bool) -> None:
        """Record a change of the system appearance and announce it."""
        self._system_dark = bool(value)
        self.signal("dark_changed").emit()

    def refresh_colors(self) -> None:
        """Recompute every derived colour from ``dark`` and the accent colour."""
        dark = self.dark
        accent = self.accent_color

        def pick(dark_value: Color, light_value: Color) -> Color:
            return dark_value if dark else light_value

        def alpha(fraction: float) -> int:
            return _qround(255 * fraction)

        self.primary_color = accent.lighter if dark else accent.dark
        self.background_color = pick(Color(0, 0, 0), Color(255, 255, 255))
        self.divider_color = pick(Color(80, 80, 80), Color(210, 210, 210))
        self.window_background_color = pick(Color(32, 32, 32), Color(237, 237, 237))
        self.window_active_background_color = pick(Color(26, 26, 26), Color(243, 243, 243))
        self.font_primary_color = pick(Color(248, 248, 248), Color(7, 7, 7))
        self.font_secondary_color = pick(Color(222, 222, 222), Color(102, 102, 102))
        self.font_tertiary_color = pick(Color(200, 200, 200), Color(153, 153, 153))
        self.item_normal_color = pick(Color(255, 255, 255, 0), Color(0, 0, 0, 0))
        self.frame_color = pick(Color(56, 56, 56, alpha(0.8)), Color(243, 243, 243, alpha(0.8)))
        self.frame_active_color = pick(
            Color(48, 48, 48, alpha(0.8)), Color(255, 255, 255, alpha(0.8))
        )
        self.item_hover_color = pick(Color(255, 255, 255, alpha(0.06)), Color(0, 0, 0, alpha(0.03)))
        self.item_press_color = pick(Color(255, 255, 255, alpha(0.09)), Color(0, 0, 0, alpha(0.06)))
        self.item_check_color = pick(Color(255, 255, 255, alpha(0.12)), Color(0, 0, 0, alpha(0.09)))

    def check_update_desktop_image(self) -> None:
        """Refresh ``desktop_image_path`` from the wallpaper when blur is enabled."""
        if not self.blur_behind_window_enabled:
            return
        with self._lock:
            path = self.wallpaper_provider()
            if self.desktop_image_path != path:
                self.desktop_image_path = path