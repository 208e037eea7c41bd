import pytest

from fluentkit.color import Color
from fluentkit.colors import Colors, create_accent_color
from fluentkit.theme import DarkMode, Theme, is_system_dark


@pytest.fixture
def palette():
    return Colors()


def test_is_system_dark():
    assert is_system_dark(Color(0, 0, 0))
    assert not is_system_dark(Color(255, 255, 255))


def test_light_defaults(palette):
    theme = Theme(palette)
    assert theme.dark is False
    assert theme.primary_color == palette.blue.dark
    assert theme.background_color == Color(255, 255, 255)
    assert theme.font_primary_color == Color(7, 7, 7)


def test_dark_mode_switches_colors(palette):
    theme = Theme(palette)
    theme.dark_mode = DarkMode.DARK
    assert theme.dark is True
    assert theme.primary_color == palette.blue.lighter
    assert theme.window_background_color == Color(32, 32, 32)
    assert theme.item_normal_color == Color(255, 255, 255, 0)


def test_frame_alpha_matches_between_modes(palette):
    theme = Theme(palette)
    light_alpha = theme.frame_color.alpha
    theme.dark_mode = DarkMode.DARK
    assert theme.frame_color.alpha == light_alpha == theme.frame_active_color.alpha


def test_system_mode_follows_system(palette):
    theme = Theme(palette, system_dark=True)
    theme.dark_mode = DarkMode.SYSTEM
    assert theme.dark is True
    seen = []
    theme.signal("dark_changed").connect(lambda: seen.append(theme.dark))
    theme.set_system_dark(False)
    assert seen == [False]
    assert theme.background_color == Color(255, 255, 255)


def test_accent_change_refreshes(palette):
    theme = Theme(palette)
    accent = create_accent_color(Color(10, 20, 30))
    theme.accent_color = accent
    assert theme.primary_color == accent.dark


def test_desktop_image_only_when_blur_enabled(palette):
    theme = Theme(palette)
    theme.wallpaper_provider = lambda: "/pictures/wall.png"
    theme.check_update_desktop_image()
    assert theme.desktop_image_path == ""
    theme.blur_behind_window_enabled = True
    assert theme.desktop_image_path == "/pictures/wall.png"


def test_desktop_image_change_notifies_once(palette):
    theme = Theme(palette)
    theme.wallpaper_provider = lambda: "/pictures/wall.png"
    seen = []
    theme.signal("desktop_image_path_changed").connect(lambda: seen.append(1))
    theme.blur_behind_window_enabled = True
    theme.check_update_desktop_image()
    assert len(seen) == 1