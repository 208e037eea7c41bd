from fluentkit.color import Color
from fluentkit.rectangle import ArcTo, LineTo, MoveTo, PenStyle, Rectangle


def test_border_valid_thresholds():
    rect = Rectangle()
    assert not rect.border_valid()
    rect.border_width = 0.4
    assert not rect.border_valid()
    rect.border_width = 0.5
    assert rect.border_valid()
    rect.color = Color(0, 0, 0, 0)
    assert not rect.border_valid()


def test_outline_without_border_or_radius():
    path = Rectangle().outline(100, 50)
    assert path[0] == MoveTo(100, 50)
    assert path[1] == LineTo(100, 0)
    assert path[-2] == LineTo(100, 50)


def test_outline_sweeps_full_turn():
    rect = Rectangle()
    rect.radius = [4, 6, 8, 10]
    arcs = [cmd for cmd in rect.outline(200, 100) if isinstance(cmd, ArcTo)]
    assert [a.start_angle for a in arcs] == [0, 90, 180, 270]
    assert sum(a.sweep_angle for a in arcs) == 360
    assert [a.width for a in arcs] == [12, 8, 20, 16]


def test_border_insets_path():
    rect = Rectangle()
    rect.border_width = 2
    path = rect.outline(100, 50)
    assert path[0] == MoveTo(99, 49)
    assert path[3] == LineTo(1, 1)


def test_short_radius_list_is_padded():
    short = Rectangle()
    short.radius = [5]
    full = Rectangle()
    full.radius = [5, 0, 0, 0]
    assert short.outline(80, 40) == full.outline(80, 40)


def test_dash_pattern_applies_to_dash_styles():
    rect = Rectangle()
    assert not rect.uses_dash_pattern
    rect.border_style = PenStyle.CUSTOM_DASH_LINE
    assert rect.uses_dash_pattern


def test_change_signal():
    rect = Rectangle()
    seen = []
    rect.signal("radius_changed").connect(lambda: seen.append(list(rect.radius)))
    rect.radius = [1, 2, 3, 4]
    assert seen == [[1, 2, 3, 4]]