import pytest

from fluentkit.textstyle import Font, FontWeight, TextStyle, default_family


def test_default_family_used_when_none_given():
    style = TextStyle()
    assert style.family == default_family()
    assert style.body.family == default_family()


@pytest.mark.parametrize(
    "name,size",
    [
        ("caption", 12),
        ("body", 13),
        ("body_strong", 13),
        ("subtitle", 20),
        ("title", 28),
        ("title_large", 40),
        ("display", 68),
    ],
)
def test_ramp_sizes(name, size):
    style = TextStyle("Example")
    font = getattr(style, name)
    assert font.pixel_size == size
    assert font.family == "Example"


def test_weights():
    style = TextStyle("Example")
    assert style.caption.weight == FontWeight.NORMAL
    assert style.body.weight == FontWeight.NORMAL
    for font in (style.body_strong, style.subtitle, style.title, style.title_large, style.display):
        assert font.weight == FontWeight.DEMI_BOLD


def test_property_change_emits():
    style = TextStyle("Example")
    seen = []
    style.signal("title_changed").connect(lambda: seen.append(style.title))
    replacement = Font("Other", 30)
    style.title = replacement
    assert seen == [replacement]