import pytest

from domain_browser.core.colors import HslColor, color_for


def test_endpoints():
    assert color_for(0) == HslColor(hue=0.0, saturation=80.0, lightness=90.0)

    top = color_for(100)
    assert top.hue == pytest.approx(120.0)
    assert top.lightness == pytest.approx(50.0)


def test_hue_increases_and_lightness_decreases():
    values = list(range(0, 101, 5)) + [33.3, 33.4]
    values.sort()
    colors = [color_for(v) for v in values]

    for lo, hi in zip(colors, colors[1:]):
        assert lo.hue < hi.hue
        assert lo.lightness > hi.lightness
        assert lo.saturation == hi.saturation


def test_out_of_range_values_are_clamped():
    assert color_for(-5) == color_for(0)
    assert color_for(150) == color_for(100)


@pytest.mark.parametrize("value", ["abc", "", None, float("nan"), "  "])
def test_non_numeric_values_have_no_color(value):
    assert color_for(value) is None


def test_numeric_strings_are_coerced():
    assert color_for("55").hue == pytest.approx(66.0)


def test_css_rendering():
    assert color_for(50).to_css() == "hsl(60deg 80% 70%)"
