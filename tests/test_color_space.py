import pytest

from colorimetry import ColorSpaceConverter, HSVColor, RGBColor
from colorimetry.color_space import round_half_up


@pytest.mark.parametrize("rgb, expected", [
    ((255, 0, 0), (0, 100, 100)),
    ((0, 255, 0), (120, 100, 100)),
    ((0, 0, 255), (240, 100, 100)),
    ((255, 255, 0), (60, 100, 100)),
    ((255, 0, 255), (300, 100, 100)),
    ((0, 0, 0), (0, 0, 0)),
    ((255, 255, 255), (0, 0, 100)),
])
def test_primary_colors(rgb, expected):
    assert ColorSpaceConverter.rgb_to_hsv(RGBColor(*rgb)).as_tuple() == expected


def test_gray_is_achromatic():
    hsv = ColorSpaceConverter.rgb_to_hsv(RGBColor(128, 128, 128))
    assert hsv.h == 0
    assert hsv.s == 0
    assert hsv.v == 50


def test_red_wraps_below_360():
    # max is red with g < b: hue lands just under 360
    hsv = ColorSpaceConverter.rgb_to_hsv(RGBColor(255, 0, 10))
    assert 350 <= hsv.h < 360


def test_mid_green():
    hsv = ColorSpaceConverter.rgb_to_hsv(RGBColor(60, 180, 75))
    assert abs(hsv.h - 127) <= 1
    assert hsv.s == 67
    assert hsv.v == 71


def test_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        RGBColor(256, 0, 0)
    with pytest.raises(ValueError):
        RGBColor(0, -1, 0)


def test_css_and_bgr():
    color = RGBColor(1, 2, 3)
    assert color.to_css() == "rgb(1, 2, 3)"
    assert color.to_bgr() == (3, 2, 1)


def test_hsv_str():
    assert str(HSVColor(120, 55, 80)) == "HSV(120°, 55%, 80%)"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-2.5) == -2
    assert round_half_up(7.125, 2) == 7.13
    assert round_half_up(1.2345, 2) == 1.23
