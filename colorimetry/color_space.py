"""
Color Space Module

RGB and HSV value types plus the RGB -> HSV conversion used for matching
reagent colors against the calibration tables.
"""

import math
from dataclasses import dataclass


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round with halves going up, unlike the banker's rounding of round()."""
    factor = 10 ** ndigits
    return math.floor(x * factor + 0.5) / factor


@dataclass(frozen=True)
class RGBColor:
    """8-bit RGB color, no alpha."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            c = getattr(self, name)
            if not 0 <= c <= 255:
                raise ValueError(f"channel {name}={c} outside [0, 255]")

    def as_tuple(self):
        return (self.r, self.g, self.b)

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_bgr(self):
        """Channel order used by OpenCV drawing calls."""
        return (self.b, self.g, self.r)


@dataclass(frozen=True)
class HSVColor:
    """Hue in degrees [0, 360), saturation and value in percent [0, 100]."""
    h: int
    s: int
    v: int

    def as_tuple(self):
        return (self.h, self.s, self.v)

    def __str__(self):
        return f"HSV({self.h}°, {self.s}%, {self.v}%)"


class ColorSpaceConverter:
    """Converts RGB colors to integer HSV."""

    @staticmethod
    def rgb_to_hsv(rgb: RGBColor) -> HSVColor:
        """
        Convert an RGB color to HSV.

        Hue uses the hexagonal formula on whichever channel is the maximum.
        All three components are rounded half up to integers; gray input
        yields hue 0 and saturation 0.

        Args:
            rgb: 8-bit RGB color

        Returns:
            HSVColor with h in [0, 360), s and v in [0, 100]
        """
        r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
        c_max = max(r, g, b)
        c_min = min(r, g, b)
        delta = c_max - c_min

        s = 0.0 if c_max == 0 else delta / c_max
        v = c_max

        h = 0.0
        if delta != 0:
            if c_max == r:
                h = (g - b) / delta + (6 if g < b else 0)
            elif c_max == g:
                h = (b - r) / delta + 2
            else:
                h = (r - g) / delta + 4
            h *= 60

        hue = int(round_half_up(h)) % 360
        return HSVColor(hue, int(round_half_up(s * 100)), int(round_half_up(v * 100)))
