"""
Interpolation Module

Maps a measured HSV color to a concentration by locating the nearest anchor
in a calibration table and blending linearly toward its neighbour.
"""

from typing import Sequence, Tuple

from config import AnalyzerConfig
from .calibration import CalibrationPoint
from .color_space import HSVColor, round_half_up


def hue_distance(h1: float, h2: float) -> float:
    """Shortest distance between two hues on the 360 degree circle."""
    diff = abs(h1 - h2)
    return min(diff, 360 - diff)


class Interpolator:
    """Nearest-anchor lookup with linear blending and distance-based confidence."""

    def __init__(self, weights: dict = None, config: dict = None):
        """
        Initialize interpolator.

        Args:
            weights: Optional weights dict, uses AnalyzerConfig.DISTANCE_WEIGHTS if None
            config: Optional config dict, uses AnalyzerConfig.INTERPOLATION if None
        """
        self.weights = weights or AnalyzerConfig.DISTANCE_WEIGHTS
        self.config = config or AnalyzerConfig.INTERPOLATION
        self.max_distance = self.config['MAX_DISTANCE']
        self.decimals = self.config['DECIMALS']

    def color_distance(self, a: HSVColor, b: HSVColor) -> float:
        """Weighted HSV distance with circular hue."""
        return (hue_distance(a.h, b.h) * self.weights['HUE']
                + abs(a.s - b.s) * self.weights['SATURATION']
                + abs(a.v - b.v) * self.weights['VALUE'])

    def confidence(self, distance: float) -> int:
        """100 at distance 0, falling linearly to 0 at MAX_DISTANCE and beyond."""
        score = int(round_half_up((1 - distance / self.max_distance) * 100))
        return max(0, min(100, score))

    def find_closest(self, hsv: HSVColor,
                     table: Sequence[CalibrationPoint]) -> Tuple[int, float]:
        """Index and distance of the nearest anchor; ties keep the first one."""
        closest_idx = 0
        min_dist = float('inf')
        for i, point in enumerate(table):
            dist = self.color_distance(hsv, point.hsv)
            if dist < min_dist:
                min_dist = dist
                closest_idx = i
        return closest_idx, min_dist

    def interpolate(self, hsv: HSVColor,
                    table: Sequence[CalibrationPoint]) -> Tuple[float, int]:
        """
        Estimate concentration for a measured color.

        The nearest anchor is blended toward the next anchor with weight
        d_closest / (d_closest + d_next). When the nearest anchor is the last
        one, the blend goes toward the previous anchor instead.

        Args:
            hsv: Measured color
            table: Anchors ordered by ascending concentration

        Returns:
            Tuple of (value rounded to DECIMALS, confidence 0-100)
        """
        if len(table) == 0:
            raise ValueError("Calibration table is empty")

        closest_idx, min_dist = self.find_closest(hsv, table)
        closest = table[closest_idx]
        value = closest.concentration

        if closest_idx < len(table) - 1:
            neighbour = table[closest_idx + 1]
        elif closest_idx > 0:
            neighbour = table[closest_idx - 1]
        else:
            neighbour = None

        if neighbour is not None:
            dist_to_neighbour = self.color_distance(hsv, neighbour.hsv)
            total = min_dist + dist_to_neighbour
            if total > 0:
                t = min_dist / total
                value = closest.concentration + t * (neighbour.concentration - closest.concentration)

        return round_half_up(value, self.decimals), self.confidence(min_dist)
