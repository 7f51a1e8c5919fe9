"""
Configuration settings for the reagent colorimetry pipeline.
Centralized configuration for all modules.
"""

from dataclasses import dataclass


@dataclass
class ReagentColors:
    """HSV anchor colors for the API Freshwater Master Test Kit.

    Each entry is (concentration, hue, saturation, value) with hue in degrees
    and saturation/value in percent, ordered by ascending concentration.
    """

    # Yellow (6.0) -> green (7.0) -> blue (7.6+)
    PH = [
        (6.0, 50, 85, 95),
        (6.4, 60, 75, 90),
        (6.8, 80, 65, 85),
        (7.0, 120, 55, 80),
        (7.2, 150, 60, 75),
        (7.4, 180, 65, 70),
        (7.6, 210, 70, 65),
        (8.0, 230, 75, 60),
    ]

    # Yellow (0) -> green (0.5) -> teal (2) -> blue (4+), ppm
    AMMONIA = [
        (0.0, 50, 90, 95),
        (0.25, 70, 80, 90),
        (0.5, 100, 65, 85),
        (1.0, 140, 55, 80),
        (2.0, 170, 60, 75),
        (4.0, 195, 70, 70),
        (8.0, 220, 75, 65),
    ]

    # Sky blue (0) -> lilac (0.25) -> purple (0.5) -> pink (2) -> magenta (5), ppm
    NITRITE = [
        (0.0, 195, 25, 90),
        (0.25, 250, 35, 85),
        (0.5, 280, 45, 80),
        (1.0, 310, 55, 75),
        (2.0, 330, 65, 70),
        (5.0, 345, 75, 65),
    ]


class AnalyzerConfig:
    """Configuration for the entire colorimetry pipeline."""

    # Region sampling
    SAMPLING = {
        'ROI_RATIO': 0.25,
        'TRIM_FRACTION': 0.1,
        'REFERENCE_RATIO': 0.1,
        'REFERENCE_INSET': 10
    }

    # Weighted HSV distance (hue is the most discriminative channel)
    DISTANCE_WEIGHTS = {
        'HUE': 0.6,
        'SATURATION': 0.25,
        'VALUE': 0.15
    }

    # Interpolation
    INTERPOLATION = {
        'MAX_DISTANCE': 100.0,
        'DECIMALS': 2
    }

    # Reading quality warnings
    WARNINGS = {
        'LOW_SATURATION': 20,
        'LOW_BRIGHTNESS': 30,
        'OVEREXPOSED_VALUE': 95,
        'OVEREXPOSED_SATURATION': 15
    }

    # Image acquisition
    IMAGE_SOURCE = {
        'TIMEOUT': 10.0,
        'USER_AGENT': 'reagent-colorimetry/1.0'
    }

    # Visualization Colors (BGR)
    VIZ_COLORS = {
        'BG_DIM': 0.5,
        'ROI_EDGE': (0, 255, 0),
        'REFERENCE_EDGE': (255, 255, 0),
        'SWATCH_EDGE': (255, 255, 255),
        'LABEL_TEXT': (255, 255, 255),
        'LABEL_BG': (0, 0, 0)
    }

    # Banner color per interpretation status (BGR)
    STATUS_COLOR_MAP = {
        'ok': (94, 197, 34),
        'warning': (11, 158, 245),
        'danger': (68, 68, 239),
        'unknown': (200, 200, 200),
    }
