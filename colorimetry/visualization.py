"""
Visualization utilities for the colorimetry pipeline.
Draws sampled regions, the measured color swatch and a result banner.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from config import AnalyzerConfig
from .color_space import RGBColor
from .sampling import Region


def add_label_to_image(img: np.ndarray,
                       text: str,
                       color: Tuple[int, int, int] = (255, 255, 255),
                       bg_color: Tuple[int, int, int] = (0, 0, 0),
                       position: str = 'top') -> np.ndarray:
    """
    Add a labeled banner to an image.

    Args:
        img: Input image (BGR or grayscale)
        text: Label text
        color: Text color
        bg_color: Banner color
        position: 'top' or 'bottom'

    Returns:
        Copy of the image with the banner drawn
    """
    if img.ndim == 2:
        vis = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    else:
        vis = img.copy()

    h, w = vis.shape[:2]
    font_scale = max(0.3, w / 900.0)
    thickness = max(1, int(w / 450.0))
    bar_h = max(12, int(h * 0.08))

    if position == 'top':
        y_start, y_end = 0, bar_h
        text_y = int(bar_h * 0.7)
    else:
        y_start, y_end = h - bar_h, h
        text_y = h - int(bar_h * 0.3)

    cv2.rectangle(vis, (0, y_start), (w, y_end), bg_color, -1)
    cv2.putText(vis, text, (10, text_y), cv2.FONT_HERSHEY_SIMPLEX,
                font_scale, color, thickness, cv2.LINE_AA)
    return vis


def dim_image(img: np.ndarray, factor: float = 0.5) -> np.ndarray:
    """Dim an image by a constant factor."""
    return (img.astype(float) * factor).astype(np.uint8)


def draw_region(img: np.ndarray,
                region: Region,
                color: Tuple[int, int, int],
                thickness: int = 2) -> np.ndarray:
    """Outline a sampling rectangle."""
    vis = img.copy()
    cv2.rectangle(vis,
                  (region.x, region.y),
                  (region.x + region.width - 1, region.y + region.height - 1),
                  color, thickness)
    return vis


def draw_swatch(img: np.ndarray,
                rgb: RGBColor,
                size: Optional[int] = None,
                edge_color: Tuple[int, int, int] = (255, 255, 255)) -> np.ndarray:
    """Paint a filled square of the measured color in the top-right corner."""
    vis = img.copy()
    h, w = vis.shape[:2]
    size = size or max(8, min(h, w) // 6)
    margin = max(2, size // 4)
    top = min(h - size, int(h * 0.08) + margin)
    left = w - size - margin
    cv2.rectangle(vis, (left, top), (left + size, top + size), rgb.to_bgr(), -1)
    cv2.rectangle(vis, (left, top), (left + size, top + size), edge_color, 1)
    return vis


def annotate_result(image: np.ndarray,
                    roi: Region,
                    reference: Optional[Region],
                    rgb: RGBColor,
                    text: str,
                    status: str = 'unknown',
                    colors: dict = None) -> np.ndarray:
    """
    Compose the single-panel result visualization.

    Args:
        image: Original BGR image
        roi: Sampled reagent region
        reference: Reference patch region, or None when not used
        rgb: Corrected measured color for the swatch
        text: Banner text
        status: Interpretation status, selects the banner color
        colors: Optional color dict, uses AnalyzerConfig.VIZ_COLORS if None

    Returns:
        Annotated BGR image
    """
    colors = colors or AnalyzerConfig.VIZ_COLORS
    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)

    vis = dim_image(image, colors['BG_DIM'])

    # Keep the sampled regions at full brightness
    for region in (roi, reference):
        if region is None:
            continue
        clamped = region.clamp(image.shape[1], image.shape[0])
        if clamped.width > 0 and clamped.height > 0:
            ys = slice(clamped.y, clamped.y + clamped.height)
            xs = slice(clamped.x, clamped.x + clamped.width)
            vis[ys, xs] = image[ys, xs]

    vis = draw_region(vis, roi, colors['ROI_EDGE'])
    if reference is not None:
        vis = draw_region(vis, reference, colors['REFERENCE_EDGE'])

    vis = draw_swatch(vis, rgb, edge_color=colors['SWATCH_EDGE'])

    bg = AnalyzerConfig.STATUS_COLOR_MAP.get(status, colors['LABEL_BG'])
    return add_label_to_image(vis, text, colors['LABEL_TEXT'], bg)
