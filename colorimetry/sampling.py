"""
Region Sampling Module

Extracts the reagent region of interest and the white reference patch from a
frame and reduces each to one representative color with a trimmed mean.
"""

import cv2
import numpy as np
from dataclasses import dataclass

from config import AnalyzerConfig
from .color_space import RGBColor, round_half_up
from .errors import InsufficientSampleError, InvalidRegionError


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in pixel coordinates."""
    x: int
    y: int
    width: int
    height: int

    def clamp(self, image_width: int, image_height: int) -> 'Region':
        """Intersect with the image bounds."""
        x0 = max(0, self.x)
        y0 = max(0, self.y)
        x1 = min(image_width, self.x + self.width)
        y1 = min(image_height, self.y + self.height)
        return Region(x0, y0, x1 - x0, y1 - y0)


class ImageSampler:
    """Samples representative colors from BGR frames."""

    def __init__(self, config: dict = None):
        """
        Initialize sampler.

        Args:
            config: Optional config dict, uses AnalyzerConfig.SAMPLING if None
        """
        self.config = config or AnalyzerConfig.SAMPLING
        self.roi_ratio = self.config['ROI_RATIO']
        self.trim_fraction = self.config['TRIM_FRACTION']
        self.reference_ratio = self.config['REFERENCE_RATIO']
        self.reference_inset = self.config['REFERENCE_INSET']

    def roi_region(self, width: int, height: int) -> Region:
        """Centered box covering ROI_RATIO of each dimension."""
        roi_w = int(np.floor(width * self.roi_ratio))
        roi_h = int(np.floor(height * self.roi_ratio))
        x = (width - roi_w) // 2
        y = (height - roi_h) // 2
        return Region(x, y, roi_w, roi_h)

    def reference_region(self, width: int, height: int) -> Region:
        """Square patch anchored at the bottom-right corner with a fixed inset."""
        size = int(np.floor(min(width, height) * self.reference_ratio))
        x = width - size - self.reference_inset
        y = height - size - self.reference_inset
        return Region(x, y, size, size)

    @staticmethod
    def to_bgr(image: np.ndarray) -> np.ndarray:
        """Normalize grayscale and BGRA input to 3-channel BGR."""
        if image.ndim == 3 and image.shape[2] == 1:
            image = image[:, :, 0]
        if image.ndim == 2:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        if image.ndim == 3 and image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
        if image.ndim == 3 and image.shape[2] == 3:
            return image
        raise ValueError(f"Unsupported image shape {image.shape}")

    def trimmed_mean(self, pixels: np.ndarray) -> RGBColor:
        """
        Average RGB pixels after discarding the darkest and brightest ones.

        Pixels are stably sorted by channel sum; the slice
        [floor(n * trim), floor(n * (1 - trim))) is kept and each channel is
        averaged independently, rounding half up.

        Args:
            pixels: (N, 3) array in RGB order

        Returns:
            Representative RGBColor
        """
        pixels = np.asarray(pixels, dtype=np.int64).reshape(-1, 3)
        n = len(pixels)
        start = int(np.floor(n * self.trim_fraction))
        end = int(np.floor(n * (1 - self.trim_fraction)))

        order = np.argsort(pixels.sum(axis=1), kind='stable')
        kept = pixels[order][start:end]

        if len(kept) == 0:
            raise InsufficientSampleError(
                f"No pixels left after trimming a region of {n} pixel(s)")

        mean = kept.sum(axis=0) / len(kept)
        r, g, b = (int(round_half_up(c)) for c in mean)
        return RGBColor(r, g, b)

    def extract_region(self, image: np.ndarray, region: Region) -> RGBColor:
        """
        Reduce one rectangle of the image to its trimmed-mean color.

        Args:
            image: BGR, BGRA or grayscale uint8 image
            region: Rectangle to sample; clamped to the image bounds

        Returns:
            RGBColor of the region
        """
        if region.width <= 0 or region.height <= 0:
            raise InvalidRegionError(f"Region has non-positive size: {region}")

        bgr = self.to_bgr(image)
        h, w = bgr.shape[:2]
        clamped = region.clamp(w, h)
        if clamped.width <= 0 or clamped.height <= 0:
            raise InvalidRegionError(f"Region {region} lies outside the {w}x{h} image")

        patch = bgr[clamped.y:clamped.y + clamped.height,
                    clamped.x:clamped.x + clamped.width]
        rgb_pixels = patch.reshape(-1, 3)[:, ::-1]
        return self.trimmed_mean(rgb_pixels)

    def sample_roi(self, image: np.ndarray) -> RGBColor:
        h, w = image.shape[:2]
        return self.extract_region(image, self.roi_region(w, h))

    def sample_reference(self, image: np.ndarray) -> RGBColor:
        h, w = image.shape[:2]
        return self.extract_region(image, self.reference_region(w, h))
