"""
Image Source Module

Acquires a decoded BGR frame from a file path, encoded bytes, an HTTP(S) URL
(e.g. the camera's capture endpoint) or an in-memory array. This is the only
I/O step of the pipeline; every call returns a freshly allocated buffer.
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np
import requests

from config import AnalyzerConfig
from .errors import ImageAcquisitionError

logger = logging.getLogger(__name__)

ImageSource = Union[np.ndarray, bytes, bytearray, str, Path]


class ImageLoader:
    """Loads images for analysis."""

    def __init__(self, config: dict = None, timeout: float = None):
        """
        Initialize loader.

        Args:
            config: Optional config dict, uses AnalyzerConfig.IMAGE_SOURCE if None
            timeout: Optional request timeout in seconds, overrides the config
        """
        self.config = config or AnalyzerConfig.IMAGE_SOURCE
        self.timeout = timeout if timeout is not None else self.config['TIMEOUT']
        self.user_agent = self.config.get('USER_AGENT', 'reagent-colorimetry')

    def load(self, source: ImageSource) -> np.ndarray:
        """
        Acquire and decode an image.

        Args:
            source: ndarray, encoded bytes, http(s) URL, or filesystem path

        Returns:
            BGR uint8 array owned by the caller (arrays are copied as-is)
        """
        if isinstance(source, np.ndarray):
            if source.size == 0:
                raise ImageAcquisitionError("Empty image array")
            if source.dtype != np.uint8:
                raise ImageAcquisitionError(f"Expected a uint8 image, got {source.dtype}")
            if not (source.ndim == 2 or (source.ndim == 3 and source.shape[2] in (1, 3, 4))):
                raise ImageAcquisitionError(f"Unsupported image shape {source.shape}")
            return source.copy()

        if isinstance(source, (bytes, bytearray)):
            return self.decode(bytes(source))

        text = str(source)
        if text.startswith(('http://', 'https://')):
            return self.decode(self.fetch(text))

        return self.read_file(Path(text))

    def fetch(self, url: str) -> bytes:
        """Download encoded image bytes, bounded by the configured timeout."""
        logger.debug("Fetching image from %s (timeout %.1fs)", url, self.timeout)
        try:
            response = requests.get(
                url,
                timeout=self.timeout,
                headers={'User-Agent': self.user_agent}
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise ImageAcquisitionError(f"Failed to fetch image from {url}: {e}") from e
        return response.content

    @staticmethod
    def decode(data: bytes) -> np.ndarray:
        buffer = np.frombuffer(data, dtype=np.uint8)
        image = cv2.imdecode(buffer, cv2.IMREAD_COLOR) if buffer.size else None
        if image is None:
            raise ImageAcquisitionError("Could not decode image data")
        return image

    @staticmethod
    def read_file(path: Path) -> np.ndarray:
        if not path.is_file():
            raise ImageAcquisitionError(f"Image file not found: {path}")
        image = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if image is None:
            raise ImageAcquisitionError(f"Could not read image: {path}")
        return image
