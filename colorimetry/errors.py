"""
Error types raised by the colorimetry modules.
"""


class ColorimetryError(Exception):
    """Base class for all colorimetry failures."""


class ImageAcquisitionError(ColorimetryError):
    """The source image could not be obtained or decoded."""


class InvalidRegionError(ColorimetryError):
    """A sampling rectangle has non-positive size or lies outside the image."""


class InsufficientSampleError(ColorimetryError):
    """No pixels remain after trimming the sampled region."""
