"""
Reagent Colorimetry Modules

This package contains the components of the water-test color analysis:
- color_space: RGB/HSV types and conversion
- sampling: ROI / reference patch sampling with trimmed mean
- reference: white reference calibration and correction
- calibration: analytes and their HSV anchor tables
- interpolation: table lookup with confidence scoring
- reading_warnings: reading quality checks
- interpretation: safety classification of a value
- image_source: image acquisition (file, bytes, URL)
"""

from .errors import (
    ColorimetryError,
    ImageAcquisitionError,
    InvalidRegionError,
    InsufficientSampleError,
)
from .color_space import RGBColor, HSVColor, ColorSpaceConverter
from .sampling import Region, ImageSampler
from .reference import ReferenceState, ReferenceCalibrator
from .calibration import Analyte, CalibrationPoint, CalibrationTable, CALIBRATION_TABLES
from .interpolation import Interpolator, hue_distance
from .reading_warnings import WarningCode, WarningEvaluator
from .interpretation import Interpretation, Interpreter
from .image_source import ImageLoader

__all__ = [
    'ColorimetryError',
    'ImageAcquisitionError',
    'InvalidRegionError',
    'InsufficientSampleError',
    'RGBColor',
    'HSVColor',
    'ColorSpaceConverter',
    'Region',
    'ImageSampler',
    'ReferenceState',
    'ReferenceCalibrator',
    'Analyte',
    'CalibrationPoint',
    'CalibrationTable',
    'CALIBRATION_TABLES',
    'Interpolator',
    'hue_distance',
    'WarningCode',
    'WarningEvaluator',
    'Interpretation',
    'Interpreter',
    'ImageLoader',
]
