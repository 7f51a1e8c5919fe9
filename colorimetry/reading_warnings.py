"""
Reading Warnings Module

Flags measured colors that are likely to give an unreliable reading.
Warnings are advisory; they never stop an analysis.
"""

from enum import Enum
from typing import Tuple

from config import AnalyzerConfig
from .color_space import HSVColor, RGBColor
from .reference import ReferenceState


class WarningCode(Enum):
    LOW_SATURATION = 'LOW_SATURATION'
    LOW_BRIGHTNESS = 'LOW_BRIGHTNESS'
    OVEREXPOSED = 'OVEREXPOSED'
    REFERENCE_NOT_CALIBRATED = 'REFERENCE_NOT_CALIBRATED'

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    WarningCode.LOW_SATURATION: 'Low saturation - check reagent dose or dilution',
    WarningCode.LOW_BRIGHTNESS: 'Low brightness - check lighting',
    WarningCode.OVEREXPOSED: 'Overexposed - reduce lighting',
    WarningCode.REFERENCE_NOT_CALIBRATED: 'Reference not calibrated - accuracy may suffer',
}


class WarningEvaluator:
    """Applies the fixed reading-quality checks in order."""

    def __init__(self, config: dict = None):
        self.config = config or AnalyzerConfig.WARNINGS

    def evaluate(self,
                 hsv: HSVColor,
                 rgb: RGBColor,
                 reference_state: ReferenceState) -> Tuple[WarningCode, ...]:
        """
        Collect warnings for one reading.

        Args:
            hsv: Measured (corrected) color
            rgb: Raw sampled color
            reference_state: Reference snapshot used for the reading

        Returns:
            Tuple of warning codes in check order
        """
        cfg = self.config
        warnings = []

        if hsv.s < cfg['LOW_SATURATION']:
            warnings.append(WarningCode.LOW_SATURATION)

        if hsv.v < cfg['LOW_BRIGHTNESS']:
            warnings.append(WarningCode.LOW_BRIGHTNESS)

        if hsv.v > cfg['OVEREXPOSED_VALUE'] and hsv.s < cfg['OVEREXPOSED_SATURATION']:
            warnings.append(WarningCode.OVEREXPOSED)

        if not reference_state.calibrated:
            warnings.append(WarningCode.REFERENCE_NOT_CALIBRATED)

        return tuple(warnings)
