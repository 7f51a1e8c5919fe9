"""
Interpretation Module

Turns a concentration into a qualitative safety status for display.
"""

from dataclasses import dataclass
from typing import Union

from .calibration import Analyte

OK = 'ok'
WARNING = 'warning'
DANGER = 'danger'
UNKNOWN = 'unknown'


@dataclass(frozen=True)
class Interpretation:
    status: str
    label: str


class Interpreter:
    """Fixed per-analyte threshold table."""

    def classify(self, analyte: Union[Analyte, str], value: float) -> Interpretation:
        """
        Classify a reading.

        Args:
            analyte: Analyte member or its string kind
            value: Concentration (pH units or ppm)

        Returns:
            Interpretation; status 'unknown' when the kind is not recognized
        """
        try:
            analyte = Analyte.lookup(analyte)
        except ValueError:
            return Interpretation(UNKNOWN, 'Unknown')

        if analyte is Analyte.PH:
            return self._classify_ph(value)
        return self._classify_nitrogen(value)

    @staticmethod
    def _classify_ph(value: float) -> Interpretation:
        if value < 6.5:
            return Interpretation(DANGER, 'Acidic (danger)')
        if value < 6.8:
            return Interpretation(WARNING, 'Slightly acidic (caution)')
        if value <= 7.4:
            return Interpretation(OK, 'Normal')
        if value <= 7.6:
            return Interpretation(WARNING, 'Slightly alkaline (caution)')
        return Interpretation(DANGER, 'Alkaline (danger)')

    @staticmethod
    def _classify_nitrogen(value: float) -> Interpretation:
        # Ammonia and nitrite share one rule set
        if value <= 0.25:
            return Interpretation(OK, 'Safe')
        if value <= 0.5:
            return Interpretation(WARNING, 'Caution')
        if value <= 1.0:
            return Interpretation(WARNING, 'Stress')
        return Interpretation(DANGER, 'Danger: change water immediately')
