"""
Calibration Table Module

Analyte kinds and their empirically derived (concentration, HSV) anchor tables.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Tuple, Union

from config import ReagentColors
from .color_space import HSVColor

logger = logging.getLogger(__name__)


class Analyte(Enum):
    """Supported reagent tests."""
    PH = 'ph'
    AMMONIA = 'nh3'
    NITRITE = 'no2'

    @property
    def display_name(self) -> str:
        return {'ph': 'pH', 'nh3': 'Ammonia', 'no2': 'Nitrite'}[self.value]

    @property
    def unit(self) -> str:
        return '' if self is Analyte.PH else 'ppm'

    @property
    def precision(self) -> int:
        return 1 if self is Analyte.PH else 2

    def format_value(self, value: float) -> str:
        text = f"{value:.{self.precision}f}"
        return f"{text} {self.unit}" if self.unit else text

    @classmethod
    def lookup(cls, kind: Union['Analyte', str]) -> 'Analyte':
        """Strict lookup; raises ValueError for unrecognized kinds."""
        if isinstance(kind, cls):
            return kind
        key = str(kind).strip().lower()
        aliases = {'ammonia': 'nh3', 'nitrite': 'no2'}
        return cls(aliases.get(key, key))

    @classmethod
    def parse(cls, kind: Union['Analyte', str]) -> 'Analyte':
        """Lenient lookup for caller input: unrecognized kinds fall back to pH."""
        try:
            return cls.lookup(kind)
        except ValueError:
            logger.warning("Unknown analyte %r, falling back to pH table", kind)
            return cls.PH


@dataclass(frozen=True)
class CalibrationPoint:
    """One observed reagent color for a known concentration."""
    concentration: float
    hue: int
    saturation: int
    value: int

    @property
    def hsv(self) -> HSVColor:
        return HSVColor(self.hue, self.saturation, self.value)


@dataclass(frozen=True)
class CalibrationTable:
    """Anchor points ordered by strictly increasing concentration."""
    analyte: Analyte
    points: Tuple[CalibrationPoint, ...]

    def __post_init__(self):
        if len(self.points) < 2:
            raise ValueError(f"{self.analyte.name} table needs at least two points")
        previous = None
        for point in self.points:
            if point.concentration < 0:
                raise ValueError(f"Negative concentration {point.concentration}")
            if previous is not None and point.concentration <= previous:
                raise ValueError(
                    f"{self.analyte.name} concentrations must strictly increase "
                    f"({previous} then {point.concentration})")
            previous = point.concentration

    @classmethod
    def from_rows(cls, analyte: Analyte, rows) -> 'CalibrationTable':
        """Build from (concentration, hue, saturation, value) tuples."""
        return cls(analyte, tuple(CalibrationPoint(*row) for row in rows))

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]


CALIBRATION_TABLES = MappingProxyType({
    Analyte.PH: CalibrationTable.from_rows(Analyte.PH, ReagentColors.PH),
    Analyte.AMMONIA: CalibrationTable.from_rows(Analyte.AMMONIA, ReagentColors.AMMONIA),
    Analyte.NITRITE: CalibrationTable.from_rows(Analyte.NITRITE, ReagentColors.NITRITE),
})
