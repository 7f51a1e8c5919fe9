"""
Reference Calibration Module

Holds the color of the white reference sticker and scales later samples so
that the sticker would read as pure white, compensating for tinted lighting.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from .color_space import RGBColor, round_half_up

logger = logging.getLogger(__name__)

WHITE = RGBColor(255, 255, 255)


@dataclass(frozen=True)
class ReferenceState:
    """Snapshot of the reference calibration."""
    calibrated: bool = False
    reference_color: RGBColor = field(default=WHITE)

    def to_dict(self) -> dict:
        return {
            'calibrated': self.calibrated,
            'reference_color': list(self.reference_color.as_tuple()),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ReferenceState':
        r, g, b = data.get('reference_color', WHITE.as_tuple())
        return cls(bool(data.get('calibrated', False)), RGBColor(int(r), int(g), int(b)))


class ReferenceCalibrator:
    """Owns the reference state; the only writer is calibrate()."""

    def __init__(self, state: Optional[ReferenceState] = None):
        self._state = state or ReferenceState()
        self._lock = threading.Lock()

    @property
    def state(self) -> ReferenceState:
        with self._lock:
            return self._state

    def calibrate(self, sample: RGBColor) -> ReferenceState:
        """Record sample as the new reference color, replacing any prior one."""
        new_state = ReferenceState(calibrated=True, reference_color=sample)
        with self._lock:
            self._state = new_state
        logger.info("Reference calibrated: %s", sample.to_css())
        return new_state

    def reset(self) -> ReferenceState:
        new_state = ReferenceState()
        with self._lock:
            self._state = new_state
        logger.info("Reference calibration cleared")
        return new_state

    @staticmethod
    def correct(rgb: RGBColor, state: ReferenceState) -> RGBColor:
        """
        Apply per-channel white balance keyed to the reference color.

        Args:
            rgb: Color to correct
            state: Reference snapshot; identity when not calibrated

        Returns:
            Corrected color, each channel clamped to 255
        """
        if not state.calibrated:
            return rgb

        ref = state.reference_color
        channels = []
        for c, ref_c in zip(rgb.as_tuple(), ref.as_tuple()):
            scale = 255 / max(ref_c, 1)
            channels.append(min(255, int(round_half_up(c * scale))))
        return RGBColor(*channels)
