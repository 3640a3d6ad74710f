"""
NormalParam - the stored state of one parameter widget

Holds the current normalized position and the position to return to on reset.
`Normal` is shared with the ranges so both clamp the same way.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


class Normal:
    """Helpers for normalized 0-1 values."""
    MIN = 0.0
    CENTER = 0.5
    MAX = 1.0

    @staticmethod
    def clamp(value: float) -> float:
        """Clamp to 0-1. NaN becomes 0."""
        if math.isnan(value):
            return Normal.MIN
        return max(Normal.MIN, min(Normal.MAX, float(value)))


@dataclass
class NormalParam:
    """Normalized value (0-1) plus its default."""
    value: float = Normal.MIN
    default: float = Normal.MIN

    def __post_init__(self):
        self.value = Normal.clamp(self.value)
        self.default = Normal.clamp(self.default)

    def update(self, normal: float):
        """Set a new normalized value (clamped)."""
        self.value = Normal.clamp(normal)

    def reset(self):
        """Return to the default position."""
        self.value = self.default

    @property
    def is_default(self) -> bool:
        return self.value == self.default
