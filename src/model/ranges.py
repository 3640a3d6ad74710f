"""
Value Ranges - normalized <-> real value conversion

A widget only ever knows a normalized position (0.0 - 1.0). A range turns that
position into something meaningful and back again:
- FloatRange: linear float values
- IntRange: discrete int values (widget "steps" when moved)
- LogDBRange: decibels, slow around 0 dB and faster further away
- FreqRange: frequency, every octave of 20 Hz - 20480 Hz gets equal travel

All ranges are immutable once built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from src.model.params import Normal, NormalParam


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


@dataclass(frozen=True)
class FloatRange:
    """Linear range of float values."""
    min: float
    max: float
    default_value: float = 0.0

    def __post_init__(self):
        if not self.max > self.min:
            raise ValueError(f"max ({self.max}) must be greater than min ({self.min})")
        if not self.min <= self.default_value <= self.max:
            raise ValueError(f"default {self.default_value} outside {self.min}..{self.max}")

    @classmethod
    def default(cls) -> FloatRange:
        """0.0 - 1.0, default 0.0."""
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def default_bipolar(cls) -> FloatRange:
        """-1.0 - 1.0, default 0.0 (center)."""
        return cls(-1.0, 1.0, 0.0)

    @property
    def span(self) -> float:
        return self.max - self.min

    def map_to_normal(self, value: float) -> float:
        value = max(self.min, min(self.max, value))
        return Normal.clamp((value - self.min) / self.span)

    def unmap_to_value(self, normal: float) -> float:
        return self.min + Normal.clamp(normal) * self.span

    def snapped(self, normal: float) -> float:
        return Normal.clamp(normal)

    def normal_param(self, value: float, default: float) -> NormalParam:
        return NormalParam(self.map_to_normal(value), self.map_to_normal(default))

    def default_normal_param(self) -> NormalParam:
        return self.normal_param(self.default_value, self.default_value)


@dataclass(frozen=True)
class IntRange:
    """
    Discrete range of int values.

    Widgets bound to an IntRange should store `snapped(normal)` rather than the
    raw normal so the handle jumps between step positions. A normal that falls
    exactly halfway between two steps rounds up.
    """
    min: int
    max: int
    default_value: Optional[int] = None

    def __post_init__(self):
        if not self.max > self.min:
            raise ValueError(f"max ({self.max}) must be greater than min ({self.min})")
        if self.default_value is None:
            object.__setattr__(self, 'default_value', self.min)
        elif not self.min <= self.default_value <= self.max:
            raise ValueError(f"default {self.default_value} outside {self.min}..{self.max}")

    @property
    def span(self) -> int:
        return self.max - self.min

    def map_to_normal(self, value: int) -> float:
        value = max(self.min, min(self.max, int(value)))
        return (value - self.min) / self.span

    def unmap_to_value(self, normal: float) -> int:
        return _round_half_up(Normal.clamp(normal) * self.span) + self.min

    def snapped(self, normal: float) -> float:
        """Normal of the nearest representable int value."""
        return self.map_to_normal(self.unmap_to_value(normal))

    def normal_param(self, value: int, default: int) -> NormalParam:
        return NormalParam(self.map_to_normal(value), self.map_to_normal(default))

    def default_normal_param(self) -> NormalParam:
        return self.normal_param(self.default_value, self.default_value)


@dataclass(frozen=True)
class LogDBRange:
    """
    Logarithmic-feel range of decibel values.

    0 dB sits at `zero_position`. Each side follows a squared curve, so the
    response is flat around 0 dB and steepens towards min_db / max_db.
    """
    min_db: float
    max_db: float
    zero_position: float = Normal.CENTER

    def __post_init__(self):
        if not self.max_db > self.min_db:
            raise ValueError(f"max_db ({self.max_db}) must be greater than min_db ({self.min_db})")
        if self.max_db < 0.0:
            raise ValueError(f"max_db ({self.max_db}) must be >= 0")
        if self.min_db > 0.0:
            raise ValueError(f"min_db ({self.min_db}) must be <= 0")

        # A one-sided range puts 0 dB at the matching end
        if self.min_db == 0.0:
            zero = Normal.MIN
        elif self.max_db == 0.0:
            zero = Normal.MAX
        else:
            zero = Normal.clamp(self.zero_position)
        object.__setattr__(self, 'zero_position', zero)

    @property
    def default_value(self) -> float:
        return 0.0

    def map_to_normal(self, value: float) -> float:
        zp = self.zero_position
        if value == 0.0:
            return zp
        if value < 0.0:
            if value <= self.min_db:
                return Normal.MIN
            neg_normal = value / self.min_db
            return Normal.clamp((1.0 - math.sqrt(neg_normal)) * zp)
        if value >= self.max_db:
            return Normal.MAX
        pos_normal = value / self.max_db
        return Normal.clamp(zp + math.sqrt(pos_normal) * (1.0 - zp))

    def unmap_to_value(self, normal: float) -> float:
        normal = Normal.clamp(normal)
        zp = self.zero_position
        if normal == zp:
            return 0.0
        if normal < zp:
            neg_normal = 1.0 - normal / zp
            return self.min_db * neg_normal * neg_normal
        pos_normal = (normal - zp) / (1.0 - zp)
        return self.max_db * pos_normal * pos_normal

    def snapped(self, normal: float) -> float:
        return Normal.clamp(normal)

    def normal_param(self, value: float, default: float) -> NormalParam:
        return NormalParam(self.map_to_normal(value), self.map_to_normal(default))

    def default_normal_param(self) -> NormalParam:
        return self.normal_param(self.default_value, self.default_value)


# The full audible spectrum the frequency mapping is built on: 10 octaves
SPECTRUM_MIN_HZ = 20.0
SPECTRUM_OCTAVES = 10
SPECTRUM_MAX_HZ = SPECTRUM_MIN_HZ * 2 ** SPECTRUM_OCTAVES  # 20480


def _hz_to_spectrum(hz: float) -> float:
    return math.log2(hz / SPECTRUM_MIN_HZ) / SPECTRUM_OCTAVES


def _spectrum_to_hz(spectrum: float) -> float:
    return SPECTRUM_MIN_HZ * 2.0 ** (spectrum * SPECTRUM_OCTAVES)


@dataclass(frozen=True)
class FreqRange:
    """
    Octave-spaced range of frequency values (Hz).

    Frequencies are placed on the 10 octave spectrum 20 Hz - 20480 Hz, then
    the [min_hz, max_hz] slice of that spectrum is stretched over 0-1. With
    the default bounds every 0.1 of travel is one octave.
    """
    min_hz: float = SPECTRUM_MIN_HZ
    max_hz: float = SPECTRUM_MAX_HZ
    default_value: float = 1000.0

    def __post_init__(self):
        if self.min_hz <= 0.0:
            raise ValueError(f"min_hz ({self.min_hz}) must be > 0")
        if not self.max_hz > self.min_hz:
            raise ValueError(f"max_hz ({self.max_hz}) must be greater than min_hz ({self.min_hz})")
        if not self.min_hz <= self.default_value <= self.max_hz:
            raise ValueError(f"default {self.default_value} outside {self.min_hz}..{self.max_hz}")

    @property
    def _spectrum_start(self) -> float:
        return _hz_to_spectrum(self.min_hz)

    @property
    def _spectrum_span(self) -> float:
        return _hz_to_spectrum(self.max_hz) - self._spectrum_start

    def map_to_normal(self, value: float) -> float:
        value = max(self.min_hz, min(self.max_hz, value))
        spectrum = _hz_to_spectrum(value)
        return Normal.clamp((spectrum - self._spectrum_start) / self._spectrum_span)

    def unmap_to_value(self, normal: float) -> float:
        # Pin the ends so 0 and 1 come back exact
        normal = Normal.clamp(normal)
        if normal == Normal.MIN:
            return self.min_hz
        if normal == Normal.MAX:
            return self.max_hz
        spectrum = self._spectrum_start + normal * self._spectrum_span
        return _spectrum_to_hz(spectrum)

    def snapped(self, normal: float) -> float:
        return Normal.clamp(normal)

    def normal_param(self, value: float, default: float) -> NormalParam:
        return NormalParam(self.map_to_normal(value), self.map_to_normal(default))

    def default_normal_param(self) -> NormalParam:
        return self.normal_param(self.default_value, self.default_value)


def range_from_config(param: dict):
    """
    Build a range from a config dict (see PANEL_PARAMS in src/config).
    'range' picks the type: float, int, db, freq.
    """
    kind = param.get('range', 'float')
    if kind == 'float':
        return FloatRange(float(param.get('min', 0.0)), float(param.get('max', 1.0)),
                          float(param.get('default', 0.0)))
    if kind == 'int':
        return IntRange(int(param.get('min', 0)), int(param.get('max', 1)),
                        param.get('default'))
    if kind == 'db':
        return LogDBRange(float(param['min']), float(param['max']),
                          float(param.get('zero_position', Normal.CENTER)))
    if kind == 'freq':
        return FreqRange(float(param.get('min', SPECTRUM_MIN_HZ)),
                         float(param.get('max', SPECTRUM_MAX_HZ)),
                         float(param.get('default', 1000.0)))
    raise ValueError(f"Unknown range type: {kind!r}")
