"""
Tick Marks - cosmetic position markers for parameter widgets

A TickMarkGroup is drawn along a slider track or around a knob. Marks have
no effect on value conversion.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np


class Tier(Enum):
    """Visual weight of a tick mark. ONE is the most prominent."""
    ONE = 1
    TWO = 2
    THREE = 3


@dataclass(frozen=True)
class TickMark:
    position: float  # Normalized 0-1
    tier: Tier


class TickMarkGroup:
    """Immutable, position-ordered collection of tick marks."""

    def __init__(self, marks: Iterable[TickMark] = ()):
        ordered = sorted(marks, key=lambda m: (m.position, m.tier.value))
        for mark in ordered:
            if not 0.0 <= mark.position <= 1.0:
                raise ValueError(f"tick mark position {mark.position} outside 0-1")
        self._marks: Tuple[TickMark, ...] = tuple(ordered)

    @classmethod
    def from_normal_tiers(cls, pairs: Iterable[Tuple[float, Tier]]) -> TickMarkGroup:
        return cls(TickMark(float(pos), tier) for pos, tier in pairs)

    @classmethod
    def center(cls, tier: Tier) -> TickMarkGroup:
        """Single mark at the center."""
        return cls([TickMark(0.5, tier)])

    @classmethod
    def min_max(cls, tier: Tier) -> TickMarkGroup:
        return cls([TickMark(0.0, tier), TickMark(1.0, tier)])

    @classmethod
    def min_max_and_center(cls, min_max_tier: Tier, center_tier: Tier) -> TickMarkGroup:
        return cls([
            TickMark(0.0, min_max_tier),
            TickMark(0.5, center_tier),
            TickMark(1.0, min_max_tier),
        ])

    @classmethod
    def subdivided(cls, one: int, two: int, three: int,
                   sides_tier: Optional[Tier] = None) -> TickMarkGroup:
        """
        Evenly subdivide the track.

        `one`, `two` and `three` are the number of interior marks wanted at
        each tier. Each tier spreads its marks over the gaps left by the tiers
        above it (at least one per gap), so subdivided(1, 2, 0) gives a
        center mark plus quarter marks.
        `sides_tier` adds marks at 0 and 1.
        """
        marks = []
        boundaries = np.array([0.0, 1.0])
        for tier, count in ((Tier.ONE, one), (Tier.TWO, two), (Tier.THREE, three)):
            if count <= 0:
                continue
            per_gap = max(1, count // (len(boundaries) - 1))
            new_positions = []
            for start, end in zip(boundaries[:-1], boundaries[1:]):
                inner = np.linspace(start, end, per_gap + 2)[1:-1]
                new_positions.extend(inner.tolist())
            marks.extend(TickMark(round(p, 9), tier) for p in new_positions)
            boundaries = np.unique(np.concatenate([boundaries, new_positions]))
        if sides_tier is not None:
            marks.append(TickMark(0.0, sides_tier))
            marks.append(TickMark(1.0, sides_tier))
        return cls(marks)

    def positions(self) -> Tuple[float, ...]:
        return tuple(m.position for m in self._marks)

    def __iter__(self) -> Iterator[TickMark]:
        return iter(self._marks)

    def __len__(self) -> int:
        return len(self._marks)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TickMarkGroup):
            return NotImplemented
        return self._marks == other._marks

    def __hash__(self) -> int:
        return hash(self._marks)

    def __repr__(self) -> str:
        inner = ", ".join(f"{m.position:g}:{m.tier.name}" for m in self._marks)
        return f"TickMarkGroup({inner})"
