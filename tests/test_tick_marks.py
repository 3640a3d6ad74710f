"""
Tests for src/model/tick_marks.py
"""

import pytest

from src.model.tick_marks import Tier, TickMark, TickMarkGroup


class TestTickMarkGroupConstructors:
    """Tests for the stock tick mark layouts."""

    def test_center(self):
        group = TickMarkGroup.center(Tier.TWO)
        assert list(group) == [TickMark(0.5, Tier.TWO)]

    def test_min_max(self):
        group = TickMarkGroup.min_max(Tier.ONE)
        assert group.positions() == (0.0, 1.0)
        assert all(m.tier == Tier.ONE for m in group)

    def test_min_max_and_center(self):
        """Min/max use the first tier, center the second."""
        group = TickMarkGroup.min_max_and_center(Tier.TWO, Tier.THREE)
        assert list(group) == [
            TickMark(0.0, Tier.TWO),
            TickMark(0.5, Tier.THREE),
            TickMark(1.0, Tier.TWO),
        ]

    def test_subdivided_center_and_quarters(self):
        group = TickMarkGroup.subdivided(1, 2, 0)
        assert group.positions() == (0.25, 0.5, 0.75)
        tiers = {m.position: m.tier for m in group}
        assert tiers[0.5] == Tier.ONE
        assert tiers[0.25] == Tier.TWO
        assert tiers[0.75] == Tier.TWO

    def test_subdivided_with_sides(self):
        group = TickMarkGroup.subdivided(1, 0, 0, sides_tier=Tier.THREE)
        assert group.positions() == (0.0, 0.5, 1.0)

    def test_subdivided_tenths(self):
        group = TickMarkGroup.subdivided(9, 0, 0)
        assert len(group) == 9
        assert group.positions()[0] == pytest.approx(0.1)
        assert group.positions()[-1] == pytest.approx(0.9)

    def test_from_normal_tiers(self):
        group = TickMarkGroup.from_normal_tiers([(0.8, Tier.ONE), (0.2, Tier.TWO)])
        assert group.positions() == (0.2, 0.8)


class TestTickMarkGroupBehavior:
    """Tests for ordering, validation and equality."""

    def test_sorted_by_position(self):
        group = TickMarkGroup([TickMark(0.9, Tier.ONE), TickMark(0.1, Tier.ONE)])
        assert group.positions() == (0.1, 0.9)

    def test_rejects_out_of_range_position(self):
        with pytest.raises(ValueError):
            TickMarkGroup([TickMark(1.5, Tier.ONE)])

    def test_equality(self):
        assert TickMarkGroup.center(Tier.TWO) == TickMarkGroup.center(Tier.TWO)
        assert TickMarkGroup.center(Tier.TWO) != TickMarkGroup.center(Tier.ONE)

    def test_hashable(self):
        assert len({TickMarkGroup.center(Tier.TWO), TickMarkGroup.center(Tier.TWO)}) == 1

    def test_empty_group(self):
        assert len(TickMarkGroup()) == 0
