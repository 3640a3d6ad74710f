"""
Tests for NormalParam in src/model/params.py
"""

from src.model import ranges
from src.model.params import Normal, NormalParam


class TestNormalParam:

    def test_update(self):
        param = NormalParam(0.5, 0.5)
        param.update(0.8)
        assert param.value == 0.8
        assert param.default == 0.5

    def test_update_clamps(self):
        param = NormalParam()
        param.update(1.7)
        assert param.value == 1.0
        param.update(-0.2)
        assert param.value == 0.0

    def test_update_nan(self):
        param = NormalParam(0.5, 0.5)
        param.update(float('nan'))
        assert param.value == 0.0

    def test_construction_clamps(self):
        param = NormalParam(3.0, -1.0)
        assert param.value == 1.0
        assert param.default == 0.0

    def test_reset(self):
        param = NormalParam(0.2, 0.6)
        assert not param.is_default
        param.reset()
        assert param.value == 0.6
        assert param.is_default


class TestSharedClamp:
    """Params and ranges clamp through the same Normal helper."""

    def test_ranges_use_params_normal(self):
        assert ranges.Normal is Normal

    def test_param_matches_range_clamp(self):
        for raw in (-0.5, 0.0, 0.3, 1.0, 2.0, float('nan')):
            assert NormalParam(raw).value == ranges.FloatRange.default().snapped(raw)

    def test_default_param_is_min(self):
        assert NormalParam().value == Normal.MIN
