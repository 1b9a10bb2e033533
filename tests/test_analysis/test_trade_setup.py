"""
Tests for TargetCalculator.
"""
import pytest

from wavecore.analysis.trade_setup import TargetCalculator
from wavecore.waves.elliott_types import WaveProjection


def projection(step, target, is_major=True, wave='WAVE 3'):
    return WaveProjection(
        step=step, wave=wave, label='3', fib_ratio='1.618',
        target=target, pct_change=0.0, is_major=is_major,
    )


class TestTargetCalculator:
    """Test TargetCalculator."""

    @pytest.fixture
    def calculator(self):
        return TargetCalculator()

    def test_entry_band_and_stop(self, calculator):
        setup = calculator.calculate(100.0, 87.456, [projection(1, 120.0)])

        assert setup.entry_low == 97.0
        assert setup.entry_high == 101.0
        assert setup.stop_loss == 87.46

    def test_first_major_above_by_step(self, calculator):
        projections = [
            projection(1, 95.0),
            projection(2, 130.0),
            projection(3, 110.0),
        ]
        assert calculator.calculate(100.0, 90.0, projections).target == 130.0

    def test_minor_projections_ignored(self, calculator):
        projections = [
            projection(1, 105.0, is_major=False, wave='Wave 2a'),
            projection(2, 112.0),
        ]
        assert calculator.calculate(100.0, 90.0, projections).target == 112.0

    def test_fallback_target(self, calculator):
        projections = [projection(1, 95.0), projection(2, 100.0)]
        assert calculator.calculate(100.0, 90.0, projections).target == 115.0

    def test_fallback_with_no_projections(self, calculator):
        assert calculator.calculate(50.0, 40.0, []).target == 57.5

    def test_custom_bands(self):
        calculator = TargetCalculator(entry_band_low=0.95, entry_band_high=1.05, fallback_target_multiplier=1.5)
        setup = calculator.calculate(200.0, 150.0, [])

        assert setup.entry_low == 190.0
        assert setup.entry_high == 210.0
        assert setup.target == 300.0

    def test_next_major_above_none(self):
        assert TargetCalculator.next_major_above([projection(1, 90.0)], 100.0) is None
