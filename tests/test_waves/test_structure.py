"""
Tests for structural wave identification.
"""
import pytest

from wavecore.shared.types import Pivot, PivotType
from wavecore.waves.elliott_types import StructuralWaves
from wavecore.waves.structure import find_structural_waves


def make_pivots(prices, first=PivotType.LOW):
    other = PivotType.HIGH if first == PivotType.LOW else PivotType.LOW
    return [
        Pivot(index=i * 5, time=str(i), price=p, type=first if i % 2 == 0 else other)
        for i, p in enumerate(prices)
    ]


class TestBullStructure:
    """Test bullish anchor search."""

    def test_simple_impulse(self):
        pivots = make_pivots([100, 120, 110, 150, 135, 145])
        assert find_structural_waves(pivots, True) == StructuralWaves(0, 1, 2, 3, 4)

    def test_w1_stops_at_break(self):
        # 107 is below 0.9 * 120, so wave 1 ends at 120
        pivots = make_pivots([100, 120, 107, 125, 115, 160, 150])
        waves = find_structural_waves(pivots, True)

        assert waves == StructuralWaves(origin=0, w1=1, w2=2, w3=5, w4=6)

    def test_w1_extends_without_break(self):
        # 110 holds above 0.9 * 120, so the scan continues to 125
        pivots = make_pivots([100, 120, 110, 125, 115, 160, 150])
        waves = find_structural_waves(pivots, True)

        assert waves.w1 == 3
        assert waves.w2 == 4
        assert waves.w3 == 5

    def test_w3_at_last_pivot_sets_w4_to_w3(self):
        pivots = make_pivots([100, 120, 110, 150])
        waves = find_structural_waves(pivots, True)

        assert waves.w3 == 3
        assert waves.w4 == 3

    def test_origin_not_after_w3(self):
        # The overall low (90) comes after the high; origin is searched up to W3 only
        pivots = make_pivots([100, 150, 90, 120])
        waves = find_structural_waves(pivots, True)

        assert waves.w3 == 1
        assert waves.origin == 0


class TestBearStructure:
    """Test bearish anchor search."""

    def test_simple_decline(self):
        pivots = make_pivots([200, 180, 199, 170, 185, 140, 150], first=PivotType.HIGH)
        waves = find_structural_waves(pivots, False)

        assert waves == StructuralWaves(origin=0, w1=1, w2=2, w3=5, w4=6)

    def test_adjacent_origin_and_w3(self):
        pivots = make_pivots([99.5, 110.5, 99.5])
        waves = find_structural_waves(pivots, False)

        assert waves == StructuralWaves(1, 2, 2, 2, 2)


class TestWindowAndEdges:
    """Test window handling and degenerate input."""

    @pytest.mark.parametrize("prices", [[], [100], [100, 110]])
    def test_fewer_than_three_pivots(self, prices):
        waves = find_structural_waves(make_pivots(prices), True)
        assert waves.as_tuple() == (0, 0, 0, 0, 0)

    def test_only_recent_window_searched(self):
        # The first five pivots hold the global extremes but fall outside the window
        prices = [10, 500, 12, 480, 11] + [100 + (i % 2) * 10 + i for i in range(20)]
        pivots = make_pivots(prices)
        waves = find_structural_waves(pivots, True)

        assert all(idx >= 5 for idx in waves.as_tuple())

    def test_anchor_ordering(self):
        pivots = make_pivots([100, 130, 115, 170, 150, 165, 140, 180, 160])
        for is_bull in (True, False):
            w = find_structural_waves(pivots, is_bull)
            assert w.w1 <= w.w2 <= w.w3 <= w.w4
            assert min(w.as_tuple()) >= 0
            assert max(w.as_tuple()) < len(pivots)
