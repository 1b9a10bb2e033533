"""
Confidence scoring against classical Elliott Wave Fibonacci rules.

The last five pivots are read as the end points of waves 1-4. Each rule
adds a fixed number of points, for a maximum of 100:

- Wave 3 is never the shortest (+30)
- Wave 2 retraces 38.2%-78.6% of Wave 1 (+25, or +12 within 23.6%-88.6%)
- Wave 3 extends 1.272x-2.618x Wave 1 (+25, or +12 within 1.0x-3.0x)
- Wave 4 retraces 23.6%-50% of Wave 3 (+20, or +10 within 14.6%-61.8%)
"""
from typing import Sequence, Tuple

from ..shared.types import Pivot

# (lo, hi, points) bands, checked in order; first match wins
W2_RETRACEMENT_BANDS: Tuple[Tuple[float, float, int], ...] = ((0.382, 0.786, 25), (0.236, 0.886, 12))
W3_EXTENSION_BANDS: Tuple[Tuple[float, float, int], ...] = ((1.272, 2.618, 25), (1.0, 3.0, 12))
W4_RETRACEMENT_BANDS: Tuple[Tuple[float, float, int], ...] = ((0.236, 0.500, 20), (0.146, 0.618, 10))
W3_NOT_SHORTEST_POINTS = 30


def ew_confidence(pivots: Sequence[Pivot]) -> int:
    """
    Score how well the most recent pivots match Elliott Wave rules.

    Args:
        pivots: Pivot sequence (only the last five are used)

    Returns:
        Integer score in [0, 100]; 0 when fewer than five pivots exist
    """
    if len(pivots) < 5:
        return 0

    p = [pv.price for pv in pivots[-5:]]
    l1 = abs(p[0] - p[1])
    l2 = abs(p[1] - p[2])
    l3 = abs(p[2] - p[3])
    l4 = abs(p[3] - p[4])

    score = 0
    if l3 >= l1 and l3 >= l4:
        score += W3_NOT_SHORTEST_POINTS

    # Ratio rules are skipped when the divisor leg is flat
    if l1 > 0:
        score += _band_points(l2 / l1, W2_RETRACEMENT_BANDS)
        score += _band_points(l3 / l1, W3_EXTENSION_BANDS)
    if l3 > 0:
        score += _band_points(l4 / l3, W4_RETRACEMENT_BANDS)

    return score


def _band_points(ratio: float, bands: Sequence[Tuple[float, float, int]]) -> int:
    for lo, hi, points in bands:
        if lo <= ratio <= hi:
            return points
    return 0
