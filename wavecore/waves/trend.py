"""
Trend classification from pivot slope.
"""
from typing import Sequence

from ..shared.defaults import TREND_LOOKBACK
from ..shared.types import Pivot


def determine_trend(pivots: Sequence[Pivot], lookback: int = TREND_LOOKBACK) -> bool:
    """
    Classify the recent trend as bullish (True) or bearish (False).

    Compares the last pivot against the pivot `lookback` positions back
    (clamped to the first pivot). Fewer than 2 pivots defaults to bullish.
    """
    if len(pivots) < 2:
        return True
    start_idx = max(0, len(pivots) - lookback)
    return pivots[-1].price > pivots[start_idx].price
