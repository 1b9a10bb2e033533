"""
Swing pivot detection (ZigZag).

A bar is a swing high when its high is strictly above the highs of `depth`
bars on each side, and a swing low when its low is strictly below the lows
of `depth` bars on each side. Confirmed swings are then merged into a
strictly alternating high/low sequence, keeping the most extreme point of
any same-direction run.
"""
import logging
from typing import List, Sequence

import numpy as np

from ..shared.defaults import PIVOT_DEPTH
from ..shared.types import Candle, Pivot, PivotType

logger = logging.getLogger(__name__)


def detect_pivots(candles: Sequence[Candle], depth: int = PIVOT_DEPTH) -> List[Pivot]:
    """
    Detect swing highs and lows.

    Args:
        candles: Candles ordered by ascending time
        depth: Number of bars on each side required to confirm a swing

    Returns:
        Alternating list of pivots (empty if fewer than 2*depth+1 candles)
    """
    if len(candles) < depth * 2 + 1:
        return []

    candidates = _find_swings(candles, depth)
    pivots = _enforce_alternation(candidates)
    logger.debug(f"{len(candidates)} swing candidates -> {len(pivots)} pivots (depth={depth})")
    return pivots


def _find_swings(candles: Sequence[Candle], depth: int) -> List[Pivot]:
    """
    Find all confirmed swing highs and lows, ordered by bar index.

    A bar can qualify as both on degenerate data; the high is listed first.
    """
    highs = np.array([c.high for c in candles], dtype=float)
    lows = np.array([c.low for c in candles], dtype=float)

    swings = []
    for i in range(depth, len(candles) - depth):
        left = slice(i - depth, i)
        right = slice(i + 1, i + depth + 1)

        if np.all(highs[i] > highs[left]) and np.all(highs[i] > highs[right]):
            swings.append(Pivot(index=i, time=candles[i].time, price=float(highs[i]), type=PivotType.HIGH))

        if np.all(lows[i] < lows[left]) and np.all(lows[i] < lows[right]):
            swings.append(Pivot(index=i, time=candles[i].time, price=float(lows[i]), type=PivotType.LOW))

    return swings


def _enforce_alternation(swings: List[Pivot]) -> List[Pivot]:
    """Collapse same-type runs to their most extreme point."""
    pivots: List[Pivot] = []
    for swing in swings:
        if not pivots:
            pivots.append(swing)
            continue

        last = pivots[-1]
        if swing.type != last.type:
            pivots.append(swing)
        elif swing.type == PivotType.HIGH and swing.price > last.price:
            pivots[-1] = swing
        elif swing.type == PivotType.LOW and swing.price < last.price:
            pivots[-1] = swing

    return pivots
