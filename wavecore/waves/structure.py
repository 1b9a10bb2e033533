"""
Structural wave identification: origin and the ends of waves 1-4.

Only the most recent pivots are searched, keeping the count anchored to
current price action. Bullish and bearish counts share one routine; the
bearish count flips the comparator and uses the mirrored W1 break threshold.

Bullish: W3 is the highest pivot, origin the lowest pivot up to W3.
Bearish: origin is the highest pivot, W3 the lowest pivot from origin on.
The search order differs between the two and is kept as is.
"""
import logging
import operator
from typing import Callable, Sequence

from ..shared.defaults import PIVOT_WINDOW, W1_BREAK_BULL, W1_BREAK_BEAR
from ..shared.types import Pivot
from .elliott_types import StructuralWaves

logger = logging.getLogger(__name__)

Comparator = Callable[[float, float], bool]


def find_structural_waves(
    pivots: Sequence[Pivot],
    is_bull: bool,
    window: int = PIVOT_WINDOW
) -> StructuralWaves:
    """
    Locate origin, W1, W2, W3 and W4 within the last `window` pivots.

    Args:
        pivots: Alternating pivot sequence
        is_bull: Trend direction from determine_trend
        window: Number of most recent pivots to search

    Returns:
        StructuralWaves with indices into `pivots`
    """
    size = len(pivots)
    recent_start = max(0, size - window)

    if size < 3:
        return StructuralWaves(recent_start, recent_start, recent_start, recent_start, recent_start)

    if is_bull:
        waves = _search(pivots, recent_start, better=operator.gt, break_ratio=W1_BREAK_BULL, extreme_first=True)
    else:
        waves = _search(pivots, recent_start, better=operator.lt, break_ratio=W1_BREAK_BEAR, extreme_first=False)

    logger.debug(f"Structural waves ({'bull' if is_bull else 'bear'}): {waves.as_tuple()}")
    return waves


def _search(
    pivots: Sequence[Pivot],
    recent_start: int,
    better: Comparator,
    break_ratio: float,
    extreme_first: bool
) -> StructuralWaves:
    """
    Generic anchor search.

    `better(a, b)` is True when price a lies further in the trend direction
    than b (greater for bull, smaller for bear).

    Args:
        extreme_first: Find W3 over the whole window first, then the origin
                       before it (bull). Otherwise find the origin over the
                       window first, then W3 after it (bear).
    """
    size = len(pivots)

    def worse(a: float, b: float) -> bool:
        return better(b, a)

    if extreme_first:
        w3 = _extreme_index(pivots, recent_start, size, better)
        origin = _extreme_index(pivots, recent_start, w3 + 1, worse)
    else:
        origin = _extreme_index(pivots, recent_start, size, worse)
        w3 = _extreme_index(pivots, origin, size, better)

    w1 = _first_impulse_end(pivots, origin, w3, better, break_ratio)

    # Deepest pullback between W1 and W3
    w2 = w1
    if w3 > w1 + 1:
        w2 = _extreme_index(pivots, w1, w3, worse)

    # Deepest pullback after W3
    w4 = w3
    if w3 < size - 1:
        w4 = _extreme_index(pivots, w3 + 1, size, worse)

    return StructuralWaves(origin=origin, w1=w1, w2=w2, w3=w3, w4=w4)


def _extreme_index(pivots: Sequence[Pivot], start: int, stop: int, better: Comparator) -> int:
    """Index of the first most-extreme pivot price in [start, stop)."""
    best = start
    for i in range(start, stop):
        if better(pivots[i].price, pivots[best].price):
            best = i
    return best


def _first_impulse_end(
    pivots: Sequence[Pivot],
    origin: int,
    w3: int,
    better: Comparator,
    break_ratio: float
) -> int:
    """
    End of the first completed swing out of the origin.

    Tracks the running extreme from origin+1 towards W3 and stops once price
    pulls back beyond `break_ratio` of that extreme.
    """
    w1 = min(origin + 1, w3)
    if w3 <= origin + 2:
        return w1

    running = pivots[origin + 1].price
    for i in range(origin + 1, w3):
        price = pivots[i].price
        if better(price, running):
            running = price
            w1 = i
        if better(running * break_ratio, price):
            break
    return w1
