"""
Forward wave projection.

Targets are generated by walking forward through repeating 9-phase cycles
from the current phase. Even cycles are motive (1-2-3-4-5 in the trend
direction), odd cycles are corrective (A-B-C-X-Y against it). Every cycle
re-uses the same Fibonacci leg lengths measured off Wave 1:

    len1 = w1_len          len2 = 0.618 * len1
    len3 = 1.618 * len1    len4 = 0.382 * len3    len5 = len1

A corrective cycle starts from the end of the first motive cycle, the
following motive cycle from the origin again, so displacement never
accumulates beyond one net cycle.
"""
import math
from typing import List

from ..shared.defaults import (
    PROJECTION_STEPS, CYCLE_LENGTH,
    FIB_W2, FIB_W3, FIB_W4, FIB_W2A, FIB_W4A, FIB_MIDPOINT,
    MIN_TARGET_PRICE,
)
from .elliott_types import WaveProjection, MOTIVE_PHASES, CORRECTIVE_PHASES


def round2(value: float) -> float:
    """Round half up to 2 decimals."""
    return math.floor(value * 100 + 0.5) / 100


def project_waves(
    origin_price: float,
    w1_len: float,
    sim_index: int,
    is_bull: bool,
    current_price: float,
    num_steps: int = PROJECTION_STEPS
) -> List[WaveProjection]:
    """
    Generate forward-looking wave targets.

    Args:
        origin_price: Price at the origin of the current impulse
        w1_len: Measured length of Wave 1
        sim_index: Current phase (0..8) from determine_current_wave
        is_bull: Trend direction
        current_price: Latest close, used for pct_change
        num_steps: Number of forward phases to walk

    Returns:
        Projections for named phases only, ordered by step
    """
    len1 = w1_len
    len2 = len1 * FIB_W2
    len3 = len1 * FIB_W3
    len4 = len3 * FIB_W4
    len5 = len1

    trend_sign = 1.0 if is_bull else -1.0
    # Wave 5 end of the first motive cycle
    w5 = origin_price + (trend_sign * len1 - trend_sign * len2 + trend_sign * len3
                         - trend_sign * len4 + trend_sign * len5)
    cycle0_net = w5 - origin_price

    projections = []
    for step in range(1, num_steps + 1):
        eff_idx = sim_index + step
        cycle_num = eff_idx // CYCLE_LENGTH
        curr_idx = eff_idx % CYCLE_LENGTH

        corrective = cycle_num % 2 == 1
        active_dir = trend_sign * (-1.0 if corrective else 1.0)
        prior_cycles_move = cycle0_net if corrective else 0.0

        # Major points relative to the cycle start
        cw1 = active_dir * len1
        cw2 = cw1 - active_dir * len2
        cw3 = cw2 + active_dir * len3
        cw4 = cw3 - active_dir * len4
        cw5 = cw4 + active_dir * len5

        # Intrawave a/b points inside waves 2 and 4
        cw2a = cw1 - active_dir * len1 * FIB_W2A
        cw2b = cw2a + active_dir * (abs(cw1 - cw2a) * FIB_MIDPOINT)
        cw4a = cw3 - active_dir * len3 * FIB_W4A
        cw4b = cw4a + active_dir * (abs(cw3 - cw4a) * FIB_MIDPOINT)

        offsets = (cw1, cw2a, cw2b, cw2, cw3, cw4a, cw4b, cw4, cw5)
        phase = (CORRECTIVE_PHASES if corrective else MOTIVE_PHASES)[curr_idx]
        if not phase.name:
            continue

        target = max(MIN_TARGET_PRICE, origin_price + prior_cycles_move + offsets[curr_idx])
        pct_change = (target - current_price) / current_price * 100 if current_price != 0 else 0.0

        projections.append(WaveProjection(
            step=step,
            wave=phase.name,
            label=phase.label,
            fib_ratio=phase.fib_ratio,
            target=round2(target),
            pct_change=round2(pct_change),
            is_major=phase.is_major,
        ))

    return projections
