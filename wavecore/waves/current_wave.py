"""
Current wave location within the 9-phase cycle.
"""
from typing import Sequence

from ..shared.types import Pivot
from .elliott_types import CurrentWave, StructuralWaves, WAVE_NAMES, WAVE_LABELS, WAVE_FIBS


def determine_current_wave(pivots: Sequence[Pivot], structural: StructuralWaves) -> CurrentWave:
    """
    Map the last pivot's position relative to the anchors onto a phase.

    At or before W1 -> Wave 1, before W2 -> Wave 2C, before W3 -> Wave 3,
    before W4 -> Wave 4C, beyond W4 -> Wave 5.
    """
    last_idx = len(pivots) - 1

    if last_idx <= structural.w1:
        sim_index = 0
    elif last_idx <= structural.w2:
        sim_index = 3
    elif last_idx <= structural.w3:
        sim_index = 4
    elif last_idx <= structural.w4:
        sim_index = 7
    else:
        sim_index = 8

    return CurrentWave(
        sim_index=sim_index,
        name=WAVE_NAMES[sim_index],
        label=WAVE_LABELS[sim_index],
        fib_ratio=WAVE_FIBS[sim_index],
    )
