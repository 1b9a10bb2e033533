"""
Elliott Wave types: structural anchors, current phase, projections and phase tables.

Extracted for reuse so the pipeline, narrative and CLI can use these types
without pulling in the search and projection code.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Tuple


@dataclass(frozen=True)
class StructuralWaves:
    """Anchor pivots of the current count, as indices into the pivot sequence."""
    origin: int
    w1: int
    w2: int
    w3: int
    w4: int

    def as_tuple(self) -> Tuple[int, int, int, int, int]:
        return (self.origin, self.w1, self.w2, self.w3, self.w4)


@dataclass(frozen=True)
class CurrentWave:
    """Where the latest pivot sits in the 9-phase cycle."""
    sim_index: int  # 0..8, only 0/3/4/7/8 are produced by the locator
    name: str
    label: str
    fib_ratio: str


@dataclass(frozen=True)
class WaveProjection:
    """A single forward price target."""
    step: int  # 1..num_steps
    wave: str
    label: str
    fib_ratio: str
    target: float
    pct_change: float
    is_major: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "wave": self.wave,
            "label": self.label,
            "fib_ratio": self.fib_ratio,
            "target": self.target,
            "pct_change": self.pct_change,
            "is_major": self.is_major,
        }


class PhaseLabel(NamedTuple):
    """Display entry for one sub-phase of a projection cycle."""
    name: str
    label: str
    fib_ratio: str
    is_major: bool


# Current-position table, indexed by sim_index (shared with the projector's phase order)
WAVE_NAMES = (
    'Wave 1', 'Wave 2A', 'Wave 2B', 'Wave 2C', 'Wave 3',
    'Wave 4A', 'Wave 4B', 'Wave 4C', 'Wave 5',
)
WAVE_LABELS = ('(1)', 'A', 'B', '(2)', '(3)', 'A', 'B', '(4)', '(5)')
WAVE_FIBS = ('1.000', '0.382', '0.500', '0.618', '1.618', '0.236', '0.500', '0.382', '1.000')

# Even cycles: 1-2-3-4-5 with named intrawave a/b points
MOTIVE_PHASES = (
    PhaseLabel('WAVE 1', '1', '1.000', True),
    PhaseLabel('Wave 2a', '2a', '0.382', False),
    PhaseLabel('Wave 2b', '2b', '0.500', False),
    PhaseLabel('WAVE 2', '2', '0.618', True),
    PhaseLabel('WAVE 3', '3', '1.618', True),
    PhaseLabel('Wave 4a', '4a', '0.236', False),
    PhaseLabel('Wave 4b', '4b', '0.500', False),
    PhaseLabel('WAVE 4', '4', '0.382', True),
    PhaseLabel('WAVE 5', '5', '1.000', True),
)

# Odd cycles: A-B-C-X-Y. Intrawave points carry no name and are never emitted.
_UNNAMED = PhaseLabel('', '', '', False)
CORRECTIVE_PHASES = (
    PhaseLabel('WAVE A', 'A', '1.000', True),
    _UNNAMED,
    _UNNAMED,
    PhaseLabel('WAVE B', 'B', '0.618', True),
    PhaseLabel('WAVE C', 'C', '1.618', True),
    _UNNAMED,
    _UNNAMED,
    PhaseLabel('WAVE X', 'X', '0.382', True),
    PhaseLabel('WAVE Y', 'Y', '1.000', True),
)
