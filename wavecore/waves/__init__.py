"""
Elliott Wave stages.

Each stage is a pure function over candles or pivots:
- detect_pivots: ZigZag swing detection
- determine_trend: bullish/bearish from pivot slope
- find_structural_waves: origin and W1-W4 anchors
- ew_confidence: Fibonacci rule score (0-100)
- determine_current_wave: current phase in the 9-phase cycle
- project_waves: forward motive/corrective targets
"""
from .elliott_types import (
    StructuralWaves,
    CurrentWave,
    WaveProjection,
    PhaseLabel,
    WAVE_NAMES,
    WAVE_LABELS,
    WAVE_FIBS,
    MOTIVE_PHASES,
    CORRECTIVE_PHASES,
)
from .pivots import detect_pivots
from .trend import determine_trend
from .structure import find_structural_waves
from .confidence import ew_confidence
from .current_wave import determine_current_wave
from .projection import project_waves, round2

__all__ = [
    'StructuralWaves',
    'CurrentWave',
    'WaveProjection',
    'PhaseLabel',
    'WAVE_NAMES',
    'WAVE_LABELS',
    'WAVE_FIBS',
    'MOTIVE_PHASES',
    'CORRECTIVE_PHASES',
    'detect_pivots',
    'determine_trend',
    'find_structural_waves',
    'ew_confidence',
    'determine_current_wave',
    'project_waves',
    'round2',
]
