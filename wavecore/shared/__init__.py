"""
Shared types and defaults for the wave engine.

This module provides:
- Candle, Pivot and PivotType
- Centralized default values for all engine parameters
"""
from .types import Candle, Pivot, PivotType
from .defaults import (
    PIVOT_DEPTH, MIN_CANDLES, MIN_PIVOTS,
    TREND_LOOKBACK, PIVOT_WINDOW,
    PROJECTION_STEPS,
    ENTRY_BAND_LOW, ENTRY_BAND_HIGH, FALLBACK_TARGET_MULTIPLIER,
)

__all__ = [
    'Candle',
    'Pivot',
    'PivotType',
    'PIVOT_DEPTH', 'MIN_CANDLES', 'MIN_PIVOTS',
    'TREND_LOOKBACK', 'PIVOT_WINDOW',
    'PROJECTION_STEPS',
    'ENTRY_BAND_LOW', 'ENTRY_BAND_HIGH', 'FALLBACK_TARGET_MULTIPLIER',
]
