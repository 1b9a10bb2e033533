"""
Analysis configuration.

Holds the tunable engine parameters. Config validation runs at construction
time (fail fast with clear errors). DEFAULT_CONFIG holds the values from
shared/defaults.py.
"""
from dataclasses import dataclass

from ..shared.defaults import (
    PIVOT_DEPTH, MIN_CANDLES, MIN_PIVOTS,
    PIVOT_WINDOW, TREND_LOOKBACK, PROJECTION_STEPS,
    ENTRY_BAND_LOW, ENTRY_BAND_HIGH, FALLBACK_TARGET_MULTIPLIER,
)


def _validate_config(
    *,
    pivot_depth: int,
    min_candles: int,
    min_pivots: int,
    pivot_window: int,
    trend_lookback: int,
    projection_steps: int,
    entry_band_low: float,
    entry_band_high: float,
    fallback_target_multiplier: float,
) -> None:
    """Validate engine parameters. Raises ValueError with clear message on failure."""
    if pivot_depth < 1:
        raise ValueError(f"pivot_depth must be >= 1, got {pivot_depth}")
    if min_candles < 2 * pivot_depth + 1:
        raise ValueError(
            f"min_candles ({min_candles}) must be >= 2 * pivot_depth + 1 ({2 * pivot_depth + 1})"
        )
    if min_pivots < 2:
        raise ValueError(f"min_pivots must be >= 2, got {min_pivots}")
    if pivot_window < 3:
        raise ValueError(f"pivot_window must be >= 3, got {pivot_window}")
    if trend_lookback < 2:
        raise ValueError(f"trend_lookback must be >= 2, got {trend_lookback}")
    if projection_steps < 1:
        raise ValueError(f"projection_steps must be >= 1, got {projection_steps}")
    if not (0 < entry_band_low <= 1):
        raise ValueError(f"entry_band_low must be in (0, 1], got {entry_band_low}")
    if entry_band_high < 1:
        raise ValueError(f"entry_band_high must be >= 1, got {entry_band_high}")
    if fallback_target_multiplier <= 1:
        raise ValueError(
            f"fallback_target_multiplier must be > 1, got {fallback_target_multiplier}"
        )


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a single Elliott Wave analysis run."""
    name: str = "default"
    description: str = ""

    # Pivot detection
    pivot_depth: int = PIVOT_DEPTH
    pivot_window: int = PIVOT_WINDOW  # Most recent pivots searched for the structure

    # Trend
    trend_lookback: int = TREND_LOOKBACK

    # Validation
    min_candles: int = MIN_CANDLES
    min_pivots: int = MIN_PIVOTS

    # Projection
    projection_steps: int = PROJECTION_STEPS

    # Trade setup
    entry_band_low: float = ENTRY_BAND_LOW
    entry_band_high: float = ENTRY_BAND_HIGH
    fallback_target_multiplier: float = FALLBACK_TARGET_MULTIPLIER

    def __post_init__(self) -> None:
        _validate_config(
            pivot_depth=self.pivot_depth,
            min_candles=self.min_candles,
            min_pivots=self.min_pivots,
            pivot_window=self.pivot_window,
            trend_lookback=self.trend_lookback,
            projection_steps=self.projection_steps,
            entry_band_low=self.entry_band_low,
            entry_band_high=self.entry_band_high,
            fallback_target_multiplier=self.fallback_target_multiplier,
        )


DEFAULT_CONFIG = AnalysisConfig(
    name="default",
    description="Reference settings: depth-5 ZigZag, 20-pivot window, 12 projection steps",
)
