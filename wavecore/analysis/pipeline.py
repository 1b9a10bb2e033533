"""
Full Elliott Wave analysis pipeline.

Runs the wave stages in order on a candle sequence:
1. Pivot detection (ZigZag)
2. Trend classification
3. Structural waves (origin, W1-W4)
4. Confidence score
5. Current wave position
6. Wave 1 length measurement and forward projections
7. Trade setup, narrative and chart points

The pipeline is a pure function of its input: no shared state, no I/O.
"""
import logging
from typing import Optional, Sequence, Union

import pandas as pd

from ..data.loader import candles_from_frame
from ..shared.defaults import EXTENDED_W3_RATIO, FIB_W3, MIN_W1_LENGTH
from ..shared.types import Candle, Pivot
from ..waves.confidence import ew_confidence
from ..waves.current_wave import determine_current_wave
from ..waves.elliott_types import StructuralWaves
from ..waves.pivots import detect_pivots
from ..waves.projection import project_waves
from ..waves.structure import find_structural_waves
from ..waves.trend import determine_trend
from .config import AnalysisConfig, DEFAULT_CONFIG
from .narrative import generate_thematic_story
from .result import (
    AnalysisError,
    AnalysisOutcome,
    AnalysisResult,
    ErrorKind,
    StructuralPoint,
)
from .trade_setup import TargetCalculator

logger = logging.getLogger(__name__)

INSUFFICIENT_HISTORY_MSG = "Insufficient price data for Elliott Wave analysis"
INSUFFICIENT_PIVOTS_MSG = "Not enough swing points detected. Try a longer history."


def measure_w1_length(pivots: Sequence[Pivot], structural: StructuralWaves) -> float:
    """
    Measure the Wave 1 length used to scale the projections.

    If Wave 3 is extended (longer than 2.618x Wave 1), Wave 1 is re-derived
    from it as W3 / 1.618. A degenerate (near-zero) Wave 1 falls back to the
    last pivot-to-pivot leg.
    """
    origin_price = pivots[structural.origin].price
    w1_len = abs(pivots[structural.w1].price - origin_price)

    w3_len = abs(pivots[structural.w3].price - pivots[structural.w2].price)
    if w3_len > 0 and w1_len > 0 and w3_len > w1_len * EXTENDED_W3_RATIO:
        logger.debug(f"Extended wave 3 ({w3_len:.4f} > {EXTENDED_W3_RATIO} x {w1_len:.4f}), rescaling wave 1")
        w1_len = w3_len / FIB_W3

    if w1_len < MIN_W1_LENGTH:
        w1_len = abs(pivots[-1].price - pivots[-2].price)

    return w1_len


class ElliottWaveAnalyzer:
    """Runs the complete Elliott Wave analysis on OHLC candles."""

    def __init__(self, config: AnalysisConfig = DEFAULT_CONFIG):
        """
        Initialize the analyzer.

        Args:
            config: Engine parameters (DEFAULT_CONFIG when omitted)
        """
        self.config = config
        self.target_calculator = TargetCalculator(
            entry_band_low=config.entry_band_low,
            entry_band_high=config.entry_band_high,
            fallback_target_multiplier=config.fallback_target_multiplier,
        )

    def analyze(self, candles: Union[Sequence[Candle], pd.DataFrame]) -> AnalysisOutcome:
        """
        Analyze a candle sequence.

        Args:
            candles: Candles ordered by ascending time, or an OHLC DataFrame

        Returns:
            AnalysisResult, or AnalysisError when there is too little data
        """
        if isinstance(candles, pd.DataFrame):
            candles = candles_from_frame(candles)

        cfg = self.config
        if not candles or len(candles) < cfg.min_candles:
            logger.info(f"Analysis skipped: {len(candles) if candles else 0} candles < {cfg.min_candles}")
            return AnalysisError(kind=ErrorKind.INSUFFICIENT_HISTORY, error=INSUFFICIENT_HISTORY_MSG)

        current_price = candles[-1].close

        pivots = detect_pivots(candles, depth=cfg.pivot_depth)
        if len(pivots) < cfg.min_pivots:
            logger.info(f"Analysis skipped: {len(pivots)} pivots < {cfg.min_pivots}")
            return AnalysisError(kind=ErrorKind.INSUFFICIENT_PIVOTS, error=INSUFFICIENT_PIVOTS_MSG)

        is_bull = determine_trend(pivots, lookback=cfg.trend_lookback)
        structural = find_structural_waves(pivots, is_bull, window=cfg.pivot_window)
        confidence = ew_confidence(pivots)
        current_wave = determine_current_wave(pivots, structural)

        origin_price = pivots[structural.origin].price
        w1_len = measure_w1_length(pivots, structural)
        logger.debug(
            f"{len(pivots)} pivots, {'bull' if is_bull else 'bear'}, {current_wave.name}, "
            f"confidence={confidence}, w1_len={w1_len:.4f}"
        )

        projections = project_waves(
            origin_price,
            w1_len,
            current_wave.sim_index,
            is_bull,
            current_price,
            num_steps=cfg.projection_steps,
        )

        trade_setup = self.target_calculator.calculate(current_price, origin_price, projections)
        story = generate_thematic_story(current_wave, is_bull, confidence, projections, current_price)

        structural_points = tuple(
            StructuralPoint.from_pivot(pivots[idx], str(label))
            for label, idx in enumerate(structural.as_tuple())
        )

        return AnalysisResult(
            current_price=current_price,
            is_bull=is_bull,
            current_wave=current_wave.name,
            current_wave_label=current_wave.label,
            confidence=confidence,
            structural_points=structural_points,
            pivots=tuple(pivots),
            projections=tuple(projections),
            trade_setup=trade_setup,
            thematic_story=story,
            invalidation_level=origin_price,
        )


def analyze_elliott_waves(
    candles: Union[Sequence[Candle], pd.DataFrame],
    config: Optional[AnalysisConfig] = None
) -> AnalysisOutcome:
    """Run the analysis with the given (or default) configuration."""
    return ElliottWaveAnalyzer(config or DEFAULT_CONFIG).analyze(candles)
