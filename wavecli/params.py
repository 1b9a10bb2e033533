#!/usr/bin/env python3
"""
Parameter reference CLI.

Shows all configurable parameters, their valid ranges, and defaults.
"""
import sys

from wavecore.shared.defaults import (
    PIVOT_DEPTH, PIVOT_WINDOW, TREND_LOOKBACK,
    MIN_CANDLES, MIN_PIVOTS, PROJECTION_STEPS,
    ENTRY_BAND_LOW, ENTRY_BAND_HIGH, FALLBACK_TARGET_MULTIPLIER,
    FIB_W2, FIB_W3, FIB_W4, W1_BREAK_BULL, W1_BREAK_BEAR, EXTENDED_W3_RATIO,
)


def main() -> int:
    """Print all configurable parameters with their ranges and defaults."""

    print("=" * 80)
    print("ELLIOTT WAVE ENGINE PARAMETER REFERENCE")
    print("=" * 80)
    print()

    print("PIVOT DETECTION (YAML section: pivots)")
    print("-" * 80)
    print(f"  depth               Bars on each side to confirm a swing: {PIVOT_DEPTH} (default)")
    print(f"                      Range: >= 1, recommended: 3-8")
    print(f"                      Lower = more, noisier swings")
    print(f"  window              Most recent pivots searched for the structure: {PIVOT_WINDOW} (default)")
    print(f"                      Range: >= 3")
    print()

    print("TREND (YAML section: trend)")
    print("-" * 80)
    print(f"  lookback            Compare last pivot with the pivot this many back: {TREND_LOOKBACK} (default)")
    print(f"                      Range: >= 2")
    print()

    print("VALIDATION (YAML section: validation)")
    print("-" * 80)
    print(f"  min_candles         Minimum bars for an analysis: {MIN_CANDLES} (default)")
    print(f"                      Range: >= 2 * depth + 1")
    print(f"  min_pivots          Minimum swing points for an analysis: {MIN_PIVOTS} (default)")
    print(f"                      Range: >= 2 (confidence needs 5)")
    print()

    print("PROJECTION (YAML section: projection)")
    print("-" * 80)
    print(f"  steps               Forward phases to project: {PROJECTION_STEPS} (default)")
    print(f"                      Range: >= 1 (9 phases per cycle)")
    print()

    print("TRADE SETUP (YAML section: trade_setup)")
    print("-" * 80)
    print(f"  entry_band_low      Entry zone low (x price): {ENTRY_BAND_LOW} (default)")
    print(f"                      Range: (0, 1]")
    print(f"  entry_band_high     Entry zone high (x price): {ENTRY_BAND_HIGH} (default)")
    print(f"                      Range: >= 1")
    print(f"  fallback_target_multiplier")
    print(f"                      Target when no major projection is above price: {FALLBACK_TARGET_MULTIPLIER} (default)")
    print(f"                      Range: > 1")
    print()

    print("FIXED MODEL CONSTANTS (not configurable)")
    print("-" * 80)
    print(f"  Wave 2 = {FIB_W2} x W1, Wave 3 = {FIB_W3} x W1, Wave 4 = {FIB_W4} x W3, Wave 5 = W1")
    print(f"  W1 scan stops at {W1_BREAK_BULL} x running max (bull) / {W1_BREAK_BEAR} x running min (bear)")
    print(f"  Wave 3 longer than {EXTENDED_W3_RATIO} x W1 rescales W1 to W3 / {FIB_W3}")
    print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
