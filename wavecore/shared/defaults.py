"""
Centralized default values for the Elliott Wave engine.

This is the SINGLE SOURCE OF TRUTH for all engine constants.
All modules should import from here to ensure consistency.

The tunable values (pivot depth, windows, steps, trade band) can be
overridden through AnalysisConfig; the Fibonacci multipliers are fixed
and shape the projection model itself.
"""

# Pivot detection (ZigZag)
PIVOT_DEPTH = 5  # Bars required on each side to confirm a swing

# Pipeline validation
MIN_CANDLES = 20  # Fewer bars -> insufficient history
MIN_PIVOTS = 5  # Fewer swings -> insufficient pivots

# Trend and structure
TREND_LOOKBACK = 7  # Compare last pivot against the pivot this many back
PIVOT_WINDOW = 20  # Structural search only looks at the most recent pivots
W1_BREAK_BULL = 0.9  # Stop the W1 scan once price drops below 90% of the running max
W1_BREAK_BEAR = 1.1  # Stop the W1 scan once price rises above 110% of the running min

# Projection model
PROJECTION_STEPS = 12  # Forward steps (~1 motive + partial corrective cycle)
CYCLE_LENGTH = 9  # Sub-phases per cycle
FIB_W2 = 0.618  # Wave 2 = 0.618 x Wave 1
FIB_W3 = 1.618  # Wave 3 = 1.618 x Wave 1
FIB_W4 = 0.382  # Wave 4 = 0.382 x Wave 3
FIB_W2A = 0.382  # First intrawave pullback of Wave 2 (of Wave 1)
FIB_W4A = 0.236  # First intrawave pullback of Wave 4 (of Wave 3)
FIB_MIDPOINT = 0.5  # b-points sit halfway back
MIN_TARGET_PRICE = 0.01  # Projected targets never go below this

# Wave 1 length measurement
EXTENDED_W3_RATIO = 2.618  # W3 leg beyond this multiple of W1 counts as extended
MIN_W1_LENGTH = 0.001  # Below this the last leg is used instead

# Trade setup
ENTRY_BAND_LOW = 0.97  # Entry zone lower bound (x current price)
ENTRY_BAND_HIGH = 1.01  # Entry zone upper bound (x current price)
FALLBACK_TARGET_MULTIPLIER = 1.15  # Target when no major projection lies above price

# Narrative confidence buckets
CONFIDENCE_HIGH = 70
CONFIDENCE_MODERATE = 40
