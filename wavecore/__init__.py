"""
Elliott Wave analysis engine.

Provides:
- Swing pivot detection (ZigZag) from daily OHLC candles
- Trend classification and structural wave anchoring (origin, W1-W4)
- Fibonacci-based confidence scoring
- Cyclic motive/corrective wave projections
- The full analysis pipeline with trade setup and narrative
"""
