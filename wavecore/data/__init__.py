"""
Candle input adapters.

Provides loading of daily OHLC data from CSV files and conversion of
pandas DataFrames into Candle sequences.
"""
from .loader import CandleLoader, candles_from_frame, load_candles

__all__ = [
    'CandleLoader',
    'candles_from_frame',
    'load_candles',
]
