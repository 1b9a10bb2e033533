"""
Command-line entry points.

Provides command-line interfaces for:
- Elliott Wave analysis of a candle CSV
- Parameter reference
"""
