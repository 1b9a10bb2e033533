#!/usr/bin/env python3
"""
Elliott Wave analysis CLI.

Runs the wave analysis on daily OHLC candles from a CSV file and prints a
text report or the JSON result.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from wavecore.analysis.config import DEFAULT_CONFIG
from wavecore.analysis.config_loader import load_config_from_yaml
from wavecore.analysis.pipeline import ElliottWaveAnalyzer
from wavecore.analysis.result import AnalysisError, AnalysisResult
from wavecore.data.loader import load_candles

logger = logging.getLogger(__name__)


def setup_logging(log_path: Optional[Path] = None, verbose: bool = False):
    """
    Setup logging to stderr and optionally to file.

    Args:
        log_path: Path to log file (None = console only)
        verbose: If True, use DEBUG level, otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Setup root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Console handler (always); stderr keeps stdout clean for --json
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (if log_path provided)
    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def format_report(result: AnalysisResult, title: str = "") -> str:
    """Render an analysis result as a plain-text report."""
    lines = []
    lines.append("=" * 80)
    lines.append(f"ELLIOTT WAVE ANALYSIS{': ' + title if title else ''}")
    lines.append("=" * 80)
    lines.append(f"Current price:      {result.current_price:.2f}")
    lines.append(f"Trend:              {'Bullish' if result.is_bull else 'Bearish'}")
    lines.append(f"Current wave:       {result.current_wave} {result.current_wave_label}")
    lines.append(f"Confidence:         {result.confidence}%")
    lines.append(f"Invalidation level: {result.invalidation_level:.2f}")
    lines.append(f"Pivots detected:    {len(result.pivots)}")
    lines.append("")

    lines.append("STRUCTURE")
    lines.append("-" * 80)
    for point in result.structural_points:
        lines.append(f"  {point.wave_label}  {point.time}  {point.price:>12.2f}  ({point.type.value})")
    lines.append("")

    lines.append("PROJECTIONS")
    lines.append("-" * 80)
    lines.append(f"  {'Step':>4}  {'Wave':<8} {'Label':<5} {'Fib':>6} {'Target':>12} {'Change':>9}")
    for p in result.projections:
        marker = "*" if p.is_major else " "
        lines.append(
            f"  {p.step:>4}{marker} {p.wave:<8} {p.label:<5} {p.fib_ratio:>6} "
            f"{p.target:>12.2f} {p.pct_change:>+8.2f}%"
        )
    lines.append("  (* = major wave)")
    lines.append("")

    setup = result.trade_setup
    lines.append("TRADE SETUP")
    lines.append("-" * 80)
    lines.append(f"  Entry:     {setup.entry_low:.2f} - {setup.entry_high:.2f}")
    lines.append(f"  Stop-loss: {setup.stop_loss:.2f}")
    lines.append(f"  Target:    {setup.target:.2f}")
    lines.append("")

    lines.append("BULL CASE")
    lines.append("-" * 80)
    lines.append(result.thematic_story.bull_case)
    lines.append("")
    lines.append("BEAR CASE")
    lines.append("-" * 80)
    lines.append(result.thematic_story.bear_case)
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run Elliott Wave analysis on daily OHLC candles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Analyze a CSV (Date,Open,High,Low,Close[,Volume])
    python -m wavecli.analyze data/aapl.csv

    # Restrict to one year and print JSON
    python -m wavecli.analyze data/aapl.csv --start-date 2024-01-01 --end-date 2024-12-31 --json

    # Custom parameters
    python -m wavecli.analyze data/aapl.csv --config configs/default.yaml
        """
    )

    parser.add_argument(
        "csv",
        type=str,
        help="CSV file with daily OHLC candles (date in first column)",
    )
    parser.add_argument(
        "--start-date", "-s",
        type=str,
        help="Start date for the candle window (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--end-date", "-e",
        type=str,
        help="End date for the candle window (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Load analysis parameters from YAML file (default: built-in defaults)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a text report",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Also write the JSON result to this file",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write logs to this file in addition to the console",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    try:
        config = load_config_from_yaml(args.config) if args.config else DEFAULT_CONFIG
        candles = load_candles(args.csv, start_date=args.start_date, end_date=args.end_date)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    logger.info(f"Loaded {len(candles)} candles from {args.csv}")
    result = ElliottWaveAnalyzer(config).analyze(candles)
    payload = result.to_dict()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(payload, f, indent=2)
        logger.info(f"Result written to {output_path}")

    if args.json:
        print(json.dumps(payload, indent=2))
    elif isinstance(result, AnalysisError):
        print(f"Error: {result.error}")
    else:
        print(format_report(result, title=Path(args.csv).stem))

    return 1 if isinstance(result, AnalysisError) else 0


if __name__ == "__main__":
    sys.exit(main())
