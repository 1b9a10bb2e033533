"""
Candle loading from CSV files and pandas DataFrames.

Loads daily OHLC data with support for:
- CSV files with the date in the first column
- Date range filtering
- Case-insensitive Open/High/Low/Close column names

Fetching data from a market-data provider is not part of this package;
the loader only reads files already on disk.
"""
import logging
import pandas as pd
from pathlib import Path
from typing import List, Optional, Union
from datetime import datetime

from ..shared.types import Candle

logger = logging.getLogger(__name__)

OHLC_COLUMNS = ("open", "high", "low", "close")


class CandleLoader:
    """
    Loads OHLC data from a CSV file.

    Supports date range filtering.
    """

    def __init__(self, data_path: Union[str, Path]):
        """
        Initialize the candle loader.

        Args:
            data_path: Path to the CSV file containing the data

        Raises:
            FileNotFoundError: If the file does not exist
        """
        self.data_path = Path(data_path)
        if not self.data_path.exists():
            raise FileNotFoundError(f"Data file not found: {self.data_path}")

    def load(
        self,
        start_date: Optional[Union[str, datetime, pd.Timestamp]] = None,
        end_date: Optional[Union[str, datetime, pd.Timestamp]] = None
    ) -> pd.DataFrame:
        """
        Load data from CSV file with optional filtering.

        Args:
            start_date: Start date for filtering (inclusive). If None, no start filter.
            end_date: End date for filtering (inclusive). If None, no end filter.

        Returns:
            DataFrame with datetime index and the file's columns, sorted by date
        """
        # Read CSV with Date as index
        df = pd.read_csv(
            self.data_path,
            index_col=0,
            parse_dates=True,
        )

        # Ensure index is datetime
        if not isinstance(df.index, pd.DatetimeIndex):
            df.index = pd.to_datetime(df.index)

        # Sort by date
        df = df.sort_index()

        # Apply date range filtering
        if start_date is not None:
            start_date = pd.to_datetime(start_date)
            df = df[df.index >= start_date]

        if end_date is not None:
            end_date = pd.to_datetime(end_date)
            df = df[df.index <= end_date]

        return df


def _resolve_columns(df: pd.DataFrame) -> dict:
    """Map lowercase OHLC(V) names to the frame's actual column names."""
    by_lower = {str(c).lower(): c for c in df.columns}
    missing = [name for name in OHLC_COLUMNS if name not in by_lower]
    if missing:
        raise ValueError(f"Columns {missing} not found. Available: {list(df.columns)}")
    resolved = {name: by_lower[name] for name in OHLC_COLUMNS}
    if "volume" in by_lower:
        resolved["volume"] = by_lower["volume"]
    return resolved


def candles_from_frame(df: pd.DataFrame) -> List[Candle]:
    """
    Convert an OHLC DataFrame into candles.

    A DatetimeIndex becomes 'YYYY-MM-DD' time labels; any other index is
    used as-is. Rows with a missing open/high/low/close are dropped.

    Raises:
        ValueError: If open/high/low/close columns are missing
    """
    columns = _resolve_columns(df)
    ohlc = [columns[name] for name in OHLC_COLUMNS]

    clean = df.dropna(subset=ohlc)
    dropped = len(df) - len(clean)
    if dropped:
        logger.debug(f"Dropped {dropped} rows with missing OHLC values")

    if isinstance(clean.index, pd.DatetimeIndex):
        times = clean.index.strftime("%Y-%m-%d").tolist()
    else:
        times = [str(t) for t in clean.index]

    volumes = clean[columns["volume"]].tolist() if "volume" in columns else [None] * len(clean)

    candles = []
    for time, o, h, l, c, v in zip(
        times,
        clean[columns["open"]].tolist(),
        clean[columns["high"]].tolist(),
        clean[columns["low"]].tolist(),
        clean[columns["close"]].tolist(),
        volumes,
    ):
        candles.append(Candle(
            time=time,
            open=float(o),
            high=float(h),
            low=float(l),
            close=float(c),
            volume=None if v is None or pd.isna(v) else float(v),
        ))
    return candles


def load_candles(
    data_path: Union[str, Path],
    start_date: Optional[Union[str, datetime, pd.Timestamp]] = None,
    end_date: Optional[Union[str, datetime, pd.Timestamp]] = None
) -> List[Candle]:
    """
    Load candles from a CSV file.

    Convenience function that combines CandleLoader.load() and candles_from_frame().
    """
    df = CandleLoader(data_path).load(start_date=start_date, end_date=end_date)
    return candles_from_frame(df)
