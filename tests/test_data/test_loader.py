"""
Tests for CSV and DataFrame candle loading.
"""
import numpy as np
import pandas as pd
import pytest

from wavecore.data.loader import CandleLoader, candles_from_frame, load_candles
from wavecore.shared.types import Candle


@pytest.fixture
def csv_path(tmp_path):
    """Unsorted daily CSV with a Date index column."""
    path = tmp_path / 'prices.csv'
    path.write_text(
        "Date,Open,High,Low,Close,Volume\n"
        "2024-01-03,11,13,10,12,300\n"
        "2024-01-01,9,11,8,10,100\n"
        "2024-01-02,10,12,9,11,200\n"
        "2024-01-04,12,14,11,13,400\n"
    )
    return path


class TestCandleLoader:
    """Test CandleLoader."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Data file not found"):
            CandleLoader(tmp_path / 'missing.csv')

    def test_load_sorts_by_date(self, csv_path):
        df = CandleLoader(csv_path).load()

        assert isinstance(df.index, pd.DatetimeIndex)
        assert list(df['Close']) == [10, 11, 12, 13]

    def test_date_filter_is_inclusive(self, csv_path):
        df = CandleLoader(csv_path).load(start_date='2024-01-02', end_date='2024-01-03')
        assert list(df.index.strftime('%Y-%m-%d')) == ['2024-01-02', '2024-01-03']


class TestCandlesFromFrame:
    """Test candles_from_frame."""

    def test_lowercase_columns(self):
        df = pd.DataFrame(
            {'open': [1.0], 'high': [2.0], 'low': [0.5], 'close': [1.5]},
            index=pd.to_datetime(['2024-03-01']),
        )
        assert candles_from_frame(df) == [
            Candle(time='2024-03-01', open=1.0, high=2.0, low=0.5, close=1.5, volume=None)
        ]

    def test_missing_columns(self):
        df = pd.DataFrame({'Open': [1.0], 'Close': [1.5]})
        with pytest.raises(ValueError, match=r"Columns \['high', 'low'\] not found"):
            candles_from_frame(df)

    def test_nan_rows_dropped(self):
        df = pd.DataFrame(
            {
                'Open': [1.0, np.nan, 3.0],
                'High': [2.0, 3.0, 4.0],
                'Low': [0.5, 1.5, 2.5],
                'Close': [1.5, 2.5, 3.5],
                'Volume': [10, 20, np.nan],
            },
            index=pd.date_range('2024-01-01', periods=3, freq='D'),
        )
        candles = candles_from_frame(df)

        assert [c.time for c in candles] == ['2024-01-01', '2024-01-03']
        assert candles[0].volume == 10.0
        assert candles[1].volume is None

    def test_non_datetime_index(self):
        df = pd.DataFrame({'Open': [1.0], 'High': [2.0], 'Low': [0.5], 'Close': [1.5]})
        assert candles_from_frame(df)[0].time == '0'


class TestLoadCandles:
    """Test load_candles."""

    def test_load_candles(self, csv_path):
        candles = load_candles(csv_path, end_date='2024-01-02')

        assert [c.time for c in candles] == ['2024-01-01', '2024-01-02']
        assert candles[0] == Candle(time='2024-01-01', open=9.0, high=11.0, low=8.0, close=10.0, volume=100.0)


class TestCandleFromDict:
    """Test Candle.from_dict."""

    def test_date_key_and_case(self):
        candle = Candle.from_dict({'Date': '2024-01-05', 'Open': '1', 'High': 2, 'Low': 0.5, 'Close': 1.5})

        assert candle.time == '2024-01-05'
        assert candle.open == 1.0
        assert candle.volume is None

    def test_missing_keys(self):
        with pytest.raises(ValueError, match="Candle missing keys"):
            Candle.from_dict({'time': 't', 'open': 1, 'close': 1})
