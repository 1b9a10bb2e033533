"""
Shared types for the wave engine.

Candle is the input unit consumed by every stage. Pivot and PivotType
are produced by the pivot detector and read by all later stages.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class PivotType(Enum):
    """Type of swing point."""
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class Candle:
    """A single daily OHLC bar."""
    time: str  # Date-like label, e.g. "2024-01-31"
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "Candle":
        """
        Build a candle from a mapping with time/open/high/low/close keys.

        Keys are matched case-insensitively and 'date' is accepted for 'time'.

        Raises:
            ValueError: If a required key is missing
        """
        lowered = {str(k).lower(): v for k, v in row.items()}
        if "time" not in lowered and "date" in lowered:
            lowered["time"] = lowered["date"]
        missing = [k for k in ("time", "open", "high", "low", "close") if k not in lowered]
        if missing:
            raise ValueError(f"Candle missing keys: {missing}")
        volume = lowered.get("volume")
        return cls(
            time=str(lowered["time"]),
            open=float(lowered["open"]),
            high=float(lowered["high"]),
            low=float(lowered["low"]),
            close=float(lowered["close"]),
            volume=None if volume is None else float(volume),
        )


@dataclass(frozen=True)
class Pivot:
    """A confirmed swing high or low."""
    index: int  # Position in the candle sequence
    time: str
    price: float
    type: PivotType

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "time": self.time,
            "price": self.price,
            "type": self.type.value,
        }
