"""
Analysis result types: trade setup, story, chart points, result and error.

Results are built fresh per call and never mutated afterwards. Expected
failures (too little history, too few swings) are returned as an
AnalysisError value so callers can render a "not enough data" state
without exception handling.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from ..shared.types import Pivot, PivotType
from ..waves.elliott_types import WaveProjection


class ErrorKind(Enum):
    """Reason an analysis could not be produced."""
    INSUFFICIENT_HISTORY = "insufficient_history"  # Fewer candles than required
    INSUFFICIENT_PIVOTS = "insufficient_pivots"  # Fewer swing points than required


@dataclass(frozen=True)
class AnalysisError:
    """Tagged error result."""
    kind: ErrorKind
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "kind": self.kind.value}


@dataclass(frozen=True)
class TradeSetup:
    """Entry band, stop and target derived from the projections."""
    entry_low: float
    entry_high: float
    stop_loss: float  # Origin price (invalidation)
    target: float


@dataclass(frozen=True)
class ThematicStory:
    """Bull and bear narratives for the current count."""
    bull_case: str
    bear_case: str


@dataclass(frozen=True)
class StructuralPoint:
    """A structural anchor pivot labelled for chart markers ("0".."4")."""
    index: int
    time: str
    price: float
    type: PivotType
    wave_label: str

    @classmethod
    def from_pivot(cls, pivot: Pivot, wave_label: str) -> "StructuralPoint":
        return cls(
            index=pivot.index,
            time=pivot.time,
            price=pivot.price,
            type=pivot.type,
            wave_label=wave_label,
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Complete Elliott Wave analysis of one candle sequence."""
    current_price: float
    is_bull: bool
    current_wave: str
    current_wave_label: str
    confidence: int  # 0-100
    structural_points: Tuple[StructuralPoint, ...]
    pivots: Tuple[Pivot, ...]
    projections: Tuple[WaveProjection, ...]
    trade_setup: TradeSetup
    thematic_story: ThematicStory
    invalidation_level: float  # Origin price; a break beyond it falsifies the count

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation."""
        return {
            "current_price": self.current_price,
            "is_bull": self.is_bull,
            "current_wave": self.current_wave,
            "current_wave_label": self.current_wave_label,
            "confidence": self.confidence,
            "structural_points": [
                {
                    "index": sp.index,
                    "time": sp.time,
                    "price": sp.price,
                    "type": sp.type.value,
                    "wave_label": sp.wave_label,
                }
                for sp in self.structural_points
            ],
            "pivots": [
                {"time": p.time, "price": p.price, "type": p.type.value}
                for p in self.pivots
            ],
            "projections": [p.to_dict() for p in self.projections],
            "trade_setup": {
                "entry_low": self.trade_setup.entry_low,
                "entry_high": self.trade_setup.entry_high,
                "stop_loss": self.trade_setup.stop_loss,
                "target": self.trade_setup.target,
            },
            "thematic_story": {
                "bull_case": self.thematic_story.bull_case,
                "bear_case": self.thematic_story.bear_case,
            },
            "invalidation_level": self.invalidation_level,
        }


AnalysisOutcome = Union[AnalysisResult, AnalysisError]
