"""
Derives a simple trade setup from wave projections.

Entry is a band around the current price, the stop sits at the wave origin
(the invalidation level) and the target is the nearest major projection
above the current price.
"""
from typing import Optional, Sequence

from ..shared.defaults import ENTRY_BAND_LOW, ENTRY_BAND_HIGH, FALLBACK_TARGET_MULTIPLIER
from ..waves.elliott_types import WaveProjection
from ..waves.projection import round2
from .result import TradeSetup


class TargetCalculator:
    """Calculates entry, stop-loss and target prices from projections."""

    def __init__(
        self,
        entry_band_low: float = ENTRY_BAND_LOW,
        entry_band_high: float = ENTRY_BAND_HIGH,
        fallback_target_multiplier: float = FALLBACK_TARGET_MULTIPLIER
    ):
        """
        Initialize the target calculator.

        Args:
            entry_band_low: Entry zone lower bound as a multiple of current price
            entry_band_high: Entry zone upper bound as a multiple of current price
            fallback_target_multiplier: Target multiple used when no major
                                        projection lies above current price
        """
        self.entry_band_low = entry_band_low
        self.entry_band_high = entry_band_high
        self.fallback_target_multiplier = fallback_target_multiplier

    def calculate(
        self,
        current_price: float,
        origin_price: float,
        projections: Sequence[WaveProjection]
    ) -> TradeSetup:
        """
        Build the trade setup.

        Args:
            current_price: Latest close
            origin_price: Price at the wave origin, used as stop-loss
            projections: Projections in step order

        Returns:
            TradeSetup with all prices rounded to 2 decimals
        """
        next_up = self.next_major_above(projections, current_price)
        if next_up is not None:
            target = next_up.target
        else:
            target = round2(current_price * self.fallback_target_multiplier)

        return TradeSetup(
            entry_low=round2(current_price * self.entry_band_low),
            entry_high=round2(current_price * self.entry_band_high),
            stop_loss=round2(origin_price),
            target=target,
        )

    @staticmethod
    def next_major_above(
        projections: Sequence[WaveProjection],
        price: float
    ) -> Optional[WaveProjection]:
        """First major projection (by step) with a target above `price`."""
        for projection in projections:
            if projection.is_major and projection.target > price:
                return projection
        return None
