"""
Thematic story generation.

Turns the wave position, confidence and projection targets into a short
bull case and bear case. Plain string templates; no language model.
"""
from typing import Sequence

from ..shared.defaults import CONFIDENCE_HIGH, CONFIDENCE_MODERATE
from ..waves.elliott_types import CurrentWave, WaveProjection
from .result import ThematicStory


def confidence_label(confidence: int) -> str:
    """Bucket a 0-100 confidence score into high / moderate / low."""
    if confidence >= CONFIDENCE_HIGH:
        return 'high'
    if confidence >= CONFIDENCE_MODERATE:
        return 'moderate'
    return 'low'


def format_pct(value: float) -> str:
    """Render a rounded percentage without trailing zeros (20.40 -> '20.4')."""
    text = f"{value:.2f}".rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def generate_thematic_story(
    current_wave: CurrentWave,
    is_bull: bool,
    confidence: int,
    projections: Sequence[WaveProjection],
    current_price: float
) -> ThematicStory:
    """
    Build bull and bear narratives for the current count.

    Upside is the highest projected target above the current price, downside
    the lowest target below it. Either reads 'limited' when no such target
    exists.
    """
    above = [p for p in projections if p.target > current_price]
    below = [p for p in projections if p.target < current_price]

    if above:
        top = max(above, key=lambda p: p.target)
        upside = f"{'+' if top.pct_change > 0 else ''}{format_pct(top.pct_change)}%"
    else:
        upside = 'limited'

    if below:
        bottom = min(below, key=lambda p: p.target)
        downside = f"{format_pct(bottom.pct_change)}%"
    else:
        downside = 'limited'

    phase = current_wave.name
    conf = confidence_label(confidence)

    if is_bull:
        bull_case = (
            f"Elliott Wave structure indicates the stock is in {phase} of a bullish impulse "
            f"with {conf} pattern confidence ({confidence}%). "
            f"Fibonacci projections suggest potential upside of {upside} to the next major wave target. "
            f"The trend remains intact as long as price holds above the invalidation level at the wave origin."
        )
        caution = 'significant uncertainty' if confidence < 50 else 'some caution'
        bear_case = (
            f"Despite the bullish wave structure, a failure to hold current levels could trigger a "
            f"corrective pullback of {downside}. If the invalidation level is broken, the entire wave count "
            f"would need to be reassessed, potentially signaling a larger corrective pattern. "
            f"The {conf} confidence score suggests {caution} in the current count."
        )
    else:
        bull_case = (
            f"Although the current wave structure appears bearish ({phase}), a potential reversal "
            f"could develop if price reclaims key resistance levels. Counter-trend rallies within the corrective "
            f"structure could offer upside of {upside}. Watch for divergence signals at wave completion points."
        )
        bear_case = (
            f"The bearish Elliott Wave structure shows the stock in {phase} with {conf} confidence ({confidence}%). "
            f"Fibonacci extensions project further downside potential of {downside}. "
            f"The corrective cycle is expected to continue until the full 5-wave impulse completes to the downside."
        )

    return ThematicStory(bull_case=bull_case, bear_case=bear_case)
