"""Rule primitives shared by the trend and gain classifiers.

A classifier is an ordered tuple of rules. Each rule is a pure function of
a SeriesSnapshot plus a fixed weight, so every rule can be tested on its
own and the evaluation order (which fixes the order of reasons) is explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from core.models.analysis import IndicatorSet, SignalType


def percent_change(prices: Sequence[float]) -> float:
    """Percent change of the last price vs the one before it (0 if none)."""
    if len(prices) < 2:
        return 0.0
    previous = prices[-2]
    return (prices[-1] - previous) / previous * 100


@dataclass(frozen=True)
class SeriesSnapshot:
    """Everything a rule may look at for one ticker."""

    prices: Sequence[float]
    volume: Sequence[int]
    indicators: IndicatorSet
    current_price: float
    change_percent: float

    @classmethod
    def from_series(
        cls,
        prices: Sequence[float],
        volume: Sequence[int],
        indicators: IndicatorSet,
        current_price: float | None = None,
        change_percent: float | None = None,
    ) -> SeriesSnapshot:
        """Build a snapshot, deriving price and change from the series if omitted."""
        return cls(
            prices=prices,
            volume=volume,
            indicators=indicators,
            current_price=prices[-1] if current_price is None else current_price,
            change_percent=(
                percent_change(prices) if change_percent is None else change_percent
            ),
        )

    @property
    def last_price(self) -> float:
        """Last close in the series."""
        return self.prices[-1]


# A trend rule yields the direction and reason of its signal, or None.
TrendVerdict = tuple[SignalType, str] | None


@dataclass(frozen=True)
class TrendRule:
    """Directional rule: adds ``weight`` to whichever side it signals."""

    indicator: str
    weight: int
    evaluate: Callable[[SeriesSnapshot], TrendVerdict]


@dataclass(frozen=True)
class GainRule:
    """Additive rule: adds ``weight`` points when it returns a reason."""

    name: str
    weight: int
    evaluate: Callable[[SeriesSnapshot], str | None]
