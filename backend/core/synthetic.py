"""Synthetic daily price/volume histories.

The dashboard has no market-data feed; every series is a random walk with
a per-symbol drift. All randomness is drawn from an injected NumPy
Generator, so a seeded simulator reproduces the same histories.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

import numpy as np

from core.models.analysis import PriceHistory

logger = logging.getLogger(__name__)

HISTORY_LENGTH = 60

# Random profile ranges
BASE_PRICE_MIN = 20.0
BASE_PRICE_SPAN = 80.0
TREND_MIN = -2.0
TREND_SPAN = 4.0

# Random walk parameters
VOLATILITY_RATIO = 0.02  # step noise as a fraction of the base price
TREND_STEP_RATIO = 0.001  # drift per unit of trend, per step
VOLUME_MIN = 1_000_000
VOLUME_SPAN = 5_000_000


class MarketSimulator:
    """Generate random-walk histories for tickers."""

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def uniform(self) -> float:
        """Draw one value in [0, 1)."""
        return float(self._rng.random())

    def random_profile(self) -> tuple[float, float]:
        """Draw a (base_price, trend) pair: base in [20, 100), trend in [-2, 2)."""
        base_price = BASE_PRICE_MIN + self.uniform() * BASE_PRICE_SPAN
        trend = self.uniform() * TREND_SPAN + TREND_MIN
        return base_price, trend

    def generate_history(
        self,
        symbol: str,
        base_price: float,
        trend: float = 0.0,
        length: int = HISTORY_LENGTH,
        end: date | None = None,
    ) -> PriceHistory:
        """
        Generate ``length`` daily closes and volumes ending the day before ``end``.

        Args:
            symbol: Ticker symbol
            base_price: Starting price level
            trend: Drift per step in units of 0.1% of the base price
            length: Number of points
            end: Reference date (defaults to today)

        Returns:
            PriceHistory with prices, volumes and dates, oldest first
        """
        end = end or date.today()
        volatility = base_price * VOLATILITY_RATIO
        trend_change = trend * base_price * TREND_STEP_RATIO

        prices: list[float] = []
        volume: list[int] = []
        dates: list[date] = []

        price = base_price
        for i in range(length):
            random_change = (self.uniform() - 0.5) * volatility
            price = price + random_change + trend_change
            prices.append(price)
            volume.append(int(self.uniform() * VOLUME_SPAN) + VOLUME_MIN)
            dates.append(end - timedelta(days=length - i))

        logger.debug(
            "Generated %d points for %s (base=%.2f trend=%.2f last=%.2f)",
            length, symbol, base_price, trend, prices[-1] if prices else base_price,
        )
        return PriceHistory(
            symbol=symbol,
            prices=tuple(prices),
            volume=tuple(volume),
            dates=tuple(dates),
        )

    def random_history(
        self,
        symbol: str,
        length: int = HISTORY_LENGTH,
        end: date | None = None,
    ) -> PriceHistory:
        """Generate a history with a freshly drawn random profile."""
        base_price, trend = self.random_profile()
        return self.generate_history(symbol, base_price, trend, length=length, end=end)
