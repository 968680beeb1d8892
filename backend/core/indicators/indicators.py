"""Technical indicators for trend classification.

Every function works on the latest point of a series and returns a scalar.
Short series never raise: each indicator falls back to a neutral value
(RSI -> 50, EMA -> last price, MACD -> zeros) when there is not enough
history for its lookback.
"""

from typing import Sequence

import numpy as np

from core.models.analysis import IndicatorSet, MacdValue
from core.models.config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig

NEUTRAL_RSI = 50.0


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.array([float(v) for v in values], dtype=np.float64)


def rsi(prices: Sequence[float], period: int = 14) -> float:
    """
    Calculate Relative Strength Index over the last ``period`` deltas.

    Uses plain averages of gains and losses (no Wilder smoothing).

    Args:
        prices: Sequence of prices, oldest first
        period: Number of deltas to look back

    Returns:
        RSI in [0, 100]; 50 when fewer than ``period + 1`` prices,
        100 when there were no losses
    """
    if len(prices) < period + 1:
        return NEUTRAL_RSI

    deltas = np.diff(_as_array(prices[-(period + 1):]))
    gains = float(deltas[deltas > 0].sum())
    losses = float(-deltas[deltas < 0].sum())

    avg_gain = gains / period
    avg_loss = losses / period

    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def ema(prices: Sequence[float], period: int) -> float:
    """
    Calculate Exponential Moving Average of the latest point.

    Seeded with the mean of the first ``period`` prices, then smoothed over
    the remaining ones with multiplier ``2 / (period + 1)``.

    Args:
        prices: Sequence of prices, oldest first
        period: EMA period

    Returns:
        EMA value, or the last price when fewer than ``period`` prices
    """
    if len(prices) < period:
        return float(prices[-1])

    arr = _as_array(prices)
    multiplier = 2.0 / (period + 1)

    value = float(np.mean(arr[:period]))
    for price in arr[period:]:
        value = (float(price) - value) * multiplier + value

    return value


def macd(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
) -> MacdValue:
    """
    Calculate the MACD line as EMA(fast) - EMA(slow).

    The signal line is not computed and is reported as 0, so the histogram
    equals the MACD line.

    Args:
        prices: Sequence of prices, oldest first
        fast_period: Fast EMA period
        slow_period: Slow EMA period

    Returns:
        MacdValue, all zeros when fewer than ``slow_period`` prices
    """
    if len(prices) < slow_period:
        return MacdValue()

    line = ema(prices, fast_period) - ema(prices, slow_period)
    signal = 0.0
    return MacdValue(macd=line, signal=signal, histogram=line - signal)


def moving_average(prices: Sequence[float], period: int) -> float:
    """EMA over only the last ``period`` prices (backs sma20/sma50)."""
    return ema(prices[-period:], period)


def sma(values: Sequence[float], period: int) -> float:
    """Sum of the last ``period`` values divided by ``period``."""
    return float(_as_array(values[-period:]).sum()) / period


def highest(values: Sequence[float], period: int) -> float:
    """Highest of the last ``period`` values."""
    return float(_as_array(values[-period:]).max())


def lowest(values: Sequence[float], period: int) -> float:
    """Lowest of the last ``period`` values."""
    return float(_as_array(values[-period:]).min())


class IndicatorCalculator:
    """Calculator for all indicators needed by the classifiers."""

    def __init__(self, config: AnalysisConfig | None = None):
        self.config = config or DEFAULT_ANALYSIS_CONFIG

    def calculate(self, prices: Sequence[float]) -> IndicatorSet:
        """
        Calculate the indicator snapshot for the latest price.

        Args:
            prices: Close prices, oldest first (at least one)

        Returns:
            IndicatorSet with RSI, MACD and both moving averages
        """
        cfg = self.config
        return IndicatorSet(
            rsi=rsi(prices, cfg.rsi_period),
            macd=macd(prices, cfg.macd_fast_period, cfg.macd_slow_period),
            sma20=moving_average(prices, cfg.short_ma_period),
            sma50=moving_average(prices, cfg.long_ma_period),
        )
