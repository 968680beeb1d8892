"""Technical indicators (pure math, no I/O)."""

from core.indicators.indicators import (
    NEUTRAL_RSI,
    rsi,
    ema,
    macd,
    moving_average,
    sma,
    highest,
    lowest,
    IndicatorCalculator,
)

__all__ = [
    "NEUTRAL_RSI",
    "rsi",
    "ema",
    "macd",
    "moving_average",
    "sma",
    "highest",
    "lowest",
    "IndicatorCalculator",
]
