"""One-call analysis of a ticker: indicators, trend and gain probability."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from core.classifier.gain import score_gain
from core.classifier.rules import SeriesSnapshot
from core.classifier.trend import score_trend
from core.indicators import IndicatorCalculator
from core.models.analysis import PriceHistory, StockAnalysis
from core.models.config import SYMBOL_SUFFIX, AnalysisConfig


def display_name(symbol: str) -> str:
    """Strip the exchange suffix (``CBA.AX`` -> ``CBA``)."""
    return symbol.replace(SYMBOL_SUFFIX, "")


def analyze_stock(
    symbol: str,
    prices: Sequence[float],
    volume: Sequence[int],
    dates: Sequence[date] = (),
    config: AnalysisConfig | None = None,
) -> StockAnalysis:
    """
    Analyze one ticker's price/volume history.

    Args:
        symbol: Ticker symbol (e.g. ``BHP.AX``)
        prices: Close prices, oldest first (non-empty)
        volume: Volumes aligned with ``prices``
        dates: Optional dates aligned with ``prices``
        config: Indicator periods and gain thresholds

    Returns:
        StockAnalysis combining indicators and both classifications
    """
    indicators = IndicatorCalculator(config).calculate(prices)
    snapshot = SeriesSnapshot.from_series(prices, volume, indicators)

    current_price = float(prices[-1])
    previous_price = float(prices[-2]) if len(prices) > 1 else current_price

    return StockAnalysis(
        symbol=symbol,
        name=display_name(symbol),
        current_price=current_price,
        change=current_price - previous_price,
        change_percent=snapshot.change_percent,
        prices=tuple(prices),
        volume=tuple(volume),
        dates=tuple(dates),
        indicators=indicators,
        classification=score_trend(snapshot),
        gain=score_gain(snapshot, config),
    )


def analyze_history(
    history: PriceHistory,
    config: AnalysisConfig | None = None,
) -> StockAnalysis:
    """Analyze a generated PriceHistory."""
    return analyze_stock(
        history.symbol,
        history.prices,
        history.volume,
        history.dates,
        config=config,
    )
