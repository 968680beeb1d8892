"""Market screener: analyze the whole ticker universe in one pass.

Each refresh draws a new random history per symbol, runs the analysis
engine on it and replaces the snapshot. Readers always see a complete
snapshot because the list is swapped, never edited in place.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum

from core.analyzer import analyze_history
from core.models.analysis import Prediction, StockAnalysis
from core.models.config import SYMBOL_SUFFIX, AnalysisConfig
from core.synthetic import HISTORY_LENGTH, MarketSimulator

logger = logging.getLogger(__name__)


class StockFilter(str, Enum):
    """Dashboard tabs."""

    ALL = "all"
    BULLISH = "bullish"
    BEARISH = "bearish"
    GAINERS = "gainers"


def apply_filter(
    stocks: list[StockAnalysis],
    stock_filter: StockFilter = StockFilter.ALL,
) -> list[StockAnalysis]:
    """Filter a snapshot; gainers are re-sorted by gain probability."""
    if stock_filter == StockFilter.BULLISH:
        return [s for s in stocks if s.prediction == Prediction.BULLISH]
    if stock_filter == StockFilter.BEARISH:
        return [s for s in stocks if s.prediction == Prediction.BEARISH]
    if stock_filter == StockFilter.GAINERS:
        gainers = [s for s in stocks if s.is_high_probability]
        return sorted(gainers, key=lambda s: s.gain_probability, reverse=True)
    return list(stocks)


class Screener:
    """Holds the latest analysis snapshot for a list of symbols."""

    def __init__(
        self,
        symbols: list[str],
        simulator: MarketSimulator | None = None,
        history_length: int = HISTORY_LENGTH,
        config: AnalysisConfig | None = None,
    ):
        self.symbols = list(symbols)
        self.history_length = history_length
        self._simulator = simulator or MarketSimulator()
        self._config = config
        self._stocks: list[StockAnalysis] = []
        self._by_symbol: dict[str, StockAnalysis] = {}
        self._last_update: datetime | None = None

    @property
    def stocks(self) -> list[StockAnalysis]:
        """Latest snapshot, biggest movers first."""
        return self._stocks

    @property
    def last_update(self) -> datetime | None:
        return self._last_update

    def refresh(self) -> list[StockAnalysis]:
        """Regenerate and re-analyze every symbol."""
        stocks = []
        for symbol in self.symbols:
            history = self._simulator.random_history(symbol, length=self.history_length)
            stocks.append(analyze_history(history, self._config))

        # Biggest movers first
        stocks.sort(key=lambda s: abs(s.change_percent), reverse=True)

        self._stocks = stocks
        self._by_symbol = {s.symbol: s for s in stocks}
        self._last_update = datetime.now(timezone.utc)

        counts = self.counts()
        logger.info(
            "Screener refreshed %d symbols: %d bullish, %d bearish, %d gainers",
            counts[StockFilter.ALL.value],
            counts[StockFilter.BULLISH.value],
            counts[StockFilter.BEARISH.value],
            counts[StockFilter.GAINERS.value],
        )
        return stocks

    def filter_stocks(
        self,
        stock_filter: StockFilter = StockFilter.ALL,
        limit: int | None = None,
    ) -> list[StockAnalysis]:
        """Get the snapshot for one dashboard tab."""
        result = apply_filter(self._stocks, stock_filter)
        if limit is not None:
            result = result[:limit]
        return result

    def counts(self) -> dict[str, int]:
        """Number of stocks per tab."""
        return {f.value: len(apply_filter(self._stocks, f)) for f in StockFilter}

    def get(self, symbol: str) -> StockAnalysis:
        """
        Look up one symbol in the snapshot.

        Accepts the bare code (``CBA``) as well as ``CBA.AX``.

        Raises:
            KeyError: If the symbol is not in the snapshot
        """
        key = symbol.upper()
        if key not in self._by_symbol and not key.endswith(SYMBOL_SUFFIX):
            key = f"{key}{SYMBOL_SUFFIX}"
        try:
            return self._by_symbol[key]
        except KeyError:
            raise KeyError(f"Unknown symbol '{symbol}'") from None
