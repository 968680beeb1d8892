"""Tests for the market screener."""

import pytest

from app.services import Screener, StockFilter, apply_filter
from core.models.analysis import Prediction
from core.models.config import ASX_SYMBOLS
from core.synthetic import MarketSimulator


@pytest.fixture
def screener():
    screener = Screener(symbols=ASX_SYMBOLS, simulator=MarketSimulator(seed=2024))
    screener.refresh()
    return screener


class TestRefresh:
    def test_empty_before_refresh(self):
        screener = Screener(symbols=["CBA.AX"], simulator=MarketSimulator(seed=1))
        assert screener.stocks == []
        assert screener.last_update is None

    def test_covers_all_symbols(self, screener):
        assert len(screener.stocks) == len(ASX_SYMBOLS) == 24
        assert {s.symbol for s in screener.stocks} == set(ASX_SYMBOLS)
        assert screener.last_update is not None

    def test_sorted_by_biggest_movers(self, screener):
        moves = [abs(s.change_percent) for s in screener.stocks]
        assert moves == sorted(moves, reverse=True)

    def test_history_length(self):
        screener = Screener(
            symbols=["CBA.AX", "BHP.AX"],
            simulator=MarketSimulator(seed=3),
            history_length=80,
        )
        stocks = screener.refresh()
        assert all(len(s.prices) == 80 for s in stocks)

    def test_refresh_replaces_snapshot(self, screener):
        before = screener.stocks
        after = screener.refresh()

        assert screener.stocks is after
        assert before is not after
        assert [s.prices for s in before] != [s.prices for s in after]

    def test_seeded_screeners_agree(self):
        first = Screener(symbols=ASX_SYMBOLS[:5], simulator=MarketSimulator(seed=9)).refresh()
        second = Screener(symbols=ASX_SYMBOLS[:5], simulator=MarketSimulator(seed=9)).refresh()
        assert first == second


class TestFilters:
    def test_all(self, screener):
        assert screener.filter_stocks(StockFilter.ALL) == screener.stocks

    def test_bullish(self, screener):
        result = screener.filter_stocks(StockFilter.BULLISH)
        assert all(s.prediction == Prediction.BULLISH for s in result)

    def test_bearish(self, screener):
        result = screener.filter_stocks(StockFilter.BEARISH)
        assert all(s.prediction == Prediction.BEARISH for s in result)

    def test_gainers_sorted_by_probability(self, screener):
        result = screener.filter_stocks(StockFilter.GAINERS)
        assert all(s.is_high_probability for s in result)
        probabilities = [s.gain_probability for s in result]
        assert probabilities == sorted(probabilities, reverse=True)

    def test_limit(self, screener):
        assert len(screener.filter_stocks(StockFilter.ALL, limit=10)) == 10

    def test_counts(self, screener):
        counts = screener.counts()

        assert set(counts) == {"all", "bullish", "bearish", "gainers"}
        assert counts["all"] == 24
        assert counts["bullish"] + counts["bearish"] <= counts["all"]
        assert counts["gainers"] == sum(1 for s in screener.stocks if s.is_high_probability)

    def test_apply_filter_does_not_mutate(self, screener):
        stocks = screener.stocks
        order = [s.symbol for s in stocks]
        apply_filter(stocks, StockFilter.GAINERS)
        assert [s.symbol for s in stocks] == order

    def test_filter_from_string(self):
        assert StockFilter("gainers") == StockFilter.GAINERS
        with pytest.raises(ValueError):
            StockFilter("losers")


class TestLookup:
    def test_full_symbol(self, screener):
        assert screener.get("CBA.AX").symbol == "CBA.AX"

    def test_bare_code_and_case(self, screener):
        assert screener.get("cba").symbol == "CBA.AX"

    def test_unknown_symbol(self, screener):
        with pytest.raises(KeyError):
            screener.get("XYZ")
