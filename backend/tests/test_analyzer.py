"""Tests for the one-call stock analyzer."""

from datetime import date, timedelta

import pytest

from core.analyzer import analyze_history, analyze_stock, display_name
from core.models.analysis import Prediction, PriceHistory
from core.synthetic import MarketSimulator


class TestAnalyzeStock:
    def test_price_fields(self):
        prices = [10.0] * 58 + [20.0, 21.0]
        volume = [1_000_000] * 60

        result = analyze_stock("BHP.AX", prices, volume)

        assert result.symbol == "BHP.AX"
        assert result.name == "BHP"
        assert result.current_price == 21.0
        assert result.change == pytest.approx(1.0)
        assert result.change_percent == pytest.approx(5.0)
        assert len(result.prices) == 60
        assert len(result.volume) == 60

    def test_flat_series(self):
        result = analyze_stock("CBA.AX", [10.0] * 60, [1_000_000] * 60)

        assert result.indicators.rsi == 100.0
        assert result.prediction == Prediction.BEARISH
        assert result.classification.confidence == pytest.approx(100.0)
        assert result.gain_probability == 0
        assert result.is_high_probability is False

    def test_idempotent(self):
        history = MarketSimulator(seed=5).random_history("WES.AX")

        first = analyze_history(history)
        second = analyze_history(history)

        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_single_point_does_not_raise(self):
        result = analyze_stock("TLS.AX", [4.0], [2_000_000])

        assert result.change == 0.0
        assert result.change_percent == 0.0
        assert result.indicators.rsi == 50.0
        assert result.indicators.macd.histogram == 0.0

    def test_dates_carried_through(self):
        end = date(2025, 3, 1)
        dates = [end - timedelta(days=30 - i) for i in range(30)]
        result = analyze_stock("RIO.AX", [50.0 + i for i in range(30)], [1] * 30, dates)

        assert result.dates == tuple(dates)

    def test_result_is_frozen(self):
        result = analyze_stock("CSL.AX", [10.0] * 60, [1] * 60)
        with pytest.raises(Exception):
            result.current_price = 0.0


class TestDisplayName:
    @pytest.mark.parametrize(
        "symbol,expected",
        [("CBA.AX", "CBA"), ("S32.AX", "S32"), ("AAPL", "AAPL")],
    )
    def test_strip_suffix(self, symbol, expected):
        assert display_name(symbol) == expected


class TestAnalyzeHistory:
    def test_matches_analyze_stock(self):
        history = PriceHistory(
            symbol="NAB.AX",
            prices=tuple(30.0 + (i % 7) * 0.4 for i in range(60)),
            volume=tuple(1_000_000 + i * 1000 for i in range(60)),
        )

        assert analyze_history(history) == analyze_stock(
            "NAB.AX", history.prices, history.volume
        )
