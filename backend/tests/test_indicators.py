"""Tests for technical indicators."""

import pytest

from core.indicators import (
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
from core.models.analysis import MacdValue
from core.models.config import AnalysisConfig


def ramp(start: float, count: int, step: float = 1.0) -> list[float]:
    """Linear price ramp."""
    return [start + i * step for i in range(count)]


def zigzag(start: float, deltas: list[float]) -> list[float]:
    """Prices built from a start value and successive deltas."""
    prices = [start]
    for d in deltas:
        prices.append(prices[-1] + d)
    return prices


class TestRSI:
    """Tests for RSI calculation."""

    @pytest.mark.parametrize("length", [0, 1, 5, 14])
    def test_rsi_insufficient_data(self, length):
        """Fewer than period + 1 prices gives the neutral 50."""
        assert rsi(ramp(10, length)) == NEUTRAL_RSI == 50.0

    def test_rsi_increasing_is_100(self):
        """No losses in the window means RSI 100."""
        result = rsi(ramp(10, 30))
        assert result == 100.0

    def test_rsi_decreasing_is_0(self):
        """No gains in the window means RSI 0."""
        result = rsi(ramp(100, 30, step=-1.0))
        assert result == pytest.approx(0.0)
        assert result >= 0.0

    def test_rsi_balanced_moves(self):
        """Equal gains and losses give 50."""
        prices = zigzag(100, [1, -1] * 7)
        assert rsi(prices) == pytest.approx(50.0)

    def test_rsi_two_to_one(self):
        """Gains twice the losses: RS = 2, RSI = 100 - 100/3."""
        prices = zigzag(100, [2, -1] * 7)
        assert rsi(prices) == pytest.approx(100 - 100 / 3)

    def test_rsi_only_uses_last_period_deltas(self):
        """Deltas older than the window are ignored."""
        prices = [500.0] + zigzag(100, [2, -1] * 7)
        assert rsi(prices) == pytest.approx(100 - 100 / 3)

    def test_rsi_custom_period(self):
        prices = zigzag(100, [1, 1, -1])
        # gains 1, losses 1 over the last 2 deltas
        assert rsi(prices, period=2) == pytest.approx(50.0)


class TestEMA:
    """Tests for EMA calculation."""

    def test_ema_insufficient_data_returns_last_price(self):
        """Test EMA with insufficient data."""
        assert ema([100.0, 101.0, 102.0], 10) == 102.0

    def test_ema_period_equals_length_is_mean(self):
        """No recurrence steps: EMA is the simple mean."""
        values = ramp(1, 10)
        assert ema(values, 10) == pytest.approx(5.5)

    def test_ema_basic(self):
        """Seed with SMA, then one smoothing step."""
        values = ramp(1, 6)
        # seed = mean(1..5) = 3, multiplier = 2/6, (6 - 3) / 3 + 3 = 4
        assert ema(values, 5) == pytest.approx(4.0)

    def test_ema_flat(self):
        assert ema([10.0] * 60, 12) == 10.0


class TestMACD:
    """Tests for MACD calculation."""

    def test_macd_insufficient_data(self):
        assert macd(ramp(1, 25)) == MacdValue(macd=0.0, signal=0.0, histogram=0.0)

    def test_macd_flat_is_zero(self):
        result = macd([10.0] * 60)
        assert result.macd == 0.0
        assert result.histogram == 0.0

    def test_macd_ramp_26(self):
        """On a ramp EMA12 lags by 5.5 steps and EMA26 is the mean."""
        result = macd(ramp(1, 26))
        # EMA12 = 26 - 5.5 = 20.5, EMA26 = mean(1..26) = 13.5
        assert result.macd == pytest.approx(7.0)

    def test_macd_signal_is_always_zero(self):
        result = macd(ramp(50, 60, step=0.7))
        assert result.signal == 0.0
        assert result.histogram == result.macd
        assert result.histogram > 0

    def test_macd_downtrend_negative(self):
        assert macd(ramp(100, 60, step=-0.5)).histogram < 0


class TestMovingAverages:
    """Tests for the truncated-window EMA and helpers."""

    def test_moving_average_is_ema_of_window(self):
        prices = zigzag(50, [1.5, -0.5, 2.0, -3.0] * 15)
        assert moving_average(prices, 20) == ema(prices[-20:], 20)

    def test_moving_average_ramp(self):
        prices = ramp(1, 60)
        assert moving_average(prices, 20) == pytest.approx(50.5)
        assert moving_average(prices, 50) == pytest.approx(35.5)

    def test_moving_average_short_series(self):
        prices = ramp(1, 10)
        assert moving_average(prices, 20) == 10.0

    def test_sma_divides_by_period(self):
        assert sma([1, 2, 3, 4, 5], 5) == pytest.approx(3.0)
        assert sma([10, 20], 5) == pytest.approx(6.0)

    def test_highest_lowest(self):
        values = [1, 3, 2, 5, 4, 6, 3, 8, 7]
        assert highest(values, 3) == 8
        assert lowest(values, 3) == 3
        assert highest(values, 20) == 8
        assert lowest(values, 20) == 1


class TestIndicatorCalculator:
    """Tests for IndicatorCalculator class."""

    def test_calculate_ramp(self):
        result = IndicatorCalculator().calculate(ramp(1, 60))

        assert result.rsi == 100.0
        assert result.macd.histogram > 0
        assert result.sma20 == pytest.approx(50.5)
        assert result.sma50 == pytest.approx(35.5)

    def test_calculate_short_series_degrades(self):
        result = IndicatorCalculator().calculate([12.0, 12.5])

        assert result.rsi == 50.0
        assert result.macd == MacdValue()
        assert result.sma20 == 12.5
        assert result.sma50 == 12.5

    def test_custom_periods(self):
        config = AnalysisConfig(short_ma_period=5, long_ma_period=10)
        result = IndicatorCalculator(config).calculate(ramp(1, 60))

        assert result.sma20 == pytest.approx(58.0)
        assert result.sma50 == pytest.approx(55.5)

    def test_idempotent(self):
        prices = zigzag(40, [0.3, -0.2, 0.5, -0.7, 0.1] * 12)
        calc = IndicatorCalculator()
        assert calc.calculate(prices) == calc.calculate(prices)
