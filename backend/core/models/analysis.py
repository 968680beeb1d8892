"""Indicator snapshots and classification result models."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict


class SignalType(str, Enum):
    """Direction of a single rule trigger."""

    BULLISH = "bullish"
    BEARISH = "bearish"


class Prediction(str, Enum):
    """Trend label for a ticker."""

    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


class MacdValue(BaseModel):
    """MACD line, signal line and histogram.

    The signal line is never computed and stays at 0, so the histogram
    always equals the MACD line.
    """

    model_config = ConfigDict(frozen=True)

    macd: float = 0.0
    signal: float = 0.0
    histogram: float = 0.0


class IndicatorSet(BaseModel):
    """Indicator values for the latest point of a price series.

    ``sma20``/``sma50`` are EMAs of the last 20/50 prices, not simple
    averages. The names are kept for compatibility with existing consumers.
    """

    model_config = ConfigDict(frozen=True)

    rsi: float
    macd: MacdValue
    sma20: float
    sma50: float


class Signal(BaseModel):
    """A triggered trend rule."""

    model_config = ConfigDict(frozen=True)

    type: SignalType
    indicator: str  # "RSI", "MACD", "MA", "Volume"
    reason: str


class ClassificationResult(BaseModel):
    """Trend label with conviction and the signals that produced it."""

    model_config = ConfigDict(frozen=True)

    prediction: Prediction
    confidence: float  # 0-100, distance from neutral
    signals: tuple[Signal, ...] = ()
    bullish_score: int = 0
    bearish_score: int = 0


class GainPrediction(BaseModel):
    """Heuristic probability of a 1%+ intraday gain."""

    model_config = ConfigDict(frozen=True)

    gain_probability: int  # 0-95
    gain_reasons: tuple[str, ...] = ()
    is_high_probability: bool = False


class PriceHistory(BaseModel):
    """Daily close prices and volumes for one symbol, oldest first."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    prices: tuple[float, ...]
    volume: tuple[int, ...]
    dates: tuple[date, ...] = ()

    @property
    def current_price(self) -> float:
        """Get the most recent close."""
        return self.prices[-1]


class StockAnalysis(BaseModel):
    """Full analysis of one ticker, as shown on a dashboard card."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    current_price: float
    change: float
    change_percent: float
    prices: tuple[float, ...]
    volume: tuple[int, ...]
    dates: tuple[date, ...] = ()
    indicators: IndicatorSet
    classification: ClassificationResult
    gain: GainPrediction

    @property
    def prediction(self) -> Prediction:
        return self.classification.prediction

    @property
    def gain_probability(self) -> int:
        return self.gain.gain_probability

    @property
    def is_high_probability(self) -> bool:
        return self.gain.is_high_probability
