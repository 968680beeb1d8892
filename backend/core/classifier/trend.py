"""Bullish/bearish/neutral trend classification.

Scoring is additive: every rule that fires adds its weight to the bullish
or bearish side, and the label comes from the bullish share of the total.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.classifier.rules import SeriesSnapshot, TrendRule, TrendVerdict, percent_change
from core.indicators import sma
from core.models.analysis import (
    ClassificationResult,
    IndicatorSet,
    Prediction,
    Signal,
    SignalType,
)

logger = logging.getLogger(__name__)

RSI_OVERSOLD = 30
RSI_OVERBOUGHT = 70
VOLUME_LOOKBACK = 20
VOLUME_SPIKE_MULT = 1.5

BULLISH_ABOVE = 60
BEARISH_BELOW = 40
NEUTRAL_CONFIDENCE = 50.0


def rsi_rule(snapshot: SeriesSnapshot) -> TrendVerdict:
    value = snapshot.indicators.rsi
    if value < RSI_OVERSOLD:
        return SignalType.BULLISH, f"Oversold ({value:.1f})"
    if value > RSI_OVERBOUGHT:
        return SignalType.BEARISH, f"Overbought ({value:.1f})"
    return None


def macd_rule(snapshot: SeriesSnapshot) -> TrendVerdict:
    # A flat histogram counts as bearish
    if snapshot.indicators.macd.histogram > 0:
        return SignalType.BULLISH, "Positive momentum"
    return SignalType.BEARISH, "Negative momentum"


def moving_average_rule(snapshot: SeriesSnapshot) -> TrendVerdict:
    price = snapshot.last_price
    sma20 = snapshot.indicators.sma20
    sma50 = snapshot.indicators.sma50
    if price > sma20 > sma50:
        return SignalType.BULLISH, "Price above MAs, uptrend"
    if price < sma20 < sma50:
        return SignalType.BEARISH, "Price below MAs, downtrend"
    return None


def volume_rule(snapshot: SeriesSnapshot) -> TrendVerdict:
    avg_volume = sma(snapshot.volume, VOLUME_LOOKBACK)
    if snapshot.volume[-1] <= avg_volume * VOLUME_SPIKE_MULT:
        return None
    if percent_change(snapshot.prices) > 0:
        return SignalType.BULLISH, "High volume + price increase"
    return SignalType.BEARISH, "High volume + price decrease"


TREND_RULES: tuple[TrendRule, ...] = (
    TrendRule(indicator="RSI", weight=25, evaluate=rsi_rule),
    TrendRule(indicator="MACD", weight=20, evaluate=macd_rule),
    TrendRule(indicator="MA", weight=30, evaluate=moving_average_rule),
    TrendRule(indicator="Volume", weight=25, evaluate=volume_rule),
)


def score_trend(
    snapshot: SeriesSnapshot,
    rules: Sequence[TrendRule] = TREND_RULES,
) -> ClassificationResult:
    """
    Evaluate trend rules in order and aggregate them into a label.

    Args:
        snapshot: Series and indicators for one ticker
        rules: Ordered rule table

    Returns:
        ClassificationResult with signals in rule order
    """
    signals: list[Signal] = []
    bullish_score = 0
    bearish_score = 0

    for rule in rules:
        verdict = rule.evaluate(snapshot)
        if verdict is None:
            continue
        signal_type, reason = verdict
        signals.append(Signal(type=signal_type, indicator=rule.indicator, reason=reason))
        if signal_type is SignalType.BULLISH:
            bullish_score += rule.weight
        else:
            bearish_score += rule.weight

    total = bullish_score + bearish_score
    if total > 0:
        bullish_confidence = bullish_score / total * 100
    else:
        bullish_confidence = NEUTRAL_CONFIDENCE

    if bullish_confidence > BULLISH_ABOVE:
        prediction = Prediction.BULLISH
    elif bullish_confidence < BEARISH_BELOW:
        prediction = Prediction.BEARISH
    else:
        prediction = Prediction.NEUTRAL

    logger.debug(
        "Trend %s: bullish=%d bearish=%d signals=%d",
        prediction.value, bullish_score, bearish_score, len(signals),
    )

    return ClassificationResult(
        prediction=prediction,
        confidence=abs(bullish_confidence - NEUTRAL_CONFIDENCE) * 2,
        signals=tuple(signals),
        bullish_score=bullish_score,
        bearish_score=bearish_score,
    )


def classify_trend(
    prices: Sequence[float],
    volume: Sequence[int],
    indicators: IndicatorSet,
) -> ClassificationResult:
    """Classify the trend of a price/volume series from its indicators."""
    return score_trend(SeriesSnapshot.from_series(prices, volume, indicators))
