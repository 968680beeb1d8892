"""Intraday gain probability (likelihood of a 1%+ move up today)."""

from __future__ import annotations

from typing import Sequence

from core.classifier.rules import GainRule, SeriesSnapshot
from core.indicators import highest, lowest, sma
from core.models.analysis import GainPrediction, IndicatorSet
from core.models.config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig

MOMENTUM_MIN_PCT = 0.3
MOMENTUM_MAX_PCT = 3.0
RSI_SWEET_LOW = 40
RSI_SWEET_HIGH = 65
VOLUME_SPIKE_MULT = 1.5
RANGE_LOOKBACK = 10
RANGE_ENTRY_LOW = 0.3
RANGE_ENTRY_HIGH = 0.7
BREAKOUT_LOOKBACK = 5


def momentum_rule(snapshot: SeriesSnapshot) -> str | None:
    change = snapshot.change_percent
    if MOMENTUM_MIN_PCT < change < MOMENTUM_MAX_PCT:
        return f"Positive momentum today (+{change:.2f}%)"
    return None


def rsi_range_rule(snapshot: SeriesSnapshot) -> str | None:
    value = snapshot.indicators.rsi
    if RSI_SWEET_LOW < value < RSI_SWEET_HIGH:
        return f"RSI in ideal range ({value:.1f}) - room to climb"
    return None


def macd_rule(snapshot: SeriesSnapshot) -> str | None:
    if snapshot.indicators.macd.histogram > 0:
        return "Bullish MACD - momentum building"
    return None


def volume_spike_rule(snapshot: SeriesSnapshot) -> str | None:
    avg_volume = sma(snapshot.volume, 20)
    recent_volume = sma(snapshot.volume, 3)
    if recent_volume > avg_volume * VOLUME_SPIKE_MULT:
        return "Volume spike detected - strong buying interest"
    return None


def entry_position_rule(snapshot: SeriesSnapshot) -> str | None:
    recent_low = lowest(snapshot.prices, RANGE_LOOKBACK)
    recent_high = highest(snapshot.prices, RANGE_LOOKBACK)
    price_range = recent_high - recent_low
    # A flat window has no position
    if price_range == 0:
        return None

    position = (snapshot.current_price - recent_low) / price_range
    if RANGE_ENTRY_LOW < position < RANGE_ENTRY_HIGH:
        return "Price in mid-range - good entry position"
    return None


def breakout_rule(snapshot: SeriesSnapshot) -> str | None:
    sma5 = sma(snapshot.prices, BREAKOUT_LOOKBACK)
    if snapshot.current_price > sma5 and snapshot.change_percent > 0:
        return "Breaking above 5-day average"
    return None


GAIN_RULES: tuple[GainRule, ...] = (
    GainRule(name="momentum", weight=25, evaluate=momentum_rule),
    GainRule(name="rsi_range", weight=20, evaluate=rsi_range_rule),
    GainRule(name="macd", weight=20, evaluate=macd_rule),
    GainRule(name="volume_spike", weight=20, evaluate=volume_spike_rule),
    GainRule(name="entry_position", weight=15, evaluate=entry_position_rule),
    GainRule(name="breakout", weight=10, evaluate=breakout_rule),
)


def score_gain(
    snapshot: SeriesSnapshot,
    config: AnalysisConfig | None = None,
    rules: Sequence[GainRule] = GAIN_RULES,
) -> GainPrediction:
    """
    Sum the weights of all firing gain rules.

    The total is capped at ``config.max_gain_probability``; the high
    probability flag is decided on the uncapped total.

    Args:
        snapshot: Series and indicators for one ticker
        config: Threshold and cap
        rules: Ordered rule table

    Returns:
        GainPrediction with reasons in rule order
    """
    cfg = config or DEFAULT_ANALYSIS_CONFIG
    score = 0
    reasons: list[str] = []

    for rule in rules:
        reason = rule.evaluate(snapshot)
        if reason is not None:
            score += rule.weight
            reasons.append(reason)

    return GainPrediction(
        gain_probability=min(score, cfg.max_gain_probability),
        gain_reasons=tuple(reasons),
        is_high_probability=score >= cfg.high_probability_threshold,
    )


def predict_intraday_gain(
    prices: Sequence[float],
    volume: Sequence[int],
    indicators: IndicatorSet,
    current_price: float,
    change_percent: float,
    config: AnalysisConfig | None = None,
) -> GainPrediction:
    """Score the chance of a 1%+ intraday gain for one ticker."""
    snapshot = SeriesSnapshot.from_series(
        prices,
        volume,
        indicators,
        current_price=current_price,
        change_percent=change_percent,
    )
    return score_gain(snapshot, config)
