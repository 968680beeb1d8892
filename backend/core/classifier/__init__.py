"""Rule-based classifiers over indicator snapshots.

Public API:
- classify_trend: bullish/bearish/neutral label with confidence and signals
- predict_intraday_gain: 0-95 gain probability with reasons
- TREND_RULES / GAIN_RULES: the ordered rule tables
"""

from core.classifier.rules import (
    GainRule,
    SeriesSnapshot,
    TrendRule,
    percent_change,
)
from core.classifier.trend import TREND_RULES, classify_trend, score_trend
from core.classifier.gain import GAIN_RULES, predict_intraday_gain, score_gain

__all__ = [
    "GainRule",
    "SeriesSnapshot",
    "TrendRule",
    "percent_change",
    "TREND_RULES",
    "classify_trend",
    "score_trend",
    "GAIN_RULES",
    "predict_intraday_gain",
    "score_gain",
]
