"""Value types and configuration shared by the engine, service and backtest."""

from core.models.analysis import (
    ClassificationResult,
    GainPrediction,
    IndicatorSet,
    MacdValue,
    Prediction,
    PriceHistory,
    Signal,
    SignalType,
    StockAnalysis,
)
from core.models.config import (
    ASX_SYMBOLS,
    DEFAULT_ANALYSIS_CONFIG,
    SYMBOL_SUFFIX,
    AnalysisConfig,
)

__all__ = [
    "ClassificationResult",
    "GainPrediction",
    "IndicatorSet",
    "MacdValue",
    "Prediction",
    "PriceHistory",
    "Signal",
    "SignalType",
    "StockAnalysis",
    "ASX_SYMBOLS",
    "DEFAULT_ANALYSIS_CONFIG",
    "SYMBOL_SUFFIX",
    "AnalysisConfig",
]
