"""Analysis configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Top ASX 200 stocks covered by the dashboard
ASX_SYMBOLS: list[str] = [
    "CBA.AX", "BHP.AX", "CSL.AX", "NAB.AX", "WBC.AX", "ANZ.AX", "MQG.AX", "WES.AX",
    "GMG.AX", "RIO.AX", "WOW.AX", "FMG.AX", "TCL.AX", "TLS.AX", "WDS.AX", "ALL.AX",
    "COL.AX", "QBE.AX", "STO.AX", "ORG.AX", "REA.AX", "RMD.AX", "NCM.AX", "S32.AX",
]

SYMBOL_SUFFIX = ".AX"


class AnalysisConfig(BaseModel):
    """Indicator periods and scoring limits for the analysis engine."""

    model_config = ConfigDict(frozen=True)

    # Indicator periods
    rsi_period: int = 14
    macd_fast_period: int = 12
    macd_slow_period: int = 26
    short_ma_period: int = 20  # reported as sma20
    long_ma_period: int = 50   # reported as sma50

    # Gain probability
    high_probability_threshold: int = 60
    max_gain_probability: int = 95


DEFAULT_ANALYSIS_CONFIG = AnalysisConfig()
