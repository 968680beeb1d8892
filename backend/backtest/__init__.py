"""Simulated backtest of the high-probability gainer predictor.

Fully independent of app/: only depends on core/ for business logic.
Outcomes are drawn at random from each prediction's own probability; no
historical prices are involved.

Usage:
    python -m backtest
    python -m backtest --days 14 --seed 42 --output results.json
"""

from backtest.runner import BacktestConfig, BacktestRunner
from backtest.stats import BacktestResult

__all__ = ["BacktestConfig", "BacktestRunner", "BacktestResult"]
