"""Statistics for the simulated gain-prediction backtest.

A prediction is a stock flagged as a high-probability intraday gainer on
a given day. It counts as a win when its simulated gain reaches the 1%
target.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

logger = logging.getLogger(__name__)

TARGET_GAIN = 1.0  # percent
DETAIL_LIMIT = 5   # predictions kept per day for the detail view

# Win-rate bands used to grade a run
EXCELLENT_WIN_RATE = 70.0
GOOD_WIN_RATE = 60.0
MARGINAL_WIN_RATE = 50.0


def performance_label(win_rate: float) -> str:
    """Grade a win rate: excellent, good, marginal or underperforming."""
    if win_rate >= EXCELLENT_WIN_RATE:
        return "excellent"
    if win_rate >= GOOD_WIN_RATE:
        return "good"
    if win_rate >= MARGINAL_WIN_RATE:
        return "marginal"
    return "underperforming"


@dataclass
class PredictionOutcome:
    symbol: str
    predicted_prob: int
    actual_gain: float  # percent

    @property
    def success(self) -> bool:
        return self.actual_gain >= TARGET_GAIN


@dataclass
class DayResult:
    date: date
    total_predictions: int = 0
    successful_predictions: int = 0
    failed_predictions: int = 0
    win_rate: float = 0.0
    avg_gain: float = 0.0
    predictions: list[PredictionOutcome] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Short display date, e.g. ``Oct 11``."""
        return f"{self.date:%b} {self.date.day}"


@dataclass
class BacktestResult:
    """Complete backtest results."""

    # Metadata
    start_date: date
    end_date: date
    symbols: list[str]

    days: list[DayResult] = field(default_factory=list)

    # Overall
    total_predictions: int = 0
    successful_predictions: int = 0
    failed_predictions: int = 0
    overall_win_rate: float = 0.0
    avg_gain: float = 0.0  # mean of the daily average gains
    best_day_win_rate: float = 0.0


class StatisticsCalculator:
    """Calculate per-day and overall backtest statistics."""

    def summarize_day(self, day: date, outcomes: list[PredictionOutcome]) -> DayResult:
        total = len(outcomes)
        wins = sum(1 for o in outcomes if o.success)
        result = DayResult(
            date=day,
            total_predictions=total,
            successful_predictions=wins,
            failed_predictions=total - wins,
            predictions=outcomes[:DETAIL_LIMIT],
        )
        if total > 0:
            result.win_rate = wins / total * 100
            result.avg_gain = sum(o.actual_gain for o in outcomes) / total
        return result

    def calculate(
        self,
        days: list[DayResult],
        symbols: list[str],
    ) -> BacktestResult:
        days = sorted(days, key=lambda d: d.date)
        if days:
            start_date, end_date = days[0].date, days[-1].date
        else:
            start_date = end_date = date.today()

        result = BacktestResult(
            start_date=start_date,
            end_date=end_date,
            symbols=symbols,
            days=days,
        )
        self._calc_overall(result)
        return result

    def _calc_overall(self, result: BacktestResult) -> None:
        result.total_predictions = sum(d.total_predictions for d in result.days)
        result.successful_predictions = sum(d.successful_predictions for d in result.days)
        result.failed_predictions = result.total_predictions - result.successful_predictions

        if result.total_predictions > 0:
            result.overall_win_rate = (
                result.successful_predictions / result.total_predictions * 100
            )
        if result.days:
            result.avg_gain = sum(d.avg_gain for d in result.days) / len(result.days)
            result.best_day_win_rate = max(d.win_rate for d in result.days)
