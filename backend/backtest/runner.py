"""BacktestRunner: simulated replay of the gain predictor over recent days.

There is no historical data behind this. For each day a fresh random
history is generated per symbol; stocks flagged as high-probability
gainers get a simulated outcome whose success chance equals their
predicted probability. The numbers show how the scoring behaves, not how
it would have traded.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date, timedelta

from core.analyzer import analyze_history
from core.models.config import AnalysisConfig
from core.synthetic import HISTORY_LENGTH, MarketSimulator

from backtest.stats import (
    BacktestResult,
    DayResult,
    PredictionOutcome,
    StatisticsCalculator,
)

logger = logging.getLogger(__name__)

# Simulated outcomes (percent)
WIN_GAIN_MIN = 1.0
WIN_GAIN_SPAN = 2.0
LOSS_GAIN_MIN = -0.5
LOSS_GAIN_SPAN = 1.3


@dataclass
class BacktestConfig:
    """Configuration for a backtest run."""

    symbols: list[str]
    days: int = 7
    history_length: int = HISTORY_LENGTH
    end_date: date | None = None  # defaults to today; the run covers the days before it


class BacktestRunner:
    """Run the simulated backtest one day at a time."""

    def __init__(
        self,
        config: BacktestConfig,
        simulator: MarketSimulator | None = None,
        analysis_config: AnalysisConfig | None = None,
    ):
        self.config = config
        self._simulator = simulator or MarketSimulator()
        self._analysis_config = analysis_config
        self._calculator = StatisticsCalculator()

    def run(self) -> BacktestResult:
        """Execute the backtest, oldest day first."""
        start_time = time.time()
        end = self.config.end_date or date.today()

        logger.info(
            f"Starting backtest: {len(self.config.symbols)} symbols, "
            f"{self.config.days} days before {end:%Y-%m-%d}"
        )

        days = []
        for offset in range(self.config.days, 0, -1):
            day = end - timedelta(days=offset)
            day_result = self._run_day(day)
            days.append(day_result)
            logger.info(
                f"  {day:%Y-%m-%d}: {day_result.total_predictions} predictions, "
                f"win rate {day_result.win_rate:.1f}%"
            )

        result = self._calculator.calculate(days, self.config.symbols)

        elapsed = time.time() - start_time
        logger.info(
            f"Backtest completed in {elapsed:.2f}s: "
            f"{result.total_predictions} predictions, "
            f"{result.overall_win_rate:.1f}% win rate"
        )
        return result

    def _run_day(self, day: date) -> DayResult:
        """Analyze every symbol as of ``day`` and simulate flagged gainers."""
        outcomes: list[PredictionOutcome] = []

        for symbol in self.config.symbols:
            history = self._simulator.random_history(
                symbol, length=self.config.history_length, end=day
            )
            analysis = analyze_history(history, self._analysis_config)
            if not analysis.is_high_probability:
                continue

            outcome = self._simulate_outcome(symbol, analysis.gain_probability)
            logger.debug(
                f"[{day:%Y-%m-%d}] {symbol}: predicted {outcome.predicted_prob}% "
                f"-> {outcome.actual_gain:+.2f}%"
            )
            outcomes.append(outcome)

        return self._calculator.summarize_day(day, outcomes)

    def _simulate_outcome(self, symbol: str, gain_probability: int) -> PredictionOutcome:
        """Draw success with chance ``gain_probability``% and a matching gain."""
        succeeded = self._simulator.uniform() < gain_probability / 100
        if succeeded:
            actual_gain = WIN_GAIN_MIN + self._simulator.uniform() * WIN_GAIN_SPAN
        else:
            actual_gain = LOSS_GAIN_MIN + self._simulator.uniform() * LOSS_GAIN_SPAN
        return PredictionOutcome(
            symbol=symbol,
            predicted_prob=gain_probability,
            actual_gain=actual_gain,
        )
