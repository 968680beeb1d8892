"""Report formatting for backtest results.

Outputs results to console (formatted tables) and JSON files.
"""

from __future__ import annotations

from pathlib import Path

import orjson

from backtest.stats import BacktestResult, TARGET_GAIN, performance_label


class ReportFormatter:
    """Format backtest results for display and export."""

    @staticmethod
    def print_console(result: BacktestResult) -> None:
        """Print formatted report to console."""
        print("\n" + "=" * 70)
        print("  BACKTEST RESULTS - High Probability Gainers (simulated)")
        print("=" * 70)
        print(f"  Period: {result.start_date:%Y-%m-%d} → {result.end_date:%Y-%m-%d}")
        print(f"  Symbols: {', '.join(result.symbols)}")

        # Overall
        print("\n" + "-" * 70)
        print("  OVERALL")
        print("-" * 70)
        print(f"  Total predictions:  {result.total_predictions}")
        print(f"  Wins:               {result.successful_predictions}")
        print(f"  Losses:             {result.failed_predictions}")
        grade = performance_label(result.overall_win_rate)
        print(f"  Win rate:           {result.overall_win_rate:.1f}% ({grade})")
        hit = "MEETS" if result.avg_gain >= TARGET_GAIN else "BELOW"
        print(f"  Avg gain per trade: {result.avg_gain:+.2f}% ({hit} {TARGET_GAIN:.0f}% target)")
        print(f"  Best day win rate:  {result.best_day_win_rate:.0f}%")

        # By day
        if result.days:
            print("\n" + "-" * 70)
            print("  BY DAY")
            print("-" * 70)
            print(f"  {'Date':<10} {'Preds':>6} {'Wins':>6} {'Losses':>7} {'Win%':>7} {'Avg gain':>9}")
            for d in result.days:
                print(
                    f"  {d.label:<10} {d.total_predictions:>6} {d.successful_predictions:>6} "
                    f"{d.failed_predictions:>7} {d.win_rate:>6.0f}% {d.avg_gain:>+8.2f}%"
                )
                for p in d.predictions:
                    mark = "✓" if p.success else "✗"
                    print(
                        f"      {mark} {p.symbol:<8} predicted {p.predicted_prob:>3}%  "
                        f"actual {p.actual_gain:+.2f}%"
                    )

        print("\n" + "=" * 70)

    @staticmethod
    def to_dict(result: BacktestResult) -> dict:
        """Convert results to JSON-serializable dict."""
        return {
            "metadata": {
                "start_date": result.start_date.isoformat(),
                "end_date": result.end_date.isoformat(),
                "symbols": result.symbols,
            },
            "overall": {
                "total_predictions": result.total_predictions,
                "successful_predictions": result.successful_predictions,
                "failed_predictions": result.failed_predictions,
                "win_rate": round(result.overall_win_rate, 2),
                "avg_gain": round(result.avg_gain, 4),
                "best_day_win_rate": round(result.best_day_win_rate, 2),
                "performance": performance_label(result.overall_win_rate),
            },
            "days": [
                {
                    "date": d.date.isoformat(),
                    "label": d.label,
                    "total_predictions": d.total_predictions,
                    "successful_predictions": d.successful_predictions,
                    "failed_predictions": d.failed_predictions,
                    "win_rate": round(d.win_rate, 2),
                    "avg_gain": round(d.avg_gain, 4),
                    "predictions": [
                        {
                            "symbol": p.symbol,
                            "predicted_prob": p.predicted_prob,
                            "actual_gain": round(p.actual_gain, 4),
                            "success": p.success,
                        }
                        for p in d.predictions
                    ],
                }
                for d in result.days
            ],
        }

    @staticmethod
    def save_json(result: BacktestResult, filepath: str) -> None:
        """Save results to JSON file."""
        data = ReportFormatter.to_dict(result)
        Path(filepath).write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))
        print(f"\nResults saved to {filepath}")
