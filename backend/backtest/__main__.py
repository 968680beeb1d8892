"""CLI entry point for the simulated backtest.

Usage:
    python -m backtest
    python -m backtest --days 14 --symbol-count 24
    python -m backtest --symbols CBA.AX,BHP.AX --seed 42
    python -m backtest --output results.json
"""

import argparse
import logging
import os
import sys

# Add backend to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.models.config import ASX_SYMBOLS
from core.synthetic import MarketSimulator

from backtest.config import get_backtest_settings
from backtest.report import ReportFormatter
from backtest.runner import BacktestConfig, BacktestRunner


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Must be positive: {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_backtest_settings()
    parser = argparse.ArgumentParser(
        description="Simulated backtest of the high-probability gainer predictor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m backtest
  python -m backtest --days 14 --seed 42
  python -m backtest --symbols CBA.AX,BHP.AX,CSL.AX
  python -m backtest --output results.json
        """,
    )
    parser.add_argument(
        "--days",
        type=positive_int,
        default=settings.days,
        help=f"Number of days to simulate (default: {settings.days})",
    )
    parser.add_argument(
        "--symbols",
        type=str,
        default=None,
        help="Comma-separated symbols (default: first --symbol-count ASX symbols)",
    )
    parser.add_argument(
        "--symbol-count",
        type=positive_int,
        default=settings.symbol_count,
        help=f"How many ASX symbols to test (default: {settings.symbol_count})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Random seed for a reproducible run",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file path for JSON results",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = get_backtest_settings()
    if args.symbols:
        symbols = [s.strip() for s in args.symbols.split(",") if s.strip()]
    else:
        symbols = ASX_SYMBOLS[: args.symbol_count]

    print(f"\nBacktest: {', '.join(symbols)}")
    print(f"Days: {args.days}")

    config = BacktestConfig(
        symbols=symbols,
        days=args.days,
        history_length=settings.history_length,
    )
    runner = BacktestRunner(config=config, simulator=MarketSimulator(seed=args.seed))

    print("\nRunning backtest...")
    result = runner.run()

    ReportFormatter.print_console(result)

    if args.output:
        ReportFormatter.save_json(result, args.output)


if __name__ == "__main__":
    main()
