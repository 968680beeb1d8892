"""Core analysis logic: indicators, classifiers, models and synthetic data.

This package contains pure business logic with no I/O dependencies
(no network, no storage). It is shared between the dashboard service
(app/) and the simulated backtest (backtest/). Randomness is confined to
core.synthetic and always comes from an injected generator.
"""
