"""Tests for application and backtest settings."""

import pytest

from app.config import Settings
from backtest.config import BacktestSettings
from core.models.config import ASX_SYMBOLS, DEFAULT_ANALYSIS_CONFIG, AnalysisConfig


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("REFRESH_INTERVAL", "RANDOM_SEED", "BACKTEST_DAYS", "PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.symbols == ASX_SYMBOLS
        assert settings.history_length == 60
        assert settings.refresh_interval == 60.0
        assert settings.random_seed is None
        assert settings.backtest_days == 7
        assert settings.backtest_symbol_count == 15
        assert settings.port == 8000

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("REFRESH_INTERVAL", "15")
        monkeypatch.setenv("RANDOM_SEED", "42")
        monkeypatch.setenv("SYMBOLS", '["CBA.AX", "BHP.AX"]')

        settings = Settings(_env_file=None)

        assert settings.refresh_interval == 15.0
        assert settings.random_seed == 42
        assert settings.symbols == ["CBA.AX", "BHP.AX"]


class TestBacktestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("BACKTEST_DAYS", "BACKTEST_SEED"):
            monkeypatch.delenv(name, raising=False)

        settings = BacktestSettings(_env_file=None)

        assert settings.days == 7
        assert settings.symbol_count == 15
        assert settings.seed is None

    def test_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("BACKTEST_DAYS", "14")
        monkeypatch.setenv("BACKTEST_SEED", "3")

        settings = BacktestSettings(_env_file=None)

        assert settings.days == 14
        assert settings.seed == 3


class TestAnalysisConfig:
    def test_defaults(self):
        assert DEFAULT_ANALYSIS_CONFIG.rsi_period == 14
        assert DEFAULT_ANALYSIS_CONFIG.macd_fast_period == 12
        assert DEFAULT_ANALYSIS_CONFIG.macd_slow_period == 26
        assert DEFAULT_ANALYSIS_CONFIG.short_ma_period == 20
        assert DEFAULT_ANALYSIS_CONFIG.long_ma_period == 50
        assert DEFAULT_ANALYSIS_CONFIG.high_probability_threshold == 60
        assert DEFAULT_ANALYSIS_CONFIG.max_gain_probability == 95

    def test_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_ANALYSIS_CONFIG.rsi_period = 7

    def test_universe(self):
        assert len(ASX_SYMBOLS) == 24
        assert all(s.endswith(".AX") for s in ASX_SYMBOLS)
        assert AnalysisConfig().max_gain_probability == 95
