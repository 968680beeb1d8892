"""REST API routes."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from app.config import get_settings
from app.services import Screener, StockFilter
from backtest.report import ReportFormatter
from core.models.analysis import Signal, StockAnalysis

logger = logging.getLogger(__name__)

router = APIRouter()


# Response models
class StockCard(BaseModel):
    """Summary shown on a dashboard card."""

    symbol: str
    name: str
    current_price: float
    change: float
    change_percent: float
    prediction: str
    confidence: float
    gain_probability: int
    is_high_probability: bool
    rsi: float
    macd_histogram: float
    sma20: float
    sma50: float
    signals: list[Signal]
    gain_reasons: list[str]


class SystemStatus(BaseModel):
    """System status response."""

    status: str
    version: str
    symbols: list[str]
    refresh_interval: float
    last_update: Optional[datetime] = None
    counts: dict[str, int]


def to_card(stock: StockAnalysis) -> StockCard:
    """Flatten an analysis into a card."""
    return StockCard(
        symbol=stock.symbol,
        name=stock.name,
        current_price=stock.current_price,
        change=stock.change,
        change_percent=stock.change_percent,
        prediction=stock.prediction.value,
        confidence=stock.classification.confidence,
        gain_probability=stock.gain_probability,
        is_high_probability=stock.is_high_probability,
        rsi=stock.indicators.rsi,
        macd_histogram=stock.indicators.macd.histogram,
        sma20=stock.indicators.sma20,
        sma50=stock.indicators.sma50,
        signals=list(stock.classification.signals),
        gain_reasons=list(stock.gain.gain_reasons),
    )


# Dependency for the screener held by the app
def get_screener(request: Request) -> Screener:
    return request.app.state.screener


@router.get("/status", response_model=SystemStatus)
async def get_status(request: Request):
    """Get system status."""
    settings = get_settings()
    screener = get_screener(request)

    return SystemStatus(
        status="running",
        version="0.1.0",
        symbols=screener.symbols,
        refresh_interval=settings.refresh_interval,
        last_update=screener.last_update,
        counts=screener.counts(),
    )


@router.get("/stocks", response_model=list[StockCard])
async def get_stocks(
    request: Request,
    filter: StockFilter = Query(StockFilter.ALL, description="all, bullish, bearish or gainers"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum stocks to return"),
):
    """Get the current snapshot for one dashboard tab."""
    screener = get_screener(request)
    return [to_card(s) for s in screener.filter_stocks(filter, limit=limit)]


@router.get("/stocks/{symbol}", response_model=StockAnalysis)
async def get_stock(request: Request, symbol: str):
    """Get the full analysis (series included) for one symbol."""
    screener = get_screener(request)
    try:
        return screener.get(symbol)
    except KeyError:
        raise HTTPException(status_code=404, detail="Symbol not found")


@router.get("/backtest")
async def get_backtest(request: Request):
    """Get the simulated backtest computed at startup."""
    result = request.app.state.backtest
    if result is None:
        raise HTTPException(status_code=503, detail="Backtest not available")
    return ReportFormatter.to_dict(result)
