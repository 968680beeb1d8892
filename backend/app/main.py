"""Main application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

# Configure logging FIRST, before any other imports
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)

# Reduce noise from third-party libraries
logging.getLogger("asyncio").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from app.api import manager, router, to_card, websocket_endpoint
from app.config import Settings, get_settings
from app.services import Screener
from backtest import BacktestConfig, BacktestRunner
from backtest.stats import BacktestResult
from core.synthetic import MarketSimulator

logger = logging.getLogger(__name__)

_refresh_task: asyncio.Task | None = None


def snapshot_payload(screener: Screener) -> dict:
    """Build the WebSocket payload for the current snapshot."""
    return {
        "last_update": screener.last_update.isoformat() if screener.last_update else None,
        "counts": screener.counts(),
        "stocks": [to_card(s).model_dump(mode="json") for s in screener.stocks],
    }


async def periodic_refresh(screener: Screener, interval: float) -> None:
    """Background task to regenerate the snapshot every ``interval`` seconds."""
    while True:
        try:
            await asyncio.sleep(interval)
            screener.refresh()
            await manager.send_snapshot(snapshot_payload(screener))
        except asyncio.CancelledError:
            break
        except Exception as e:
            logger.warning(f"Snapshot refresh error: {e}")


def run_backtest(settings: Settings) -> BacktestResult:
    """Run the dashboard's simulated backtest over the configured symbols."""
    config = BacktestConfig(
        symbols=settings.symbols[: settings.backtest_symbol_count],
        days=settings.backtest_days,
        history_length=settings.history_length,
    )
    simulator = MarketSimulator(seed=settings.random_seed)
    return BacktestRunner(config=config, simulator=simulator).run()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global _refresh_task

    logger.info("Starting ASX Trend Dashboard...")
    settings = get_settings()

    screener = Screener(
        symbols=settings.symbols,
        simulator=MarketSimulator(seed=settings.random_seed),
        history_length=settings.history_length,
    )
    screener.refresh()
    app.state.screener = screener

    app.state.backtest = run_backtest(settings)

    _refresh_task = asyncio.create_task(
        periodic_refresh(screener, settings.refresh_interval)
    )
    logger.info(f"Snapshot refresh every {settings.refresh_interval:.0f}s")

    yield

    # Shutdown
    logger.info("Shutting down...")

    if _refresh_task:
        _refresh_task.cancel()
        try:
            await _refresh_task
        except asyncio.CancelledError:
            pass
        _refresh_task = None

    logger.info("Shutdown complete")


# Create FastAPI app with orjson for faster JSON serialization
app = FastAPI(
    title="ASX Trend Dashboard",
    description="Indicator-based trend and intraday gain screener for ASX stocks (synthetic data)",
    version="0.1.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include REST routes
app.include_router(router, prefix="/api")

# WebSocket endpoint
app.websocket("/ws")(websocket_endpoint)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "ASX Trend Dashboard",
        "version": "0.1.0",
        "docs": "/docs",
        "data": "synthetic",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def main():
    """Run the application."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
