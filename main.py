# main.py
import asyncio
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
# REST routes
from api.routes import router as api_router
from logger import setup_logger
# WebSocket endpoint + market heartbeat
from realtime.endpoints import ws_endpoint
from realtime.ticker import market_ticker

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ticker_task = None
    if config.TICKER_ENABLED:
        ticker_task = asyncio.create_task(market_ticker(config.TICK_SECONDS))
    try:
        yield
    finally:
        if ticker_task:
            ticker_task.cancel()
            with suppress(asyncio.CancelledError):
                await ticker_task


app = FastAPI(title="Live Market Simulation", version="1.0", lifespan=lifespan)

# --- CORS: open for demo clients ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- REST API (health, snapshot) ---
app.include_router(api_router)

# --- WebSockets ---
app.add_api_websocket_route("/ws", ws_endpoint)

# --- Dev runner ---
if __name__ == "__main__":
    import uvicorn
    logger.info("Starting market server on %s:%s", config.HOST, config.PORT)
    uvicorn.run("main:app", host=config.HOST, port=config.PORT)
