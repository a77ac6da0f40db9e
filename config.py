# config.py
import os

# ---------- Market ----------
ASSETS = ["A", "B", "C"]
INITIAL_PRICES = {"A": 100.0, "B": 120.0, "C": 80.0}
PRICE_FLOOR = 0.01
DRIFT_RANGE = 0.04  # +/- 4c per tick
IMPACT_PER_UNIT = 0.002  # 0.2% per 100 units
MAX_ORDER_QTY = 1_000_000  # larger orders are clipped
TICK_SECONDS = float(os.environ.get("MARKET_TICK_SECONDS", "1.0"))
TICKER_ENABLED = os.environ.get("MARKET_TICKER", "1") != "0"
MARKET_SEED = (int(os.environ["MARKET_SEED"])
               if os.environ.get("MARKET_SEED") else None)

# ---------- Players ----------
DEFAULT_NAME = "Player"
MAX_NAME_LENGTH = 24
LEADERBOARD_SIZE = 10

# ---------- Server ----------
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "4000"))

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
