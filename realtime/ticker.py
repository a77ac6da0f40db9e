import asyncio

import config
import state
from logger import setup_logger
from realtime.utils import broadcast, snapshot_message

logger = setup_logger(__name__)


async def market_ticker(tick_s: float = config.TICK_SECONDS):
  logger.info("Market ticker started (every %.2fs)", tick_s)
  try:
    while True:
      await asyncio.sleep(tick_s)
      try:
        if state.market.drift():
          await broadcast(snapshot_message("market_update"))
      except Exception:
        logger.exception("Tick %s failed", state.market.state.tick)
  finally:
    logger.info("Market ticker stopped")
