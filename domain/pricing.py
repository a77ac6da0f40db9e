# domain/pricing.py
import time

from config import DRIFT_RANGE, IMPACT_PER_UNIT, PRICE_FLOOR
from domain.models import Asset, MarketState


def clamp_price(x: float, floor: float = PRICE_FLOOR) -> float:
  return max(floor, x)


def step_prices(state: MarketState):
  """Advance the clock one tick and random-walk every asset price."""
  state.tick += 1
  now = time.time()
  for asset in state.list_assets():
    drift = state.rng.uniform(-DRIFT_RANGE, DRIFT_RANGE)
    asset.price = clamp_price(asset.price + drift)
    asset.last_update = now


def impacted_price(price: float, side: str, qty: int) -> float:
  # buys push the price up, sells push it down
  impact = qty * IMPACT_PER_UNIT
  factor = 1 + impact if side == "buy" else 1 - impact
  return clamp_price(price * factor)


def apply_impact(asset: Asset, side: str, qty: int):
  asset.price = impacted_price(asset.price, side, qty)
  asset.last_update = time.time()
