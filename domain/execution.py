# domain/execution.py
from __future__ import annotations

import math
from typing import Any, Optional

from config import ASSETS, MAX_ORDER_QTY
from domain.models import MarketState
from domain.pricing import apply_impact, impacted_price
from logger import setup_logger

logger = setup_logger(__name__)

SIDES = ("buy", "sell")


def coerce_quantity(raw: Any) -> int:
  """Floor to an int in [1, MAX_ORDER_QTY]. Anything unparseable counts as 1."""
  if isinstance(raw, int):
    # JSON ints are unbounded; don't route them through float
    value = raw
  else:
    try:
      value = float(raw)
    except (TypeError, ValueError, OverflowError):
      return 1
    if not math.isfinite(value):
      return 1
    value = math.floor(value)
  return min(MAX_ORDER_QTY, max(1, value))


def coerce_side(raw: Any) -> Optional[str]:
  if not isinstance(raw, str):
    return None
  side = raw.strip().lower()
  return side if side in SIDES else None


def coerce_asset(raw: Any) -> Optional[str]:
  return raw if isinstance(raw, str) and raw in ASSETS else None


def execute_trade(state: MarketState, participant_id: str, asset_id: Any,
                  side: Any, qty: Any) -> bool:
  """
  Execute a market order for `participant_id` at the current price.
  - Cash moves by qty * pre-impact price; shorts and negative cash allowed.
  - Price is then moved by qty * IMPACT_PER_UNIT in the order's direction.

  Returns:
      True if the trade was applied, False for an unknown asset or side, or
      when the resulting cash, price or holding value would not be a finite
      number (nothing is changed in those cases).
  """
  asset_id = coerce_asset(asset_id)
  side = coerce_side(side)
  if asset_id is None or side is None:
    return False
  q = coerce_quantity(qty)

  pl = state.get_or_create_participant(participant_id)
  asset = state.assets[asset_id]
  px = asset.price

  signed = q if side == "buy" else -q
  new_position = pl.positions[asset_id] + signed
  new_cash = pl.cash - signed * px
  new_price = impacted_price(px, side, q)
  if not all(
      math.isfinite(x) for x in (new_cash, new_price, new_position * new_price)):
    logger.warning("Ignored trade from %s: %s %s %s overflows", participant_id,
                   side, q, asset_id)
    return False

  pl.positions[asset_id] = new_position
  pl.cash = new_cash
  apply_impact(asset, side, q)
  return True
