# domain/engine.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from config import LEADERBOARD_SIZE
from domain.execution import execute_trade
from domain.models import MarketState
from domain.portfolio import compute_leaderboard, mark_all, mark_to_market, normalize_name
from domain.pricing import step_prices
from logger import setup_logger

logger = setup_logger(__name__)


class Market:
  """Command surface over a MarketState.

  Every command runs to completion without awaiting: mutate, revalue,
  rerank. The return value says whether connected clients need a fresh
  ``market_update``.
  """

  def __init__(self,
               state: Optional[MarketState] = None,
               leaderboard_size: int = LEADERBOARD_SIZE):
    self.state = state or MarketState()
    self.leaderboard_size = leaderboard_size
    self.leaderboard: List[dict] = []

  def _rerank(self):
    self.leaderboard = compute_leaderboard(self.state, self.leaderboard_size)

  # ---------- Commands ----------
  def join(self, participant_id: str) -> bool:
    pl = self.state.get_or_create_participant(participant_id)
    mark_to_market(self.state, pl)
    self._rerank()
    # the newcomer gets its own init; nobody else needs a push
    return False

  def leave(self, participant_id: str) -> bool:
    if self.state.remove_participant(participant_id) is not None:
      self._rerank()
    return False

  def set_name(self, participant_id: str, raw_name: Any) -> bool:
    pl = self.state.get_or_create_participant(participant_id)
    pl.name = normalize_name(raw_name)
    mark_to_market(self.state, pl)
    self._rerank()
    return True

  def trade(self, participant_id: str, asset: Any, side: Any, qty: Any) -> bool:
    if not execute_trade(self.state, participant_id, asset, side, qty):
      logger.debug("Ignored trade from %s: asset=%r side=%r", participant_id,
                   asset, side)
      return False
    # the traded asset moved, so every holder of it is revalued
    mark_all(self.state)
    self._rerank()
    return True

  def drift(self) -> bool:
    step_prices(self.state)
    mark_all(self.state)
    self._rerank()
    return True

  # ---------- Views ----------
  def snapshot(self) -> Dict[str, Any]:
    return {
        "tick": self.state.tick,
        "assets": {
            a.asset_id: {
                "price": round(a.price, 2)
            } for a in self.state.list_assets()
        },
        "leaderboard": [dict(row) for row in self.leaderboard],
    }
