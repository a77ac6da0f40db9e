# domain/models.py
from __future__ import annotations

import random
import time
from typing import Dict, List, Optional

from config import ASSETS, DEFAULT_NAME, INITIAL_PRICES


class Asset:

  def __init__(self, asset_id: str, price: float):
    self.asset_id = asset_id
    self.price = float(price)
    self.last_update = time.time()


class Participant:

  def __init__(self, participant_id: str, name: str = DEFAULT_NAME):
    self.participant_id = participant_id
    self.name = name
    self.cash = 0.0  # may go negative, no margin
    # positions[a] = signed qty, negative = short
    self.positions: Dict[str, int] = {a: 0 for a in ASSETS}
    self.pnl = 0.0


class MarketState:
  """Authoritative simulation state: assets, participants and the clock.

  Only the domain functions mutate it; everything leaving the process is a
  copy built by ``Market.snapshot``.
  """

  def __init__(self,
               initial_prices: Optional[Dict[str, float]] = None,
               seed: Optional[int] = None):
    prices = initial_prices or INITIAL_PRICES
    # market
    self.seed = seed if seed is not None else random.randint(1, 10_000)
    self.rng = random.Random(self.seed)
    self.assets: Dict[str, Asset] = {a: Asset(a, prices[a]) for a in ASSETS}
    self.tick = 0
    # players, insertion ordered
    self.participants: Dict[str, Participant] = {}

  def get_or_create_participant(self, participant_id: str) -> Participant:
    pl = self.participants.get(participant_id)
    if pl is None:
      pl = Participant(participant_id)
      self.participants[participant_id] = pl
    return pl

  def remove_participant(self, participant_id: str) -> Optional[Participant]:
    return self.participants.pop(participant_id, None)

  def list_assets(self) -> List[Asset]:
    return list(self.assets.values())

  def list_participants(self) -> List[Participant]:
    return list(self.participants.values())
