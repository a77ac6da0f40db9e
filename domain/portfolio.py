# domain/portfolio.py
from typing import Any, List

from config import DEFAULT_NAME, LEADERBOARD_SIZE, MAX_NAME_LENGTH
from domain.models import MarketState, Participant


def normalize_name(raw: Any) -> str:
  if not raw:
    return DEFAULT_NAME
  name = str(raw)[:MAX_NAME_LENGTH]
  return name or DEFAULT_NAME


def mark_to_market(state: MarketState, pl: Participant) -> float:
  mv = 0.0
  for a, asset in state.assets.items():
    mv += pl.positions[a] * asset.price
  pl.pnl = pl.cash + mv
  return pl.pnl


def mark_all(state: MarketState):
  for pl in state.list_participants():
    mark_to_market(state, pl)


def compute_leaderboard(state: MarketState,
                        size: int = LEADERBOARD_SIZE) -> List[dict]:
  # highest pnl first; equal pnl falls back to id so every run agrees
  ranked = sorted(state.list_participants(),
                  key=lambda pl: (-pl.pnl, pl.participant_id))
  return [{
      "id": pl.participant_id,
      "name": pl.name,
      "pnl": round(pl.pnl, 2)
  } for pl in ranked[:size]]
