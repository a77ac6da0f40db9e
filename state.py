from __future__ import annotations

import random
import string
from typing import Dict

from fastapi import WebSocket

import config
from domain.engine import Market
from domain.models import MarketState

# ---- Connections ----
clients: Dict[str, WebSocket] = {}                 # participantId -> ws

# ---- Market (single source of truth) ----
market = Market(MarketState(config.INITIAL_PRICES, seed=config.MARKET_SEED))


# ---- ID generators ----
def gen_participant_id() -> str:
    """Generate a short opaque per-connection id, e.g. 'k8z2q1m9d0'."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=10))
