import pytest

import config
import state
from domain.engine import Market
from domain.models import MarketState


@pytest.fixture
def market_state():
    """Deterministic state with the stock starting prices."""
    return MarketState(config.INITIAL_PRICES, seed=42)


@pytest.fixture
def market(market_state):
    return Market(market_state)


@pytest.fixture
def live_market(monkeypatch, market):
    """Swap in a fresh process-wide market with the ticker switched off."""
    monkeypatch.setattr(config, "TICKER_ENABLED", False)
    monkeypatch.setattr(state, "market", market)
    monkeypatch.setattr(state, "clients", {})
    return market
