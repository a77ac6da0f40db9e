import pytest

import config


def assert_valuation_holds(market):
    state = market.state
    for pl in state.list_participants():
        expected = pl.cash + sum(pl.positions[a] * state.assets[a].price
                                 for a in state.assets)
        assert pl.pnl == pytest.approx(expected)


def test_join_creates_participant_without_broadcast(market):
    assert market.join("p1") is False
    assert market.snapshot()["leaderboard"] == [{
        "id": "p1",
        "name": "Player",
        "pnl": 0.0
    }]


def test_buy_100_scenario(market):
    market.join("p1")
    assert market.trade("p1", "A", "buy", 100) is True
    snap = market.snapshot()
    assert snap["assets"]["A"]["price"] == 120.0
    assert snap["leaderboard"][0]["pnl"] == 2000.0
    assert_valuation_holds(market)


def test_trade_revalues_every_holder(market):
    market.trade("p1", "A", "buy", 10)
    market.trade("p2", "A", "buy", 50)
    # p2's buy lifted A, p1's holding must reflect it
    assert_valuation_holds(market)
    assert market.state.participants["p1"].pnl > 0


def test_higher_pnl_ranks_first_on_next_snapshot(market):
    market.join("p1")
    market.join("p2")
    market.set_name("p1", "alice")
    market.set_name("p2", "bob")
    market.trade("p2", "B", "buy", 50)
    board = market.snapshot()["leaderboard"]
    assert [row["name"] for row in board] == ["bob", "alice"]


def test_invalid_trade_is_silent(market):
    market.join("p1")
    before = market.snapshot()
    assert market.trade("p1", "Q", "buy", 5) is False
    assert market.snapshot() == before


def test_set_name_truncates_and_defaults(market):
    assert market.set_name("p1", "n" * 30) is True
    assert market.state.participants["p1"].name == "n" * 24
    market.set_name("p1", "")
    assert market.state.participants["p1"].name == "Player"


def test_drift_ticks_and_keeps_invariants(market):
    market.trade("p1", "A", "buy", 5)
    market.trade("p2", "C", "sell", 20)
    for i in range(1, 51):
        assert market.drift() is True
        snap = market.snapshot()
        assert snap["tick"] == i
        assert all(a.price >= config.PRICE_FLOOR for a in market.state.list_assets())
        assert_valuation_holds(market)
        pnls = [row["pnl"] for row in snap["leaderboard"]]
        assert pnls == sorted(pnls, reverse=True)


def test_leave_drops_participant_from_leaderboard(market):
    market.join("p1")
    market.join("p2")
    assert market.leave("p1") is False
    assert [row["id"] for row in market.snapshot()["leaderboard"]] == ["p2"]
    # leaving twice is harmless
    market.leave("p1")


def test_snapshot_is_a_copy(market):
    market.join("p1")
    snap = market.snapshot()
    snap["leaderboard"][0]["name"] = "mallory"
    snap["assets"]["A"]["price"] = 1.0
    assert market.leaderboard[0]["name"] == "Player"
    assert market.state.assets["A"].price == 100.0


def test_snapshot_rounds_display_prices_only(market):
    market.state.assets["A"].price = 100.123456
    assert market.snapshot()["assets"]["A"]["price"] == 100.12
    assert market.state.assets["A"].price == 100.123456
