"""Tests for game and stats persistence (serialization/deserialization)."""

import json
from decimal import Decimal

import pytest

from api.routes.game import (
    _deserialize_card,
    _deserialize_game,
    _serialize_card,
    _serialize_game,
)
from api.routes.stats import (
    _deserialize_stats,
    _serialize_round,
    _serialize_stats,
    record_round,
    SESSION_KEY_ROUNDS,
    SESSION_KEY_STATS,
)
from api.session import get_session_store
from config import AppConfig, GameConfig
from core.cards import Card, Rank, Suit
from core.game import HighCardGame, TableRules
from core.statistics import SessionStats


class TestCardSerialization:
    """Tests for card serialization."""

    def test_serialize_card_structure(self):
        """Test that serialized cards use enum values."""
        serialized = _serialize_card(Card(Rank.SEVEN, Suit.DIAMONDS))
        assert serialized == {"rank": 7, "suit": Suit.DIAMONDS.value}

    def test_every_card_restores(self):
        """Test that all 52 cards survive serialization."""
        for rank in Rank:
            for suit in Suit:
                card = Card(rank, suit)
                assert _deserialize_card(_serialize_card(card)) == card


class TestGameSerialization:
    """Tests for full game serialization."""

    def test_serialized_game_is_json(self):
        """Test that game data can go through the session store as JSON."""
        game = HighCardGame(initial_balance=Decimal("12.50"), seed=5)
        data = _serialize_game(game)
        assert json.loads(json.dumps(data)) == data
        assert data["balance"] == "12.50"

    def test_restore_preserves_deck_position(self):
        """Test that a restored game continues with the same cards."""
        game = HighCardGame(initial_balance=Decimal("100"), seed=9)
        game.play_round(10)
        game.play_round(10)

        restored = _deserialize_game(_serialize_game(game))

        assert restored.balance == game.balance
        assert restored.deck.remaining == 48
        assert list(restored.deck) == list(game.deck)
        assert restored.play_round(5) == game.play_round(5)

    def test_restore_preserves_rules(self):
        """Test that table rules survive a restore."""
        game = HighCardGame(
            initial_balance=Decimal("10"),
            rules=TableRules(tie_break_by_suit=False, win_payout=Decimal("2")),
        )

        restored = _deserialize_game(_serialize_game(game))

        assert restored.rules == game.rules


class TestStatsSerialization:
    """Tests for stats and round history storage."""

    def test_stats_keep_decimal_precision(self):
        """Test that money totals are stored as exact strings."""
        stats = SessionStats(rounds_played=3, player_wins=2, total_wagered=Decimal("0.30"))
        data = _serialize_stats(stats)

        assert data["total_wagered"] == "0.30"
        assert _deserialize_stats(data) == stats

    def test_deserialize_missing_fields(self):
        """Test that an empty dict gives empty stats."""
        assert _deserialize_stats({}) == SessionStats()

    def test_serialize_round(self):
        """Test the stored shape of a round."""
        game = HighCardGame(initial_balance=Decimal("50"), seed=2)
        result = game.play_round(5)

        entry = _serialize_round(result, timestamp=1000)

        assert entry["timestamp"] == 1000
        assert entry["outcome"] in ("player_win", "house_win")
        assert entry["player_card"] == str(result.player_card)
        assert entry["balance_after"] == str(result.balance_after)

    @pytest.mark.asyncio
    async def test_history_is_capped(self):
        """Test that only the most recent rounds are kept while stats keep counting."""
        game = HighCardGame(initial_balance=Decimal("1000"), seed=4)
        with pytest.MonkeyPatch.context() as mp:
            mp.setattr("api.routes.stats.config", AppConfig(game=GameConfig(history_limit=3)))
            for _ in range(5):
                await record_round("capped", game.play_round(1))

        store = await get_session_store()
        data = await store.get("capped")
        assert len(data[SESSION_KEY_ROUNDS]) == 3
        assert data[SESSION_KEY_STATS]["rounds_played"] == 5
