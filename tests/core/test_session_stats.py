"""Tests for session statistics."""

from decimal import Decimal

from core.cards import Card, Rank, Suit
from core.game import HighCardGame, RoundOutcome, RoundResult
from core.statistics import SessionStats


def _result(outcome: RoundOutcome, bet: str, net: str, balance_after: str) -> RoundResult:
    return RoundResult(
        outcome=outcome,
        player_card=Card(Rank.FIVE, Suit.CLUBS),
        house_card=Card(Rank.NINE, Suit.HEARTS),
        bet=Decimal(bet),
        net=Decimal(net),
        balance_after=Decimal(balance_after),
    )


class TestSessionStats:
    """Tests for the SessionStats tally."""

    def test_empty_stats(self):
        """Test a fresh tally."""
        stats = SessionStats()
        assert stats.rounds_played == 0
        assert stats.win_rate == 0.0
        assert stats.net_result == Decimal("0")

    def test_record_each_outcome(self):
        """Test counting wins, losses and pushes."""
        stats = SessionStats.from_results([
            _result(RoundOutcome.PLAYER_WIN, "10", "10", "110"),
            _result(RoundOutcome.HOUSE_WIN, "20", "-20", "90"),
            _result(RoundOutcome.PUSH, "5", "0", "90"),
            _result(RoundOutcome.PLAYER_WIN, "5", "5", "95"),
        ])

        assert stats.rounds_played == 4
        assert stats.player_wins == 2
        assert stats.house_wins == 1
        assert stats.pushes == 1
        assert stats.total_wagered == Decimal("40")
        assert stats.net_result == Decimal("-5")
        assert stats.win_rate == 0.5

    def test_net_result_tracks_balance(self):
        """Test that net_result equals the balance change over a session."""
        game = HighCardGame(initial_balance=Decimal("200"), seed=3)
        stats = SessionStats()

        for _ in range(30):
            stats.record(game.play_round(5))

        assert game.balance == Decimal("200") + stats.net_result
        assert stats.total_wagered == Decimal("150")
        assert stats.player_wins + stats.house_wins + stats.pushes == 30
