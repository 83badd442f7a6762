"""Per-session round statistics."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from core.game.result import RoundOutcome, RoundResult


@dataclass
class SessionStats:
    """
    Running tally of finished rounds.

    net_result is the sum of every round's balance change, so a session
    that starts at B ends at B + net_result (ignoring added funds).
    """

    rounds_played: int = 0
    player_wins: int = 0
    house_wins: int = 0
    pushes: int = 0
    total_wagered: Decimal = Decimal("0")
    net_result: Decimal = Decimal("0")

    @classmethod
    def from_results(cls, results: Iterable[RoundResult]) -> "SessionStats":
        """Build stats from a sequence of round results."""
        stats = cls()
        for result in results:
            stats.record(result)
        return stats

    def record(self, result: RoundResult) -> None:
        """Add one finished round to the tally."""
        self.rounds_played += 1
        self.total_wagered += result.bet
        self.net_result += result.net

        if result.outcome == RoundOutcome.PLAYER_WIN:
            self.player_wins += 1
        elif result.outcome == RoundOutcome.HOUSE_WIN:
            self.house_wins += 1
        else:
            self.pushes += 1

    @property
    def win_rate(self) -> float:
        """Return the fraction of rounds the player won."""
        if self.rounds_played == 0:
            return 0.0
        return self.player_wins / self.rounds_played
