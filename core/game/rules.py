"""High-card table rule variations."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TableRules:
    """
    High-card table rules configuration.

    The defaults break rank ties by suit, so every round has a winner and
    a push never happens.
    """

    # Compare suits (Clubs < Diamonds < Hearts < Spades) when ranks match
    tie_break_by_suit: bool = True

    # Winnings per unit staked (1:1)
    win_payout: Decimal = Decimal("1")

    def __post_init__(self) -> None:
        """Validate rule values."""
        if self.win_payout <= 0:
            raise ValueError("win_payout must be positive")

    @classmethod
    def rank_only(cls) -> "TableRules":
        """Rules where equal ranks push and the bet is refunded."""
        return cls(tie_break_by_suit=False)
