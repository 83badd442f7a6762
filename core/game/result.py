"""Round outcomes and results."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

from core.cards import Card


class RoundOutcome(Enum):
    """Outcome of a single high-card round."""

    PLAYER_WIN = auto()
    HOUSE_WIN = auto()
    # Only reachable when suits do not break rank ties
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class RoundResult:
    """
    Immutable record of a finished round.

    net is the balance change relative to before the bet was placed:
    +bet on a 1:1 win, -bet on a loss, zero on a push.
    """

    outcome: RoundOutcome
    player_card: Card
    house_card: Card
    bet: Decimal
    net: Decimal
    balance_after: Decimal

    @property
    def balance_before(self) -> Decimal:
        """Return the balance before the bet was deducted."""
        return self.balance_after - self.net
