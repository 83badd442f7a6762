"""Game exceptions.

Every exception is raised before any state changes, so callers can catch
and retry with corrected input.
"""


class GameError(Exception):
    """Base class for high-card table errors."""


class DeckExhaustedError(GameError, IndexError):
    """Raised when drawing from a deck with no cards left."""


class InsufficientCardsError(GameError):
    """Raised when more cards are requested than remain in the deck."""

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot draw {requested} cards, only {remaining} remaining"
        )


class InsufficientFundsError(GameError):
    """Raised when a bet exceeds the player's balance."""

    def __init__(self, bet, balance) -> None:
        self.bet = bet
        self.balance = balance
        super().__init__(f"Bet of {bet} exceeds balance of {balance}")
