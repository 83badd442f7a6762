"""Core high-card engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.exceptions import (
    DeckExhaustedError,
    GameError,
    InsufficientCardsError,
    InsufficientFundsError,
)
from core.game import HighCardGame, RoundOutcome, RoundResult, TableRules

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "GameError",
    "DeckExhaustedError",
    "InsufficientCardsError",
    "InsufficientFundsError",
    "HighCardGame",
    "RoundOutcome",
    "RoundResult",
    "TableRules",
]
