"""Card and Deck classes - immutable cards, no-repeat deck."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator

from core.exceptions import DeckExhaustedError, InsufficientCardsError


class Suit(Enum):
    """Card suits, ordered for tiebreaks (Clubs lowest, Spades highest)."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks. Ace is low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def name(self) -> str:
        """Return a readable name like 'Ace of Spades'."""
        return f"{self.rank.name.title()} of {self.suit.name.title()}"


def full_deck() -> list[Card]:
    """Return all 52 cards, suit by suit, in rank order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


# Process-wide random source for unseeded decks
_default_rng: Random | None = None


def get_default_rng() -> Random:
    """Get or create the shared random source used by unseeded decks."""
    global _default_rng
    if _default_rng is None:
        _default_rng = Random()
    return _default_rng


class Deck:
    """
    A standard 52-card deck dealt without replacement.

    Cards are kept in a fixed shuffled order with a cursor marking how many
    have been drawn. Cards before the cursor are never handed out again
    until the next reset.
    """

    TOTAL_CARDS = 52

    def __init__(self, rng: Random | None = None, seed: int | None = None) -> None:
        """
        Initialize and shuffle a new deck.

        Args:
            rng: Random number generator for shuffling
            seed: Seed for a private generator, used when rng is not given.
                With neither, the shared default generator is used.
        """
        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = Random(seed)
        else:
            self._rng = get_default_rng()
        self._cards: list[Card] = []
        self._next_index = 0
        self.reset_and_shuffle()

    @classmethod
    def seeded(cls, seed: int) -> "Deck":
        """Create a deck whose shuffles are fully determined by seed."""
        return cls(seed=seed)

    def reset_and_shuffle(self) -> None:
        """Rebuild all 52 cards, shuffle them and rewind the cursor."""
        self._cards = full_deck()
        self._shuffle_in_place(self._cards)
        self._next_index = 0

    def _shuffle_in_place(self, cards: list[Card]) -> None:
        """Fisher-Yates shuffle."""
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card:
        """Draw the next card."""
        if self.remaining <= 0:
            raise DeckExhaustedError("No cards left in the deck")
        card = self._cards[self._next_index]
        self._next_index += 1
        return card

    def draw_many(self, count: int) -> list[Card]:
        """
        Draw several cards at once.

        Either all requested cards are drawn or none are.

        Args:
            count: Number of cards to draw

        Returns:
            The drawn cards in draw order
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count > self.remaining:
            raise InsufficientCardsError(count, self.remaining)
        return [self.draw() for _ in range(count)]

    @property
    def remaining(self) -> int:
        """Return the number of cards not yet drawn."""
        return len(self._cards) - self._next_index

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards drawn since the last reset."""
        return self._next_index

    @property
    def total_cards(self) -> int:
        """Return the size of a full deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return self.remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._next_index:])
