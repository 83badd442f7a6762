"""Pytest fixtures for high-card table tests."""

import pytest
from decimal import Decimal
from random import Random

from core.cards import Card, Deck
from core.game import HighCardGame, TableRules


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def game(rng):
    """A new game with 100 in the bank."""
    return HighCardGame(initial_balance=Decimal("100"), rng=rng)


@pytest.fixture
def rank_only_game(rng):
    """A game where equal ranks push."""
    return HighCardGame(
        initial_balance=Decimal("100"),
        rules=TableRules.rank_only(),
        rng=rng,
    )


def _stack_deck(game: HighCardGame, *cards: Card) -> None:
    """Put cards on top of the game's deck in the given draw order."""
    rest = [c for c in game.deck._cards if c not in cards]
    game.deck._cards = list(cards) + rest
    game.deck._next_index = 0


@pytest.fixture
def stack_deck():
    """Helper that fixes the next cards a game will draw."""
    return _stack_deck
