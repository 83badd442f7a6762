"""High-card game engine."""

from decimal import Decimal, InvalidOperation
from random import Random
from typing import Callable

from core.cards import Card, Deck
from core.exceptions import InsufficientFundsError
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.result import RoundOutcome, RoundResult
from core.game.rules import TableRules


# Cards needed to complete one round (player + house)
CARDS_PER_ROUND = 2


def to_amount(value: Decimal | int | str) -> Decimal:
    """
    Convert a money amount to Decimal.

    Args:
        value: Amount as Decimal, int or numeric string

    Returns:
        The amount as a finite Decimal
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def compare_cards(a: Card, b: Card, tie_break_by_suit: bool = True) -> int:
    """
    Compare two cards for the high-card game.

    Rank decides first (Ace low, King high). On equal ranks the suit order
    Clubs < Diamonds < Hearts < Spades decides when tie_break_by_suit is set.

    Returns:
        Positive if a beats b, negative if b beats a, zero on a tie
    """
    if a.rank != b.rank:
        return a.rank.value - b.rank.value
    if tie_break_by_suit:
        return a.suit.value - b.suit.value
    return 0


class HighCardGame:
    """
    High-card game engine.

    The player and the house each draw one card from a shared deck and the
    higher card wins. Balance changes only through add_funds and
    play_round, and never goes negative.

    Communication with recorders and presenters happens through events and
    return values only.
    """

    def __init__(
        self,
        initial_balance: Decimal | int | str = Decimal("0"),
        rules: TableRules | None = None,
        rng: Random | None = None,
        seed: int | None = None,
    ) -> None:
        """
        Initialize a new high-card game.

        Args:
            initial_balance: Starting balance, must not be negative
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible games
            seed: Seed for the deck when rng is not given
        """
        balance = to_amount(initial_balance)
        if balance < 0:
            raise ValueError(f"Starting balance cannot be negative: {balance}")

        self.rules = rules or TableRules()
        self.deck = Deck(rng=rng, seed=seed)
        self._balance = balance
        self.events = EventEmitter()

    @property
    def balance(self) -> Decimal:
        """Return the player's current balance."""
        return self._balance

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def add_funds(self, amount: Decimal | int | str) -> Decimal:
        """
        Add money to the player's balance.

        Args:
            amount: Positive amount to add

        Returns:
            The new balance
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise ValueError(f"Amount must be positive: {amount}")

        self._balance += amount
        self.events.emit_new(EventType.FUNDS_ADDED, amount=amount, balance=self._balance)
        return self._balance

    def play_round(self, bet: Decimal | int | str) -> RoundResult:
        """
        Play one wagered round.

        The bet is taken before the cards are drawn. A win returns the bet
        plus winnings at rules.win_payout, a push refunds the bet and a loss
        keeps it.

        Args:
            bet: Positive amount no larger than the balance

        Returns:
            The finished round
        """
        bet = to_amount(bet)
        if bet <= 0:
            raise ValueError(f"Bet must be positive: {bet}")
        if bet > self._balance:
            raise InsufficientFundsError(bet, self._balance)

        reshuffled = self.deck.remaining < CARDS_PER_ROUND
        if reshuffled:
            self.deck.reset_and_shuffle()

        self._balance -= bet
        player_card = self.deck.draw()
        house_card = self.deck.draw()

        cmp = compare_cards(player_card, house_card, self.rules.tie_break_by_suit)

        if cmp > 0:
            winnings = bet * self.rules.win_payout
            self._balance += bet + winnings
            outcome, net = RoundOutcome.PLAYER_WIN, winnings
            settled_event, settled_amount = EventType.PLAYER_WINS, winnings
        elif cmp < 0:
            outcome, net = RoundOutcome.HOUSE_WIN, -bet
            settled_event, settled_amount = EventType.HOUSE_WINS, bet
        else:
            self._balance += bet
            outcome, net = RoundOutcome.PUSH, Decimal("0")
            settled_event, settled_amount = EventType.PUSH, bet

        result = RoundResult(
            outcome=outcome,
            player_card=player_card,
            house_card=house_card,
            bet=bet,
            net=net,
            balance_after=self._balance,
        )

        # Round is committed; subscribers only observe it
        if reshuffled:
            self.events.emit_new(EventType.DECK_SHUFFLED)
        self.events.emit_new(EventType.BET_PLACED, amount=bet)
        self.events.emit_new(EventType.CARD_DEALT, card=player_card, to="player")
        self.events.emit_new(EventType.CARD_DEALT, card=house_card, to="house")
        self.events.emit_new(settled_event, amount=settled_amount)
        self.events.emit_new(EventType.ROUND_ENDED, result=result)
        return result
