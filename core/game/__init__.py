"""Game engine, rules and round results."""

from core.game.events import GameEvent, EventType, EventEmitter
from core.game.result import RoundOutcome, RoundResult
from core.game.rules import TableRules
from core.game.engine import HighCardGame, compare_cards

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "RoundOutcome",
    "RoundResult",
    "TableRules",
    "HighCardGame",
    "compare_cards",
]
