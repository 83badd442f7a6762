"""Game API endpoints."""

import logging
import time
from decimal import Decimal
from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Header

from api.routes.stats import record_round
from api.schemas import (
    BetRequest,
    CardResponse,
    FundsRequest,
    GameStateResponse,
    NewGameRequest,
    RoundResponse,
)
from api.session import create_session, extract_session_id, get_session_store
from config import config
from core.cards import Card, Rank, Suit
from core.exceptions import GameError
from core.game import HighCardGame, TableRules

logger = logging.getLogger(__name__)

router = APIRouter()

# In-memory game cache (for performance, backed by session store)
_games: dict[str, HighCardGame] = {}

# Session data keys
SESSION_KEY_GAME = "game"
SESSION_KEY_CREATED_AT = "created_at"
SESSION_KEY_LAST_ACTIVITY = "last_activity"


def _serialize_card(card: Card) -> dict[str, int]:
    """Serialize a card to a dict."""
    return {"rank": card.rank.value, "suit": card.suit.value}


def _deserialize_card(data: dict[str, int]) -> Card:
    """Deserialize a card from a dict."""
    return Card(Rank(data["rank"]), Suit(data["suit"]))


def _serialize_game(game: HighCardGame) -> dict[str, Any]:
    """Serialize game state for session storage."""
    return {
        "balance": str(game.balance),
        "deck_cards": [_serialize_card(c) for c in game.deck._cards],
        "deck_next_index": game.deck._next_index,
        "rules": {
            "tie_break_by_suit": game.rules.tie_break_by_suit,
            "win_payout": str(game.rules.win_payout),
        },
    }


def _deserialize_game(data: dict[str, Any]) -> HighCardGame:
    """Restore game from session data."""
    rules = TableRules(
        tie_break_by_suit=data["rules"]["tie_break_by_suit"],
        win_payout=Decimal(data["rules"]["win_payout"]),
    )
    game = HighCardGame(initial_balance=Decimal(data["balance"]), rules=rules)

    # Restore deck order and draw position
    game.deck._cards = [_deserialize_card(c) for c in data["deck_cards"]]
    game.deck._next_index = data["deck_next_index"]

    return game


def _new_game(request: NewGameRequest | None = None) -> HighCardGame:
    """Create a game from request options, falling back to config defaults."""
    request = request or NewGameRequest()
    starting_balance = request.starting_balance
    if starting_balance is None:
        starting_balance = config.game.starting_balance
    tie_break = request.tie_break_by_suit
    if tie_break is None:
        tie_break = config.game.tie_break_by_suit

    return HighCardGame(
        initial_balance=starting_balance,
        rules=TableRules(tie_break_by_suit=tie_break),
        seed=request.seed,
    )


async def _load_game(session_id: str) -> HighCardGame | None:
    """Load game from session store."""
    store = await get_session_store()
    session_data = await store.get(session_id)
    if session_data and SESSION_KEY_GAME in session_data:
        return _deserialize_game(session_data[SESSION_KEY_GAME])
    return None


async def _save_game(session_id: str, game: HighCardGame) -> None:
    """Save game to session store."""
    store = await get_session_store()
    session_data = await store.get(session_id) or {}
    session_data[SESSION_KEY_GAME] = _serialize_game(game)
    session_data[SESSION_KEY_LAST_ACTIVITY] = int(time.time())
    session_data.setdefault(SESSION_KEY_CREATED_AT, int(time.time()))
    await store.set(session_id, session_data)


async def _get_game(session_id: str) -> HighCardGame:
    """Get or create a game for the session."""
    # Check memory cache first
    if session_id in _games:
        return _games[session_id]

    # Try to load from session store
    game = await _load_game(session_id)
    if game is not None:
        _games[session_id] = game
        return game

    game = _new_game()
    _games[session_id] = game
    await _save_game(session_id, game)
    return game


def _card_response(card: Card) -> CardResponse:
    return CardResponse(rank=str(card.rank), suit=str(card.suit), name=card.name)


def _game_state_response(game: HighCardGame) -> GameStateResponse:
    """Convert game state to response."""
    return GameStateResponse(
        balance=float(game.balance),
        cards_remaining=game.deck.remaining,
        tie_break_by_suit=game.rules.tie_break_by_suit,
    )


@router.post("/new")
async def new_game(
    request: NewGameRequest | None = None,
    session_id: Annotated[str | None, Header(alias="X-Session-ID")] = None,
) -> dict[str, str]:
    """Create a new game, starting a session unless a valid one is given."""
    if session_id is None or extract_session_id(session_id) is None:
        session_id = await create_session()

    game = _new_game(request)
    _games[session_id] = game
    await _save_game(session_id, game)
    logger.info("New game for session %s with balance %s", session_id, game.balance)

    return {"session_id": session_id}


@router.get("/state")
async def get_state(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Get current game state."""
    game = await _get_game(session_id)
    return _game_state_response(game)


@router.post("/funds")
async def add_funds(
    request: FundsRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Add funds to the player's balance."""
    game = await _get_game(session_id)

    try:
        game.add_funds(request.amount)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    await _save_game(session_id, game)
    return _game_state_response(game)


@router.post("/round")
async def play_round(
    request: BetRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> RoundResponse:
    """Play one round: bet, draw player and house cards, settle."""
    game = await _get_game(session_id)

    try:
        result = game.play_round(request.amount)
    except (ValueError, GameError) as exc:
        logger.info("Rejected round for session %s: %s", session_id, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    await _save_game(session_id, game)
    await record_round(session_id, result)

    return RoundResponse(
        outcome=result.outcome.name.lower(),
        player_card=_card_response(result.player_card),
        house_card=_card_response(result.house_card),
        bet=float(result.bet),
        net=float(result.net),
        balance=float(result.balance_after),
        cards_remaining=game.deck.remaining,
    )
