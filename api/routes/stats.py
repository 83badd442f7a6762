"""Statistics API endpoints."""

import time
from decimal import Decimal
from typing import Annotated, Any

from fastapi import APIRouter, Header

from api.schemas import RoundHistoryEntry, SessionStatsResponse
from api.session import get_session_store
from config import config
from core.game.result import RoundResult
from core.statistics import SessionStats

router = APIRouter()

# Session data keys
SESSION_KEY_STATS = "stats"
SESSION_KEY_ROUNDS = "rounds"
SESSION_KEY_LAST_ACTIVITY = "last_activity"


def _serialize_stats(stats: SessionStats) -> dict[str, Any]:
    """Serialize session stats for session storage."""
    return {
        "rounds_played": stats.rounds_played,
        "player_wins": stats.player_wins,
        "house_wins": stats.house_wins,
        "pushes": stats.pushes,
        "total_wagered": str(stats.total_wagered),
        "net_result": str(stats.net_result),
    }


def _deserialize_stats(data: dict[str, Any]) -> SessionStats:
    """Deserialize session stats from session storage."""
    return SessionStats(
        rounds_played=data.get("rounds_played", 0),
        player_wins=data.get("player_wins", 0),
        house_wins=data.get("house_wins", 0),
        pushes=data.get("pushes", 0),
        total_wagered=Decimal(data.get("total_wagered", "0")),
        net_result=Decimal(data.get("net_result", "0")),
    )


def _serialize_round(result: RoundResult, timestamp: int) -> dict[str, Any]:
    """Serialize a finished round as a history entry."""
    return {
        "timestamp": timestamp,
        "outcome": result.outcome.name.lower(),
        "player_card": str(result.player_card),
        "house_card": str(result.house_card),
        "bet": str(result.bet),
        "net": str(result.net),
        "balance_after": str(result.balance_after),
    }


def _history_entry(data: dict[str, Any]) -> RoundHistoryEntry:
    """Convert a stored round to its response model."""
    return RoundHistoryEntry(
        timestamp=data["timestamp"],
        outcome=data["outcome"],
        player_card=data["player_card"],
        house_card=data["house_card"],
        bet=float(Decimal(data["bet"])),
        net=float(Decimal(data["net"])),
        balance_after=float(Decimal(data["balance_after"])),
    )


async def record_round(session_id: str, result: RoundResult) -> None:
    """
    Store a finished round in the session.

    Stats accumulate over every round. The round history keeps only the
    most recent game.history_limit entries.
    """
    store = await get_session_store()
    session_data = await store.get(session_id) or {}

    stats = _deserialize_stats(session_data.get(SESSION_KEY_STATS, {}))
    stats.record(result)
    session_data[SESSION_KEY_STATS] = _serialize_stats(stats)

    now = int(time.time() * 1000)
    rounds = session_data.get(SESSION_KEY_ROUNDS, [])
    rounds.append(_serialize_round(result, now))
    session_data[SESSION_KEY_ROUNDS] = rounds[-config.game.history_limit:]
    session_data[SESSION_KEY_LAST_ACTIVITY] = int(time.time())

    await store.set(session_id, session_data)


def _stats_response(stats: SessionStats) -> SessionStatsResponse:
    return SessionStatsResponse(
        rounds_played=stats.rounds_played,
        player_wins=stats.player_wins,
        house_wins=stats.house_wins,
        pushes=stats.pushes,
        win_rate=stats.win_rate,
        total_wagered=float(stats.total_wagered),
        net_result=float(stats.net_result),
    )


async def _load_session_data(session_id: str) -> dict[str, Any]:
    store = await get_session_store()
    return await store.get(session_id) or {}


@router.get("/session")
async def get_session_stats(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> SessionStatsResponse:
    """Get session statistics."""
    session_data = await _load_session_data(session_id)
    return _stats_response(_deserialize_stats(session_data.get(SESSION_KEY_STATS, {})))


@router.get("/history")
async def get_round_history(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> list[RoundHistoryEntry]:
    """Get the session's recorded rounds, newest first."""
    session_data = await _load_session_data(session_id)
    rounds = session_data.get(SESSION_KEY_ROUNDS, [])
    return [_history_entry(r) for r in reversed(rounds)]


@router.delete("/session")
async def reset_session_stats(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> SessionStatsResponse:
    """Clear the session's statistics and round history."""
    store = await get_session_store()
    session_data = await store.get(session_id) or {}
    session_data.pop(SESSION_KEY_STATS, None)
    session_data.pop(SESSION_KEY_ROUNDS, None)
    session_data[SESSION_KEY_LAST_ACTIVITY] = int(time.time())
    await store.set(session_id, session_data)

    return _stats_response(SessionStats())
