"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# Game schemas
class NewGameRequest(BaseModel):
    """Request to start a new game."""

    starting_balance: Decimal | None = Field(
        default=None, ge=0, description="Starting balance (config default if omitted)"
    )
    seed: int | None = Field(default=None, description="Deck seed for reproducible games")
    tie_break_by_suit: bool | None = Field(
        default=None, description="Break rank ties by suit (config default if omitted)"
    )


class FundsRequest(BaseModel):
    """Request to add funds."""

    amount: Decimal = Field(..., gt=0, description="Amount to add")


class BetRequest(BaseModel):
    """Request to play a round."""

    amount: Decimal = Field(..., gt=0, description="Bet amount")


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    rank: str
    suit: str
    name: str


class GameStateResponse(BaseModel):
    """Current game state."""

    balance: float
    cards_remaining: int
    tie_break_by_suit: bool


RoundOutcomeName = Literal["player_win", "house_win", "push"]


class RoundResponse(BaseModel):
    """Result of a played round."""

    outcome: RoundOutcomeName
    player_card: CardResponse
    house_card: CardResponse
    bet: float
    net: float
    balance: float
    cards_remaining: int


# Stats schemas
class RoundHistoryEntry(BaseModel):
    """One recorded round."""

    timestamp: int  # Milliseconds since epoch
    outcome: RoundOutcomeName
    player_card: str
    house_card: str
    bet: float
    net: float
    balance_after: float


class SessionStatsResponse(BaseModel):
    """Session statistics."""

    rounds_played: int
    player_wins: int
    house_wins: int
    pushes: int
    win_rate: float
    total_wagered: float
    net_result: float


# Match tracker schemas
class MatchCreateRequest(BaseModel):
    """Request to record a match."""

    hero_name: str = Field(..., min_length=1, max_length=100)
    role: str = Field(..., min_length=1, max_length=100)
    result: str = Field(..., min_length=1, max_length=20, description='e.g. "Win" or "Loss"')


class MatchRecordResponse(BaseModel):
    """A stored match record."""

    id: str
    hero_name: str
    role: str
    result: str
    created_at: datetime


class MatchReportResponse(BaseModel):
    """Match tracker summary."""

    total_matches: int
    total_wins: int
