"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Literal


class BetRequest(BaseModel):
    """Request to place a bet."""

    amount: int = Field(..., ge=1, description="Bet amount in chips")


class ActionRequest(BaseModel):
    """Request for player action."""

    action: Literal["hit", "stand"]


class CardResponse(BaseModel):
    """Card representation."""

    rank: str
    suit: str
    value: int


class HandResponse(BaseModel):
    """Hand representation."""

    cards: list[CardResponse]
    value: int
    is_busted: bool


class DealerActionResponse(BaseModel):
    """One step of the dealer's turn."""

    kind: Literal["hit", "stand", "bust"]
    card: CardResponse | None = None
    value: int | None = None
    message: str


class GameStateResponse(BaseModel):
    """Current game state."""

    state: str
    dealer_hand: HandResponse
    player_hand: HandResponse
    player_money: int
    current_bet: int
    cards_remaining: int
    can_deal: bool
    can_hit: bool
    can_stand: bool
    dealer_actions: list[DealerActionResponse] = Field(default_factory=list)
