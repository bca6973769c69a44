"""Game engine and state management."""

from core.game.errors import DeckExhausted, GameError, InsufficientChips
from core.game.events import (
    DealerAction,
    DealerBust,
    DealerHit,
    DealerStand,
    EventType,
    GameEvent,
)
from core.game.state import Action, GameState
from core.game.engine import Game

__all__ = [
    "Action",
    "DealerAction",
    "DealerBust",
    "DealerHit",
    "DealerStand",
    "DeckExhausted",
    "EventType",
    "Game",
    "GameError",
    "GameEvent",
    "GameState",
    "InsufficientChips",
]
