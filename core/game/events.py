"""Game events and dealer action results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable

from core.cards import Card


class EventType(Enum):
    """What a GameEvent reports."""

    # Round flow
    ROUND_STARTED = auto()
    BET_PLACED = auto()

    # Cards
    CARD_DEALT = auto()

    # Player
    PLAYER_HIT = auto()
    PLAYER_BUSTS = auto()
    PLAYER_STAND = auto()

    # Dealer
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()

    # Failures
    INSUFFICIENT_FUNDS = auto()
    DECK_EXHAUSTED = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Something that happened at the table.

    ``data`` carries the details a front-end needs to show it, such as the
    card dealt or the hand value reached.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


@dataclass(frozen=True)
class DealerAction:
    """One step of the dealer's turn."""


@dataclass(frozen=True)
class DealerHit(DealerAction):
    """The dealer drew a card."""

    card: Card

    def __str__(self) -> str:
        return f"Dealer hits: {self.card}"


@dataclass(frozen=True)
class DealerStand(DealerAction):
    """The dealer stopped drawing at ``value``."""

    value: int

    def __str__(self) -> str:
        return f"Dealer stands at {self.value}"


@dataclass(frozen=True)
class DealerBust(DealerAction):
    """The dealer went over 21."""

    value: int

    def __str__(self) -> str:
        return f"Dealer busts with {self.value}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Fans game events out to subscribers.

    Handlers subscribe to one event type or, with ``None``, to every event.
    Nothing is kept once an event has been delivered.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Call ``handler`` for every ``event_type`` event, or for all events if None."""
        self._handlers.setdefault(event_type, []).append(handler)

    def emit(self, event: GameEvent) -> None:
        """Pass an event to every matching subscriber."""
        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        # Catch-all handlers
        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """Create and emit a new event."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

