"""Signed session ids and the in-memory store of games in progress."""

import logging
import time
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from itsdangerous import BadSignature, URLSafeSerializer

from config import config
from core.cards import Card, Deck, Rank, Suit
from core.game import Game, GameState

logger = logging.getLogger(__name__)


def card_to_dict(card: Card) -> dict[str, int]:
    return {"rank": card.rank.value, "suit": card.suit.value}


def card_from_dict(data: dict[str, int]) -> Card:
    return Card(Rank(data["rank"]), Suit(data["suit"]))


def game_to_dict(game: Game) -> dict[str, Any]:
    """
    Snapshot a game as plain JSON-safe data.

    The deck is stored in draw order reversed, exactly as ``Deck`` keeps it,
    so a restored game draws the same cards.
    """
    return {
        "state": game.state.name,
        "player_money": game.player_money,
        "current_bet": game.current_bet,
        "deck": [card_to_dict(c) for c in game.deck],
        "dealer_cards": [card_to_dict(c) for c in game.dealer_cards],
        "player_cards": [card_to_dict(c) for c in game.player_cards],
    }


def game_from_dict(data: dict[str, Any]) -> Game:
    """Rebuild a game from ``game_to_dict`` output."""
    return Game(
        deck=Deck.of(card_from_dict(c) for c in data["deck"]),
        dealer_cards=[card_from_dict(c) for c in data["dealer_cards"]],
        player_cards=[card_from_dict(c) for c in data["player_cards"]],
        player_money=data["player_money"],
        current_bet=data["current_bet"],
        state=GameState[data["state"]],
    )


@dataclass
class _Seat:
    snapshot: dict[str, Any]
    expires_at: float


class GameStore:
    """
    One saved game per signed session id.

    Every save pushes the session's expiry ``ttl`` seconds into the future.
    Expired seats are dropped when read and swept whenever a session is
    opened, so abandoned games do not pile up.
    """

    def __init__(self, secret_key: str | None = None, ttl: int | None = None) -> None:
        self.ttl = ttl or config.http.session_ttl
        self._serializer = URLSafeSerializer(
            secret_key or config.http.secret_key, salt="blackjack-seat"
        )
        self._seats: dict[str, _Seat] = {}

    def __len__(self) -> int:
        return len(self._seats)

    def open(self, game: Game) -> str:
        """Seat ``game`` under a fresh signed session id and return the id."""
        self.purge_expired()
        session_id = self._serializer.dumps(uuid4().hex)
        self.save(session_id, game)
        logger.info("Opened session (%d active)", len(self._seats))
        return session_id

    def is_signed(self, session_id: str) -> bool:
        """
        True if ``session_id`` was issued by a store with this secret.

        Ids do not expire themselves; an id whose game has expired simply
        gets a new game.
        """
        try:
            self._serializer.loads(session_id)
        except BadSignature:
            logger.debug("Rejected session id")
            return False
        return True

    def load(self, session_id: str) -> Game | None:
        """Restore the session's game, or None if it is unknown or expired."""
        seat = self._seats.get(session_id)
        if seat is None:
            return None
        if seat.expires_at < time.time():
            del self._seats[session_id]
            return None
        return game_from_dict(seat.snapshot)

    def save(self, session_id: str, game: Game) -> None:
        self._seats[session_id] = _Seat(game_to_dict(game), time.time() + self.ttl)

    def purge_expired(self) -> int:
        """Drop every expired seat and return how many went."""
        now = time.time()
        expired = [sid for sid, seat in self._seats.items() if seat.expires_at < now]
        for sid in expired:
            del self._seats[sid]
        if expired:
            logger.info("Removed %d expired sessions", len(expired))
        return len(expired)


# Global store instance
_store: GameStore | None = None


def get_game_store() -> GameStore:
    """Get or create the game store."""
    global _store
    if _store is None:
        _store = GameStore()
    return _store
