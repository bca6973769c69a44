"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand, best_hand_value

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "best_hand_value",
]
