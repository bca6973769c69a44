"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from core.cards import Card, Rank

BLACKJACK = 21


def best_hand_value(ranks: Iterable[Rank]) -> int:
    """
    Score a collection of ranks.

    Non-aces are summed first. Aces are then folded in one at a time, each
    counting 11 if that keeps the running total at or under 21, otherwise 1.
    The choice is made per ace in sequence, so [K, A, A] scores 22.
    """
    aces: list[Rank] = []
    total = 0

    for rank in ranks:
        if rank.is_ace:
            aces.append(rank)
        else:
            total += rank.blackjack_value

    for _ in aces:
        if total + 11 <= BLACKJACK:
            total += 11
        else:
            total += 1

    return total


@dataclass
class Hand:
    """An ordered hand of cards held by the dealer or the player."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def ranks(self) -> list[Rank]:
        return [card.rank for card in self.cards]

    @property
    def value(self) -> int:
        """Calculate the best hand value."""
        return best_hand_value(self.ranks)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_busted:
            return f"{cards_str} (BUST)"
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
