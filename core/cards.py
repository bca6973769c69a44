"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator


class Suit(Enum):
    """Card suits, in deck-building order."""

    HEARTS = auto()
    DIAMONDS = auto()
    SPADES = auto()
    CLUBS = auto()

    @classmethod
    def all(cls) -> tuple["Suit", ...]:
        """Return every suit in fixed order."""
        return tuple(cls)

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♤",
            Suit.HEARTS: "♡",
            Suit.DIAMONDS: "♢",
            Suit.CLUBS: "♧",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def all(cls) -> tuple["Rank", ...]:
        """Return every rank from Two to Ace."""
        return tuple(cls)

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the base point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_RANK_CODES = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_CODES = {
    "H": Suit.HEARTS,
    "♡": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♢": Suit.DIAMONDS,
    "S": Suit.SPADES,
    "♤": Suit.SPADES,
    "C": Suit.CLUBS,
    "♧": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base point value of the card's rank."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'Tc', '10h', 'A♤', 'ks'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


def cards(*specs: str) -> list[Card]:
    """Build a list of cards from short strings, e.g. cards("Tc", "As")."""
    return [Card.from_string(spec) for spec in specs]


class Deck:
    """
    A deck of cards drawn from the top.

    The top of the deck is the end of the underlying list, so an explicit
    deck built with ``Deck.of`` is drawn last-element-first.
    """

    def __init__(
        self,
        rng: Random | None = None,
        cards: Iterable[Card] | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            rng: Random number generator used for the shuffle
            cards: Explicit cards to use instead of a shuffled 52-card set
        """
        if cards is not None:
            self._cards: list[Card] = list(cards)
            return

        self._cards = [
            Card(rank, suit) for suit in Suit.all() for rank in Rank.all()
        ]
        (rng or Random()).shuffle(self._cards)

    @classmethod
    def of(cls, cards: Iterable[Card]) -> "Deck":
        """Create an unshuffled deck holding exactly ``cards``, in order."""
        return cls(cards=cards)

    def draw(self) -> Card | None:
        """Draw a card from the top of the deck, or None if it is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
