"""Tests for Card and Deck classes."""

import pytest
from collections import Counter
from random import Random

from core.cards import Card, Deck, Rank, Suit, cards


class TestRankAndSuit:
    """Tests for the rank and suit enumerations."""

    def test_all_ranks_in_order(self):
        ranks = Rank.all()
        assert len(ranks) == 13
        assert ranks[0] == Rank.TWO
        assert ranks[-1] == Rank.ACE

    def test_all_suits_in_order(self):
        assert Suit.all() == (Suit.HEARTS, Suit.DIAMONDS, Suit.SPADES, Suit.CLUBS)

    def test_rank_values(self):
        """Test blackjack point values."""
        assert Rank.TWO.blackjack_value == 2
        assert Rank.NINE.blackjack_value == 9
        assert Rank.TEN.blackjack_value == 10
        assert Rank.JACK.blackjack_value == 10
        assert Rank.QUEEN.blackjack_value == 10
        assert Rank.KING.blackjack_value == 10
        assert Rank.ACE.blackjack_value == 11

    def test_rank_display(self):
        assert [str(r) for r in Rank.all()] == [
            "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A",
        ]

    def test_suit_display(self):
        assert str(Suit.SPADES) == "♤"
        assert str(Suit.HEARTS) == "♡"
        assert str(Suit.DIAMONDS) == "♢"
        assert str(Suit.CLUBS) == "♧"


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_value(self):
        assert Card(Rank.TWO, Suit.HEARTS).value == 2
        assert Card(Rank.KING, Suit.HEARTS).value == 10
        assert Card(Rank.ACE, Suit.HEARTS).value == 11

    def test_card_is_ace(self):
        assert Card(Rank.ACE, Suit.SPADES).is_ace
        assert not Card(Rank.KING, Suit.SPADES).is_ace

    def test_card_str(self):
        """Rank display followed by suit glyph."""
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♡"
        assert str(Card(Rank.ACE, Suit.CLUBS)) == "A♧"

    def test_card_equality_is_structural(self):
        assert Card(Rank.ACE, Suit.SPADES) == Card(Rank.ACE, Suit.SPADES)
        assert Card(Rank.ACE, Suit.SPADES) != Card(Rank.KING, Suit.SPADES)
        assert len({Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}) == 1

    def test_card_from_string(self):
        assert Card.from_string("Tc") == Card(Rank.TEN, Suit.CLUBS)
        assert Card.from_string("10h") == Card(Rank.TEN, Suit.HEARTS)
        assert Card.from_string("As") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("kd") == Card(Rank.KING, Suit.DIAMONDS)

    def test_card_from_string_with_glyphs(self):
        assert Card.from_string("A♤") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("Q♡") == Card(Rank.QUEEN, Suit.HEARTS)

    @pytest.mark.parametrize("text", ["", "A", "1h", "Ax", "11s"])
    def test_card_from_string_rejects_garbage(self, text):
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_cards_helper(self):
        assert cards("2d", "3h") == [
            Card(Rank.TWO, Suit.DIAMONDS),
            Card(Rank.THREE, Suit.HEARTS),
        ]


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_has_52_cards(self):
        deck = Deck()
        assert len(deck) == 52
        assert deck.cards_remaining == 52

    def test_deck_has_all_unique_cards(self):
        cards_ = list(Deck())
        assert len(set(cards_)) == 52

    def test_deck_has_13_of_each_suit(self):
        counts = Counter(card.suit for card in Deck())
        assert all(counts[suit] == 13 for suit in Suit.all())

    def test_deck_has_4_of_each_rank(self):
        counts = Counter(card.rank for card in Deck())
        assert all(counts[rank] == 4 for rank in Rank.all())

    def test_new_decks_are_shuffled(self):
        assert Deck() != Deck()

    def test_seeded_decks_repeat(self):
        assert Deck(rng=Random(7)) == Deck(rng=Random(7))

    def test_deck_draw(self):
        deck = Deck()
        card = deck.draw()
        assert isinstance(card, Card)
        assert len(deck) == 51

    def test_deck_draw_all(self):
        deck = Deck()
        drawn = [deck.draw() for _ in range(52)]
        assert len(deck) == 0
        assert None not in drawn

    def test_draw_from_empty_deck_returns_none(self):
        deck = Deck.of([])
        assert deck.draw() is None
        assert len(deck) == 0

    def test_of_draws_from_the_end(self):
        """The last card listed is the top of the deck."""
        deck = Deck.of(cards("4s", "4h", "4c"))
        assert deck.draw() == Card.from_string("4c")
        assert deck.draw() == Card.from_string("4h")
        assert deck.draw() == Card.from_string("4s")
        assert deck.draw() is None

    def test_of_allows_duplicates(self):
        deck = Deck.of(cards("As", "As"))
        assert len(deck) == 2
