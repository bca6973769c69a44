"""Tests for hand scoring."""

from hypothesis import given, strategies as st

from core.cards import Card, Rank, Suit, cards
from core.hand import Hand, best_hand_value

ranks_strategy = st.lists(st.sampled_from(Rank.all()), max_size=12)


class TestBestHandValue:
    """Tests for the greedy ace-folding score."""

    def test_ten_and_four_is_14(self):
        assert best_hand_value([Rank.TEN, Rank.FOUR]) == 14

    def test_jack_and_queen_is_20(self):
        assert best_hand_value([Rank.JACK, Rank.QUEEN]) == 20

    def test_simple_blackjack(self):
        assert best_hand_value([Rank.KING, Rank.ACE]) == 21

    def test_two_aces(self):
        assert best_hand_value([Rank.ACE, Rank.ACE]) == 12

    def test_bust_with_two_aces(self):
        """The first ace takes 11 because it fits; the second then busts."""
        assert best_hand_value([Rank.KING, Rank.ACE, Rank.ACE]) == 22

    def test_four_aces(self):
        assert best_hand_value([Rank.ACE] * 4) == 14

    def test_ace_counts_one_when_eleven_busts(self):
        assert best_hand_value([Rank.KING, Rank.FIVE, Rank.ACE]) == 16

    def test_ace_order_does_not_matter(self):
        assert best_hand_value([Rank.ACE, Rank.KING, Rank.ACE]) == 22
        assert best_hand_value([Rank.ACE, Rank.ACE, Rank.KING]) == 22

    def test_empty_is_zero(self):
        assert best_hand_value([]) == 0

    @given(ranks_strategy)
    def test_without_aces_is_plain_sum(self, ranks):
        plain = [r for r in ranks if not r.is_ace]
        assert best_hand_value(plain) == sum(r.blackjack_value for r in plain)

    @given(ranks_strategy)
    def test_greedy_fold(self, ranks):
        """At most one ace ever counts as 11."""
        base = sum(r.blackjack_value for r in ranks if not r.is_ace)
        aces = sum(1 for r in ranks if r.is_ace)
        value = best_hand_value(ranks)
        if aces and base + 11 <= 21:
            assert value == base + 11 + (aces - 1)
        else:
            assert value == base + aces


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10

    def test_blackjack_value(self, blackjack_hand):
        assert blackjack_hand.value == 21
        assert not blackjack_hand.is_busted

    def test_bust(self, bust_hand):
        assert bust_hand.is_busted
        assert bust_hand.value == 26
        assert str(bust_hand).endswith("(BUST)")

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        hand = Hand()
        hand.add_card(Card(Rank.ACE, Suit.SPADES))
        assert hand.value == 11

        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        # Ace now counts as 1
        assert hand.value == 14

    def test_ranks(self):
        assert Hand(cards("Ts", "Ad")).ranks == [Rank.TEN, Rank.ACE]

    def test_str(self):
        assert str(Hand(cards("Ts", "4h"))) == "10♤ 4♡ (14)"

    def test_clear_hand(self, blackjack_hand):
        blackjack_hand.clear()
        assert len(blackjack_hand) == 0
        assert blackjack_hand.value == 0
