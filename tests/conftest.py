"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from core.cards import Deck, cards
from core.hand import Hand
from core.game import Game


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return Hand(cards("As", "Kh"))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand(cards("Ts", "6h", "Kc"))


@pytest.fixture
def game(rng):
    """A new game instance waiting for a bet."""
    return Game(rng=rng)


@pytest.fixture
def events(game):
    """Every event the game emits, in order."""
    seen = []
    game.subscribe(seen.append)
    return seen
