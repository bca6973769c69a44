"""Engine error types."""


class GameError(Exception):
    """Base class for blackjack engine errors."""


class InsufficientChips(GameError):
    """The bet is larger than the player's balance."""

    def __init__(self, bet: int, available: int) -> None:
        self.bet = bet
        self.available = available
        super().__init__(f"Cannot bet {bet} chips with only {available} available")


class DeckExhausted(GameError):
    """
    The deck ran out of cards in the middle of a round.

    A single deck never runs dry in one normal round, so this aborts the
    round rather than being something a caller retries.
    """

    def __init__(self) -> None:
        super().__init__("Empty deck!")
