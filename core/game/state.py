"""Round state and player action enumerations."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: WAITING_FOR_BET → PLAYER_TURN → DEALER_TURN → ROUND_COMPLETE
    """

    # Before the first deal
    WAITING_FOR_BET = auto()

    # Player may hit or stand
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Dealer finished, ready for the next deal
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Action(Enum):
    """What the player chooses to do on their turn."""

    HIT = "hit"
    STAND = "stand"

    def __str__(self) -> str:
        return self.name.title()
