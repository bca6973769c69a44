"""Interactive text front-end for the blackjack engine."""

import logging
from typing import Callable

from core.cards import Card
from core.game import Action, DealerAction, Game, InsufficientChips

logger = logging.getLogger(__name__)

ACTION_KEYS = {
    "h": Action.HIT,
    "hit": Action.HIT,
    "s": Action.STAND,
    "stand": Action.STAND,
}

QUIT_KEYS = {"q", "quit"}


def format_cards(cards: list[Card]) -> str:
    return " ".join(str(card) for card in cards)


def parse_action(raw: str) -> Action | None:
    """Map a line of input to an action, or None if it is not recognized."""
    return ACTION_KEYS.get(raw.strip().lower())


class ConsoleApp:
    """
    Prompt loop around the engine.

    A fresh Game (and so a fresh shuffled deck) is created for every round;
    only the chip balance carries over.
    """

    def __init__(
        self,
        starting_chips: int,
        default_bet: int,
        input_fn: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
        game_factory: Callable[[int], Game] | None = None,
    ) -> None:
        self.chips = starting_chips
        self.default_bet = default_bet
        self._input = input_fn or input
        self._output = output or print
        self._game_factory = game_factory or (lambda chips: Game(player_money=chips))
        self.rounds_played = 0

    def render(self, game: Game) -> None:
        """Show the table and the action menu."""
        self._output(f"Bank: {game.player_money}")
        self._output(f"Current Bet: {game.current_bet}")
        self._output(f"Dealer Cards: {format_cards(game.dealer_cards)}")
        self._output(f"Player Cards: {format_cards(game.player_cards)} ({game.player_value})")
        self._output("Actions:")
        self._output(" H) Hit")
        self._output(" S) Stand")

    def pick_action(self) -> Action:
        """Read lines until one names an action."""
        while True:
            action = parse_action(self._input("> "))
            if action is not None:
                return action

    def ask_bet(self) -> int | None:
        """
        Ask for the next bet.

        Returns:
            The bet, or None if the player wants to stop
        """
        while True:
            raw = self._input(f"Bet (enter for {self.default_bet}, Q to quit): ").strip().lower()
            if raw in QUIT_KEYS:
                return None
            if not raw:
                return self.default_bet
            if raw.isdecimal() and int(raw) > 0:
                return int(raw)
            self._output("Please enter a positive number of chips.")

    def play_round(self, bet: int) -> list[DealerAction]:
        """
        Deal one round and play it to the end.

        Raises:
            InsufficientChips: If the bet is more than the bank holds.
        """
        game = self._game_factory(self.chips)
        game.deal_hand(bet)
        self.chips = game.player_money

        dealer_actions: list[DealerAction] = []
        while not dealer_actions:
            self.render(game)
            dealer_actions = game.play(self.pick_action())
            if not dealer_actions and game.player_busted:
                self._output(f"Player Cards: {format_cards(game.player_cards)}")
                self._output(f"You bust with {game.player_value}")
                dealer_actions = game.stand()

        for action in dealer_actions:
            self._output(str(action))

        self.rounds_played += 1
        return dealer_actions

    def run(self) -> int:
        """Play rounds until the player quits or runs out of chips."""
        while self.chips > 0:
            bet = self.ask_bet()
            if bet is None:
                break
            try:
                self.play_round(bet)
            except InsufficientChips as exc:
                self._output(f"{exc}. Try a smaller bet.")

        logger.info("Session over after %d rounds with %d chips", self.rounds_played, self.chips)
        self._output(f"Thanks for playing. You leave with {self.chips} chips.")
        return 0
