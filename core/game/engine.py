"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Callable, Iterable

from transitions import Machine, MachineError

from core.cards import Card, Deck
from core.hand import Hand
from core.game.errors import DeckExhausted, InsufficientChips
from core.game.events import (
    DealerAction,
    DealerBust,
    DealerHit,
    DealerStand,
    EventEmitter,
    EventType,
    GameEvent,
)
from core.game.state import Action, GameState

logger = logging.getLogger(__name__)

STARTING_CHIPS = 100

# Dealer draws while at or below this value
DEALER_HITS_ON = 16


class Game:
    """
    Single-player blackjack round engine.

    Owns one deck and the dealer's and player's hands. The engine is
    completely UI-agnostic: callers drive it with ``deal_hand``, ``hit`` and
    ``stand`` and observe it through return values and events.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {
            "trigger": "start_round",
            "source": ["waiting_for_bet", "round_complete"],
            "dest": "player_turn",
        },
        {"trigger": "player_hits", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_stands", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "round_complete"},
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        dealer_cards: Iterable[Card] = (),
        player_cards: Iterable[Card] = (),
        player_money: int = STARTING_CHIPS,
        current_bet: int = 0,
        state: GameState | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            deck: Deck to draw from (a freshly shuffled deck if not provided)
            dealer_cards: Cards already in the dealer's hand
            player_cards: Cards already in the player's hand
            player_money: Player's chip balance
            current_bet: Bet already riding on the hand
            state: Round state to start in; defaults to PLAYER_TURN when
                hands are supplied and WAITING_FOR_BET otherwise
            rng: Random number generator for the default deck's shuffle
        """
        self.deck = deck if deck is not None else Deck(rng=rng)
        self._dealer_hand = Hand(list(dealer_cards))
        self._player_hand = Hand(list(player_cards))
        self._player_money = player_money
        self._current_bet = current_bet
        self.events = EventEmitter()

        if state is None:
            dealt = len(self._dealer_hand) or len(self._player_hand)
            state = GameState.PLAYER_TURN if dealt else GameState.WAITING_FOR_BET

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial=state.name.lower(),
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current round state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def dealer_cards(self) -> list[Card]:
        return list(self._dealer_hand.cards)

    @property
    def player_cards(self) -> list[Card]:
        return list(self._player_hand.cards)

    @property
    def dealer_value(self) -> int:
        return self._dealer_hand.value

    @property
    def player_value(self) -> int:
        return self._player_hand.value

    @property
    def player_busted(self) -> bool:
        return self._player_hand.is_busted

    @property
    def player_money(self) -> int:
        return self._player_money

    @property
    def current_bet(self) -> int:
        return self._current_bet

    @property
    def cards_remaining(self) -> int:
        return len(self.deck)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal_hand(self, bet: int) -> None:
        """
        Take a bet and deal two cards each to the dealer and the player.

        Cards are dealt dealer, dealer, player, player. Hands left over from
        a finished round are cleared first.

        Raises:
            MachineError: If a round is already in progress.
            InsufficientChips: If the bet is larger than the balance. Nothing
                is changed in that case.
            DeckExhausted: If the deck runs out while dealing.
        """
        if not self.may_start_round():
            raise MachineError(f"Cannot deal while in state {self.state}")

        if bet < 0:
            raise ValueError(f"Bet must not be negative, got {bet}")

        if bet > self._player_money:
            logger.warning(
                "Rejected bet of %d with balance %d", bet, self._player_money
            )
            self.events.emit_new(
                EventType.INSUFFICIENT_FUNDS,
                required=bet,
                available=self._player_money,
            )
            raise InsufficientChips(bet, self._player_money)

        self.start_round()  # Trigger state transition

        self._dealer_hand.clear()
        self._player_hand.clear()

        self._player_money -= bet
        self._current_bet = bet
        self.events.emit_new(EventType.BET_PLACED, amount=bet)

        self._deal_card_to(self._dealer_hand)
        self._deal_card_to(self._dealer_hand)
        self._deal_card_to(self._player_hand)
        self._deal_card_to(self._player_hand)

        logger.info(
            "Dealt round with bet %d: dealer %s, player %s",
            bet,
            self._dealer_hand,
            self._player_hand,
        )
        self.events.emit_new(EventType.ROUND_STARTED)

    def hit(self) -> Card:
        """
        Deal one more card to the player.

        Returns:
            The card drawn

        Raises:
            DeckExhausted: If there is no card left to draw.
        """
        self.player_hits()

        card = self._deal_card_to(self._player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_value)

        if self._player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_value)

        return card

    def stand(self) -> list[DealerAction]:
        """
        End the player's turn and play out the dealer's hand.

        The dealer draws while at 16 or less, then stands or busts.

        Returns:
            Every dealer step in order, ending with exactly one
            DealerStand or DealerBust

        Raises:
            DeckExhausted: If the dealer needs a card and none is left.
        """
        self.player_stands()
        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_value)

        actions: list[DealerAction] = []

        while self.dealer_value <= DEALER_HITS_ON:
            card = self._deal_card_to(self._dealer_hand)
            actions.append(DealerHit(card))
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_value)

        value = self.dealer_value
        if self._dealer_hand.is_busted:
            actions.append(DealerBust(value))
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=value)
        else:
            actions.append(DealerStand(value))
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=value)

        logger.info("Dealer finished: %s", actions[-1])
        self.dealer_done()
        return actions

    def play(self, action: Action) -> list[DealerAction]:
        """Apply a player action; only standing produces dealer actions."""
        if action is Action.HIT:
            self.hit()
            return []
        return self.stand()

    def _deal_card_to(self, hand: Hand) -> Card:
        """Draw a card into ``hand``."""
        card = self.deck.draw()
        if card is None:
            logger.error("Deck exhausted in state %s", self.state)
            self.events.emit_new(EventType.DECK_EXHAUSTED, state=self.state.name)
            raise DeckExhausted()

        hand.add_card(card)
        name = "dealer" if hand is self._dealer_hand else "player"
        logger.debug("Dealt %s to %s", card, name)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=name,
            hand_value=hand.value,
        )
        return card
