"""Game API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException
from transitions import MachineError

from api.schemas import (
    ActionRequest,
    BetRequest,
    CardResponse,
    DealerActionResponse,
    GameStateResponse,
    HandResponse,
)
from api.session import get_game_store
from config import config
from core.cards import Card
from core.game import (
    Action,
    DealerAction,
    DealerBust,
    DealerHit,
    DeckExhausted,
    Game,
    GameState,
    InsufficientChips,
)
from core.hand import Hand

logger = logging.getLogger(__name__)

router = APIRouter()

_BETWEEN_ROUNDS = (GameState.WAITING_FOR_BET, GameState.ROUND_COMPLETE)


def _new_game(chips: int | None = None) -> Game:
    """A game with a freshly shuffled deck, waiting for a bet."""
    return Game(player_money=config.game.starting_chips if chips is None else chips)


def require_session(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> str:
    """Reject session ids that were not signed by this server."""
    if not get_game_store().is_signed(session_id):
        raise HTTPException(status_code=401, detail="Invalid session")
    return session_id


def _load_game(session_id: str) -> Game:
    """Restore the session's game, seating a new one if it has expired."""
    store = get_game_store()
    game = store.load(session_id)
    if game is None:
        game = _new_game()
        store.save(session_id, game)
    return game


def _abort_round(session_id: str, game: Game, exc: DeckExhausted) -> HTTPException:
    """Void the round, hand the stake back and leave the seat ready for a bet."""
    logger.error("Aborting round for session: %s", exc)
    get_game_store().save(session_id, _new_game(game.player_money + game.current_bet))
    return HTTPException(status_code=500, detail=str(exc))


def _card_response(card: Card) -> CardResponse:
    return CardResponse(rank=str(card.rank), suit=str(card.suit), value=card.value)


def _hand_response(cards: list[Card]) -> HandResponse:
    hand = Hand(cards)
    return HandResponse(
        cards=[_card_response(c) for c in hand],
        value=hand.value,
        is_busted=hand.is_busted,
    )


def _dealer_action_response(action: DealerAction) -> DealerActionResponse:
    if isinstance(action, DealerHit):
        return DealerActionResponse(
            kind="hit", card=_card_response(action.card), message=str(action)
        )
    kind = "bust" if isinstance(action, DealerBust) else "stand"
    return DealerActionResponse(kind=kind, value=action.value, message=str(action))  # type: ignore[attr-defined]


def _game_state_response(
    game: Game,
    dealer_actions: list[DealerAction] | None = None,
) -> GameStateResponse:
    """Convert game state to response."""
    return GameStateResponse(
        state=game.state.name,
        dealer_hand=_hand_response(game.dealer_cards),
        player_hand=_hand_response(game.player_cards),
        player_money=game.player_money,
        current_bet=game.current_bet,
        cards_remaining=game.cards_remaining,
        can_deal=game.state in _BETWEEN_ROUNDS,
        can_hit=game.state == GameState.PLAYER_TURN,
        can_stand=game.state == GameState.PLAYER_TURN,
        dealer_actions=[_dealer_action_response(a) for a in dealer_actions or []],
    )


@router.post("/new")
async def new_game(
    session_id: Annotated[str | None, Header(alias="X-Session-ID")] = None,
) -> dict[str, str]:
    """Seat a new game, reusing the caller's session id when it is still valid."""
    store = get_game_store()
    if session_id is not None and store.is_signed(session_id):
        store.save(session_id, _new_game())
        return {"session_id": session_id}

    return {"session_id": store.open(_new_game())}


@router.get("/state")
async def get_state(
    session_id: Annotated[str, Depends(require_session)],
) -> GameStateResponse:
    return _game_state_response(_load_game(session_id))


@router.post("/bet")
async def place_bet(
    request: BetRequest,
    session_id: Annotated[str, Depends(require_session)],
) -> GameStateResponse:
    """Place a bet and deal cards."""
    game = _load_game(session_id)
    if game.state in _BETWEEN_ROUNDS:
        # Every round is dealt from a full, freshly shuffled deck
        game = _new_game(game.player_money)

    try:
        game.deal_hand(request.amount)
    except InsufficientChips as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MachineError as exc:
        raise HTTPException(status_code=409, detail="Round already in progress") from exc
    except DeckExhausted as exc:
        raise _abort_round(session_id, game, exc) from exc

    get_game_store().save(session_id, game)
    return _game_state_response(game)


@router.post("/action")
async def player_action(
    request: ActionRequest,
    session_id: Annotated[str, Depends(require_session)],
) -> GameStateResponse:
    """Execute a player action."""
    game = _load_game(session_id)

    try:
        dealer_actions = game.play(Action(request.action))
    except MachineError as exc:
        raise HTTPException(status_code=409, detail=f"Cannot {request.action} now") from exc
    except DeckExhausted as exc:
        raise _abort_round(session_id, game, exc) from exc

    get_game_store().save(session_id, game)
    return _game_state_response(game, dealer_actions)
