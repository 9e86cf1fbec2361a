from __future__ import annotations

from typing import Sequence

from esper import World
from loguru import logger

from fourstack.components.active_turn import ActiveTurn
from fourstack.components.board import Board
from fourstack.components.game_state import GameOutcome, GameState
from fourstack.events.bus import EVENT_GAME_OVER, EventBus


def get_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    for _, state in world.get_component(GameState):
        return state
    world.create_entity(GameState())
    return list(world.get_component(GameState))[0][1]


def is_game_over(world: World) -> bool:
    return get_game_state(world).outcome.is_over


def set_outcome(world: World, event_bus: EventBus, outcome: GameOutcome, *, lines: Sequence = ()) -> bool:
    """Finish the session with ``outcome`` and emit EVENT_GAME_OVER.

    A finished outcome is final: later calls are ignored and return False.
    """
    state = get_game_state(world)
    if state.outcome.is_over or not outcome.is_over:
        return False
    state.outcome = outcome
    logger.info("Game over: {} (winner={})", outcome.kind.name, outcome.winner.name if outcome.winner else None)
    event_bus.emit(EVENT_GAME_OVER, outcome=outcome, lines=list(lines))
    return True


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None


def active_owner(world: World) -> int | None:
    for _, active in world.get_component(ActiveTurn):
        return active.owner_entity
    return None
