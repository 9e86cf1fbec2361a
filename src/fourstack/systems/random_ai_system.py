from __future__ import annotations

import random
from typing import Optional

from esper import World
from loguru import logger

from fourstack.ai.random_policy import RandomColumnPolicy
from fourstack.components.active_turn import ActiveTurn
from fourstack.components.game_state import BOARD_FULL
from fourstack.components.random_agent import RandomAgent
from fourstack.errors import NoLegalMove
from fourstack.events.bus import (
    EventBus,
    EVENT_COLUMN_CLICK,
    EVENT_GAME_OVER,
    EVENT_TICK,
    EVENT_TURN_ADVANCED,
)
from fourstack.utils.game_state import get_board, is_game_over, set_outcome


class RandomAISystem:
    """Drops pieces for owners marked with RandomAgent after their decision delay.

    Idle -> (turn arrives) -> pending, counting the delay down on ticks ->
    choose a column and emit EVENT_COLUMN_CLICK -> idle.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.policy = RandomColumnPolicy(rng if rng is not None else self._seed_from_agents())
        self.pending_owner: Optional[int] = None
        self.has_dispatched_action = False
        self.delay_remaining: float = 0.0
        event_bus.subscribe(EVENT_TURN_ADVANCED, self.on_turn_advanced)
        event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        self._prime_initial_owner()

    def on_turn_advanced(self, sender, **payload) -> None:
        new_owner = payload.get("new_owner")
        if new_owner is not None and self._is_ai_owner(new_owner):
            self._arm(new_owner)
        else:
            self._reset()

    def on_game_over(self, sender, **payload) -> None:
        self._reset()

    def on_tick(self, sender, **payload) -> None:
        if self.pending_owner is None or self.has_dispatched_action:
            return
        if is_game_over(self.world):
            self._reset()
            return
        dt = float(payload.get("dt", 0.0))
        if self.delay_remaining > 0.0:
            self.delay_remaining = max(0.0, self.delay_remaining - dt)
            if self.delay_remaining > 0.0:
                return
        owner = self.pending_owner
        board = get_board(self.world)
        if board is None:
            return
        self.has_dispatched_action = True
        try:
            column = self.policy.choose_column(board)
        except NoLegalMove:
            logger.info("Opponent has no legal move; ending the game as a draw")
            set_outcome(self.world, self.event_bus, BOARD_FULL)
            return
        logger.debug("Opponent {} picks column {}", owner, column)
        self.event_bus.emit(EVENT_COLUMN_CLICK, column=column, owner_entity=owner)

    def _arm(self, owner_entity: int) -> None:
        self.pending_owner = owner_entity
        self.has_dispatched_action = False
        self.delay_remaining = self._decision_delay_for(owner_entity)

    def _reset(self) -> None:
        self.pending_owner = None
        self.has_dispatched_action = False
        self.delay_remaining = 0.0

    def _is_ai_owner(self, owner_entity: int) -> bool:
        try:
            self.world.component_for_entity(owner_entity, RandomAgent)
            return True
        except KeyError:
            return False

    def _decision_delay_for(self, owner_entity: int) -> float:
        try:
            agent: RandomAgent = self.world.component_for_entity(owner_entity, RandomAgent)
            return max(0.0, agent.decision_delay)
        except KeyError:
            return 0.0

    def _seed_from_agents(self) -> int | None:
        for _, agent in self.world.get_component(RandomAgent):
            return agent.seed
        return None

    def _prime_initial_owner(self) -> None:
        active_entries = list(self.world.get_component(ActiveTurn))
        if not active_entries:
            return
        _, active = active_entries[0]
        if self._is_ai_owner(active.owner_entity):
            self._arm(active.owner_entity)
