from esper import World
from loguru import logger

from fourstack.components.active_turn import ActiveTurn
from fourstack.components.cell import Side
from fourstack.components.game_state import BOARD_FULL
from fourstack.components.player_side import PlayerSide
from fourstack.components.turn_order import TurnOrder
from fourstack.events.bus import EventBus, EVENT_MOVE_RESOLVED, EVENT_TURN_ADVANCED
from fourstack.utils.game_state import get_board, is_game_over, set_outcome


class TurnSystem:
    """Rotates the active owner once a move has been fully resolved.

    Flow:
      - EVENT_MOVE_RESOLVED arrives after placement, cascade and win check.
      - If no column is open the session ends as a forced draw.
      - Otherwise the turn order advances and EVENT_TURN_ADVANCED fires.
    A rejected column never reaches this system, so the same owner keeps the turn.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_RESOLVED, self.on_move_resolved)
        self._ensure_turn_order()

    def _ensure_turn_order(self):
        existing = list(self.world.get_component(TurnOrder))
        if existing:
            return
        owners = [ent for ent, _ in self.world.get_component(PlayerSide)]
        # First side opens unless an ActiveTurn was placed beforehand.
        owners.sort(key=lambda entity: (
            self.world.component_for_entity(entity, PlayerSide).side is not Side.FIRST,
            entity,
        ))
        order = TurnOrder(owners=owners, index=0)
        self.world.create_entity(order)
        active_list = list(self.world.get_component(ActiveTurn))
        if active_list:
            order.start_with(active_list[0][1].owner_entity)
        elif owners:
            self.world.create_entity(ActiveTurn(owner_entity=owners[0]))

    def on_move_resolved(self, sender, **payload):
        if is_game_over(self.world):
            return
        board = get_board(self.world)
        if board is not None and not board.legal_columns():
            set_outcome(self.world, self.event_bus, BOARD_FULL)
            return
        self._advance_turn()

    def _advance_turn(self):
        """Advance turn order and update ActiveTurn component."""
        orders = list(self.world.get_component(TurnOrder))
        if not orders:
            return
        _, order = orders[0]
        new_owner = order.advance()
        if new_owner is None:
            return
        active_list = list(self.world.get_component(ActiveTurn))
        previous_owner = None
        if not active_list:
            self.world.create_entity(ActiveTurn(owner_entity=new_owner))
        else:
            _, comp_active = active_list[0]
            previous_owner = comp_active.owner_entity
            comp_active.owner_entity = new_owner
        logger.debug("Turn passes from {} to {}", previous_owner, new_owner)
        self.event_bus.emit(EVENT_TURN_ADVANCED, previous_owner=previous_owner, new_owner=new_owner)
