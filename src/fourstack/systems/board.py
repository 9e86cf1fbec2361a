from __future__ import annotations

from esper import World
from loguru import logger

from fourstack.components.board import Board
from fourstack.components.player_side import PlayerSide
from fourstack.components.game_state import GameOutcome
from fourstack.constants import BOARD_COLS, BOARD_ROWS
from fourstack.errors import ColumnFull, InvalidColumn
from fourstack.events.bus import (
    EventBus,
    EVENT_CASCADE_COMPLETE,
    EVENT_CASCADE_STEP,
    EVENT_COLUMN_CLICK,
    EVENT_GRAVITY_APPLIED,
    EVENT_LINES_CLEARED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_RESOLVED,
    EVENT_PIECE_PLACED,
)
from fourstack.systems.board_ops import find_diagonal_lines
from fourstack.utils.game_state import active_owner, is_game_over, set_outcome


class BoardSystem:
    """Applies column requests to the board in a fixed order.

    place -> cascade (one event group per pass) -> diagonal win check for the
    side that moved. Rejected columns only produce EVENT_MOVE_REJECTED.
    """

    def __init__(self, world: World, event_bus: EventBus, rows: int = BOARD_ROWS, cols: int = BOARD_COLS):
        self.world = world
        self.event_bus = event_bus
        self.board = Board(rows=rows, cols=cols)
        self.board_entity = self.world.create_entity(self.board)
        self.event_bus.subscribe(EVENT_COLUMN_CLICK, self.on_column_click)

    def on_column_click(self, sender, **kwargs):
        column = kwargs.get('column')
        owner_entity = kwargs.get('owner_entity')
        if column is None:
            return
        if is_game_over(self.world):
            return
        if owner_entity is None or owner_entity != active_owner(self.world):
            logger.debug("Ignoring column {} from {}: not the active owner", column, owner_entity)
            return
        try:
            side = self.world.component_for_entity(owner_entity, PlayerSide).side
        except KeyError:
            return
        self.play(owner_entity, column, side)

    def play(self, owner_entity: int, column: int, side) -> bool:
        """Run one full move for ``side``. Returns False when the column was rejected."""
        try:
            placement = self.board.place(column, side)
        except (InvalidColumn, ColumnFull) as exc:
            reason = "invalid_column" if isinstance(exc, InvalidColumn) else "column_full"
            logger.debug("Move rejected: {}", exc)
            self.event_bus.emit(EVENT_MOVE_REJECTED, column=column, reason=reason, owner_entity=owner_entity)
            return False
        logger.debug("{} dropped into column {} at row {}", side.name, placement.col, placement.row)
        self.event_bus.emit(
            EVENT_PIECE_PLACED,
            row=placement.row,
            col=placement.col,
            side=side,
            owner_entity=owner_entity,
        )
        self._resolve_cascade()
        if self.board.check_diagonal_win(side):
            set_outcome(
                self.world,
                self.event_bus,
                GameOutcome.win(side),
                lines=find_diagonal_lines(self.board, side),
            )
            logger.debug("Final board:\n{}", self.board.to_text())
            return True
        self.event_bus.emit(EVENT_MOVE_RESOLVED, owner_entity=owner_entity, side=side)
        return True

    def _resolve_cascade(self):
        report = self.board.resolve_cascade()
        for cascade_pass in report.passes:
            logger.debug(
                "Cascade pass {} cleared {} cells", cascade_pass.depth, len(cascade_pass.removed)
            )
            self.event_bus.emit(EVENT_CASCADE_STEP, depth=cascade_pass.depth, positions=cascade_pass.removed)
            self.event_bus.emit(
                EVENT_LINES_CLEARED,
                depth=cascade_pass.depth,
                positions=cascade_pass.removed,
                lines=cascade_pass.lines,
            )
            self.event_bus.emit(EVENT_GRAVITY_APPLIED, depth=cascade_pass.depth, moves=cascade_pass.moves)
        self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=report.depth, cleared=report.cleared)
        return report
