from __future__ import annotations

from typing import Dict, List, Set, Tuple

from esper import World

from fourstack.components.active_turn import ActiveTurn
from fourstack.components.cell import Side
from fourstack.components.game_state import OutcomeKind
from fourstack.components.human_agent import HumanAgent
from fourstack.components.match_clock import MatchClock, format_clock
from fourstack.constants import (
    BOARD_COLOR,
    EMPTY_CELL_COLOR,
    FRAME_COLOR,
    FRAME_THICKNESS,
    PIECE_COLORS,
    WIN_OUTLINE_COLOR,
)
from fourstack.events.bus import EventBus, EVENT_GAME_OVER
from fourstack.ui.layout import BoardGeometry, compute_board_geometry
from fourstack.utils.game_state import get_board, get_game_state

PADDING = 6
Position = Tuple[int, int]

OUTCOME_BANNERS = {
    (OutcomeKind.WIN, Side.FIRST): "YOU WIN! Diagonal Four-Stack!",
    (OutcomeKind.WIN, Side.SECOND): "AI WINS! Diagonal Four-Stack!",
    (OutcomeKind.TIMEOUT, None): "TIME'S UP! You Lose!",
    (OutcomeKind.BOARD_FULL, None): "BOARD FULL! Draw.",
}


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.winning_cells: Set[Position] = set()
        # Filled by process(); lets tests inspect layout without a window.
        self._last_piece_layout: Dict[Position, dict] = {}
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)

    def on_game_over(self, sender, **kwargs):
        lines = kwargs.get('lines') or []
        self.winning_cells = {pos for line in lines for pos in line.cells}

    def clock_text(self) -> str:
        clocks = list(self.world.get_component(MatchClock))
        remaining = clocks[0][1].remaining if clocks else 0.0
        return f"Time: {format_clock(remaining)}"

    def status_text(self) -> str:
        outcome = get_game_state(self.world).outcome
        if outcome.is_over:
            return OUTCOME_BANNERS[(outcome.kind, outcome.winner)]
        active: List[int] = [comp.owner_entity for _, comp in self.world.get_component(ActiveTurn)]
        if active and self.world.has_component(active[0], HumanAgent):
            return "Your Turn (Yellow)"
        return "AI Turn (Red)"

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        board = get_board(self.world)
        if board is None:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        self._layout_pieces(board, geometry)
        if headless:
            return
        self._draw_board(arcade, geometry)
        for (row, col), entry in self._last_piece_layout.items():
            x, y = entry["center"]
            arcade.draw_circle_filled(x, y, entry["radius"], entry["color"])
            if (row, col) in self.winning_cells:
                arcade.draw_circle_outline(x, y, entry["radius"] + 2, WIN_OUTLINE_COLOR, 4)
        self._draw_hud(arcade)

    def _layout_pieces(self, board, geometry: BoardGeometry) -> None:
        radius = max(geometry.cell_size - PADDING, 4) / 2
        self._last_piece_layout = {}
        for row in range(board.rows):
            for col in range(board.cols):
                cell = board.cell_at(row, col)
                color = EMPTY_CELL_COLOR if cell.is_empty else PIECE_COLORS[cell.side.value]
                self._last_piece_layout[(row, col)] = {
                    "center": geometry.cell_center(row, col),
                    "radius": radius,
                    "color": color,
                    "side": cell.side,
                }

    def _draw_board(self, arcade, geometry: BoardGeometry) -> None:
        arcade.draw_lrbt_rectangle_filled(
            geometry.left - FRAME_THICKNESS,
            geometry.right + FRAME_THICKNESS,
            geometry.bottom - FRAME_THICKNESS,
            geometry.top + FRAME_THICKNESS,
            FRAME_COLOR,
        )
        arcade.draw_lrbt_rectangle_filled(
            geometry.left, geometry.right, geometry.bottom, geometry.top, BOARD_COLOR
        )

    def _draw_hud(self, arcade) -> None:
        height = self.window.height
        arcade.draw_text(self.clock_text(), 20, height - 40, arcade.color.WHITE, 24)
        outcome = get_game_state(self.world).outcome
        if not outcome.is_over:
            arcade.draw_text(self.status_text(), 20, height - 80, arcade.color.WHITE, 24)
            return
        color = arcade.color.YELLOW if outcome.winner is Side.FIRST else arcade.color.RED
        arcade.draw_text(
            self.status_text(),
            self.window.width / 2,
            height - 80,
            color,
            28,
            anchor_x="center",
        )
