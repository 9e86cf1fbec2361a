from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from fourstack.constants import (
    BOARD_COLS,
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOARD_ROWS,
    BOTTOM_MARGIN,
    HUD_HEIGHT,
    MIN_CELL_SIZE,
)


@dataclass(slots=True, frozen=True)
class BoardGeometry:
    cell_size: int
    left: float
    bottom: float
    rows: int
    cols: int

    @property
    def right(self) -> float:
        return self.left + self.cols * self.cell_size

    @property
    def top(self) -> float:
        return self.bottom + self.rows * self.cell_size

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        # Board row 0 is the top row; screen y grows upwards.
        x = self.left + col * self.cell_size + self.cell_size / 2
        y = self.bottom + (self.rows - 1 - row) * self.cell_size + self.cell_size / 2
        return x, y


def compute_board_geometry(
    window_width: int,
    window_height: int,
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
) -> BoardGeometry:
    """Return the board placement shared by RenderSystem and InputSystem.

    The board is centred horizontally, sits on the bottom margin and leaves
    HUD_HEIGHT free at the top for the clock and status lines.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    cell_size = int(min(max_board_w / cols, max_board_h / rows))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    left = (window_width - cols * cell_size) / 2
    return BoardGeometry(cell_size=cell_size, left=left, bottom=BOTTOM_MARGIN, rows=rows, cols=cols)


def column_at(geometry: BoardGeometry, x: float, y: float) -> int | None:
    """Map a window point to a column index, or None when it misses the grid."""
    if not (geometry.left <= x < geometry.right and geometry.bottom <= y < geometry.top):
        return None
    return int((x - geometry.left) // geometry.cell_size)
