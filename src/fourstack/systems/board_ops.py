"""Line detection, gravity and cascade resolution over a ``Board``.

Row 0 is the top of the board. Horizontal and vertical fours are cleared by
the cascade; diagonal fours are never cleared and only decide the winner.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Tuple

from fourstack.components.cell import EMPTY, Side
from fourstack.constants import LINE_LENGTH

if TYPE_CHECKING:
    from fourstack.components.board import Board

Position = Tuple[int, int]


class Direction(Enum):
    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)
    DESCENDING = (1, 1)    # row increasing, column increasing
    ASCENDING = (-1, 1)    # row decreasing, column increasing


@dataclass(slots=True, frozen=True)
class Line:
    side: Side
    direction: Direction
    cells: Tuple[Position, ...]


@dataclass(slots=True, frozen=True)
class GravityMove:
    source: Position
    target: Position
    side: Side


@dataclass(slots=True)
class CascadePass:
    depth: int
    removed: List[Position]
    lines: List[Line]
    moves: List[GravityMove]


@dataclass(slots=True)
class CascadeReport:
    """Ordered record of every detect/clear/gravity pass of one resolution."""
    passes: List[CascadePass] = field(default_factory=list)

    @property
    def cleared(self) -> bool:
        return bool(self.passes)

    @property
    def depth(self) -> int:
        return len(self.passes)

    @property
    def removed(self) -> List[Position]:
        return [pos for cascade_pass in self.passes for pos in cascade_pass.removed]

    def __bool__(self) -> bool:
        return self.cleared


def _line_from(board: Board, row: int, col: int, direction: Direction) -> Line | None:
    # Anchors are chosen by the callers so that every step stays on the board.
    first = board.cells[row][col]
    if first.is_empty:
        return None
    d_row, d_col = direction.value
    cells = [(row, col)]
    for step in range(1, LINE_LENGTH):
        r, c = row + d_row * step, col + d_col * step
        if board.cells[r][c] != first:
            return None
        cells.append((r, c))
    return Line(side=first.side, direction=direction, cells=tuple(cells))


def find_clearable_lines(board: Board) -> List[Line]:
    """Every aligned horizontal or vertical 4-window holding a single side.

    Overlapping windows are all reported, so a run of five yields two lines
    that together cover all five cells.
    """
    lines: List[Line] = []
    for row in range(board.rows):
        for col in range(board.cols - LINE_LENGTH + 1):
            line = _line_from(board, row, col, Direction.HORIZONTAL)
            if line is not None:
                lines.append(line)
    for col in range(board.cols):
        for row in range(board.rows - LINE_LENGTH + 1):
            line = _line_from(board, row, col, Direction.VERTICAL)
            if line is not None:
                lines.append(line)
    return lines


def iter_diagonal_lines(board: Board) -> Iterator[Line]:
    for row in range(board.rows - LINE_LENGTH + 1):
        for col in range(board.cols - LINE_LENGTH + 1):
            line = _line_from(board, row, col, Direction.DESCENDING)
            if line is not None:
                yield line
    for row in range(LINE_LENGTH - 1, board.rows):
        for col in range(board.cols - LINE_LENGTH + 1):
            line = _line_from(board, row, col, Direction.ASCENDING)
            if line is not None:
                yield line


def find_diagonal_lines(board: Board, side: Side | None = None) -> List[Line]:
    """All diagonal fours, optionally limited to one side (used for highlighting)."""
    return [line for line in iter_diagonal_lines(board) if side is None or line.side is side]


def check_diagonal_win(board: Board, side: Side) -> bool:
    return any(line.side is side for line in iter_diagonal_lines(board))


def apply_gravity(board: Board) -> List[GravityMove]:
    """Re-pack every column's pieces against the bottom, keeping their order."""
    moves: List[GravityMove] = []
    for col in range(board.cols):
        pieces = [(row, board.cells[row][col]) for row in range(board.rows) if not board.cells[row][col].is_empty]
        first_target = board.rows - len(pieces)
        for row in range(board.rows):
            board.cells[row][col] = EMPTY
        for offset, (source_row, cell) in enumerate(pieces):
            target_row = first_target + offset
            board.cells[target_row][col] = cell
            if target_row != source_row:
                moves.append(GravityMove(source=(source_row, col), target=(target_row, col), side=cell.side))
    return moves


def resolve_cascade(board: Board) -> CascadeReport:
    """Clear horizontal/vertical fours and apply gravity until nothing matches.

    Each pass detects on the untouched board, clears every marked cell in one
    batch and then applies gravity. A pass removes at least four pieces, so
    the loop cannot run more than rows * cols times.
    """
    report = CascadeReport()
    max_passes = board.rows * board.cols
    while True:
        lines = find_clearable_lines(board)
        if not lines:
            return report
        if len(report.passes) >= max_passes:
            raise RuntimeError(f"Cascade did not settle within {max_passes} passes")
        removed = sorted({pos for line in lines for pos in line.cells})
        for row, col in removed:
            board.cells[row][col] = EMPTY
        moves = apply_gravity(board)
        report.passes.append(
            CascadePass(depth=len(report.passes) + 1, removed=removed, lines=lines, moves=moves)
        )


def gravity_invariant_holds(board: Board) -> bool:
    """True when no occupied cell sits above an empty one in any column."""
    for col in range(board.cols):
        seen_piece = False
        for row in range(board.rows):
            if not board.cells[row][col].is_empty:
                seen_piece = True
            elif seen_piece:
                return False
    return True


def legal_columns(board: Board) -> List[int]:
    return [col for col in range(board.cols) if not board.column_is_full(col)]
