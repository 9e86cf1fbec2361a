from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from fourstack.components.cell import EMPTY, Cell, Side
from fourstack.constants import BOARD_COLS, BOARD_ROWS, LINE_LENGTH
from fourstack.errors import ColumnFull, InvalidColumn
from fourstack.systems import board_ops

# Glyphs used by to_text/from_text.
_GLYPHS = {None: ".", Side.FIRST: "X", Side.SECOND: "O"}
_SIDES_BY_GLYPH = {glyph: side for side, glyph in _GLYPHS.items()}


@dataclass(slots=True)
class Placement:
    row: int
    col: int
    side: Side


@dataclass(slots=True)
class Board:
    """Grid state for one session. Row 0 is the top row.

    Only ``place`` and ``resolve_cascade`` mutate the grid, and both leave every
    column's pieces packed against the bottom.
    """
    rows: int = BOARD_ROWS
    cols: int = BOARD_COLS
    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < LINE_LENGTH or self.cols < LINE_LENGTH:
            raise ValueError(
                f"Board must be at least {LINE_LENGTH}x{LINE_LENGTH}, got {self.rows}x{self.cols}"
            )
        if not self.cells:
            self.cells = [[EMPTY] * self.cols for _ in range(self.rows)]
        elif len(self.cells) != self.rows or any(len(row) != self.cols for row in self.cells):
            raise ValueError("cells do not match the board dimensions")

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """Build a board from rows of ``.``/``X``/``O`` glyphs, top row first."""
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        cells = [[Cell(side=_SIDES_BY_GLYPH[glyph]) for glyph in line] for line in lines]
        return cls(rows=len(cells), cols=len(cells[0]) if cells else 0, cells=cells)

    def to_text(self) -> str:
        return "\n".join("".join(_GLYPHS[cell.side] for cell in row) for row in self.cells)

    def copy(self) -> "Board":
        return Board(rows=self.rows, cols=self.cols, cells=[list(row) for row in self.cells])

    def cell_at(self, row: int, col: int) -> Cell:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) is outside the {self.rows}x{self.cols} board")
        return self.cells[row][col]

    def column_is_full(self, column: int) -> bool:
        self._check_column(column)
        return not self.cells[0][column].is_empty

    def legal_columns(self) -> List[int]:
        return board_ops.legal_columns(self)

    def occupied_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if not cell.is_empty)

    def place(self, column: int, side: Side) -> Placement:
        """Drop a piece into ``column``; raises InvalidColumn or ColumnFull."""
        self._check_column(column)
        for row in range(self.rows - 1, -1, -1):
            if self.cells[row][column].is_empty:
                self.cells[row][column] = Cell.occupied(side)
                return Placement(row=row, col=column, side=side)
        raise ColumnFull(column)

    def resolve_cascade(self) -> board_ops.CascadeReport:
        return board_ops.resolve_cascade(self)

    def check_diagonal_win(self, side: Side) -> bool:
        return board_ops.check_diagonal_win(self, side)

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.cols:
            raise InvalidColumn(column, self.cols)
