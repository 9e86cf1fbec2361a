"""Recoverable board and policy errors.

``InvalidColumn`` and ``ColumnFull`` are reported to the caller and leave the
board untouched. ``NoLegalMove`` means the board has no open column left.
"""


class FourStackError(Exception):
    """Base class for game rule errors."""


class InvalidColumn(FourStackError, ValueError):
    def __init__(self, column: int, cols: int):
        super().__init__(f"Column {column} is outside [0, {cols})")
        self.column = column
        self.cols = cols


class ColumnFull(FourStackError):
    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class NoLegalMove(FourStackError):
    def __init__(self):
        super().__init__("Every column is full")
