"""Opponent move selection.

A uniform pick among the open columns, with no lookahead and no blocking. The
policy only reads the board, so callers can ask what the opponent would play
without committing the move.
"""
from __future__ import annotations

import random

from fourstack.components.board import Board
from fourstack.errors import NoLegalMove


class RandomColumnPolicy:
    def __init__(self, rng: random.Random | int | None = None) -> None:
        if isinstance(rng, random.Random):
            self.random = rng
        else:
            self.random = random.Random(rng)

    def choose_column(self, board: Board) -> int:
        legal = board.legal_columns()
        if not legal:
            raise NoLegalMove()
        return self.random.choice(legal)
