import random

import pytest

from fourstack.ai.random_policy import RandomColumnPolicy
from fourstack.components.board import Board
from fourstack.components.cell import Side
from fourstack.errors import NoLegalMove

FULL_4X4 = """
    XOXO
    XOXO
    OXOX
    OXOX
"""


def test_never_picks_a_full_column():
    board = Board(rows=4, cols=7)
    for column in (0, 2, 3, 5, 6):
        for i in range(4):
            board.place(column, Side.FIRST if i % 2 == 0 else Side.SECOND)
    policy = RandomColumnPolicy(random.Random(3))
    picks = {policy.choose_column(board) for _ in range(200)}
    assert picks == {1, 4}
    assert not any(board.column_is_full(col) for col in picks)


def test_single_open_column_is_always_chosen():
    board = Board.from_text("""
        XOX.
        XOXO
        OXOX
        OXOX
    """)
    policy = RandomColumnPolicy(0)
    assert [policy.choose_column(board) for _ in range(10)] == [3] * 10


def test_full_board_raises_no_legal_move():
    board = Board.from_text(FULL_4X4)
    with pytest.raises(NoLegalMove):
        RandomColumnPolicy(1).choose_column(board)


def test_same_seed_gives_same_sequence():
    board = Board()
    first = RandomColumnPolicy(random.Random(42))
    second = RandomColumnPolicy(42)
    assert [first.choose_column(board) for _ in range(20)] == [
        second.choose_column(board) for _ in range(20)
    ]


def test_every_open_column_gets_picked():
    board = Board()
    policy = RandomColumnPolicy(random.Random(9))
    picks = {policy.choose_column(board) for _ in range(500)}
    assert picks == set(range(7))


def test_choosing_does_not_touch_the_board():
    board = Board()
    board.place(3, Side.FIRST)
    before = board.to_text()
    RandomColumnPolicy(5).choose_column(board)
    assert board.to_text() == before
