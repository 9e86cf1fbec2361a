from __future__ import annotations

import random
from types import SimpleNamespace

from fourstack.components.board import Board
from fourstack.components.cell import Side
from fourstack.events.bus import EventBus, EVENT_TICK
from fourstack.systems.board import BoardSystem
from fourstack.systems.match_clock_system import MatchClockSystem
from fourstack.systems.random_ai_system import RandomAISystem
from fourstack.systems.turn_system import TurnSystem
from fourstack.world import create_world, owner_for_side


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


def make_session(rows=6, cols=7, delay=0.0, duration=120.0, seed=0):
    """World plus the driver systems wired the same way the window wires them."""
    bus = EventBus()
    world = create_world(bus, opponent_delay=delay, seed=seed)
    board_system = BoardSystem(world, bus, rows=rows, cols=cols)
    turn_system = TurnSystem(world, bus)
    clock_system = MatchClockSystem(world, bus, duration=duration)
    ai_system = RandomAISystem(world, bus, rng=random.Random(seed))
    return SimpleNamespace(
        bus=bus,
        world=world,
        board=board_system.board,
        board_system=board_system,
        turn_system=turn_system,
        clock_system=clock_system,
        ai_system=ai_system,
        human=owner_for_side(world, Side.FIRST),
        ai=owner_for_side(world, Side.SECOND),
    )


def load_layout(board: Board, text: str) -> None:
    """Overwrite board cells in place from a ``.``/``X``/``O`` layout."""
    layout = Board.from_text(text)
    assert (layout.rows, layout.cols) == (board.rows, board.cols)
    board.cells = layout.cells


def drive_ticks(bus, count=1, dt=0.1):
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def record(bus, event_name):
    captured = []
    bus.subscribe(event_name, lambda sender, **payload: captured.append(payload))
    return captured
