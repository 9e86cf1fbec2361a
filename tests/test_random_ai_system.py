import random

from fourstack.components.active_turn import ActiveTurn
from fourstack.components.cell import Side
from fourstack.components.game_state import TIMEOUT, OutcomeKind
from fourstack.events.bus import (
    EventBus,
    EVENT_COLUMN_CLICK,
    EVENT_GAME_OVER,
    EVENT_PIECE_PLACED,
    EVENT_TURN_ADVANCED,
)
from fourstack.systems.board import BoardSystem
from fourstack.systems.random_ai_system import RandomAISystem
from fourstack.utils.game_state import get_game_state, set_outcome
from fourstack.world import create_world, owner_for_side
from tests.helpers import drive_ticks, load_layout, make_session, record


def test_idle_while_the_human_holds_the_turn():
    s = make_session(delay=0.0)
    placed = record(s.bus, EVENT_PIECE_PLACED)
    drive_ticks(s.bus, count=5, dt=0.1)
    assert s.ai_system.pending_owner is None
    assert placed == []


def test_arms_with_the_agent_delay_when_its_turn_arrives():
    s = make_session(delay=0.5)
    s.bus.emit(EVENT_COLUMN_CLICK, column=1, owner_entity=s.human)
    assert s.ai_system.pending_owner == s.ai
    assert s.ai_system.delay_remaining == 0.5
    assert s.ai_system.has_dispatched_action is False


def test_same_seed_plays_the_same_columns():
    def ai_columns(seed):
        s = make_session(delay=0.0, seed=seed)
        placed = record(s.bus, EVENT_PIECE_PLACED)
        for _ in range(3):
            s.bus.emit(EVENT_COLUMN_CLICK, column=0, owner_entity=s.human)
            drive_ticks(s.bus, count=1, dt=0.016)
        return [p["col"] for p in placed if p["side"] is Side.SECOND]

    first = ai_columns(7)
    assert len(first) == 3
    assert first == ai_columns(7)


def test_full_board_on_its_turn_ends_in_a_draw():
    s = make_session(rows=4, cols=4, delay=0.0)
    load_layout(s.board, """
        XOXO
        XOXO
        OXOX
        OXOX
    """)
    over = record(s.bus, EVENT_GAME_OVER)
    clicks = record(s.bus, EVENT_COLUMN_CLICK)
    s.bus.emit(EVENT_TURN_ADVANCED, previous_owner=s.human, new_owner=s.ai)
    drive_ticks(s.bus, count=1, dt=0.016)
    assert clicks == []
    assert len(over) == 1
    assert get_game_state(s.world).outcome.kind is OutcomeKind.BOARD_FULL


def test_game_over_cancels_a_pending_move():
    s = make_session(delay=0.5)
    placed = record(s.bus, EVENT_PIECE_PLACED)
    s.bus.emit(EVENT_COLUMN_CLICK, column=1, owner_entity=s.human)
    set_outcome(s.world, s.bus, TIMEOUT)
    assert s.ai_system.pending_owner is None
    drive_ticks(s.bus, count=10, dt=0.2)
    assert len(placed) == 1


def test_moves_first_when_it_holds_the_opening_turn():
    bus = EventBus()
    world = create_world(bus, opponent_delay=0.0, seed=1)
    BoardSystem(world, bus)
    ai = owner_for_side(world, Side.SECOND)
    world.create_entity(ActiveTurn(owner_entity=ai))
    system = RandomAISystem(world, bus, rng=random.Random(1))
    assert system.pending_owner == ai
    placed = record(bus, EVENT_PIECE_PLACED)
    drive_ticks(bus, count=1, dt=0.016)
    assert [p["side"] for p in placed] == [Side.SECOND]
    assert placed[0]["row"] == 5
