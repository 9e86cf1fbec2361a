from fourstack.components.cell import Side
from fourstack.components.game_state import BOARD_FULL, TIMEOUT, GameOutcome
from fourstack.constants import EMPTY_CELL_COLOR, PIECE_COLORS
from fourstack.events.bus import EVENT_COLUMN_CLICK
from fourstack.systems.render import RenderSystem
from fourstack.ui.layout import compute_board_geometry
from fourstack.utils.game_state import set_outcome
from tests.helpers import DummyWindow, drive_ticks, load_layout, make_session


def _session_with_render(**kwargs):
    s = make_session(**kwargs)
    render = RenderSystem(s.world, s.bus, DummyWindow())
    return s, render


def test_status_follows_the_active_owner():
    s, render = _session_with_render(delay=10.0)
    assert render.status_text() == "Your Turn (Yellow)"
    s.bus.emit(EVENT_COLUMN_CLICK, column=0, owner_entity=s.human)
    assert render.status_text() == "AI Turn (Red)"


def test_clock_text_tracks_the_match_clock():
    s, render = _session_with_render(duration=120.0)
    assert render.clock_text() == "Time: 2:00"
    drive_ticks(s.bus, count=3, dt=0.5)
    assert render.clock_text() == "Time: 1:58"


def test_outcome_banners():
    s, render = _session_with_render()
    set_outcome(s.world, s.bus, GameOutcome.win(Side.SECOND))
    assert render.status_text() == "AI WINS! Diagonal Four-Stack!"

    s, render = _session_with_render()
    set_outcome(s.world, s.bus, GameOutcome.win(Side.FIRST))
    assert render.status_text() == "YOU WIN! Diagonal Four-Stack!"

    s, render = _session_with_render()
    set_outcome(s.world, s.bus, TIMEOUT)
    assert render.status_text() == "TIME'S UP! You Lose!"
    assert render.clock_text() == "Time: 2:00"

    s, render = _session_with_render()
    set_outcome(s.world, s.bus, BOARD_FULL)
    assert render.status_text() == "BOARD FULL! Draw."


def test_winning_line_cells_are_remembered():
    s, render = _session_with_render(delay=0.0)
    load_layout(s.board, """
        .......
        .......
        .......
        ..XO...
        .XOX...
        XOOO...
    """)
    s.bus.emit(EVENT_COLUMN_CLICK, column=3, owner_entity=s.human)
    assert render.winning_cells == {(5, 0), (4, 1), (3, 2), (2, 3)}


def test_piece_layout_covers_every_cell():
    s, render = _session_with_render(delay=10.0)
    s.bus.emit(EVENT_COLUMN_CLICK, column=2, owner_entity=s.human)
    geometry = compute_board_geometry(800, 600, s.board.rows, s.board.cols)
    render._layout_pieces(s.board, geometry)
    layout = render._last_piece_layout
    assert len(layout) == 42
    assert layout[(5, 2)]["side"] is Side.FIRST
    assert layout[(5, 2)]["color"] == PIECE_COLORS["first"]
    assert layout[(5, 2)]["center"] == geometry.cell_center(5, 2)
    assert layout[(0, 0)]["side"] is None
    assert layout[(0, 0)]["color"] == EMPTY_CELL_COLOR
    assert layout[(0, 0)]["radius"] == 25.0
