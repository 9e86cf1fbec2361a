from fourstack.components.human_agent import HumanAgent
from fourstack.events.bus import EventBus, EVENT_COLUMN_CLICK, EVENT_MOUSE_PRESS
from fourstack.ui.layout import column_at, compute_board_geometry
from fourstack.utils.game_state import active_owner, get_board, is_game_over

# arcade.MOUSE_BUTTON_LEFT
MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Turns left clicks on the grid into column requests for the human owner."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', MOUSE_BUTTON_LEFT)
        if x is None or y is None or button != MOUSE_BUTTON_LEFT:
            return
        if is_game_over(self.world):
            return
        owner = active_owner(self.world)
        if owner is None or not self.world.has_component(owner, HumanAgent):
            return
        board = get_board(self.world)
        if board is None:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        column = column_at(geometry, x, y)
        if column is None:
            return
        self.event_bus.emit(EVENT_COLUMN_CLICK, column=column, owner_entity=owner)
