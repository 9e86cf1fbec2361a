from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_COLUMN_CLICK = "column_click"                # payload: column=int, owner_entity=int|None


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_PIECE_PLACED = "piece_placed"                # payload: row, col, side=Side, owner_entity=int
EVENT_MOVE_REJECTED = "move_rejected"              # payload: column=int, reason=str, owner_entity=int|None
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int, positions=[(r,c),...]
EVENT_LINES_CLEARED = "lines_cleared"              # payload: depth=int, positions=[(r,c),...], lines=list[Line]
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: depth=int, moves=list[GravityMove]
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int, cleared=bool
EVENT_MOVE_RESOLVED = "move_resolved"              # payload: owner_entity=int, side=Side


# ============================================================================
# TURN SYSTEM
# ============================================================================
EVENT_TURN_ADVANCED = "turn_advanced"              # payload: previous_owner=int|None, new_owner=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_OVER = "game_over"                      # payload: outcome=GameOutcome, lines=list[Line]
