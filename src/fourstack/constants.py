BOARD_ROWS = 6
BOARD_COLS = 7
LINE_LENGTH = 4

# Seconds the automated opponent waits before dropping its piece.
OPPONENT_MOVE_DELAY = 0.5
# Length of a match in seconds.
MATCH_DURATION = 120.0

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "FourStack"
UPDATE_RATE = 1 / 60

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.70
BOARD_MAX_HEIGHT_PCT = 0.75
BOTTOM_MARGIN = 40
# Space reserved above the board for the clock and status lines.
HUD_HEIGHT = 110
MIN_CELL_SIZE = 20
# Frame drawn around the grid, in pixels.
FRAME_THICKNESS = 14

PIECE_COLORS = {
    "first": (236, 200, 40),    # yellow
    "second": (200, 40, 48),    # red
}
EMPTY_CELL_COLOR = (18, 24, 48)
BOARD_COLOR = (38, 78, 170)
FRAME_COLOR = (24, 46, 110)
WIN_OUTLINE_COLOR = (255, 255, 255)
