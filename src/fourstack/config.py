"""Session configuration bundled from the defaults in ``fourstack.constants``."""
from __future__ import annotations

from dataclasses import dataclass

from fourstack.constants import (
    BOARD_COLS,
    BOARD_ROWS,
    LINE_LENGTH,
    MATCH_DURATION,
    OPPONENT_MOVE_DELAY,
)


@dataclass(slots=True, frozen=True)
class GameConfig:
    rows: int = BOARD_ROWS
    cols: int = BOARD_COLS
    opponent_delay: float = OPPONENT_MOVE_DELAY
    match_duration: float = MATCH_DURATION
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < LINE_LENGTH or self.cols < LINE_LENGTH:
            raise ValueError(
                f"Board must be at least {LINE_LENGTH}x{LINE_LENGTH}, got {self.rows}x{self.cols}"
            )
        if self.opponent_delay < 0:
            raise ValueError("opponent_delay must not be negative")
        if self.match_duration <= 0:
            raise ValueError("match_duration must be positive")
