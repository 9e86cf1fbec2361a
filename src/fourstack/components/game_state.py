"""Session outcome resource."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from fourstack.components.cell import Side


class OutcomeKind(Enum):
    ONGOING = auto()
    WIN = auto()
    TIMEOUT = auto()
    BOARD_FULL = auto()


@dataclass(slots=True, frozen=True)
class GameOutcome:
    kind: OutcomeKind = OutcomeKind.ONGOING
    winner: Optional[Side] = None

    @classmethod
    def win(cls, side: Side) -> "GameOutcome":
        return cls(kind=OutcomeKind.WIN, winner=side)

    @property
    def is_over(self) -> bool:
        return self.kind is not OutcomeKind.ONGOING


ONGOING = GameOutcome()
TIMEOUT = GameOutcome(kind=OutcomeKind.TIMEOUT)
BOARD_FULL = GameOutcome(kind=OutcomeKind.BOARD_FULL)


@dataclass
class GameState:
    """Singleton component storing the current outcome of the session."""
    outcome: GameOutcome = field(default=ONGOING)
