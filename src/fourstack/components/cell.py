from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """The two competing sides. FIRST is the human (yellow), SECOND the AI (red)."""
    FIRST = "first"
    SECOND = "second"

    @property
    def other(self) -> "Side":
        return Side.SECOND if self is Side.FIRST else Side.FIRST


@dataclass(slots=True, frozen=True)
class Cell:
    """One grid square: empty, or occupied by a side."""
    side: Side | None = None

    @classmethod
    def occupied(cls, side: Side) -> "Cell":
        return cls(side=side)

    @property
    def is_empty(self) -> bool:
        return self.side is None

    def holds(self, side: Side) -> bool:
        return self.side is side


EMPTY = Cell()
