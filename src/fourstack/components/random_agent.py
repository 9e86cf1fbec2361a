from dataclasses import dataclass

from fourstack.constants import OPPONENT_MOVE_DELAY


@dataclass(slots=True)
class RandomAgent:
    """Marker component for the owner whose columns are picked at random.

    decision_delay: seconds of ticks to wait after the turn arrives before moving.
    """

    seed: int | None = None
    decision_delay: float = OPPONENT_MOVE_DELAY
