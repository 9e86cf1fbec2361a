from dataclasses import dataclass

from fourstack.constants import MATCH_DURATION


@dataclass(slots=True)
class MatchClock:
    """Countdown for the session, in seconds."""
    duration: float = MATCH_DURATION
    remaining: float = MATCH_DURATION

    @property
    def expired(self) -> bool:
        return self.remaining <= 0.0


def format_clock(seconds: float) -> str:
    """Render seconds as ``m:ss``, truncating fractions like the on-screen timer."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"
