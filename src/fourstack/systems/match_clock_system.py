from esper import World

from fourstack.components.game_state import TIMEOUT
from fourstack.components.match_clock import MatchClock
from fourstack.constants import MATCH_DURATION
from fourstack.events.bus import EventBus, EVENT_TICK
from fourstack.utils.game_state import is_game_over, set_outcome


class MatchClockSystem:
    """Counts the match clock down on ticks and ends the game at zero."""

    def __init__(self, world: World, event_bus: EventBus, duration: float = MATCH_DURATION):
        self.world = world
        self.event_bus = event_bus
        if not list(self.world.get_component(MatchClock)):
            self.world.create_entity(MatchClock(duration=duration, remaining=duration))
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def clock(self) -> MatchClock:
        return list(self.world.get_component(MatchClock))[0][1]

    def on_tick(self, sender, **payload):
        if is_game_over(self.world):
            return
        clock = self.clock()
        clock.remaining -= float(payload.get("dt", 0.0))
        if clock.remaining <= 0.0:
            clock.remaining = 0.0
            set_outcome(self.world, self.event_bus, TIMEOUT)
