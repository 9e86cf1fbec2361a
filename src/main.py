"""Entry point for the FourStack vanish-cascade game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
from __future__ import annotations

import argparse

from arcade import Window, run, set_background_color, color
from loguru import logger

from fourstack.config import GameConfig
from fourstack.constants import UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from fourstack.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TICK
from fourstack.log import configure_logging
from fourstack.systems.board import BoardSystem
from fourstack.systems.input import InputSystem
from fourstack.systems.match_clock_system import MatchClockSystem
from fourstack.systems.random_ai_system import RandomAISystem
from fourstack.systems.render import RenderSystem
from fourstack.systems.turn_system import TurnSystem
from fourstack.world import create_world


class FourStackWindow(Window):
    def __init__(self, config: GameConfig | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.config = config or GameConfig()
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(
            self.event_bus,
            opponent_delay=self.config.opponent_delay,
            seed=self.config.seed,
        )
        # Board and turn systems
        self.board_system = BoardSystem(self.world, self.event_bus, rows=self.config.rows, cols=self.config.cols)
        self.turn_system = TurnSystem(self.world, self.event_bus)
        self.match_clock_system = MatchClockSystem(self.world, self.event_bus, duration=self.config.match_duration)
        self.random_ai_system = RandomAISystem(self.world, self.event_bus, rng=self.world.random)

        # Interface systems
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Play FourStack against a random opponent.")
    parser.add_argument("--rows", type=int, default=defaults.rows)
    parser.add_argument("--cols", type=int, default=defaults.cols)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the opponent's choices")
    parser.add_argument("--duration", type=float, default=defaults.match_duration, help="Match length in seconds")
    parser.add_argument("--delay", type=float, default=defaults.opponent_delay, help="Opponent response delay in seconds")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    config = GameConfig(
        rows=args.rows,
        cols=args.cols,
        opponent_delay=args.delay,
        match_duration=args.duration,
        seed=args.seed,
    )
    logger.info("Starting FourStack {}x{} (seed={})", config.rows, config.cols, config.seed)
    FourStackWindow(config)
    run()


if __name__ == "__main__":
    main()
