import random

from esper import World
from .events.bus import EventBus
from fourstack.components.cell import Side
from fourstack.components.game_state import GameState
from fourstack.components.human_agent import HumanAgent
from fourstack.components.player_side import PlayerSide
from fourstack.components.random_agent import RandomAgent
from fourstack.constants import OPPONENT_MOVE_DELAY


def create_world(
    event_bus: EventBus,
    *,
    opponent_delay: float = OPPONENT_MOVE_DELAY,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> World:
    """Create the session world with the human (First) and AI (Second) owners.

    Board, turn order and clock are added by the systems that own them.
    """
    world = World()
    setattr(world, "random", rng or random.Random(seed))

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState())

    world.create_entity(
        HumanAgent(),
        PlayerSide(side=Side.FIRST, name="You"),
    )
    world.create_entity(
        RandomAgent(seed=seed, decision_delay=opponent_delay),
        PlayerSide(side=Side.SECOND, name="AI"),
    )
    return world


def owner_for_side(world: World, side: Side) -> int | None:
    for entity, player in world.get_component(PlayerSide):
        if player.side is side:
            return entity
    return None
