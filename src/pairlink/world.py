import random

from esper import World

from pairlink.components.board import Board
from pairlink.components.countdown_timer import CountdownTimer
from pairlink.components.session_state import SessionState
from pairlink.constants import GRID_COLS, GRID_ROWS
from pairlink.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    rng: random.Random | None = None,
) -> World:
    """Build the ECS world with the session singletons a game needs.

    The event bus is accepted for symmetry with the systems; nothing is
    emitted while the world is assembled.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    # Session state and its countdown share one entity.
    world.create_entity(SessionState(), CountdownTimer())
    world.create_entity(Board(rows=rows, cols=cols))
    return world
