from esper import World

from pairlink.constants import PATH_DISPLAY_DELAY
from pairlink.events.bus import EventBus, EVENT_FRAME, EVENT_MATCH_COMMIT
from pairlink.utils.state_access import get_pending_match


class PathDisplaySystem:
    """Holds a found path on screen for a short delay, then requests the commit.

    Frame deltas arrive via EVENT_FRAME; hosts without a frame loop (tests,
    scripts) skip this system and emit EVENT_MATCH_COMMIT themselves.
    """
    def __init__(self, world: World, event_bus: EventBus, *, delay: float = PATH_DISPLAY_DELAY):
        self.world = world
        self.event_bus = event_bus
        self.delay = delay
        self.event_bus.subscribe(EVENT_FRAME, self.on_frame)

    def on_frame(self, sender, **kwargs):
        pending = get_pending_match(self.world)
        if pending is None:
            return
        dt = kwargs.get('dt', 1/60)
        pending.elapsed += dt
        if pending.elapsed >= self.delay:
            self.event_bus.emit(EVENT_MATCH_COMMIT)
