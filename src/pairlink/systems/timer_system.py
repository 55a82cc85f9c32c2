import logging

from esper import World

from pairlink.constants import base_time_for_level
from pairlink.events.bus import (
    EventBus,
    EVENT_LEVEL_CLEARED,
    EVENT_LEVEL_FAILED,
    EVENT_TIMER_START,
    EVENT_TIMER_STOP,
    EVENT_TIMER_TICK,
)
from pairlink.utils.state_access import get_session_state, get_timer

logger = logging.getLogger(__name__)


class TimerSystem:
    """Level countdown driven by external one-second ticks."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TIMER_START, self.on_timer_start)
        self.event_bus.subscribe(EVENT_TIMER_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_TIMER_STOP, self.on_stop)
        self.event_bus.subscribe(EVENT_LEVEL_CLEARED, self.on_stop)
        self.event_bus.subscribe(EVENT_LEVEL_FAILED, self.on_stop)

    def on_timer_start(self, sender, **kwargs):
        state = get_session_state(self.world)
        level = kwargs.get('level', state.level)
        state.base_time = base_time_for_level(level)
        state.time_remaining = state.base_time
        get_timer(self.world).running = True

    def on_stop(self, sender, **kwargs):
        get_timer(self.world).running = False

    def on_tick(self, sender, **kwargs):
        timer = get_timer(self.world)
        state = get_session_state(self.world)
        if not timer.running or state.paused or state.cleared:
            return
        state.time_remaining -= 1
        if state.time_remaining > 0:
            return
        state.time_remaining = 0
        timer.running = False
        state.message = None
        state.failed = True
        logger.info("level %d failed: out of time", state.level)
        self.event_bus.emit(EVENT_LEVEL_FAILED, level=state.level, score=state.score, reason='timeout')
