import logging

from esper import World

from pairlink.constants import MESSAGE_NO_HINT
from pairlink.events.bus import EventBus, EVENT_HINT_REQUEST, EVENT_HINT_SHOWN, EVENT_HINT_UNAVAILABLE
from pairlink.systems.deadlock import find_connectable_pair
from pairlink.systems.match_rules import rule_for_level
from pairlink.utils.state_access import get_board, get_session_state

logger = logging.getLogger(__name__)


class HintSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)

    def on_hint_request(self, sender, **kwargs):
        state = get_session_state(self.world)
        if state.hints_remaining <= 0 or state.time_remaining <= 0:
            return
        if state.paused or state.terminal:
            return
        pair = find_connectable_pair(get_board(self.world), rule_for_level(state.level))
        if pair is None:
            # Advisory only; no hint is spent.
            state.message = MESSAGE_NO_HINT
            self.event_bus.emit(EVENT_HINT_UNAVAILABLE, message=MESSAGE_NO_HINT)
            return
        state.hint_pair = pair
        state.selected = None
        state.hints_remaining -= 1
        state.message = None
        logger.debug("hint %s-%s, %d left", pair[0], pair[1], state.hints_remaining)
        self.event_bus.emit(EVENT_HINT_SHOWN, pair=pair, hints_remaining=state.hints_remaining)
