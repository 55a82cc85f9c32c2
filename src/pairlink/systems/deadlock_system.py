import logging

from esper import World

from pairlink.components.game_mode import ModeKind
from pairlink.constants import MESSAGE_DEADLOCK_FAILED
from pairlink.events.bus import EventBus, EVENT_AUTO_SHUFFLE, EVENT_DEADLOCK_CHECK, EVENT_LEVEL_FAILED
from pairlink.systems.deadlock import any_move_exists, shuffle_until_playable
from pairlink.systems.match_rules import rule_for_level
from pairlink.utils.state_access import get_board, get_session_state, world_rng

logger = logging.getLogger(__name__)


class DeadlockSystem:
    """Applies the mode's policy when the board has no legal move left.

    Classic-hard pays for a reshuffle with a hint and fails the level once
    hints run out; every other mode reshuffles for free.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_DEADLOCK_CHECK, self.on_deadlock_check)

    def on_deadlock_check(self, sender, **kwargs):
        state = get_session_state(self.world)
        if state.terminal:
            return
        board = get_board(self.world)
        if board.occupied_count() < 2:
            return
        rule = rule_for_level(state.level)
        if any_move_exists(board, rule):
            return
        logger.debug("no moves left on level %d (%s)", state.level, kwargs.get('reason', 'unknown'))
        match state.mode.kind:
            case ModeKind.CLASSIC_HARD:
                if state.hints_remaining > 0:
                    state.hints_remaining -= 1
                    self._reshuffle(hint_cost=1)
                else:
                    state.failed = True
                    state.selected = None
                    state.message = MESSAGE_DEADLOCK_FAILED
                    logger.info("level %d failed: deadlock with no hints", state.level)
                    self.event_bus.emit(EVENT_LEVEL_FAILED, level=state.level, score=state.score, reason='deadlock')
            case _:
                self._reshuffle(hint_cost=0)

    def _reshuffle(self, *, hint_cost: int) -> None:
        state = get_session_state(self.world)
        board = get_board(self.world)
        playable = shuffle_until_playable(board, rule_for_level(state.level), world_rng(self.world), force=True)
        # Positions survive a reshuffle but symbols move, so any highlight is stale.
        state.selected = None
        state.hint_pair = None
        state.auto_shuffle_count += 1
        self.event_bus.emit(EVENT_AUTO_SHUFFLE, hint_cost=hint_cost, playable=playable)
