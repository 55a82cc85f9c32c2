import logging

from esper import World

from pairlink.components.board import EMPTY
from pairlink.components.fall_style import FallStyle
from pairlink.constants import MATCH_SCORE, MATCH_TIME_BONUS
from pairlink.events.bus import (
    EventBus,
    EVENT_BOARD_COMPACTED,
    EVENT_DEADLOCK_CHECK,
    EVENT_LEVEL_CLEARED,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_COMMIT,
)
from pairlink.systems.compaction import apply_fall, fall_style_for
from pairlink.utils.state_access import clear_pending_match, get_board, get_session_state

logger = logging.getLogger(__name__)


class MatchResolutionSystem:
    """Second phase of a match: removes the pair, scores it and compacts the board."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MATCH_COMMIT, self.on_match_commit)

    def on_match_commit(self, sender, **kwargs):
        pending = clear_pending_match(self.world)
        if pending is None:
            return
        state = get_session_state(self.world)
        if state.failed:
            # The clock or a deadlock ended the level while the path was shown.
            state.current_path = []
            logger.debug("dropping pending match %s-%s after failure", pending.first, pending.second)
            return
        board = get_board(self.world)
        symbols = (board.get(*pending.first), board.get(*pending.second))
        board.set(*pending.first, EMPTY)
        board.set(*pending.second, EMPTY)

        state.selected = None
        state.pairs_left -= 1
        state.score += MATCH_SCORE
        state.time_remaining = min(state.time_remaining + MATCH_TIME_BONUS, state.base_time)
        state.message = None

        style = fall_style_for(state.mode, state.level, state.fall_style)
        apply_fall(board, style)
        if style is not FallStyle.NONE:
            logger.debug("compacted board %s", style.value)
        self.event_bus.emit(EVENT_BOARD_COMPACTED, style=style)
        state.current_path = []
        logger.debug("cleared %s at %s/%s, %d pairs left", symbols[0], pending.first, pending.second, state.pairs_left)
        self.event_bus.emit(
            EVENT_MATCH_CLEARED,
            first=pending.first,
            second=pending.second,
            symbols=symbols,
            pairs_left=state.pairs_left,
            score=state.score,
        )

        if state.pairs_left <= 0:
            state.score += state.time_remaining
            state.cleared = True
            logger.info("level %d cleared with score %d", state.level, state.score)
            self.event_bus.emit(EVENT_LEVEL_CLEARED, level=state.level, score=state.score)
        else:
            self.event_bus.emit(EVENT_DEADLOCK_CHECK, reason='match')
