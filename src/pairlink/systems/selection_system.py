import logging
from typing import Tuple

from esper import World

from pairlink.components.pending_match import PendingMatch
from pairlink.events.bus import (
    EventBus,
    EVENT_MATCH_PATH_FOUND,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_MISMATCH,
    EVENT_TILE_SELECTED,
)
from pairlink.systems.match_rules import rule_for_level
from pairlink.systems.path_finder import find_path
from pairlink.utils.state_access import get_board, get_pending_match, get_session_state, set_pending_match

logger = logging.getLogger(__name__)


class SelectionSystem:
    """Turns tile clicks into selections, mismatches or a pending match.

    Flow:
      - First click on an occupied cell selects it.
      - Clicking the selected cell again deselects it.
      - A second cell that fails the level's pairing rule or has no legal
        path becomes the new selection.
      - Otherwise the path is published and a PendingMatch is stored until
        EVENT_MATCH_COMMIT arrives.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        state = get_session_state(self.world)
        if state.time_remaining <= 0 or state.paused or state.terminal:
            return
        # Input stays locked while a matched path is on display.
        if get_pending_match(self.world) is not None:
            return
        board = get_board(self.world)
        if not board.is_interior(row, col) or board.is_empty(row, col):
            return
        tapped = (row, col)
        state.hint_pair = None

        if state.selected is None:
            self._select(tapped)
            return
        if state.selected == tapped:
            state.selected = None
            self.event_bus.emit(EVENT_TILE_DESELECTED, row=row, col=col, reason='same_tile')
            return
        first = state.selected
        first_symbol = board.get(*first)
        if not first_symbol:
            self._select(tapped)
            return

        rule = rule_for_level(state.level)
        if not rule.matches(first_symbol, board.get(*tapped)):
            self._mismatch(first, tapped, reason='symbol')
            return
        path = find_path(board, first, tapped)
        if path is None:
            self._mismatch(first, tapped, reason='no_path')
            return
        state.current_path = list(path)
        set_pending_match(self.world, PendingMatch(first=first, second=tapped, path=list(path)))
        logger.debug("match %s-%s via %d cells", first, tapped, len(path))
        self.event_bus.emit(EVENT_MATCH_PATH_FOUND, first=first, second=tapped, path=list(path))

    def _select(self, pos: Tuple[int, int]) -> None:
        state = get_session_state(self.world)
        state.selected = pos
        self.event_bus.emit(EVENT_TILE_SELECTED, row=pos[0], col=pos[1])

    def _mismatch(self, first: Tuple[int, int], second: Tuple[int, int], *, reason: str) -> None:
        state = get_session_state(self.world)
        state.selected = second
        logger.debug("mismatch %s-%s (%s)", first, second, reason)
        self.event_bus.emit(EVENT_TILE_MISMATCH, first=first, second=second, reason=reason)
