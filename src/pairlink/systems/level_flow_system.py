"""Coordinator for session start, restarts, level advances and pausing."""
from __future__ import annotations

import logging
import random

from esper import World

from pairlink.components.fall_style import FallStyle
from pairlink.components.game_mode import GameMode, ModeKind
from pairlink.constants import CLASSIC_LEVEL_CAP, HARD_HINT_BONUS_PER_LEVEL, STARTING_HINTS
from pairlink.events.bus import (
    EVENT_DEADLOCK_CHECK,
    EVENT_GAME_RESTART_REQUEST,
    EVENT_GAME_START_REQUEST,
    EVENT_GAME_STARTED,
    EVENT_LEVEL_ADVANCE_REQUEST,
    EVENT_LEVEL_STARTED,
    EVENT_PAUSE_CHANGED,
    EVENT_PAUSE_REQUEST,
    EVENT_TIMER_START,
    EVENT_TIMER_STOP,
    EventBus,
)
from pairlink.systems.board_generator import BoardGenerator
from pairlink.systems.compaction import fall_style_for
from pairlink.utils.state_access import clear_pending_match, get_board, get_session_state, world_rng

logger = logging.getLogger(__name__)


class LevelFlowSystem:
    """Owns the level lifecycle: level number, hint budget, board layout and clock start."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        generator: BoardGenerator | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or world_rng(world)
        self.generator = generator or BoardGenerator(self._rng)

        self.event_bus.subscribe(EVENT_GAME_START_REQUEST, self._on_start)
        self.event_bus.subscribe(EVENT_GAME_RESTART_REQUEST, self._on_restart)
        self.event_bus.subscribe(EVENT_LEVEL_ADVANCE_REQUEST, self._on_advance)
        self.event_bus.subscribe(EVENT_PAUSE_REQUEST, self._on_pause_request)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_start(self, sender, **payload) -> None:
        mode = payload.get("mode") or get_session_state(self.world).mode
        self._begin(mode)

    def _on_restart(self, sender, **payload) -> None:
        state = get_session_state(self.world)
        self.event_bus.emit(EVENT_TIMER_STOP, reason="restart")
        clear_pending_match(self.world)
        state.reset_transient()
        state.paused = False
        self._begin(payload.get("mode") or state.mode)

    def _on_advance(self, sender, **payload) -> None:
        state = get_session_state(self.world)
        match state.mode.kind:
            case ModeKind.CLASSIC_EASY | ModeKind.CLASSIC_HARD if state.level >= CLASSIC_LEVEL_CAP:
                return
            case ModeKind.PRACTICE:
                state.level = state.mode.start_level
            case _:
                state.level += 1
        if state.mode.kind is ModeKind.CLASSIC_HARD:
            state.hints_remaining += HARD_HINT_BONUS_PER_LEVEL
        else:
            state.hints_remaining = STARTING_HINTS
        self.setup_level(state.level)

    def _on_pause_request(self, sender, **payload) -> None:
        state = get_session_state(self.world)
        if not state.mode.pause_allowed:
            return
        if state.time_remaining <= 0 or state.terminal:
            return
        requested = payload.get("paused")
        paused = (not state.paused) if requested is None else bool(requested)
        if paused == state.paused:
            return
        state.paused = paused
        self.event_bus.emit(EVENT_PAUSE_CHANGED, paused=paused)

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def _begin(self, mode: GameMode) -> None:
        state = get_session_state(self.world)
        state.mode = mode
        state.level = mode.start_level if mode.kind is ModeKind.PRACTICE else 1
        state.score = 0
        state.hints_remaining = STARTING_HINTS
        state.paused = False
        state.auto_shuffle_count = 0
        self.event_bus.emit(EVENT_GAME_STARTED, mode=mode, level=state.level)
        self.setup_level(state.level)

    def setup_level(self, level: int) -> None:
        """Lay out a fresh board for ``level`` and start its clock."""
        state = get_session_state(self.world)
        board = get_board(self.world)
        board.clear()
        state.reset_transient()
        state.paused = False
        clear_pending_match(self.world)

        if state.mode.is_endless:
            # Drawn per level; level 9 still skips compaction via fall_style_for.
            state.fall_style = self._rng.choice(list(FallStyle))
        else:
            state.fall_style = fall_style_for(state.mode, level)

        self.generator.generate(board, level)
        state.pairs_left = (board.rows * board.cols) // 2
        if state.mode.kind is not ModeKind.CLASSIC_HARD:
            state.hints_remaining = STARTING_HINTS

        logger.info(
            "level %d started (%s, fall %s, %d pairs)",
            level,
            state.mode.kind.name.lower(),
            state.fall_style.value,
            state.pairs_left,
        )
        self.event_bus.emit(EVENT_LEVEL_STARTED, level=level, mode=state.mode, fall_style=state.fall_style)
        # The clock runs before the deadlock check so a failure can stop it.
        self.event_bus.emit(EVENT_TIMER_START, level=level)
        self.event_bus.emit(EVENT_DEADLOCK_CHECK, reason="setup")
