from __future__ import annotations

import logging

from esper import World

from pairlink.constants import ENDLESS_BEST_LEVEL_KEY, ENDLESS_BEST_SCORE_KEY
from pairlink.events.bus import (
    EVENT_ENDLESS_RECORD_UPDATED,
    EVENT_GAME_STARTED,
    EVENT_LEVEL_CLEARED,
    EVENT_LEVEL_FAILED,
    EventBus,
)
from pairlink.persistence.record_store import MemoryRecordStore, RecordStore
from pairlink.utils.state_access import get_session_state

logger = logging.getLogger(__name__)


class EndlessRecordSystem:
    """Tracks and persists the best endless run across sessions."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        store: RecordStore | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.store: RecordStore = store if store is not None else MemoryRecordStore()

        self.event_bus.subscribe(EVENT_GAME_STARTED, self._on_game_started)
        self.event_bus.subscribe(EVENT_LEVEL_CLEARED, self._on_level_cleared)
        self.event_bus.subscribe(EVENT_LEVEL_FAILED, self._on_level_failed)

        if load_existing:
            self.load_records()

    def load_records(self) -> None:
        state = get_session_state(self.world)
        state.endless_best_level = self.store.read(ENDLESS_BEST_LEVEL_KEY)
        state.endless_best_score = self.store.read(ENDLESS_BEST_SCORE_KEY)

    def save_records(self) -> None:
        state = get_session_state(self.world)
        self.store.write(ENDLESS_BEST_LEVEL_KEY, state.endless_best_level)
        self.store.write(ENDLESS_BEST_SCORE_KEY, state.endless_best_score)

    # Event handlers -----------------------------------------------------

    def _on_game_started(self, sender, **payload) -> None:
        mode = payload.get("mode")
        if mode is not None and mode.is_endless:
            self.load_records()

    def _on_level_cleared(self, sender, **payload) -> None:
        state = get_session_state(self.world)
        if not state.mode.is_endless:
            return
        self._record(state.level, state.score)

    def _on_level_failed(self, sender, **payload) -> None:
        state = get_session_state(self.world)
        if not state.mode.is_endless:
            return
        # The failed level itself was not completed.
        self._record(max(0, state.level - 1), state.score)

    def _record(self, level: int, score: int) -> None:
        state = get_session_state(self.world)
        state.endless_best_level = max(state.endless_best_level, level)
        state.endless_best_score = max(state.endless_best_score, score)
        self.save_records()
        logger.info(
            "endless record: level %d, score %d",
            state.endless_best_level,
            state.endless_best_score,
        )
        self.event_bus.emit(
            EVENT_ENDLESS_RECORD_UPDATED,
            best_level=state.endless_best_level,
            best_score=state.endless_best_score,
        )
