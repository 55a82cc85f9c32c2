"""Public facade over the ECS world: one object per game session.

Every public method runs under a re-entrant lock, so a host may deliver
ticks and taps from different threads. Each method translates the call
into bus events, lets the systems mutate state, then reports a fresh
snapshot through ``on_change``.
"""
from __future__ import annotations

import random
import threading
from typing import Callable, Optional

from esper import World

from pairlink.components.game_mode import GameMode
from pairlink.constants import GRID_COLS, GRID_ROWS, PATH_DISPLAY_DELAY
from pairlink.events.bus import (
    EVENT_FRAME,
    EVENT_GAME_RESTART_REQUEST,
    EVENT_GAME_START_REQUEST,
    EVENT_HINT_REQUEST,
    EVENT_LEVEL_ADVANCE_REQUEST,
    EVENT_MATCH_COMMIT,
    EVENT_PAUSE_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_TIMER_STOP,
    EVENT_TIMER_TICK,
    EventBus,
)
from pairlink.persistence.record_store import MemoryRecordStore, RecordStore
from pairlink.systems.deadlock_system import DeadlockSystem
from pairlink.systems.endless_record_system import EndlessRecordSystem
from pairlink.systems.feedback_system import FeedbackSystem, SoundPlayer
from pairlink.systems.hint_system import HintSystem
from pairlink.systems.level_flow_system import LevelFlowSystem
from pairlink.systems.match_resolution import MatchResolutionSystem
from pairlink.systems.path_display_system import PathDisplaySystem
from pairlink.systems.selection_system import SelectionSystem
from pairlink.systems.timer_system import TimerSystem
from pairlink.utils.snapshot import SessionSnapshot, build_snapshot
from pairlink.utils.state_access import get_pending_match, get_timer
from pairlink.world import create_world

ChangeCallback = Callable[[SessionSnapshot], None]


class GameSession:
    def __init__(
        self,
        *,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        rng: random.Random | None = None,
        store: RecordStore | None = None,
        sound_player: SoundPlayer | None = None,
        on_change: ChangeCallback | None = None,
        path_delay: float = PATH_DISPLAY_DELAY,
    ) -> None:
        self._lock = threading.RLock()
        self._closed = False
        self.on_change = on_change
        self.event_bus = EventBus()
        self.world: World = create_world(self.event_bus, rows=rows, cols=cols, rng=rng)
        self.store: RecordStore = store if store is not None else MemoryRecordStore()

        # Progression systems
        self.endless_record_system = EndlessRecordSystem(self.world, self.event_bus, store=self.store)
        self.level_flow_system = LevelFlowSystem(self.world, self.event_bus)
        self.timer_system = TimerSystem(self.world, self.event_bus)

        # Board systems
        self.selection_system = SelectionSystem(self.world, self.event_bus)
        self.path_display_system = PathDisplaySystem(self.world, self.event_bus, delay=path_delay)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.deadlock_system = DeadlockSystem(self.world, self.event_bus)
        self.hint_system = HintSystem(self.world, self.event_bus)

        self.feedback_system: Optional[FeedbackSystem] = None
        if sound_player is not None:
            self.feedback_system = FeedbackSystem(self.world, self.event_bus, sound_player)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, mode: GameMode | None = None) -> None:
        self._dispatch(EVENT_GAME_START_REQUEST, mode=mode)

    def restart(self, mode: GameMode | None = None) -> None:
        self._dispatch(EVENT_GAME_RESTART_REQUEST, mode=mode)

    def advance_to_next_level(self) -> None:
        self._dispatch(EVENT_LEVEL_ADVANCE_REQUEST)

    def stop_timer(self) -> None:
        self._dispatch(EVENT_TIMER_STOP, reason="stop")

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self.event_bus.emit(EVENT_TIMER_STOP, reason="close")
            self._closed = True

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def pause(self) -> None:
        self._dispatch(EVENT_PAUSE_REQUEST, paused=True)

    def resume(self) -> None:
        self._dispatch(EVENT_PAUSE_REQUEST, paused=False)

    def toggle_pause(self) -> None:
        self._dispatch(EVENT_PAUSE_REQUEST, paused=None)

    def use_hint(self) -> None:
        self._dispatch(EVENT_HINT_REQUEST)

    def handle_tap(self, row: int, col: int) -> None:
        self._dispatch(EVENT_TILE_CLICK, row=row, col=col)

    def commit_match(self) -> None:
        """Resolve the pending match now instead of waiting out the display delay."""
        self._dispatch(EVENT_MATCH_COMMIT)

    # ------------------------------------------------------------------
    # Clock
    # ------------------------------------------------------------------

    def advance_frame(self, dt: float) -> None:
        self._dispatch(EVENT_FRAME, dt=dt)

    def tick(self) -> None:
        self._dispatch(EVENT_TIMER_TICK)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def timer_running(self) -> bool:
        with self._lock:
            return get_timer(self.world).running

    @property
    def match_pending(self) -> bool:
        with self._lock:
            return get_pending_match(self.world) is not None

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return build_snapshot(self.world)

    def _dispatch(self, name: str, **payload) -> None:
        with self._lock:
            self.event_bus.emit(name, **payload)
            if self.on_change is not None:
                self.on_change(build_snapshot(self.world))
