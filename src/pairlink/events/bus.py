from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even when nobody holds the system.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_FRAME = "frame"                      # payload: dt=float (seconds since last frame)
EVENT_TIMER_TICK = "timer_tick"            # payload: None (one countdown second)
EVENT_TIMER_START = "timer_start"          # payload: level=int
EVENT_TIMER_STOP = "timer_stop"            # payload: reason=str


# ============================================================================
# INPUT & SELECTION
# ============================================================================
EVENT_TILE_CLICK = "tile_click"            # payload: row, col
EVENT_TILE_SELECTED = "tile_selected"      # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"  # payload: row, col, reason=str
EVENT_TILE_MISMATCH = "tile_mismatch"      # payload: first=(r,c), second=(r,c), reason=str


# ============================================================================
# MATCHING & BOARD MECHANICS
# ============================================================================
EVENT_MATCH_PATH_FOUND = "match_path_found"    # payload: first=(r,c), second=(r,c), path=list[(r,c)]
EVENT_MATCH_COMMIT = "match_commit"            # payload: None
EVENT_MATCH_CLEARED = "match_cleared"          # payload: first, second, symbols=(str,str), pairs_left=int, score=int
EVENT_BOARD_COMPACTED = "board_compacted"      # payload: style=FallStyle
EVENT_DEADLOCK_CHECK = "deadlock_check"        # payload: reason=str
EVENT_AUTO_SHUFFLE = "auto_shuffle"            # payload: hint_cost=int, playable=bool


# ============================================================================
# HINTS
# ============================================================================
EVENT_HINT_REQUEST = "hint_request"            # payload: None
EVENT_HINT_SHOWN = "hint_shown"                # payload: pair=((r,c),(r,c)), hints_remaining=int
EVENT_HINT_UNAVAILABLE = "hint_unavailable"    # payload: message=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_START_REQUEST = "game_start_request"        # payload: mode=GameMode
EVENT_GAME_RESTART_REQUEST = "game_restart_request"    # payload: mode=GameMode|None
EVENT_LEVEL_ADVANCE_REQUEST = "level_advance_request"  # payload: None
EVENT_PAUSE_REQUEST = "pause_request"                  # payload: paused=bool|None (None toggles)
EVENT_PAUSE_CHANGED = "pause_changed"                  # payload: paused=bool
EVENT_GAME_STARTED = "game_started"                    # payload: mode=GameMode, level=int
EVENT_LEVEL_STARTED = "level_started"                  # payload: level=int, mode=GameMode, fall_style=FallStyle
EVENT_LEVEL_CLEARED = "level_cleared"                  # payload: level=int, score=int
EVENT_LEVEL_FAILED = "level_failed"                    # payload: level=int, score=int, reason=str


# ============================================================================
# PERSISTENCE
# ============================================================================
EVENT_ENDLESS_RECORD_UPDATED = "endless_record_updated"  # payload: best_level=int, best_score=int
