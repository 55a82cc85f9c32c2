"""Immutable, pull-based view of a session for presentation layers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from pairlink.components.board import Position
from pairlink.components.fall_style import FALL_STYLE_NAMES, FallStyle
from pairlink.components.game_mode import GameMode, ModeKind
from pairlink.constants import CLASSIC_LEVEL_CAP
from pairlink.utils.state_access import get_board, get_session_state

LEVEL_NAMES = {
    1: "Warm-up",
    2: "Getting There",
    3: "Gravity",
    4: "Sky City",
    5: "Heart's Pull",
    6: "Right-hand Rule",
    7: "Split Sides",
    8: "Repelling Poles",
    9: "Ultimate Pairs",
    10: "Challenge",
}
COMPLETE_LEVEL_NAME = "Complete"

MODE_NAMES = {
    ModeKind.CLASSIC_EASY: "Classic (Easy)",
    ModeKind.CLASSIC_HARD: "Classic (Hard)",
    ModeKind.PRACTICE: "Practice",
    ModeKind.ENDLESS: "Endless",
}


def level_name(level: int) -> str:
    return LEVEL_NAMES.get(level, COMPLETE_LEVEL_NAME)


def display_name(mode: GameMode, level: int, fall_style: FallStyle) -> str:
    """Title for the current level; endless runs are named after their fall style."""
    if mode.is_endless:
        return FALL_STYLE_NAMES[fall_style]
    return level_name(level)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    grid: Tuple[Tuple[str, ...], ...]
    rows: int
    cols: int
    mode: GameMode
    mode_name: str
    level: int
    level_name: str
    fall_style: FallStyle
    time_remaining: int
    base_time: int
    progress: float
    score: int
    hints_remaining: int
    paused: bool
    selected: Optional[Position]
    hint_pair: Optional[Tuple[Position, Position]]
    path: Tuple[Position, ...]
    pairs_left: int
    cleared: bool
    failed: bool
    message: Optional[str]
    auto_shuffle_count: int
    endless_best_level: int
    endless_best_score: int
    campaign_complete: bool

    @property
    def pause_allowed(self) -> bool:
        return self.mode.pause_allowed


def build_snapshot(world: World) -> SessionSnapshot:
    state = get_session_state(world)
    board = get_board(world)
    classic = state.mode.kind in (ModeKind.CLASSIC_EASY, ModeKind.CLASSIC_HARD)
    return SessionSnapshot(
        grid=board.rows_view(),
        rows=board.rows,
        cols=board.cols,
        mode=state.mode,
        mode_name=MODE_NAMES[state.mode.kind],
        level=state.level,
        level_name=display_name(state.mode, state.level, state.fall_style),
        fall_style=state.fall_style,
        time_remaining=state.time_remaining,
        base_time=state.base_time,
        progress=state.progress,
        score=state.score,
        hints_remaining=state.hints_remaining,
        paused=state.paused,
        selected=state.selected,
        hint_pair=state.hint_pair,
        path=tuple(state.current_path),
        pairs_left=state.pairs_left,
        cleared=state.cleared,
        failed=state.failed,
        message=state.message,
        auto_shuffle_count=state.auto_shuffle_count,
        endless_best_level=state.endless_best_level,
        endless_best_score=state.endless_best_score,
        campaign_complete=classic and state.cleared and state.level >= CLASSIC_LEVEL_CAP,
    )
