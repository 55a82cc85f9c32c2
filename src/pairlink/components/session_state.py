from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pairlink.components.board import Position
from pairlink.components.fall_style import FallStyle
from pairlink.components.game_mode import GameMode


@dataclass(slots=True)
class SessionState:
    """Singleton component holding every mutable counter of a game session."""
    mode: GameMode = field(default_factory=GameMode.classic_easy)
    level: int = 1
    time_remaining: int = 0
    base_time: int = 0
    score: int = 0
    hints_remaining: int = 0
    pairs_left: int = 0
    selected: Optional[Position] = None
    hint_pair: Optional[Tuple[Position, Position]] = None
    current_path: List[Position] = field(default_factory=list)
    message: Optional[str] = None
    paused: bool = False
    cleared: bool = False
    failed: bool = False
    # Bumped on every automatic reshuffle so a UI can pulse the hint counter.
    auto_shuffle_count: int = 0
    fall_style: FallStyle = FallStyle.NONE
    # Endless mode only.
    endless_best_level: int = 0
    endless_best_score: int = 0

    @property
    def terminal(self) -> bool:
        return self.cleared or self.failed

    @property
    def progress(self) -> float:
        if self.base_time <= 0:
            return 0.0
        return min(max(self.time_remaining, 0), self.base_time) / self.base_time

    def reset_transient(self) -> None:
        """Drop per-level interaction state (selection, hint, path, flags)."""
        self.selected = None
        self.hint_pair = None
        self.current_path = []
        self.message = None
        self.cleared = False
        self.failed = False
