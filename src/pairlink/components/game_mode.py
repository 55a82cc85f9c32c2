"""Game mode value object: which rule set drives progression, hints and failure."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ModeKind(Enum):
    CLASSIC_EASY = auto()
    CLASSIC_HARD = auto()
    PRACTICE = auto()
    ENDLESS = auto()


@dataclass(frozen=True, slots=True)
class GameMode:
    """Mode tag plus its payload (practice carries the level it starts from)."""
    kind: ModeKind
    start_level: int = 1

    def __post_init__(self) -> None:
        if self.start_level < 1:
            raise ValueError(f"start_level must be positive, got {self.start_level}")

    @classmethod
    def classic_easy(cls) -> GameMode:
        return cls(ModeKind.CLASSIC_EASY)

    @classmethod
    def classic_hard(cls) -> GameMode:
        return cls(ModeKind.CLASSIC_HARD)

    @classmethod
    def practice(cls, start_level: int) -> GameMode:
        return cls(ModeKind.PRACTICE, start_level=start_level)

    @classmethod
    def endless(cls) -> GameMode:
        return cls(ModeKind.ENDLESS)

    @property
    def is_endless(self) -> bool:
        return self.kind is ModeKind.ENDLESS

    @property
    def pause_allowed(self) -> bool:
        return self.kind is not ModeKind.ENDLESS
