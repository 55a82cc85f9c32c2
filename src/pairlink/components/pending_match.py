from dataclasses import dataclass, field
from typing import List

from pairlink.components.board import Position


@dataclass(slots=True)
class PendingMatch:
    """A matched pair whose path is on display, awaiting commit.

    ``elapsed`` accumulates frame time toward the display delay.
    """
    first: Position
    second: Position
    path: List[Position] = field(default_factory=list)
    elapsed: float = 0.0
