from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

Position = Tuple[int, int]

# Empty-cell sentinel; symbols are never the empty string.
EMPTY = ""


@dataclass(slots=True)
class Board:
    """Playable grid wrapped in a one-cell empty border corridor.

    Cells are stored row-major in a dense list of ``(rows+2) * (cols+2)``
    strings. Interior addresses run ``1..rows`` x ``1..cols``; row/col ``0``
    and ``rows+1``/``cols+1`` form the border, which only path routing uses
    and which never holds a symbol.
    """
    rows: int
    cols: int
    cells: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        assert (self.rows * self.cols) % 2 == 0, "Board must have an even number of cells"
        expected = (self.rows + 2) * (self.cols + 2)
        if len(self.cells) != expected:
            self.cells = [EMPTY] * expected

    @property
    def padded_rows(self) -> int:
        return self.rows + 2

    @property
    def padded_cols(self) -> int:
        return self.cols + 2

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows + 2 and 0 <= col < self.cols + 2

    def is_interior(self, row: int, col: int) -> bool:
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} board")
        return row * (self.cols + 2) + col

    def get(self, row: int, col: int) -> str:
        return self.cells[self._index(row, col)]

    def set(self, row: int, col: int, symbol: str) -> None:
        index = self._index(row, col)
        if symbol != EMPTY and not self.is_interior(row, col):
            raise ValueError(f"border cell ({row}, {col}) must stay empty")
        self.cells[index] = symbol

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[self._index(row, col)] == EMPTY

    def clear(self) -> None:
        for index in range(len(self.cells)):
            self.cells[index] = EMPTY

    def interior_positions(self) -> Iterator[Position]:
        """Yield every playable cell in reading order."""
        for row in range(1, self.rows + 1):
            for col in range(1, self.cols + 1):
                yield (row, col)

    def occupied(self) -> List[Tuple[Position, str]]:
        return [
            ((row, col), self.get(row, col))
            for row, col in self.interior_positions()
            if not self.is_empty(row, col)
        ]

    def occupied_count(self) -> int:
        return sum(1 for pos in self.interior_positions() if not self.is_empty(*pos))

    def rows_view(self) -> Tuple[Tuple[str, ...], ...]:
        """Immutable copy of the padded grid, indexable with path coordinates."""
        width = self.cols + 2
        return tuple(
            tuple(self.cells[row * width:(row + 1) * width])
            for row in range(self.rows + 2)
        )
