"""Fresh, pair-balanced board layouts for each level."""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from pairlink.components.board import EMPTY, Board, Position
from pairlink.constants import (
    CLUSTER_LEVEL,
    CLUSTER_RATIO,
    PAIR_BASES,
    PAIR_SUFFIXES,
    SPECIAL_LEVEL,
    SYMBOL_CATALOGUE,
)
from pairlink.systems.match_rules import tagged_symbol

logger = logging.getLogger(__name__)

Slot = Tuple[Position, Position]


class BoardGenerator:
    """Fills every interior cell so symbols form exact pairs.

    All randomness flows through the injected ``rng`` so seeded tests see
    reproducible layouts.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        catalogue: Sequence[str] = SYMBOL_CATALOGUE,
        pair_bases: Sequence[str] = PAIR_BASES,
        cluster_ratio: float = CLUSTER_RATIO,
    ) -> None:
        self.rng = rng or random.Random()
        self.catalogue = tuple(catalogue)
        self.pair_bases = tuple(pair_bases)
        self.cluster_ratio = cluster_ratio

    def generate(self, board: Board, level: int) -> None:
        if level == SPECIAL_LEVEL:
            self.fill_tagged_pairs(board)
        else:
            self.fill_general(board, cluster=(level == CLUSTER_LEVEL))

    def fill_general(self, board: Board, *, cluster: bool = False) -> None:
        pair_count = self._prepare(board)
        pool: List[str] = []
        for index in range(pair_count):
            name = self.catalogue[index % len(self.catalogue)]
            pool.append(name)
            pool.append(name)
        self.rng.shuffle(pool)
        if cluster:
            self._place_clustered(board, pool, pair_count)
            return
        for (row, col), name in zip(board.interior_positions(), pool):
            board.set(row, col, name)

    def fill_tagged_pairs(self, board: Board) -> None:
        pair_count = self._prepare(board)
        bases = list(self.pair_bases)
        self.rng.shuffle(bases)
        if pair_count <= len(bases):
            chosen = bases[:pair_count]
        else:
            chosen = bases
            while len(chosen) < pair_count:
                chosen.append(self.rng.choice(self.pair_bases))
        names: List[str] = []
        for base in chosen:
            for suffix in PAIR_SUFFIXES:
                names.append(tagged_symbol(base, suffix))
        self.rng.shuffle(names)
        for (row, col), name in zip(board.interior_positions(), names):
            board.set(row, col, name)

    def _prepare(self, board: Board) -> int:
        total = board.rows * board.cols
        assert total % 2 == 0, "Board must have an even number of cells"
        board.clear()
        return total // 2

    def _place_clustered(self, board: Board, pool: List[str], pair_count: int) -> None:
        target = int(pair_count * self.cluster_ratio)
        slots = self._adjacent_slots(board)
        self.rng.shuffle(slots)
        remaining = list(pool)
        occupied: set[Position] = set()
        placed = 0
        for first, second in slots:
            if placed >= target:
                break
            if first in occupied or second in occupied:
                continue
            name = _pop_next_pair(remaining)
            if name is None:
                break
            board.set(*first, name)
            board.set(*second, name)
            occupied.add(first)
            occupied.add(second)
            placed += 1
        free_cells = [pos for pos in board.interior_positions() if board.get(*pos) == EMPTY]
        self.rng.shuffle(free_cells)
        for (row, col), name in zip(free_cells, remaining):
            board.set(row, col, name)
        logger.debug("clustered %d of %d targeted adjacent pairs", placed, target)

    @staticmethod
    def _adjacent_slots(board: Board) -> List[Slot]:
        slots: List[Slot] = []
        for row in range(1, board.rows + 1):
            for col in range(1, board.cols):
                slots.append(((row, col), (row, col + 1)))
        for row in range(1, board.rows):
            for col in range(1, board.cols + 1):
                slots.append(((row, col), (row + 1, col)))
        return slots


def _pop_next_pair(pool: List[str]) -> Optional[str]:
    """Take the pool's first symbol together with its first mate.

    Best effort: when the head has no mate left it is put back and None is
    returned, which ends clustering early.
    """
    if not pool:
        return None
    name = pool.pop(0)
    try:
        pool.remove(name)
    except ValueError:
        pool.insert(0, name)
        return None
    return name
