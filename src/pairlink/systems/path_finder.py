"""Turn-limited connectivity search over the bordered grid."""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from pairlink.components.board import Board, Position
from pairlink.constants import MAX_TURNS

# Enumeration order up, right, down, left fixes BFS tie-breaking.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

# (row, col, heading, turns)
_Node = Tuple[int, int, int, int]


def find_path(board: Board, start: Position, end: Position, *, max_turns: int = MAX_TURNS) -> Optional[List[Position]]:
    """Shortest route from start to end through empty cells with at most max_turns bends.

    Both endpoints must be distinct occupied cells. The returned list holds
    every cell walked, endpoints included; border cells may appear in it.
    """
    if start == end:
        return None
    if not (board.in_bounds(*start) and board.in_bounds(*end)):
        return None
    if board.is_empty(*start) or board.is_empty(*end):
        return None

    parents: Dict[_Node, Optional[_Node]] = {}
    queue: deque[_Node] = deque()
    sr, sc = start
    for heading, (dr, dc) in enumerate(DIRECTIONS):
        nr, nc = sr + dr, sc + dc
        if not board.in_bounds(nr, nc):
            continue
        if (nr, nc) == end:
            return [start, end]
        if board.is_empty(nr, nc):
            node = (nr, nc, heading, 0)
            parents[node] = None
            queue.append(node)

    while queue:
        node = queue.popleft()
        row, col, heading, turns = node
        for next_heading, (dr, dc) in enumerate(DIRECTIONS):
            next_turns = turns if next_heading == heading else turns + 1
            if next_turns > max_turns:
                continue
            nr, nc = row + dr, col + dc
            if not board.in_bounds(nr, nc):
                continue
            if (nr, nc) == end:
                return _rebuild(parents, node, start, end)
            if not board.is_empty(nr, nc):
                continue
            child = (nr, nc, next_heading, next_turns)
            if child in parents:
                continue
            parents[child] = node
            queue.append(child)
    return None


def _rebuild(parents: Dict[_Node, Optional[_Node]], last: _Node, start: Position, end: Position) -> List[Position]:
    route: List[Position] = [end]
    node: Optional[_Node] = last
    while node is not None:
        route.append((node[0], node[1]))
        node = parents[node]
    route.append(start)
    route.reverse()
    return route


def can_connect(board: Board, start: Position, end: Position) -> bool:
    return find_path(board, start, end) is not None


def count_turns(path: Sequence[Position]) -> int:
    """Number of direction changes between consecutive steps of a path."""
    turns = 0
    previous: Optional[Tuple[int, int]] = None
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        step = (r2 - r1, c2 - c1)
        if previous is not None and step != previous:
            turns += 1
        previous = step
    return turns
