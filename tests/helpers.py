"""Shared builders for board and session tests."""
from __future__ import annotations

import random
from collections import Counter
from typing import Dict, List, Sequence

from pairlink.components.board import EMPTY, Board
from pairlink.components.game_mode import GameMode
from pairlink.events.bus import EventBus
from pairlink.persistence.record_store import MemoryRecordStore
from pairlink.session import GameSession
from pairlink.utils.state_access import get_board, get_session_state

EMPTY_TOKEN = "."


def board_from_rows(rows: Sequence[str]) -> Board:
    """Build a board from whitespace-separated tokens; ``.`` marks an empty cell."""
    grid = [row.split() for row in rows]
    board = Board(rows=len(grid), cols=len(grid[0]))
    for r, tokens in enumerate(grid, start=1):
        assert len(tokens) == board.cols
        for c, token in enumerate(tokens, start=1):
            if token != EMPTY_TOKEN:
                board.set(r, c, token)
    return board


def board_rows(board: Board) -> List[str]:
    return [
        " ".join(board.get(r, c) or EMPTY_TOKEN for c in range(1, board.cols + 1))
        for r in range(1, board.rows + 1)
    ]


def symbol_counts(board: Board) -> Counter:
    return Counter(symbol for _, symbol in board.occupied())


def border_is_empty(board: Board) -> bool:
    for r in range(board.padded_rows):
        for c in range(board.padded_cols):
            if not board.is_interior(r, c) and board.get(r, c) != EMPTY:
                return False
    return True


def make_session(
    mode: GameMode | None = None,
    *,
    seed: int = 0,
    rows: int | None = None,
    cols: int | None = None,
    start: bool = True,
    **kwargs,
) -> GameSession:
    sizes = {}
    if rows is not None:
        sizes["rows"] = rows
    if cols is not None:
        sizes["cols"] = cols
    kwargs.setdefault("store", MemoryRecordStore())
    session = GameSession(rng=random.Random(seed), **sizes, **kwargs)
    if start:
        session.start(mode or GameMode.classic_easy())
    return session


def install_layout(session: GameSession, rows: Sequence[str]) -> Board:
    """Replace the session's board contents with a hand-built layout."""
    layout = board_from_rows(rows)
    board = get_board(session.world)
    assert (board.rows, board.cols) == (layout.rows, layout.cols)
    board.cells = list(layout.cells)
    state = get_session_state(session.world)
    state.pairs_left = board.occupied_count() // 2
    state.selected = None
    state.hint_pair = None
    return board


def capture(bus: EventBus, name: str) -> List[Dict]:
    """Record the payload of every emission of ``name``."""
    received: List[Dict] = []
    bus.subscribe(name, lambda sender, **kwargs: received.append(kwargs))
    return received
