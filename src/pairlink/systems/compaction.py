"""Gravity-style re-packing of the interior after a pair is removed.

Every transform touches interior cells only, keeps the relative order of
surviving symbols along the axis of motion and leaves vacated cells empty.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from pairlink.components.board import EMPTY, Board
from pairlink.components.fall_style import FallStyle
from pairlink.components.game_mode import GameMode
from pairlink.constants import SPECIAL_LEVEL

# Fixed per-level styles for classic and practice play.
LEVEL_FALL_STYLES: Dict[int, FallStyle] = {
    3: FallStyle.DOWN,
    4: FallStyle.UP,
    5: FallStyle.LEFT,
    6: FallStyle.RIGHT,
    7: FallStyle.SPLIT_LEFT_RIGHT,
    8: FallStyle.SPLIT_UP_DOWN,
}


def _packed(values: Sequence[str], toward_start: bool) -> List[str]:
    survivors = [value for value in values if value != EMPTY]
    gap = [EMPTY] * (len(values) - len(survivors))
    return survivors + gap if toward_start else gap + survivors


def _column(board: Board, col: int, first: int, last: int) -> List[str]:
    return [board.get(row, col) for row in range(first, last + 1)]


def _write_column(board: Board, col: int, first: int, values: Sequence[str]) -> None:
    for offset, value in enumerate(values):
        board.set(first + offset, col, value)


def _row(board: Board, row: int, first: int, last: int) -> List[str]:
    return [board.get(row, col) for col in range(first, last + 1)]


def _write_row(board: Board, row: int, first: int, values: Sequence[str]) -> None:
    for offset, value in enumerate(values):
        board.set(row, first + offset, value)


def _pack_columns(board: Board, first: int, last: int, toward_top: bool) -> None:
    if first > last:
        return
    for col in range(1, board.cols + 1):
        _write_column(board, col, first, _packed(_column(board, col, first, last), toward_top))


def _pack_rows(board: Board, first: int, last: int, toward_left: bool) -> None:
    if first > last:
        return
    for row in range(1, board.rows + 1):
        _write_row(board, row, first, _packed(_row(board, row, first, last), toward_left))


def fall_down(board: Board) -> None:
    _pack_columns(board, 1, board.rows, toward_top=False)


def fall_up(board: Board) -> None:
    _pack_columns(board, 1, board.rows, toward_top=True)


def fall_left(board: Board) -> None:
    _pack_rows(board, 1, board.cols, toward_left=True)


def fall_right(board: Board) -> None:
    _pack_rows(board, 1, board.cols, toward_left=False)


def split_fall_left_right(board: Board) -> None:
    """Left half (``1..cols//2``) packs left, right half packs right."""
    mid = board.cols // 2
    _pack_rows(board, 1, mid, toward_left=True)
    _pack_rows(board, mid + 1, board.cols, toward_left=False)


def split_fall_up_down(board: Board) -> None:
    """Top half (``1..rows//2``) packs up, bottom half packs down."""
    mid = board.rows // 2
    _pack_columns(board, 1, mid, toward_top=True)
    _pack_columns(board, mid + 1, board.rows, toward_top=False)


def _center_slots(length: int) -> List[int]:
    """Alternating fill order from the two middle cells outward.

    Starts at ``length//2`` walking toward 1, then ``length//2 + 1`` walking
    toward ``length``; once one side runs out only the other is used.
    """
    near = length // 2
    far = near + 1
    slots: List[int] = []
    while len(slots) < length:
        if near >= 1:
            slots.append(near)
            near -= 1
            if len(slots) >= length:
                break
        if far <= length:
            slots.append(far)
            far += 1
    return slots


def fall_toward_center(board: Board) -> None:
    """Columns gather toward the middle row, then rows toward the middle column."""
    row_slots = _center_slots(board.rows)
    for col in range(1, board.cols + 1):
        survivors = [value for value in _column(board, col, 1, board.rows) if value != EMPTY]
        _write_column(board, col, 1, [EMPTY] * board.rows)
        for value, row in zip(survivors, row_slots):
            board.set(row, col, value)
    col_slots = _center_slots(board.cols)
    for row in range(1, board.rows + 1):
        survivors = [value for value in _row(board, row, 1, board.cols) if value != EMPTY]
        _write_row(board, row, 1, [EMPTY] * board.cols)
        for value, col in zip(survivors, col_slots):
            board.set(row, col, value)


def _no_fall(board: Board) -> None:
    return


FALL_TRANSFORMS: Dict[FallStyle, Callable[[Board], None]] = {
    FallStyle.NONE: _no_fall,
    FallStyle.DOWN: fall_down,
    FallStyle.UP: fall_up,
    FallStyle.LEFT: fall_left,
    FallStyle.RIGHT: fall_right,
    FallStyle.SPLIT_LEFT_RIGHT: split_fall_left_right,
    FallStyle.SPLIT_UP_DOWN: split_fall_up_down,
    FallStyle.CENTER: fall_toward_center,
}


def apply_fall(board: Board, style: FallStyle) -> None:
    FALL_TRANSFORMS[style](board)


def fall_style_for(mode: GameMode, level: int, endless_style: FallStyle = FallStyle.NONE) -> FallStyle:
    """Compaction applied after a removal on this level."""
    if level == SPECIAL_LEVEL:
        return FallStyle.NONE
    if mode.is_endless:
        return endless_style
    return LEVEL_FALL_STYLES.get(level, FallStyle.NONE)
