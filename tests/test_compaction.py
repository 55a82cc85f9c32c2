import random

import pytest

from pairlink.components.board import Board
from pairlink.components.fall_style import FallStyle
from pairlink.components.game_mode import GameMode
from pairlink.systems.compaction import apply_fall, fall_style_for

from tests.helpers import board_from_rows, board_rows, border_is_empty, symbol_counts


def _random_sparse_board(seed: int, rows: int = 6, cols: int = 8) -> Board:
    rng = random.Random(seed)
    board = Board(rows=rows, cols=cols)
    for row, col in board.interior_positions():
        if rng.random() < 0.5:
            board.set(row, col, f"tile_{rng.randint(1, 5):03d}")
    return board


def test_fall_down_packs_columns_toward_bottom():
    board = board_from_rows([
        "A .",
        ". B",
        "C .",
        ". .",
    ])
    apply_fall(board, FallStyle.DOWN)
    assert board_rows(board) == [
        ". .",
        ". .",
        "A .",
        "C B",
    ]


def test_fall_up_keeps_relative_order():
    board = board_from_rows([
        ". .",
        "A .",
        ". B",
        "C .",
    ])
    apply_fall(board, FallStyle.UP)
    assert board_rows(board) == [
        "A B",
        "C .",
        ". .",
        ". .",
    ]


def test_fall_left_and_right():
    left = board_from_rows([". A . B"])
    apply_fall(left, FallStyle.LEFT)
    assert board_rows(left) == ["A B . ."]

    right = board_from_rows(["A . B ."])
    apply_fall(right, FallStyle.RIGHT)
    assert board_rows(right) == [". . A B"]


def test_split_left_right_pushes_halves_apart():
    board = board_from_rows([". A B ."])
    apply_fall(board, FallStyle.SPLIT_LEFT_RIGHT)
    assert board_rows(board) == ["A . . B"]


def test_split_up_down_pushes_halves_apart():
    board = board_from_rows([".", "A", "B", "."])
    apply_fall(board, FallStyle.SPLIT_UP_DOWN)
    assert board_rows(board) == ["A", ".", ".", "B"]


def test_center_gathers_columns_then_rows():
    board = board_from_rows([
        "A . . .",
        ". . . B",
    ])
    apply_fall(board, FallStyle.CENTER)
    assert board_rows(board) == [
        ". A B .",
        ". . . .",
    ]


def test_center_odd_column_fills_upper_middle_first():
    board = board_from_rows([
        "A P",
        ". Q",
        ". .",
        ". R",
        "B .",
        ". S",
        "C T",
    ])
    apply_fall(board, FallStyle.CENTER)
    # Three survivors take rows 3, 4, 2; five take 3, 4, 2, 5, 1.
    assert board_rows(board) == [
        "T .",
        "C R",
        "A P",
        "B Q",
        "S .",
        ". .",
        ". .",
    ]


def test_center_full_odd_column_ends_on_the_far_side():
    board = board_from_rows([f"{symbol} ." for symbol in "ABCDEFG"])
    apply_fall(board, FallStyle.CENTER)
    assert board_rows(board) == [
        "E .",
        "C .",
        "A .",
        "B .",
        "D .",
        "F .",
        "G .",
    ]


@pytest.mark.parametrize("row, expected", [
    ("X . Y . . . Z", ". Z X Y . . ."),
    ("V W . X . Y Z", "Z X V W Y . ."),
])
def test_center_odd_row_fills_left_middle_first(row, expected):
    board = board_from_rows([row, ". . . . . . ."])
    apply_fall(board, FallStyle.CENTER)
    assert board_rows(board) == [expected, ". . . . . . ."]


def test_none_style_is_a_no_op():
    board = board_from_rows(["A . B ."])
    apply_fall(board, FallStyle.NONE)
    assert board_rows(board) == ["A . B ."]


@pytest.mark.parametrize("style", list(FallStyle))
def test_every_style_preserves_symbols_and_border(style):
    for seed in range(5):
        board = _random_sparse_board(seed)
        before = symbol_counts(board)
        apply_fall(board, style)
        assert symbol_counts(board) == before
        assert border_is_empty(board)


def test_directional_styles_leave_no_gaps():
    for seed in range(5):
        down = _random_sparse_board(seed)
        apply_fall(down, FallStyle.DOWN)
        for col in range(1, down.cols + 1):
            column = [down.get(row, col) for row in range(1, down.rows + 1)]
            filled = [value for value in column if value]
            assert column[len(column) - len(filled):] == filled

        left = _random_sparse_board(seed)
        apply_fall(left, FallStyle.LEFT)
        for row in range(1, left.rows + 1):
            line = [left.get(row, col) for col in range(1, left.cols + 1)]
            filled = [value for value in line if value]
            assert line[:len(filled)] == filled


def test_fall_style_per_level():
    easy = GameMode.classic_easy()
    assert fall_style_for(easy, 1) is FallStyle.NONE
    assert fall_style_for(easy, 2) is FallStyle.NONE
    assert fall_style_for(easy, 3) is FallStyle.DOWN
    assert fall_style_for(easy, 4) is FallStyle.UP
    assert fall_style_for(easy, 5) is FallStyle.LEFT
    assert fall_style_for(easy, 6) is FallStyle.RIGHT
    assert fall_style_for(easy, 7) is FallStyle.SPLIT_LEFT_RIGHT
    assert fall_style_for(easy, 8) is FallStyle.SPLIT_UP_DOWN
    assert fall_style_for(easy, 9) is FallStyle.NONE
    assert fall_style_for(easy, 10) is FallStyle.NONE
    assert fall_style_for(GameMode.practice(5), 5) is FallStyle.LEFT


def test_endless_uses_its_random_style_except_on_special_level():
    endless = GameMode.endless()
    assert fall_style_for(endless, 3, FallStyle.CENTER) is FallStyle.CENTER
    assert fall_style_for(endless, 9, FallStyle.CENTER) is FallStyle.NONE
