"""Legal-move detection and reshuffling over the occupied cells."""
from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple

from pairlink.components.board import Board, Position
from pairlink.constants import SHUFFLE_MAX_ATTEMPTS
from pairlink.systems.match_rules import MatchRule
from pairlink.systems.path_finder import can_connect

logger = logging.getLogger(__name__)


def _groups(board: Board, rule: MatchRule) -> Dict[str, List[Position]]:
    groups: Dict[str, List[Position]] = {}
    for pos, symbol in board.occupied():
        key = rule.group_key(symbol)
        if key is None:
            continue
        groups.setdefault(key, []).append(pos)
    return groups


def find_connectable_pair(board: Board, rule: MatchRule) -> Optional[Tuple[Position, Position]]:
    """First matching pair (by group, reading order) that a legal path joins."""
    for positions in _groups(board, rule).values():
        if len(positions) < 2:
            continue
        for i, first in enumerate(positions[:-1]):
            for second in positions[i + 1:]:
                if not rule.matches(board.get(*first), board.get(*second)):
                    continue
                if can_connect(board, first, second):
                    return first, second
    return None


def any_move_exists(board: Board, rule: MatchRule) -> bool:
    return find_connectable_pair(board, rule) is not None


def shuffle_until_playable(
    board: Board,
    rule: MatchRule,
    rng: random.Random,
    *,
    force: bool = False,
    max_attempts: int = SHUFFLE_MAX_ATTEMPTS,
) -> bool:
    """Permute symbols across the occupied cells until a move exists.

    Returns True once a playable permutation is in place. The final attempt
    is accepted unconditionally, so an exhausted budget leaves the last
    permutation on the board and returns False. ``force`` marks callers that
    need play to go on; for them an exhausted budget is logged as a warning.
    """
    occupied = board.occupied()
    if len(occupied) < 2:
        return False
    positions = [pos for pos, _ in occupied]
    values = [symbol for _, symbol in occupied]
    for attempt in range(1, max_attempts + 1):
        rng.shuffle(values)
        for (row, col), symbol in zip(positions, values):
            board.set(row, col, symbol)
        if any_move_exists(board, rule):
            logger.debug("reshuffle found a playable layout after %d attempt(s)", attempt)
            return True
    if force:
        logger.warning("no playable layout after %d reshuffles; keeping the last one", max_attempts)
    else:
        logger.debug("no playable layout after %d reshuffles; keeping the last one", max_attempts)
    return False
