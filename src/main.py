"""Headless entry point for the pair-link engine.

Builds a seeded GameSession and autoplays it by tapping connectable pairs,
then prints a summary per level.
"""
from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from pairlink.components.game_mode import GameMode
from pairlink.persistence.record_store import JsonRecordStore, MemoryRecordStore
from pairlink.session import GameSession
from pairlink.systems.deadlock import find_connectable_pair
from pairlink.systems.match_rules import rule_for_level
from pairlink.utils.state_access import get_board

MODES = {
    "easy": lambda level: GameMode.classic_easy(),
    "hard": lambda level: GameMode.classic_hard(),
    "practice": GameMode.practice,
    "endless": lambda level: GameMode.endless(),
}


def play_level(session: GameSession, ticks_per_match: int) -> None:
    """Clear pairs until the level ends; the clock ticks between matches."""
    while True:
        snap = session.snapshot()
        if snap.cleared or snap.failed:
            return
        pair = find_connectable_pair(get_board(session.world), rule_for_level(snap.level))
        if pair is None:
            return
        first, second = pair
        session.handle_tap(*first)
        session.handle_tap(*second)
        session.commit_match()
        for _ in range(ticks_per_match):
            session.tick()


def main() -> None:
    parser = argparse.ArgumentParser(description='Autoplay a pair-link session without a UI')
    parser.add_argument('--mode', choices=sorted(MODES), default='easy', help='Game mode')
    parser.add_argument('--level', type=int, default=1, help='Start level (practice mode)')
    parser.add_argument('--levels', type=int, default=3, help='Number of levels to play')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for board layouts')
    parser.add_argument('--ticks', type=int, default=1, help='Clock seconds elapsed per match')
    parser.add_argument('--records', type=Path, default=None, help='JSON file for endless records')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, ...)')
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    store = JsonRecordStore(args.records) if args.records else MemoryRecordStore()
    session = GameSession(rng=random.Random(args.seed), store=store)
    try:
        session.start(MODES[args.mode](args.level))
        for index in range(args.levels):
            play_level(session, args.ticks)
            snap = session.snapshot()
            outcome = 'cleared' if snap.cleared else 'failed'
            print(f"Level {snap.level} ({snap.level_name}): {outcome}, score {snap.score}, "
                  f"{snap.time_remaining}s left, {snap.auto_shuffle_count} reshuffle(s)")
            if not snap.cleared or snap.campaign_complete:
                break
            if index + 1 < args.levels:
                session.advance_to_next_level()
        snap = session.snapshot()
        print(f"Final score: {snap.score}")
        if snap.mode.is_endless:
            print(f"Endless best: level {snap.endless_best_level}, score {snap.endless_best_score}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
