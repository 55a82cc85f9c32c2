"""Lookup helpers for the singleton components every system touches."""
from __future__ import annotations

import random

from esper import World

from pairlink.components.board import Board
from pairlink.components.countdown_timer import CountdownTimer
from pairlink.components.pending_match import PendingMatch
from pairlink.components.session_state import SessionState


def get_session_state(world: World) -> SessionState:
    """Return the shared SessionState component, creating it if absent."""
    existing = list(world.get_component(SessionState))
    if existing:
        return existing[0][1]
    world.create_entity(SessionState(), CountdownTimer())
    return list(world.get_component(SessionState))[0][1]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_timer(world: World) -> CountdownTimer:
    for _, timer in world.get_component(CountdownTimer):
        return timer
    timer = CountdownTimer()
    world.create_entity(timer)
    return timer


def get_pending_match(world: World) -> PendingMatch | None:
    for _, pending in world.get_component(PendingMatch):
        return pending
    return None


def set_pending_match(world: World, pending: PendingMatch) -> None:
    clear_pending_match(world)
    world.create_entity(pending)


def clear_pending_match(world: World) -> PendingMatch | None:
    """Drop the pending match (if any) and return it."""
    entries = list(world.get_component(PendingMatch))
    if not entries:
        return None
    for ent, _ in entries:
        world.remove_component(ent, PendingMatch)
    return entries[0][1]


def world_rng(world: World, fallback: random.Random | None = None) -> random.Random:
    candidate = getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    return fallback or random.Random()
