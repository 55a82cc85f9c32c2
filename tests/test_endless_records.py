from pairlink.components.game_mode import GameMode
from pairlink.constants import ENDLESS_BEST_LEVEL_KEY, ENDLESS_BEST_SCORE_KEY
from pairlink.events.bus import EVENT_ENDLESS_RECORD_UPDATED
from pairlink.persistence.record_store import MemoryRecordStore
from pairlink.utils.state_access import get_session_state

from tests.helpers import capture, install_layout, make_session


def test_endless_start_loads_stored_records():
    store = MemoryRecordStore({ENDLESS_BEST_LEVEL_KEY: 4, ENDLESS_BEST_SCORE_KEY: 900})
    session = make_session(GameMode.endless(), store=store)
    snap = session.snapshot()
    assert snap.endless_best_level == 4
    assert snap.endless_best_score == 900


def test_clearing_endless_level_records_best():
    store = MemoryRecordStore()
    session = make_session(GameMode.endless(), rows=2, cols=4, store=store)
    install_layout(session, ["A A . .", ". . . ."])
    updates = capture(session.event_bus, EVENT_ENDLESS_RECORD_UPDATED)

    session.handle_tap(1, 1)
    session.handle_tap(1, 2)
    session.commit_match()

    snap = session.snapshot()
    assert snap.cleared
    assert snap.score == 10 + 120
    assert store.read(ENDLESS_BEST_LEVEL_KEY) == 1
    assert store.read(ENDLESS_BEST_SCORE_KEY) == 130
    assert updates == [{"best_level": 1, "best_score": 130}]


def test_failing_endless_level_counts_previous_level():
    store = MemoryRecordStore()
    session = make_session(GameMode.endless(), rows=2, cols=4, store=store)
    session.advance_to_next_level()
    install_layout(session, ["A A B B", ". . . ."])
    session.handle_tap(1, 1)
    session.handle_tap(1, 2)
    session.commit_match()
    assert session.snapshot().score == 10

    get_session_state(session.world).time_remaining = 1
    session.tick()
    snap = session.snapshot()
    assert snap.failed
    assert snap.endless_best_level == 1
    assert store.read(ENDLESS_BEST_LEVEL_KEY) == 1
    assert store.read(ENDLESS_BEST_SCORE_KEY) == 10


def test_records_never_decrease():
    store = MemoryRecordStore({ENDLESS_BEST_LEVEL_KEY: 7, ENDLESS_BEST_SCORE_KEY: 5000})
    session = make_session(GameMode.endless(), rows=2, cols=4, store=store)
    get_session_state(session.world).time_remaining = 1
    session.tick()
    assert store.read(ENDLESS_BEST_LEVEL_KEY) == 7
    assert store.read(ENDLESS_BEST_SCORE_KEY) == 5000


def test_classic_modes_leave_records_alone():
    store = MemoryRecordStore()
    session = make_session(GameMode.classic_easy(), rows=2, cols=4, store=store)
    install_layout(session, ["A A . .", ". . . ."])
    session.handle_tap(1, 1)
    session.handle_tap(1, 2)
    session.commit_match()
    assert session.snapshot().cleared
    assert store.read(ENDLESS_BEST_SCORE_KEY) == 0
