from pairlink.components.game_mode import GameMode
from pairlink.constants import base_time_for_level
from pairlink.events.bus import EVENT_LEVEL_FAILED

from tests.helpers import capture, make_session


def test_base_time_shrinks_to_floor():
    assert base_time_for_level(1) == 120
    assert base_time_for_level(2) == 115
    assert base_time_for_level(10) == 75
    assert base_time_for_level(19) == 30
    assert base_time_for_level(40) == 30


def test_running_out_of_time_fails_level():
    session = make_session(GameMode.classic_easy())
    failures = capture(session.event_bus, EVENT_LEVEL_FAILED)
    for _ in range(119):
        session.tick()
    assert session.snapshot().time_remaining == 1
    assert not session.snapshot().failed

    session.tick()
    snap = session.snapshot()
    assert snap.time_remaining == 0
    assert snap.failed
    assert snap.progress == 0.0
    assert not session.timer_running
    assert failures == [{"level": 1, "score": 0, "reason": "timeout"}]

    session.tick()
    assert len(failures) == 1


def test_ticks_ignored_while_paused_or_stopped():
    session = make_session(GameMode.classic_easy())
    session.pause()
    session.tick()
    assert session.snapshot().time_remaining == 120
    session.resume()
    session.tick()
    assert session.snapshot().time_remaining == 119

    session.stop_timer()
    session.stop_timer()
    session.tick()
    assert session.snapshot().time_remaining == 119
    assert not session.timer_running


def test_close_stops_the_timer():
    session = make_session(GameMode.classic_easy())
    session.close()
    session.close()
    assert not session.timer_running
