from pairlink.components.game_mode import GameMode
from pairlink.constants import SOUND_CLICK, SOUND_COMBO

from tests.helpers import install_layout, make_session


class RecordingPlayer:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


def test_selection_and_match_cues():
    player = RecordingPlayer()
    session = make_session(GameMode.classic_easy(), rows=2, cols=4, sound_player=player)
    install_layout(session, ["A B A B", ". . . ."])
    player.played.clear()

    session.handle_tap(1, 1)
    session.handle_tap(1, 1)
    session.handle_tap(1, 1)
    session.handle_tap(1, 2)
    assert player.played == [SOUND_CLICK, SOUND_CLICK, SOUND_CLICK, SOUND_CLICK]

    session.handle_tap(1, 4)
    assert len(player.played) == 4
    session.commit_match()
    assert player.played[-1] == SOUND_COMBO
    assert player.played.count(SOUND_COMBO) == 1


def test_session_without_player_is_silent():
    session = make_session(GameMode.classic_easy())
    assert session.feedback_system is None
