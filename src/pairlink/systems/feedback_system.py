from typing import Protocol

from esper import World

from pairlink.constants import SOUND_CLICK, SOUND_COMBO
from pairlink.events.bus import (
    EventBus,
    EVENT_MATCH_CLEARED,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_MISMATCH,
    EVENT_TILE_SELECTED,
)


class SoundPlayer(Protocol):
    def play(self, name: str) -> None:
        ...


class FeedbackSystem:
    """Fire-and-forget audio cues for selection and match events."""
    def __init__(self, world: World, event_bus: EventBus, sound_player: SoundPlayer):
        self.world = world
        self.event_bus = event_bus
        self.sound_player = sound_player
        for name in (EVENT_TILE_SELECTED, EVENT_TILE_DESELECTED, EVENT_TILE_MISMATCH):
            self.event_bus.subscribe(name, self.on_click)
        self.event_bus.subscribe(EVENT_MATCH_CLEARED, self.on_combo)

    def on_click(self, sender, **kwargs):
        self.sound_player.play(SOUND_CLICK)

    def on_combo(self, sender, **kwargs):
        self.sound_player.play(SOUND_COMBO)
