"""Keyboard controls for playback."""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Dict

from boardplay.constants import (
    BLOCKING_MODIFIERS,
    KEY_STEP_BACK,
    KEY_STEP_FORWARD,
    KEY_TOGGLE_PAUSE,
)
from boardplay.errors import BoundsError
from boardplay.events.bus import EVENT_KEY_PRESS, EventBus
from boardplay.systems.playback_system import PlaybackSystem

logger = logging.getLogger(__name__)


class PlaybackAction(Enum):
    TOGGLE_PAUSE = auto()
    STEP_BACK = auto()
    STEP_FORWARD = auto()


KeyBindings = Dict[int, PlaybackAction]

DEFAULT_KEY_BINDINGS: KeyBindings = {
    KEY_TOGGLE_PAUSE: PlaybackAction.TOGGLE_PAUSE,
    KEY_STEP_BACK: PlaybackAction.STEP_BACK,
    KEY_STEP_FORWARD: PlaybackAction.STEP_FORWARD,
}


class PlaybackInputSystem:
    """Dispatches key presses to the playback controller."""

    def __init__(
        self,
        playback: PlaybackSystem,
        event_bus: EventBus | None = None,
        *,
        bindings: KeyBindings | None = None,
    ) -> None:
        self.playback = playback
        self.bindings: KeyBindings = dict(DEFAULT_KEY_BINDINGS if bindings is None else bindings)
        if event_bus is not None:
            event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        try:
            symbol_int = int(symbol)
        except (TypeError, ValueError):
            return
        self.handle_key_press(symbol_int, int(payload.get("modifiers") or 0))

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> PlaybackAction | None:
        """Run the action bound to ``symbol``.

        Unbound keys and chords with Shift, Ctrl, Alt or Command held are ignored.
        """
        if modifiers & BLOCKING_MODIFIERS:
            return None
        action = self.bindings.get(symbol)
        if action is None:
            return None
        if action == PlaybackAction.TOGGLE_PAUSE:
            self.playback.toggle_pause()
        elif action == PlaybackAction.STEP_BACK:
            self.playback.step_back()
        elif action == PlaybackAction.STEP_FORWARD:
            try:
                self.playback.step_forward()
            except BoundsError as exc:
                logger.warning("Cannot step forward: %s", exc)
                return None
        return action
