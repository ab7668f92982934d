from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored anywhere still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"            # payload: dt=float
EVENT_FRAME_DUE = "frame_due"  # payload: None


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"  # payload: symbol=int, modifiers=int


# ============================================================================
# PLAYBACK
# ============================================================================
EVENT_FRAME_RENDERED = "frame_rendered"        # payload: index=int, cursor=int
EVENT_PLAYBACK_PAUSED = "playback_paused"      # payload: cursor=int
EVENT_PLAYBACK_RESUMED = "playback_resumed"    # payload: cursor=int
EVENT_PLAYBACK_FINISHED = "playback_finished"  # payload: cursor=int
