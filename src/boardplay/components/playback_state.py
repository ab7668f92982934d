"""Session state of the playback controller."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class PlaybackState:
    """Singleton component holding the playback cursor and schedule flags.

    ``paused`` only changes on explicit user action. ``scheduled`` tracks whether
    frames advance on the fixed-rate timer; reaching the end of the sequence
    clears it without touching ``paused``.
    """
    cursor: int = 0
    paused: bool = False
    scheduled: bool = True
    frame_rate: float = 5.0
    displayed_index: Optional[int] = None
