from esper import World

from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.components.palette import Palette
from boardplay.components.playback_state import PlaybackState
from boardplay.components.snapshot_sequence import SnapshotSequence
from boardplay.constants import FRAME_RATE


def create_world(
    board: BoardDescriptor,
    sequence: SnapshotSequence,
    *,
    palette: Palette | None = None,
    frame_rate: float = FRAME_RATE,
) -> World:
    if frame_rate <= 0:
        raise ValueError(f"frame rate must be positive, got {frame_rate}")
    sequence.check_dimensions(board)
    world = World()

    # Single session entity; systems look components up by type.
    world.create_entity(
        board,
        sequence,
        palette or Palette(),
        PlaybackState(
            cursor=0,
            paused=False,
            # Nothing to play: keep the schedule stopped from the start.
            scheduled=len(sequence) > 0,
            frame_rate=float(frame_rate),
        ),
    )
    return world
