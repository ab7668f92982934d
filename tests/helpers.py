from __future__ import annotations

from typing import Sequence

from esper import World

from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.components.rendered_frame import CellDraw, RenderedFrame
from boardplay.components.snapshot_sequence import SnapshotSequence
from boardplay.events.bus import EventBus
from boardplay.systems.playback_system import PlaybackSystem
from boardplay.world import create_world


def build_session(
    frames: Sequence[Sequence[Sequence[int]]],
    x_size: int,
    y_size: int,
    *,
    rows_first: bool = False,
    frame_rate: float = 5,
) -> tuple[World, EventBus, PlaybackSystem]:
    """Create a world plus playback controller for the given frames."""

    board = BoardDescriptor(x_size=x_size, y_size=y_size)
    if rows_first:
        sequence = SnapshotSequence.from_rows(frames)
    else:
        sequence = SnapshotSequence.from_columns(frames)
    bus = EventBus()
    world = create_world(board, sequence, frame_rate=frame_rate)
    playback = PlaybackSystem(world, bus)
    return world, bus, playback


def counting_frames(count: int, x_size: int = 2, y_size: int = 2) -> list[list[list[int]]]:
    """Frames whose every cell holds the frame number, so frame ``i`` is easy to spot."""

    return [[[i] * y_size for _ in range(x_size)] for i in range(count)]


def cell_at(rendered: RenderedFrame, column: int, row: int) -> CellDraw | None:
    for cell in rendered.cells:
        if cell.column == column and cell.row == row:
            return cell
    return None


class EventRecorder:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def listen(self, bus: EventBus, *names: str) -> EventRecorder:
        for name in names:
            bus.subscribe(name, self._handler_for(name))
        return self

    def _handler_for(self, name: str):
        def _handler(sender, **payload):
            self.events.append((name, payload))
        return _handler

    def names(self) -> list[str]:
        return [name for name, _ in self.events]
