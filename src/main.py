"""Entry point for the board snapshot viewer.

Loads the snapshot file, sets up the ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import sys

from arcade import Window, run, set_background_color

from boardplay.constants import (
    BACKGROUND_COLOR,
    CELL_SIZE,
    DEFAULT_SNAPSHOT_PATH,
    FRAME_RATE,
    READOUT_MARGIN,
    WINDOW_TITLE,
)
from boardplay.errors import SnapshotFormatError
from boardplay.events.bus import EVENT_KEY_PRESS, EVENT_TICK, EventBus
from boardplay.loaders.snapshot_loader import load_snapshots
from boardplay.systems.frame_schedule_system import FrameScheduleSystem
from boardplay.systems.playback_input_system import PlaybackInputSystem
from boardplay.systems.playback_system import PlaybackSystem
from boardplay.systems.render import RenderSystem
from boardplay.ui.layout import compute_canvas_size
from boardplay.utils.session import get_board
from boardplay.world import create_world

logger = logging.getLogger(__name__)


class BoardPlaybackWindow(Window):
    def __init__(self, world, *, cell_size: int = CELL_SIZE, margin: int = READOUT_MARGIN):
        width, height = compute_canvas_size(get_board(world), cell_size, margin)
        super().__init__(width, height, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.world = world
        self.event_bus = EventBus()
        self.playback_system = PlaybackSystem(self.world, self.event_bus, cell_size=cell_size, margin=margin)

        self.frame_schedule_system = FrameScheduleSystem(self.world, self.event_bus)
        self.input_system = PlaybackInputSystem(self.playback_system, self.event_bus)
        self.render_system = RenderSystem(self.world, self)
        set_background_color(BACKGROUND_COLOR)

        # The first frame is shown right away; the schedule takes over from there.
        if self.playback_system.state.scheduled:
            self.playback_system.tick()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play back precomputed board snapshots")
    ap.add_argument("path", nargs="?", default=DEFAULT_SNAPSHOT_PATH,
                    help=f"data.js or .json snapshot file (default {DEFAULT_SNAPSHOT_PATH})")
    ap.add_argument("--fps", type=float, default=FRAME_RATE,
                    help=f"Frames advanced per second (default {FRAME_RATE})")
    ap.add_argument("--cell-size", type=int, default=CELL_SIZE,
                    help=f"Pixel size of one board cell (default {CELL_SIZE})")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Logging verbosity (default INFO)")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.fps <= 0 or args.cell_size < 2:
        logger.error("--fps must be positive and --cell-size at least 2")
        return 1
    try:
        board, sequence = load_snapshots(args.path)
    except SnapshotFormatError as exc:
        logger.error("Cannot load snapshots: %s", exc)
        return 1

    world = create_world(board, sequence, frame_rate=args.fps)
    BoardPlaybackWindow(world, cell_size=args.cell_size)
    run()
    return 0

if __name__ == "__main__":
    sys.exit(main())
