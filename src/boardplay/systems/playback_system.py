from __future__ import annotations

import logging

from esper import World

from boardplay.components.playback_state import PlaybackState
from boardplay.components.rendered_frame import RenderedFrame
from boardplay.constants import CELL_SIZE, READOUT_MARGIN
from boardplay.events.bus import (
    EVENT_FRAME_DUE,
    EVENT_FRAME_RENDERED,
    EVENT_PLAYBACK_FINISHED,
    EVENT_PLAYBACK_PAUSED,
    EVENT_PLAYBACK_RESUMED,
    EventBus,
)
from boardplay.rendering.frame_renderer import FrameRenderer
from boardplay.utils.session import (
    get_board,
    get_palette,
    get_playback_state,
    get_sequence,
    session_entity,
)

logger = logging.getLogger(__name__)


class PlaybackSystem:
    """Owns the playback cursor: render ticks, pause toggling and manual steps.

    A render tick shows ``sequence[cursor]`` and then advances the cursor by
    one. Reaching the end of the sequence stops the tick schedule but leaves
    the pause flag alone.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        cell_size: int = CELL_SIZE,
        margin: int = READOUT_MARGIN,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.renderer = FrameRenderer(get_board(world), get_palette(world), cell_size=cell_size, margin=margin)
        self.event_bus.subscribe(EVENT_FRAME_DUE, self._on_frame_due)

    @property
    def state(self) -> PlaybackState:
        return get_playback_state(self.world)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_frame_due(self, sender, **payload) -> None:
        state = self.state
        if state.paused or not state.scheduled:
            return
        if state.cursor >= len(get_sequence(self.world)):
            # Resumed after the last frame. playback_finished already fired.
            state.scheduled = False
            return
        self.tick()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def tick(self) -> RenderedFrame:
        """Render the frame under the cursor, then advance the cursor."""
        state = self.state
        sequence = get_sequence(self.world)
        index = state.cursor
        frame = sequence.frame(index)
        rendered = self.renderer.build(frame, index)
        self.world.add_component(session_entity(self.world), rendered)
        state.displayed_index = index
        state.cursor = index + 1
        self.event_bus.emit(EVENT_FRAME_RENDERED, index=index, cursor=state.cursor)
        if state.cursor >= len(sequence):
            self._stop_schedule(state)
        return rendered

    def toggle_pause(self) -> None:
        state = self.state
        if state.paused:
            state.paused = False
            state.scheduled = True
            logger.debug("Playback resumed at cursor %d", state.cursor)
            self.event_bus.emit(EVENT_PLAYBACK_RESUMED, cursor=state.cursor)
        else:
            state.paused = True
            state.scheduled = False
            logger.debug("Playback paused at cursor %d", state.cursor)
            self.event_bus.emit(EVENT_PLAYBACK_PAUSED, cursor=state.cursor)

    def step_back(self) -> RenderedFrame | None:
        """Show the previous frame; no-op unless the cursor is past frame 1."""
        state = self.state
        if state.cursor <= 1:
            return None
        state.cursor -= 2
        rendered = self.tick()
        logger.debug("Stepped back to frame %d", rendered.index)
        return rendered

    def step_forward(self) -> RenderedFrame:
        """Render the frame under the cursor immediately, paused or not.

        Raises BoundsError once the cursor has reached the end of the sequence.
        """
        rendered = self.tick()
        logger.debug("Stepped forward to frame %d", rendered.index)
        return rendered

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _stop_schedule(self, state: PlaybackState) -> None:
        if not state.scheduled:
            return
        state.scheduled = False
        logger.info("Playback reached the end at cursor %d", state.cursor)
        self.event_bus.emit(EVENT_PLAYBACK_FINISHED, cursor=state.cursor)
