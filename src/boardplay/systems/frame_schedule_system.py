from __future__ import annotations

from esper import World

from boardplay.events.bus import EVENT_FRAME_DUE, EVENT_TICK, EventBus
from boardplay.utils.frame_timer import FrameTimer
from boardplay.utils.session import get_playback_state


class FrameScheduleSystem:
    """Turns per-update window ticks into fixed-rate ``frame_due`` events."""

    def __init__(self, world: World, event_bus: EventBus, *, timer: FrameTimer | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        state = get_playback_state(world)
        self._timer = timer or FrameTimer.for_rate(state.frame_rate)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def timer(self) -> FrameTimer:
        return self._timer

    def on_tick(self, sender, **kwargs):
        state = get_playback_state(self.world)
        if state.paused or not state.scheduled:
            # Start counting from zero on resume instead of firing straight away.
            self._timer.reset()
            return
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            dt = 1/60
        if self._timer.advance(dt):
            self.event_bus.emit(EVENT_FRAME_DUE)
