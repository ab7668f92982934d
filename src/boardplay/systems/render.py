from __future__ import annotations

from esper import World

from boardplay.components.rendered_frame import RenderedFrame
from boardplay.constants import (
    CELL_STROKE_COLOR,
    CELL_STROKE_WIDTH,
    READOUT_COLOR,
    READOUT_TEXT_SIZE,
)
from boardplay.utils.session import get_rendered_frame


class RenderSystem:
    """Draws the most recently rendered snapshot frame every window draw."""

    def __init__(self, world: World, window):
        self.world = world
        self.window = window
        self._last_drawn_index: int | None = None

    @property
    def last_drawn_index(self) -> int | None:
        return self._last_drawn_index

    def process(self):
        # Background cleared by the window prior to on_draw.
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        rendered = get_rendered_frame(self.world)
        if rendered is None:
            return
        self._last_drawn_index = rendered.index
        if headless:
            return
        self.draw(arcade, rendered)

    def draw(self, arcade, rendered: RenderedFrame) -> None:
        arcade.draw_text(
            rendered.readout_text,
            rendered.readout_x,
            rendered.readout_y,
            READOUT_COLOR,
            READOUT_TEXT_SIZE,
            anchor_x="center",
            anchor_y="center",
        )
        for cell in rendered.cells:
            arcade.draw_lbwh_rectangle_filled(cell.left, cell.bottom, cell.size, cell.size, cell.color)
            arcade.draw_lbwh_rectangle_outline(
                cell.left,
                cell.bottom,
                cell.size,
                cell.size,
                CELL_STROKE_COLOR,
                border_width=CELL_STROKE_WIDTH,
            )
