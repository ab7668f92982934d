from __future__ import annotations

from typing import TYPE_CHECKING

from boardplay.components.rendered_frame import CellDraw, RenderedFrame
from boardplay.constants import CELL_SIZE, EMPTY_CELL_COLOR, READOUT_MARGIN
from boardplay.ui.layout import cell_origin, compute_canvas_size, readout_position

if TYPE_CHECKING:
    from boardplay.components.board_descriptor import BoardDescriptor
    from boardplay.components.palette import Palette
    from boardplay.components.snapshot_sequence import Frame


class FrameRenderer:
    """Turns one snapshot frame into cell draw commands."""

    def __init__(self, board: BoardDescriptor, palette: Palette, cell_size: int = CELL_SIZE, margin: int = READOUT_MARGIN):
        self._board = board
        self._palette = palette
        self._cell_size = cell_size
        self.width, self.height = compute_canvas_size(board, cell_size, margin)

    def color_for(self, value: int):
        if value == 0:
            return EMPTY_CELL_COLOR
        return self._palette.color_for(value)

    def build(self, frame: Frame, index: int) -> RenderedFrame:
        board = self._board
        draw_size = self._cell_size - 1
        cells: list[CellDraw] = []
        for col in range(board.columns):
            column = frame[col]
            for row in range(board.rows):
                value = column[row]
                left, bottom = cell_origin(col, row, self.height, self._cell_size)
                cells.append(
                    CellDraw(
                        column=col,
                        row=row,
                        value=value,
                        left=left,
                        bottom=bottom,
                        size=draw_size,
                        color=self.color_for(value),
                    )
                )
        text_x, text_y = readout_position(self.width, self.height)
        return RenderedFrame(
            index=index,
            cells=cells,
            readout_text=str(index),
            readout_x=text_x,
            readout_y=text_y,
        )
