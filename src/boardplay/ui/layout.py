from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.constants import CELL_SIZE, READOUT_MARGIN, READOUT_OFFSET


def compute_canvas_size(board: BoardDescriptor, cell_size: int = CELL_SIZE, margin: int = READOUT_MARGIN):
    """Return (width, height) of the canvas: board area plus the readout margin on the right."""
    return board.columns * cell_size + margin, board.rows * cell_size


def cell_origin(column: int, row: int, canvas_height: int, cell_size: int = CELL_SIZE):
    """Return (left, bottom) of a cell in arcade coordinates.

    Rows count downward from the top edge, matching the snapshot layout, while
    arcade's origin sits at the bottom-left corner.
    """
    draw_size = cell_size - 1
    left = column * cell_size
    top = canvas_height - row * cell_size
    return left, top - draw_size


def readout_position(canvas_width: int, canvas_height: int):
    """Centre of the frame index readout, near the top-right corner."""
    return canvas_width - READOUT_OFFSET, canvas_height - READOUT_OFFSET
