from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.components.palette import Palette
from boardplay.components.snapshot_sequence import SnapshotSequence
from boardplay.constants import EMPTY_CELL_COLOR
from boardplay.rendering.frame_renderer import FrameRenderer
from boardplay.ui.layout import cell_origin, compute_canvas_size, readout_position
from tests.helpers import cell_at


def test_canvas_size_adds_readout_margin():
    board = BoardDescriptor(x_size=10, y_size=7)

    assert compute_canvas_size(board) == (10 * 4 + 100, 7 * 4)
    assert compute_canvas_size(board, cell_size=8, margin=20) == (100, 56)


def test_cell_origin_flips_rows_to_bottom_left_origin():
    # Row 0 sits against the top edge of a 40 px canvas.
    assert cell_origin(0, 0, 40) == (0, 37)
    assert cell_origin(2, 3, 40) == (8, 25)
    assert cell_origin(1, 0, 40, cell_size=10) == (10, 31)


def test_readout_sits_near_top_right_corner():
    assert readout_position(200, 120) == (150, 70)


def test_build_produces_one_draw_per_cell():
    board = BoardDescriptor(x_size=5, y_size=3)
    frame = tuple(tuple((col + row) % 4 for row in range(3)) for col in range(5))
    renderer = FrameRenderer(board, Palette())

    rendered = renderer.build(frame, 7)

    assert len(rendered.cells) == board.columns * board.rows
    assert {(cell.column, cell.row) for cell in rendered.cells} == {
        (col, row) for col in range(5) for row in range(3)
    }
    assert all(cell.size == 3 for cell in rendered.cells)
    assert rendered.index == 7
    assert rendered.readout_text == "7"


def test_build_colors_cells_by_value():
    palette = Palette()
    board = BoardDescriptor(x_size=2, y_size=1)
    sequence = SnapshotSequence.from_rows([[[0, 1]], [[2, 0]]])
    renderer = FrameRenderer(board, palette)

    first = renderer.build(sequence.frame(0), 0)
    assert cell_at(first, 0, 0).color == EMPTY_CELL_COLOR
    assert cell_at(first, 1, 0).color == palette.colors[0]

    second = renderer.build(sequence.frame(1), 1)
    assert cell_at(second, 0, 0).color == palette.colors[1 % len(palette)]
    assert cell_at(second, 1, 0).color == EMPTY_CELL_COLOR


def test_build_wraps_large_values():
    palette = Palette.from_hex([("red", "#FF0000"), ("blue", "#0000FF")])
    board = BoardDescriptor(x_size=3, y_size=1)
    renderer = FrameRenderer(board, palette)

    rendered = renderer.build(((5,), (6,), (0,)), 0)

    assert cell_at(rendered, 0, 0).color == (255, 0, 0, 255)
    assert cell_at(rendered, 1, 0).color == (0, 0, 255, 255)
    assert cell_at(rendered, 2, 0).color == EMPTY_CELL_COLOR
    assert cell_at(rendered, 3, 0) is None
