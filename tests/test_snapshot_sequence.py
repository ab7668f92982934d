import pytest

from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.components.snapshot_sequence import SnapshotSequence
from boardplay.errors import BoundsError, SnapshotFormatError


def test_board_descriptor_requires_positive_sizes():
    board = BoardDescriptor(x_size=3, y_size=2)
    assert (board.columns, board.rows) == (3, 2)

    with pytest.raises(ValueError):
        BoardDescriptor(x_size=0, y_size=2)
    with pytest.raises(ValueError):
        BoardDescriptor(x_size=2, y_size=-1)


def test_from_columns_freezes_frames():
    source = [[[0, 1], [2, 3]]]
    sequence = SnapshotSequence.from_columns(source)
    source[0][0][0] = 99

    assert len(sequence) == 1
    assert sequence.frame(0) == ((0, 1), (2, 3))


def test_from_rows_transposes_to_columns():
    sequence = SnapshotSequence.from_rows([[[0, 1]], [[2, 0]]])

    assert sequence.frame(0) == ((0,), (1,))
    assert sequence.frame(1) == ((2,), (0,))
    sequence.check_dimensions(BoardDescriptor(x_size=2, y_size=1))


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_frame_out_of_range_raises_bounds_error(index):
    sequence = SnapshotSequence.from_columns([[[0]], [[1]]])

    with pytest.raises(BoundsError) as excinfo:
        sequence.frame(index)

    assert excinfo.value.cursor == index
    assert excinfo.value.length == 2
    assert isinstance(excinfo.value, IndexError)


def test_check_dimensions_rejects_wrong_column_count():
    sequence = SnapshotSequence.from_columns([[[0, 0]], [[0, 0], [0, 0]]])

    with pytest.raises(SnapshotFormatError, match="frame 0 has 1 columns"):
        sequence.check_dimensions(BoardDescriptor(x_size=2, y_size=2))


def test_check_dimensions_rejects_short_column():
    sequence = SnapshotSequence.from_columns([[[0, 0], [0]]])

    with pytest.raises(SnapshotFormatError, match="column 1 has 1 rows"):
        sequence.check_dimensions(BoardDescriptor(x_size=2, y_size=2))


def test_check_dimensions_rejects_negative_values():
    sequence = SnapshotSequence.from_columns([[[0, -3]]])

    with pytest.raises(SnapshotFormatError, match="invalid cell value -3"):
        sequence.check_dimensions(BoardDescriptor(x_size=1, y_size=2))
