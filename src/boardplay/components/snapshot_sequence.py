from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.errors import BoundsError, SnapshotFormatError

# frame[column][row]
Frame = Tuple[Tuple[int, ...], ...]


def _freeze(grid: Iterable[Iterable[int]]) -> Frame:
    return tuple(tuple(column) for column in grid)


@dataclass(frozen=True, slots=True)
class SnapshotSequence:
    """Ordered, read-only list of board frames indexed ``frame[column][row]``."""

    frames: tuple[Frame, ...] = ()

    @classmethod
    def from_columns(cls, frames: Iterable[Iterable[Iterable[int]]]) -> SnapshotSequence:
        return cls(frames=tuple(_freeze(frame) for frame in frames))

    @classmethod
    def from_rows(cls, frames: Iterable[Iterable[Iterable[int]]]) -> SnapshotSequence:
        """Build from frames written row by row (``frame[row][column]``)."""
        return cls(frames=tuple(_freeze(zip(*frame)) for frame in frames))

    def __len__(self) -> int:
        return len(self.frames)

    def frame(self, index: int) -> Frame:
        if index < 0 or index >= len(self.frames):
            raise BoundsError(index, len(self.frames))
        return self.frames[index]

    def check_dimensions(self, board: BoardDescriptor) -> None:
        """Raise SnapshotFormatError when any frame does not match ``board``."""
        for index, frame in enumerate(self.frames):
            if len(frame) != board.columns:
                raise SnapshotFormatError(
                    f"frame {index} has {len(frame)} columns, board expects {board.columns}"
                )
            for col, column in enumerate(frame):
                if len(column) != board.rows:
                    raise SnapshotFormatError(
                        f"frame {index} column {col} has {len(column)} rows, board expects {board.rows}"
                    )
                for value in column:
                    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                        raise SnapshotFormatError(
                            f"frame {index} column {col} holds invalid cell value {value!r}"
                        )
