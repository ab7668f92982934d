"""Exceptions raised by the playback viewer."""


class BoundsError(IndexError):
    """A frame was requested at a cursor outside ``[0, length)``."""

    def __init__(self, cursor: int, length: int) -> None:
        super().__init__(f"cursor {cursor} outside snapshot range [0, {length})")
        self.cursor = cursor
        self.length = length


class SnapshotFormatError(ValueError):
    """Snapshot input could not be parsed or does not match the board."""
