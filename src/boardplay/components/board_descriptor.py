from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class BoardDescriptor:
    """Board dimensions shared by every snapshot in the session."""
    x_size: int
    y_size: int

    def __post_init__(self) -> None:
        if self.x_size <= 0 or self.y_size <= 0:
            raise ValueError(f"board size must be positive, got {self.x_size}x{self.y_size}")

    @property
    def columns(self) -> int:
        return self.x_size

    @property
    def rows(self) -> int:
        return self.y_size
