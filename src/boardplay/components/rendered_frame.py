from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class CellDraw:
    """One filled, outlined square in arcade coordinates (bottom-left origin)."""

    column: int
    row: int
    value: int
    left: float
    bottom: float
    size: float
    color: Tuple[int, int, int, int]


@dataclass(slots=True)
class RenderedFrame:
    """Draw commands for the frame currently on screen."""

    index: int
    cells: List[CellDraw] = field(default_factory=list)
    readout_text: str = ""
    readout_x: float = 0.0
    readout_y: float = 0.0
