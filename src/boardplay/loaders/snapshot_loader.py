"""Readers for the board snapshot files written by the simulation.

The simulation emits a small JavaScript file::

    const board = { x_size: 3, y_size: 2 };
    let tile_snapshots = [];
    tile_snapshots.push([
      [0, 1],
      [0, 0],
      [2, 0],
    ]);

with one ``push`` block per frame, each listing the board column by column.
A JSON document with ``board`` and ``tile_snapshots`` keys holding the same
data is accepted too.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.components.snapshot_sequence import SnapshotSequence
from boardplay.errors import SnapshotFormatError

logger = logging.getLogger(__name__)

_BOARD_RE = re.compile(
    r"board\s*=\s*\{\s*x_size\s*:\s*(-?\d+)\s*,\s*y_size\s*:\s*(-?\d+)\s*,?\s*\}"
)
_PUSH_RE = re.compile(r"tile_snapshots\.push\(\s*(\[.*?\])\s*\)\s*;", re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r",(\s*\])")


def parse_snapshot_script(text: str) -> tuple[BoardDescriptor, SnapshotSequence]:
    match = _BOARD_RE.search(text)
    if match is None:
        raise SnapshotFormatError("board header 'const board = { x_size: .., y_size: .. }' not found")
    board = _board_from_values(int(match.group(1)), int(match.group(2)))

    frames: list[Any] = []
    for number, block in enumerate(_PUSH_RE.findall(text)):
        literal = _TRAILING_COMMA_RE.sub(r"\1", block)
        try:
            frames.append(json.loads(literal))
        except json.JSONDecodeError as exc:
            raise SnapshotFormatError(f"snapshot {number} is not a valid array literal: {exc}") from exc
    return board, _build_sequence(board, frames)


def parse_snapshot_json(text: str) -> tuple[BoardDescriptor, SnapshotSequence]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotFormatError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SnapshotFormatError("expected a JSON object with 'board' and 'tile_snapshots'")
    board_data = data.get("board")
    if not isinstance(board_data, dict):
        raise SnapshotFormatError("missing 'board' object")
    sizes = [board_data.get("x_size"), board_data.get("y_size")]
    if any(not isinstance(size, int) or isinstance(size, bool) for size in sizes):
        raise SnapshotFormatError(f"board needs integer x_size and y_size, got {sizes[0]!r} and {sizes[1]!r}")
    board = _board_from_values(sizes[0], sizes[1])
    frames = data.get("tile_snapshots", [])
    if not isinstance(frames, list):
        raise SnapshotFormatError("'tile_snapshots' must be a list")
    return board, _build_sequence(board, frames)


def load_snapshots(path: str | Path) -> tuple[BoardDescriptor, SnapshotSequence]:
    """Read a ``data.js`` script or ``.json`` file from disk."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotFormatError(f"cannot read {path}: {exc}") from exc
    if path.suffix.lower() == ".json":
        board, sequence = parse_snapshot_json(text)
    else:
        board, sequence = parse_snapshot_script(text)
    logger.info(
        "Loaded %d snapshots of a %dx%d board from %s",
        len(sequence),
        board.x_size,
        board.y_size,
        path,
    )
    return board, sequence


def _board_from_values(x_size: int, y_size: int) -> BoardDescriptor:
    try:
        return BoardDescriptor(x_size=x_size, y_size=y_size)
    except ValueError as exc:
        raise SnapshotFormatError(str(exc)) from exc


def _build_sequence(board: BoardDescriptor, frames: list[Any]) -> SnapshotSequence:
    for index, frame in enumerate(frames):
        if not isinstance(frame, list) or not all(isinstance(column, list) for column in frame):
            raise SnapshotFormatError(f"frame {index} must be a list of columns")
    sequence = SnapshotSequence.from_columns(frames)
    sequence.check_dimensions(board)
    return sequence
