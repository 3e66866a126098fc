"""Reading a starting position from text."""

from __future__ import annotations

from typing import TextIO

from .core import SIZE, Position
from .pieces import COLORS, PIECE_KINDS, make_piece


def parse_position(text: str) -> Position:
    """Build a position from 64 whitespace-separated two-letter cells, row by row.

    Each cell is a kind letter followed by a colour letter; any other cell,
    such as ``--``, is kept on the grid without a piece. Text after the
    64th cell is ignored.
    """
    cells = text.split()[: SIZE * SIZE]
    if len(cells) < SIZE * SIZE:
        raise ValueError(f"expected {SIZE * SIZE} cells, found {len(cells)}")
    rows = [list(row) for row in zip(*[iter(cells)] * SIZE)]
    position = Position(rows)
    for row, line in enumerate(position.grid):
        for col, cell in enumerate(line):
            kind, color = cell
            if kind in PIECE_KINDS and color in COLORS:
                position.add_piece(make_piece(color, kind, position, row, col))
    return position


def read_position(stream: TextIO) -> Position:
    """Read a position from a text stream."""
    return parse_position(stream.read())