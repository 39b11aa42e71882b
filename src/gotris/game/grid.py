from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from .pieces import Piece
from .shapes import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    CELL_LOW_BITS,
    CELL_MASK,
    EMPTY_ROW,
    FULL_ROW,
    PADDING_MASK,
    SHAPE_ROWS,
    cell_value,
    pack_cell,
)


Grid = List[int]


def new_grid() -> Grid:
    """Empty visible rows followed by the phantom floor row."""
    return [EMPTY_ROW] * BOARD_HEIGHT + [FULL_ROW]


def collision_row(row: int) -> int:
    """Return `row` with every occupied cell widened to all ones.

    Two colors can have disjoint bit patterns (001 and 110), so testing a
    shape against raw color bits would miss an occupied cell.
    """
    occupied = (row | (row >> 1) | (row >> 2)) & CELL_LOW_BITS
    return (occupied * CELL_MASK) | PADDING_MASK


def is_complete(row: int) -> bool:
    return collision_row(row) == FULL_ROW


def _overlay(piece: Piece, depth: int) -> Iterator[Tuple[int, int]]:
    # (grid row, shape row) pairs from the piece's true bottom upward
    bottom = SHAPE_ROWS - 1 - piece.bottom_gap()
    for offset in range(bottom + 1):
        grid_row = depth - offset
        if grid_row < 0:
            break
        yield grid_row, piece.rows[bottom - offset]


def collides(grid: Grid, piece: Piece, depth: int) -> bool:
    for grid_row, shape_row in _overlay(piece, depth):
        if collision_row(grid[grid_row]) & shape_row:
            return True
    return False


def merge(grid: Grid, piece: Piece, depth: int) -> Grid:
    merged = list(grid)
    for grid_row, shape_row in _overlay(piece, depth):
        merged[grid_row] |= shape_row
    return merged


def clear_complete_rows(grid: Grid) -> int:
    """Remove complete rows in place and return how many were removed."""
    cleared = 0
    row = BOARD_HEIGHT - 1
    while row >= 0:
        if is_complete(grid[row]):
            grid[1 : row + 1] = grid[0:row]
            grid[0] = EMPTY_ROW
            cleared += 1
            # the row above now sits at `row`, look at it again
        else:
            row -= 1
    return cleared


def row_colors(row: int) -> List[int]:
    return [cell_value(row, col) for col in range(BOARD_WIDTH)]


def pack_row(colors: List[int]) -> int:
    packed = PADDING_MASK
    for col, color in enumerate(colors):
        packed |= pack_cell(col, color)
    return packed


def to_array(grid: Grid) -> np.ndarray:
    """Visible cell colors as a (height, width) int8 array."""
    return np.array([row_colors(row) for row in grid[:BOARD_HEIGHT]], dtype=np.int8)
