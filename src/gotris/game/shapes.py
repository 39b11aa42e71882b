"""
Board geometry and the canonical shape table.

Rows are packed integers: 10 cells of 3 bits each, framed by one padding
bit on either side (32 bits total). A cell holds a color code, 0 meaning
empty. Shape rows share the exact same layout as board rows so the two can
be AND'd and OR'd against each other directly.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Tuple


BOARD_WIDTH = 10
BOARD_HEIGHT = 20
CELL_BITS = 3
SHAPE_ROWS = 4
ROW_BITS = BOARD_WIDTH * CELL_BITS + 2

CELL_MASK = (1 << CELL_BITS) - 1
FULL_ROW = (1 << ROW_BITS) - 1
PADDING_MASK = (1 << (ROW_BITS - 1)) | 1
EMPTY_ROW = PADDING_MASK

# Leftmost box column of a freshly spawned shape
SPAWN_COLUMN = 3


def cell_shift(col: int) -> int:
    """Bit offset of the lowest bit of column `col` (0 is the leftmost)."""
    return 1 + CELL_BITS * (BOARD_WIDTH - 1 - col)


def cell_value(row: int, col: int) -> int:
    return (row >> cell_shift(col)) & CELL_MASK


def pack_cell(col: int, color: int) -> int:
    return (color & CELL_MASK) << cell_shift(col)


# One low bit per cell, used to normalise occupied cells
CELL_LOW_BITS = sum(1 << cell_shift(c) for c in range(BOARD_WIDTH))
LEFT_EDGE_MASK = CELL_MASK << cell_shift(0)
RIGHT_EDGE_MASK = CELL_MASK << cell_shift(BOARD_WIDTH - 1)


class TileColor(IntEnum):
    """Cell color codes, following the Windows 98 Tetris palette."""
    TRANSPARENT = 0
    BLUE = 1
    CYAN = 2
    GREY = 3
    YELLOW = 4
    GREEN = 5
    VIOLET = 6
    RED = 7


class TetrominoType(IntEnum):
    L_LEFT = 0
    L_RIGHT = 1
    SQUARE = 2
    PIPE = 3
    TRI_POINT = 4
    S = 5
    Z = 6


Block = Tuple[int, int, int, int]


# Cells are read left to right: padding, columns 0..9, padding.
BASE_SHAPES: Dict[TetrominoType, Tuple[Block, TileColor]] = {
    # _|
    TetrominoType.L_LEFT: (
        (
            0,
            0b0_000_000_000_000_000_110_000_000_000_000_0,
            0b0_000_000_000_000_000_110_000_000_000_000_0,
            0b0_000_000_000_000_110_110_000_000_000_000_0,
        ),
        TileColor.VIOLET,
    ),
    # |_
    TetrominoType.L_RIGHT: (
        (
            0,
            0b0_000_000_000_000_100_000_000_000_000_000_0,
            0b0_000_000_000_000_100_000_000_000_000_000_0,
            0b0_000_000_000_000_100_100_000_000_000_000_0,
        ),
        TileColor.YELLOW,
    ),
    TetrominoType.SQUARE: (
        (
            0,
            0b0_000_000_000_000_010_010_000_000_000_000_0,
            0b0_000_000_000_000_010_010_000_000_000_000_0,
            0,
        ),
        TileColor.CYAN,
    ),
    TetrominoType.PIPE: (
        (
            0b0_000_000_000_000_000_111_000_000_000_000_0,
            0b0_000_000_000_000_000_111_000_000_000_000_0,
            0b0_000_000_000_000_000_111_000_000_000_000_0,
            0b0_000_000_000_000_000_111_000_000_000_000_0,
        ),
        TileColor.RED,
    ),
    # _-_
    TetrominoType.TRI_POINT: (
        (
            0,
            0b0_000_000_000_000_011_000_000_000_000_000_0,
            0b0_000_000_000_011_011_011_000_000_000_000_0,
            0,
        ),
        TileColor.GREY,
    ),
    TetrominoType.S: (
        (
            0,
            0b0_000_000_000_000_001_001_000_000_000_000_0,
            0b0_000_000_000_001_001_000_000_000_000_000_0,
            0,
        ),
        TileColor.BLUE,
    ),
    TetrominoType.Z: (
        (
            0,
            0b0_000_000_000_101_101_000_000_000_000_000_0,
            0b0_000_000_000_000_101_101_000_000_000_000_0,
            0,
        ),
        TileColor.GREEN,
    ),
}


def base_rows(kind: TetrominoType) -> List[int]:
    return list(BASE_SHAPES[kind][0])


def base_color(kind: TetrominoType) -> TileColor:
    return BASE_SHAPES[kind][1]
