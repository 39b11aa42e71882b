from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Tuple

from .shapes import (
    BOARD_WIDTH,
    CELL_BITS,
    LEFT_EDGE_MASK,
    RIGHT_EDGE_MASK,
    SHAPE_ROWS,
    TetrominoType,
    TileColor,
    base_color,
    base_rows,
    cell_value,
    pack_cell,
)


LEFT = -1
RIGHT = 1


@dataclass
class Piece:
    """A falling shape: four packed rows sharing a single color."""

    kind: TetrominoType
    color: TileColor
    rows: List[int] = field(default_factory=lambda: [0] * SHAPE_ROWS)

    @classmethod
    def from_kind(cls, kind: TetrominoType) -> "Piece":
        return cls(kind=kind, color=base_color(kind), rows=base_rows(kind))

    @classmethod
    def pick(cls, rng: random.Random) -> "Piece":
        """Pick one of the canonical shapes uniformly using `rng`."""
        kind = rng.choice(list(TetrominoType))
        return cls.from_kind(kind)

    def copy(self) -> "Piece":
        return Piece(self.kind, self.color, list(self.rows))

    def touches_left(self) -> bool:
        return any(row & LEFT_EDGE_MASK for row in self.rows)

    def touches_right(self) -> bool:
        return any(row & RIGHT_EDGE_MASK for row in self.rows)

    def shift(self, direction: int) -> bool:
        """Move one cell left (negative) or right (positive).

        Leaves the piece untouched and returns False when it already sits
        against that edge of the board.
        """
        if direction < 0:
            if self.touches_left():
                return False
            self.rows = [row << CELL_BITS for row in self.rows]
        elif direction > 0:
            if self.touches_right():
                return False
            self.rows = [row >> CELL_BITS for row in self.rows]
        else:
            return False
        return True

    def cells(self) -> List[Tuple[int, int]]:
        """Occupied (row, column) pairs, columns in board coordinates."""
        return [
            (r, c)
            for r, row in enumerate(self.rows)
            for c in range(BOARD_WIDTH)
            if cell_value(row, c)
        ]

    def bottom_gap(self) -> int:
        gap = 0
        for row in reversed(self.rows):
            if row:
                break
            gap += 1
        return gap

    def top_row(self) -> int:
        for r, row in enumerate(self.rows):
            if row:
                return r
        return SHAPE_ROWS

    def height(self) -> int:
        return max(0, SHAPE_ROWS - self.bottom_gap() - self.top_row())

    def rotate(self) -> None:
        """Rotate 90 degrees clockwise in place.

        The occupied extent keeps its leftmost column and the box row of its
        bottom edge, and is pushed back left if it would overrun the board.
        """
        if self.kind == TetrominoType.SQUARE:
            return
        cells = self.cells()
        if not cells:
            return
        min_col = min(c for _, c in cells)
        max_col = max(c for _, c in cells)
        min_row = min(r for r, _ in cells)
        max_row = max(r for r, _ in cells)

        new_height = max_col - min_col + 1
        new_width = max_row - min_row + 1
        bottom = max(max_row, new_height - 1)
        top = bottom - (new_height - 1)
        kick = max(0, min_col + new_width - BOARD_WIDTH)

        rotated = [0] * SHAPE_ROWS
        for r, c in cells:
            rotated[top + c - min_col] |= pack_cell(min_col - kick + max_row - r, self.color)
        self.rows = rotated
