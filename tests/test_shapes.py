from __future__ import annotations

import pytest

from gotris.game.shapes import (
    BASE_SHAPES,
    BOARD_WIDTH,
    EMPTY_ROW,
    FULL_ROW,
    LEFT_EDGE_MASK,
    PADDING_MASK,
    RIGHT_EDGE_MASK,
    SPAWN_COLUMN,
    TetrominoType,
    TileColor,
    cell_shift,
    cell_value,
    pack_cell,
)


def test_row_layout():
    assert FULL_ROW == 0xFFFFFFFF
    assert PADDING_MASK == (1 << 31) | 1
    assert EMPTY_ROW == PADDING_MASK
    assert cell_shift(0) == 28
    assert cell_shift(BOARD_WIDTH - 1) == 1
    assert LEFT_EDGE_MASK == 0b111 << 28
    assert RIGHT_EDGE_MASK == 0b111 << 1


def test_pack_cell_reads_back():
    row = EMPTY_ROW | pack_cell(0, TileColor.RED) | pack_cell(9, TileColor.BLUE)
    assert cell_value(row, 0) == TileColor.RED
    assert cell_value(row, 9) == TileColor.BLUE
    assert all(cell_value(row, c) == 0 for c in range(1, 9))


def test_seven_distinct_colors():
    colors = {color for _, color in BASE_SHAPES.values()}
    assert len(BASE_SHAPES) == 7
    assert len(colors) == 7
    assert TileColor.TRANSPARENT not in colors


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_shape_cells_share_color_and_stay_in_spawn_box(kind):
    rows, color = BASE_SHAPES[kind]
    assert len(rows) == 4
    occupied = []
    for r, row in enumerate(rows):
        assert row & PADDING_MASK == 0
        for c in range(BOARD_WIDTH):
            value = cell_value(row, c)
            if value:
                assert value == color
                occupied.append((r, c))
    assert len(occupied) == 4
    assert all(SPAWN_COLUMN <= c < SPAWN_COLUMN + 4 for _, c in occupied)
