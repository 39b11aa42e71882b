from __future__ import annotations

import random

import pytest

from gotris.game import Piece, TetrominoType, TileColor
from gotris.game.pieces import LEFT, RIGHT
from gotris.game.shapes import cell_value

NON_SQUARE = [k for k in TetrominoType if k != TetrominoType.SQUARE]


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_shift_left_then_right_restores(kind):
    piece = Piece.from_kind(kind)
    original = list(piece.rows)
    assert piece.shift(LEFT)
    assert piece.rows != original
    assert piece.shift(RIGHT)
    assert piece.rows == original


def test_shift_is_blocked_at_the_left_edge():
    piece = Piece.from_kind(TetrominoType.PIPE)
    moves = 0
    while piece.shift(LEFT):
        moves += 1
    assert moves == 5
    blocked = list(piece.rows)
    assert not piece.shift(LEFT)
    assert piece.rows == blocked
    assert piece.cells() == [(r, 0) for r in range(4)]


def test_shift_is_blocked_at_the_right_edge():
    piece = Piece.from_kind(TetrominoType.S)
    moves = 0
    while piece.shift(RIGHT):
        moves += 1
    # S spans columns 3..5 at spawn
    assert moves == 4
    assert piece.touches_right()
    assert not piece.touches_left()


@pytest.mark.parametrize("kind", NON_SQUARE)
def test_four_rotations_restore_the_shape(kind):
    piece = Piece.from_kind(kind)
    original = list(piece.rows)
    piece.rotate()
    assert piece.rows != original
    for _ in range(3):
        piece.rotate()
    assert piece.rows == original


@pytest.mark.parametrize("kind", NON_SQUARE)
def test_rotation_keeps_color_and_cell_count(kind):
    piece = Piece.from_kind(kind)
    piece.rotate()
    cells = piece.cells()
    assert len(cells) == 4
    assert all(cell_value(piece.rows[r], c) == piece.color for r, c in cells)


def test_square_is_rotation_invariant():
    piece = Piece.from_kind(TetrominoType.SQUARE)
    original = list(piece.rows)
    for _ in range(5):
        piece.rotate()
        assert piece.rows == original


def test_rotation_is_clockwise():
    piece = Piece.from_kind(TetrominoType.TRI_POINT)
    assert sorted(piece.cells()) == [(1, 4), (2, 3), (2, 4), (2, 5)]
    piece.rotate()
    # the point now faces right
    assert sorted(piece.cells()) == [(0, 3), (1, 3), (1, 4), (2, 3)]


def test_pipe_rotates_to_a_horizontal_bar_on_the_bottom_row():
    piece = Piece.from_kind(TetrominoType.PIPE)
    piece.rotate()
    assert piece.cells() == [(3, 5), (3, 6), (3, 7), (3, 8)]
    assert piece.bottom_gap() == 0
    assert piece.height() == 1


def test_rotation_is_pushed_back_inside_the_right_edge():
    piece = Piece.from_kind(TetrominoType.PIPE)
    while piece.shift(RIGHT):
        pass
    piece.rotate()
    assert piece.cells() == [(3, 6), (3, 7), (3, 8), (3, 9)]


@pytest.mark.parametrize(
    "kind,gap,height",
    [
        (TetrominoType.PIPE, 0, 4),
        (TetrominoType.L_LEFT, 0, 3),
        (TetrominoType.L_RIGHT, 0, 3),
        (TetrominoType.SQUARE, 1, 2),
        (TetrominoType.TRI_POINT, 1, 2),
        (TetrominoType.S, 1, 2),
        (TetrominoType.Z, 1, 2),
    ],
)
def test_bottom_gap_and_height(kind, gap, height):
    piece = Piece.from_kind(kind)
    assert piece.bottom_gap() == gap
    assert piece.height() == height


def test_copy_is_independent():
    piece = Piece.from_kind(TetrominoType.Z)
    clone = piece.copy()
    clone.shift(LEFT)
    assert clone.rows != piece.rows
    assert clone.color == piece.color == TileColor.GREEN


def test_pick_uses_the_given_generator():
    a = [Piece.pick(random.Random(7)).kind for _ in range(3)]
    b = [Piece.pick(random.Random(7)).kind for _ in range(3)]
    assert a == b
    rng = random.Random(1234)
    seen = {Piece.pick(rng).kind for _ in range(300)}
    assert seen == set(TetrominoType)
