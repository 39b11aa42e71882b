from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional, Tuple

from .grid import Grid, clear_complete_rows, collides, merge, new_grid
from .pieces import LEFT, RIGHT, Piece
from .rules import ScoringRules
from .shapes import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    SHAPE_ROWS,
    SPAWN_COLUMN,
    TetrominoType,
    TileColor,
    cell_value,
)

logger = logging.getLogger(__name__)


CellCallback = Callable[[int, int, bool, TileColor], None]

PREVIEW_WIDTH = 4


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    EXIT = 6


class PieceState(Enum):
    EMPTY = "empty"
    SPAWNED = "spawned"
    FROZEN = "frozen"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    base_tick_ms: int = 800
    tick_step_ms: int = 70
    min_tick_ms: int = 100

    def tick_interval(self, level: int) -> int:
        """Gravity interval in milliseconds for a driving loop at `level`."""
        return max(self.min_tick_ms, self.base_tick_ms - level * self.tick_step_ms)


class Field:
    """Playfield state machine.

    The field knows nothing about time: a driving loop calls `advance()` once
    per gravity tick and forwards user actions to the mutators in between,
    all from the same thread.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.grid: Grid = new_grid()
        self.score = 0
        self.lines_cleared_total = 0
        self.state = PieceState.EMPTY
        self.active: Optional[Piece] = None
        self.upcoming: Optional[Piece] = None
        self.depth = 0

    # State transitions

    def spawn(self) -> None:
        """Promote the upcoming piece to active and queue a new one."""
        if self.upcoming is None:
            self.upcoming = Piece.pick(self.rng)
        self.active = self.upcoming
        self.upcoming = Piece.pick(self.rng)
        self.depth = 0
        self.state = PieceState.SPAWNED
        logger.debug("spawned %s, next %s", self.active.kind.name, self.upcoming.kind.name)

    def freeze(self) -> Tuple[int, bool]:
        """Fold the active piece into the grid and clear complete rows.

        Returns (rows cleared, game over). The game is over when part of the
        piece was still above the board when it came to rest.
        """
        piece = self.active
        if self.state is not PieceState.SPAWNED or piece is None:
            return 0, False
        game_over = self.depth - (piece.height() - 1) < 0
        self.grid = merge(self.grid, piece, self.depth)
        self.active = None
        self.state = PieceState.FROZEN

        cleared = clear_complete_rows(self.grid)
        self.lines_cleared_total += cleared
        self.score += self.rules.score_for_lines(cleared)
        logger.debug("froze %s at depth %d, cleared %d", piece.kind.name, self.depth, cleared)
        if game_over:
            logger.info("game over, score %d", self.score)
        return cleared, game_over

    # Ticks

    def advance(self) -> Tuple[Grid, bool]:
        """Run one gravity tick and return (grid snapshot, game over)."""
        if self.upcoming is None:
            self.upcoming = Piece.pick(self.rng)
        if self.state is not PieceState.SPAWNED:
            self.spawn()
            return list(self.grid), False
        if not collides(self.grid, self.active, self.depth + 1):
            self.depth += 1
            return self.current(), False
        _, game_over = self.freeze()
        return list(self.grid), game_over

    def current(self) -> Grid:
        if self.state is not PieceState.SPAWNED or self.active is None:
            return list(self.grid)
        return merge(self.grid, self.active, self.depth)

    # Moves

    def _commit(self, tentative: Piece) -> bool:
        if collides(self.grid, tentative, self.depth):
            return False
        self.active = tentative
        return True

    def move_horizontal(self, direction: int) -> bool:
        if self.state is not PieceState.SPAWNED or self.active is None:
            return False
        tentative = self.active.copy()
        if not tentative.shift(direction):
            return False
        return self._commit(tentative)

    def move_left(self) -> bool:
        return self.move_horizontal(LEFT)

    def move_right(self) -> bool:
        return self.move_horizontal(RIGHT)

    def rotate(self) -> bool:
        if self.state is not PieceState.SPAWNED or self.active is None:
            return False
        if self.active.kind == TetrominoType.SQUARE:
            return True
        tentative = self.active.copy()
        if tentative.touches_left():
            tentative.shift(RIGHT)
        elif tentative.touches_right():
            tentative.shift(LEFT)
        tentative.rotate()
        return self._commit(tentative)

    def soft_drop(self) -> bool:
        if self.state is not PieceState.SPAWNED or self.active is None:
            return False
        if collides(self.grid, self.active, self.depth + 1):
            return False
        self.depth += 1
        return True

    def hard_drop(self) -> None:
        while self.soft_drop():
            pass

    # Presentation surface

    def render_board(self, callback: CellCallback) -> None:
        grid = self.current()
        for row in range(BOARD_HEIGHT):
            for col in range(BOARD_WIDTH):
                color = TileColor(cell_value(grid[row], col))
                callback(row, col, col == BOARD_WIDTH - 1, color)

    def render_preview(self, callback: CellCallback) -> None:
        rows = self.upcoming.rows if self.upcoming is not None else [0] * SHAPE_ROWS
        for row in range(SHAPE_ROWS):
            for col in range(PREVIEW_WIDTH):
                color = TileColor(cell_value(rows[row], SPAWN_COLUMN + col))
                callback(row, col, col == PREVIEW_WIDTH - 1, color)

    def display_score(self) -> str:
        return self.rules.display_score(self.score)

    def level(self) -> int:
        return self.rules.level(self.score)


TEXT_TO_ACTION = {
    "a": Action.LEFT,
    "left": Action.LEFT,
    "d": Action.RIGHT,
    "right": Action.RIGHT,
    "s": Action.SOFT_DROP,
    "down": Action.SOFT_DROP,
    "w": Action.ROTATE,
    "rotate": Action.ROTATE,
    " ": Action.HARD_DROP,
    "e": Action.EXIT,
    "exit": Action.EXIT,
}


def parse_action(text: str) -> Action:
    """Map a typed command to an action; unknown input maps to NONE."""
    key = text.rstrip("\r\n")
    if key.strip():
        key = key.strip().lower()
    elif key:
        key = " "
    return TEXT_TO_ACTION.get(key, Action.NONE)


def apply_action(field: Field, action: Action) -> bool:
    """Forward `action` to `field`; returns whether the move was accepted."""
    if action == Action.LEFT:
        return field.move_left()
    if action == Action.RIGHT:
        return field.move_right()
    if action == Action.ROTATE:
        return field.rotate()
    if action == Action.SOFT_DROP:
        return field.soft_drop()
    if action == Action.HARD_DROP:
        depth = field.depth
        field.hard_drop()
        return field.depth != depth
    return False
