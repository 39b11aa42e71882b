"""Game module for Gotris.

Exports the falling-block engine and supporting types:
- Field: Playfield state machine (gravity, moves, row clearing, scoring)
- Piece: Packed four-row shape with shift and rotation
- TetrominoType / TileColor: Canonical shapes and their color codes
- ScoringRules: Quadratic line scoring and level derivation
- Action / apply_action: User actions and their dispatch onto a field
"""

from .shapes import BOARD_HEIGHT, BOARD_WIDTH, TetrominoType, TileColor
from .pieces import Piece
from .grid import collides, collision_row, new_grid
from .rules import ScoringRules
from .core import Action, Field, GameConfig, PieceState, apply_action, parse_action

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "TetrominoType",
    "TileColor",
    "Piece",
    "collides",
    "collision_row",
    "new_grid",
    "ScoringRules",
    "Action",
    "Field",
    "GameConfig",
    "PieceState",
    "apply_action",
    "parse_action",
]
