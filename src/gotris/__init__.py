"""Gotris: a falling-block puzzle engine on bit-packed rows."""

from .game import Action, Field, GameConfig, Piece, ScoringRules, TetrominoType, TileColor

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Field",
    "GameConfig",
    "Piece",
    "ScoringRules",
    "TetrominoType",
    "TileColor",
]
