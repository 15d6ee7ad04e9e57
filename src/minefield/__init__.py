"""
Minefield game module.

Provides the core rules engine: field generation, cell state,
flood-fill opening, and win/lose detection.
"""
from .cell import (
    Adjacent,
    Cell,
    CellKind,
    CellStatus,
    Empty,
    Mine,
    EMPTY,
    MINE,
)
from .field import (
    Field,
    FieldConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .render import render

__all__ = [
    "Adjacent",
    "Cell",
    "CellKind",
    "CellStatus",
    "Empty",
    "Mine",
    "EMPTY",
    "MINE",
    "Field",
    "FieldConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "render",
]
