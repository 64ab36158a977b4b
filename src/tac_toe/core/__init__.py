"""
Core module - fundamental types, constants, and errors.

This module provides the building blocks used throughout the engine.
"""

from tac_toe.core.types import (
    Mark,
    Cell,
    CellCoord,
    WinLine,
    Draw,
    Win,
    Outcome,
    ROW_SIZE,
    MAX_INDEX,
    MAX_TURNS,
    WIN_CHECK_MIN_TURN,
    EMPTY,
    FIRST_MARK,
)
from tac_toe.core.errors import MoveError, OutOfBounds, CellMarked, GameEnded

__all__ = [
    # Types
    "Mark",
    "Cell",
    "CellCoord",
    "WinLine",
    "Draw",
    "Win",
    "Outcome",
    # Constants
    "ROW_SIZE",
    "MAX_INDEX",
    "MAX_TURNS",
    "WIN_CHECK_MIN_TURN",
    "EMPTY",
    "FIRST_MARK",
    # Errors
    "MoveError",
    "OutOfBounds",
    "CellMarked",
    "GameEnded",
]
