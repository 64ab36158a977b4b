"""
tac_toe - rules engine for 3x3 tic-tac-toe.

The engine owns the board, validates moves, detects a completed line or a
draw, and reports which line won. Rendering, input geometry and networking
are left to the caller.

Quick Start:
    from tac_toe import Game

    game = Game()
    game.apply_move(0, 0)          # X
    game.apply_move(1, 1)          # O
    game.current_outcome()         # None while running

Modules:
    core   - Mark, WinLine, Draw/Win outcomes, move errors
    games  - Board storage, validation, outcome evaluation, Game facade
    utils  - Front-end configuration
    cli    - Terminal front-end
"""

from tac_toe.core import (
    Mark,
    WinLine,
    Draw,
    Win,
    Outcome,
    MoveError,
    OutOfBounds,
    CellMarked,
    GameEnded,
)
from tac_toe.games import Game

__version__ = "1.0.0"

__all__ = [
    # Engine
    "Game",
    # Types
    "Mark",
    "WinLine",
    "Draw",
    "Win",
    "Outcome",
    # Errors
    "MoveError",
    "OutOfBounds",
    "CellMarked",
    "GameEnded",
]
