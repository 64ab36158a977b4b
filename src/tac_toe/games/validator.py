"""
Move validation.

Checks run bounds first, then game-over, then occupancy, so an ended game
reports GameEnded for any in-bounds cell regardless of its contents.
"""

from __future__ import annotations

from typing import Optional

from tac_toe.core.errors import CellMarked, GameEnded, OutOfBounds
from tac_toe.core.types import MAX_INDEX, Outcome
from tac_toe.games.game_state import Board


def check_index_bounds(r: int, c: int) -> None:
    """Raise OutOfBounds for the first coordinate outside [0, MAX_INDEX]."""
    for index in (r, c):
        if not 0 <= index <= MAX_INDEX:
            raise OutOfBounds(index, MAX_INDEX)


def validate_move(board: Board, outcome: Optional[Outcome], r: int, c: int) -> None:
    """
    Raise a MoveError if the move may not be applied.

    Args:
        board: Current board
        outcome: Current outcome, None while the game is running
        r, c: Target cell
    """
    check_index_bounds(r, c)

    if outcome is not None:
        raise GameEnded()

    if not board.is_empty(r, c):
        raise CellMarked(r, c)
