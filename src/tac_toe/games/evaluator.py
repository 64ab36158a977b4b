"""
Outcome evaluation after a mark is placed.
"""

from __future__ import annotations

from typing import Optional

from tac_toe.core.types import MAX_TURNS, WIN_CHECK_MIN_TURN, Draw, Outcome, Win
from tac_toe.games.game_rules import CELL_LINES
from tac_toe.games.game_state import Board


def evaluate_outcome(board: Board, r: int, c: int, turn_number: int) -> Optional[Outcome]:
    """
    Return the outcome produced by the mark just placed at (r, c), or None.

    Only lines through (r, c) are checked, in CELL_LINES order. If the move
    completes more than one line, the first one in that order is reported.
    """
    if turn_number < WIN_CHECK_MIN_TURN:
        return None

    for line in CELL_LINES[(r, c)]:
        owner = board.line_owner(line)
        if owner is not None:
            return Win(owner, line)

    if turn_number == MAX_TURNS:
        return Draw()

    return None
