"""
Game - the public engine facade.

Every move runs validator -> board write -> outcome evaluation -> turn advance.
The turn is not advanced by a move that ends the game.
"""

from __future__ import annotations

import logging
import operator
from typing import List, Optional, Tuple

import numpy as np

from tac_toe.core.types import FIRST_MARK, ROW_SIZE, Cell, CellCoord, Mark, Outcome
from tac_toe.games.evaluator import evaluate_outcome
from tac_toe.games.game_rules import in_bounds
from tac_toe.games.game_state import Board
from tac_toe.games.validator import check_index_bounds, validate_move
from tac_toe.utils.config import CELL_STRINGS

logger = logging.getLogger(__name__)


class Game:
    """
    One 3x3 game, from empty board to Draw or Win.

    Not thread-safe: a single owner serializes all calls.
    """

    __slots__ = ('_board', '_turn_number', '_turn_of', '_first_mark', '_outcome', '_moves')

    def __init__(self, first_mark: Mark = FIRST_MARK):
        self._board = Board()
        self._turn_number = 1
        self._first_mark = first_mark
        self._turn_of = first_mark
        self._outcome: Optional[Outcome] = None
        self._moves: List[CellCoord] = []

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, row: int, col: int) -> Optional[Outcome]:
        """
        Place the current mover's mark at (row, col).

        Returns:
            The outcome if this move ended the game, else None.

        Raises:
            OutOfBounds: a coordinate is outside [0, 2]
            GameEnded: the game already has an outcome
            CellMarked: the cell is occupied
        """
        row, col = operator.index(row), operator.index(col)
        validate_move(self._board, self._outcome, row, col)

        mark = self._turn_of
        self._board.place(row, col, mark)
        self._moves.append((row, col))
        logger.debug("Turn %d: %s marked (%d,%d)", self._turn_number, mark.name, row, col)

        outcome = evaluate_outcome(self._board, row, col, self._turn_number)
        if outcome is not None:
            self._outcome = outcome
            logger.debug("Game ended on turn %d: %s", self._turn_number, outcome)
            return outcome

        self._advance_turn()
        return None

    def _advance_turn(self) -> None:
        if self._turn_of is self._first_mark:
            self._turn_of = self._first_mark.other
        else:
            self._turn_of = self._first_mark
            self._turn_number += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def turn_number(self) -> int:
        """Full rounds, starting at 1."""
        return self._turn_number

    @property
    def moves_played(self) -> Tuple[CellCoord, ...]:
        return tuple(self._moves)

    def current_mover(self) -> Mark:
        return self._turn_of

    def board_snapshot(self) -> np.ndarray:
        return self._board.snapshot()

    def current_outcome(self) -> Optional[Outcome]:
        return self._outcome

    def has_ended(self) -> bool:
        return self._outcome is not None

    def is_cell_marked(self, row: int, col: int) -> bool:
        """False for out-of-bounds coordinates instead of raising."""
        row, col = operator.index(row), operator.index(col)
        if not in_bounds(row, col):
            return False
        return not self._board.is_empty(row, col)

    def cell(self, row: int, col: int) -> Cell:
        row, col = operator.index(row), operator.index(col)
        check_index_bounds(row, col)
        return self._board.mark_at(row, col)

    def valid_moves(self) -> np.ndarray:
        """Return empty cell positions as array of shape (N, 2)."""
        if self.has_ended():
            return np.empty((0, 2), dtype=np.intp)
        return self._board.empty_cells()

    def state_string(self) -> str:
        board = self._board.cells
        lines = ["╭───┬───┬───╮"]
        for i in range(ROW_SIZE):
            row = "│ " + " │ ".join(CELL_STRINGS[int(board[i, j])] for j in range(ROW_SIZE)) + " │"
            lines.append(row)
            if i < ROW_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
