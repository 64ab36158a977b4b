"""
Board - 3x3 cell storage.

Uses int8 board:
    0 = empty
    1 = Mark.X
    2 = Mark.O
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from tac_toe.core.types import EMPTY, ROW_SIZE, Cell, Mark, WinLine
from tac_toe.games.game_rules import all_marked_same, line_values


class Board:
    """
    Lightweight board container owned by a Game.

    Nothing outside the owning Game writes to ``cells``; readers get
    ``snapshot()`` copies.
    """
    __slots__ = ('cells',)

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            cells = np.zeros((ROW_SIZE, ROW_SIZE), dtype=np.int8)
        self.cells = cells

    def place(self, r: int, c: int, mark: Mark) -> None:
        """Write a mark. Callers validate the move first."""
        self.cells[r, c] = mark

    def is_empty(self, r: int, c: int) -> bool:
        return self.cells[r, c] == EMPTY

    def mark_at(self, r: int, c: int) -> Cell:
        value = int(self.cells[r, c])
        return None if value == EMPTY else Mark(value)

    def line_owner(self, line: WinLine) -> Cell:
        """Mark holding all three cells of ``line``, or None."""
        values = line_values(self.cells, line)
        if all_marked_same(values):
            return Mark(int(values[0]))
        return None

    def empty_cells(self) -> np.ndarray:
        """Return empty cell positions as array of shape (N, 2)."""
        return np.argwhere(self.cells == EMPTY)

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the cell codes."""
        snap = self.cells.copy()
        snap.flags.writeable = False
        return snap
