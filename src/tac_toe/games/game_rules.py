"""
Line table and NumPy helpers for win detection.

Only the lines through the last-placed cell can have just been completed,
so each cell maps to the 2-4 lines that pass through it. The lines are listed
in the order they are checked: row, column, left diagonal, right diagonal.
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np

from tac_toe.core.types import EMPTY, MAX_INDEX, ROW_SIZE, CellCoord, WinLine


_COLUMNS = (WinLine.COLUMN_0, WinLine.COLUMN_1, WinLine.COLUMN_2)
_ROWS = (WinLine.ROW_0, WinLine.ROW_1, WinLine.ROW_2)


def in_bounds(r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    return 0 <= r <= MAX_INDEX and 0 <= c <= MAX_INDEX


def _lines_through(r: int, c: int) -> Tuple[WinLine, ...]:
    lines = [_ROWS[r], _COLUMNS[c]]
    if r == c:
        lines.append(WinLine.DIAGONAL_LEFT)
    if r + c == MAX_INDEX:
        lines.append(WinLine.DIAGONAL_RIGHT)
    return tuple(lines)


# Pre-computed lines through each cell (center: 4, corners: 3, edges: 2)
CELL_LINES: Dict[CellCoord, Tuple[WinLine, ...]] = {
    (r, c): _lines_through(r, c)
    for r in range(ROW_SIZE)
    for c in range(ROW_SIZE)
}

# Pre-computed flat indices of each line into a raveled 3x3 board
LINE_INDICES: Dict[WinLine, np.ndarray] = {
    line: np.array([r * ROW_SIZE + c for r, c in line.cells], dtype=np.intp)
    for line in WinLine
}


def line_values(board: np.ndarray, line: WinLine) -> np.ndarray:
    """Cell codes along a line, in the line's cell order."""
    return board.ravel()[LINE_INDICES[line]]


def all_marked_same(values: np.ndarray) -> bool:
    """
    Return True if:
    - first value is a mark (not EMPTY)
    - all values equal the first
    """
    first = values[0]
    if first == EMPTY:
        return False

    return bool(np.all(values == first))
