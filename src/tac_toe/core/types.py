"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Mark: the two player symbols
- WinLine: the eight three-in-a-row lines
- Draw / Win: terminal outcomes
- Grid and turn constants
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union


# ─── Grid & Turn Constants ────────────────────────────────────────────────────

ROW_SIZE = 3
MAX_INDEX = ROW_SIZE - 1

# A full round is one move by each mark; 9 cells fill up on round 5
MAX_TURNS = 5

# Fewer than 5 marks cannot complete a line, i.e. nothing to check before round 3
WIN_CHECK_MIN_TURN = 3

# Board cell code for an unmarked cell
EMPTY = 0

# ──────────────────────────────────────────────────────────────────────────────


class Mark(IntEnum):
    """Player symbol. The value doubles as the board cell code."""

    X = 1
    O = 2

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


FIRST_MARK = Mark.X

# A cell is either empty (None) or holds a Mark
Cell = Optional[Mark]
CellCoord = Tuple[int, int]


class WinLine(Enum):
    """The eight lines that end the game when uniformly marked."""

    ROW_0 = ((0, 0), (0, 1), (0, 2))
    ROW_1 = ((1, 0), (1, 1), (1, 2))
    ROW_2 = ((2, 0), (2, 1), (2, 2))
    COLUMN_0 = ((0, 0), (1, 0), (2, 0))
    COLUMN_1 = ((0, 1), (1, 1), (2, 1))
    COLUMN_2 = ((0, 2), (1, 2), (2, 2))
    DIAGONAL_LEFT = ((0, 0), (1, 1), (2, 2))
    DIAGONAL_RIGHT = ((2, 0), (1, 1), (0, 2))

    @property
    def cells(self) -> Tuple[CellCoord, CellCoord, CellCoord]:
        return self.value


@dataclass(frozen=True)
class Draw:
    """Board filled without a completed line."""


@dataclass(frozen=True)
class Win:
    """A completed line."""

    mark: Mark
    line: WinLine


Outcome = Union[Draw, Win]
