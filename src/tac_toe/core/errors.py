"""
Move rejection errors.

All of these are raised before the board is touched, so a caller can catch
them, report the message, and keep using the same game.
"""

from __future__ import annotations


class MoveError(Exception):
    """Base class for rejected moves."""


class OutOfBounds(MoveError):
    def __init__(self, index: int, max_index: int):
        self.index = index
        self.max = max_index
        super().__init__(f"Cell index {index} out of bounds; max index is {max_index}")


class CellMarked(MoveError):
    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__("Cell is already marked!")


class GameEnded(MoveError):
    def __init__(self):
        super().__init__("Game already finished!")
