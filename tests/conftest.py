"""
Shared test fixtures for tac_toe tests.

Design principles:
- Move sequences as plain (row, col) lists
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, List, Sequence, Tuple

import pytest

from tac_toe.games.tic_tac_toe import Game


# =============================================================================
# Move Sequences
# =============================================================================

# X X O / O O X / X X O - nine moves, no line
DRAW_MOVES: List[Tuple[int, int]] = [
    (0, 0), (1, 1), (0, 1), (0, 2), (2, 0), (1, 0), (1, 2), (2, 2), (2, 1),
]

# X takes column 0 on the fifth move
COLUMN_WIN_MOVES: List[Tuple[int, int]] = [
    (0, 0), (0, 1), (1, 0), (1, 1), (2, 0),
]


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> Game:
    """Fresh Game."""
    return Game()


@pytest.fixture
def play() -> Callable[[Sequence[Tuple[int, int]]], Game]:
    """Build a Game by applying moves in order."""
    def _play(moves: Sequence[Tuple[int, int]]) -> Game:
        g = Game()
        for r, c in moves:
            g.apply_move(r, c)
        return g
    return _play


@pytest.fixture
def draw_moves() -> List[Tuple[int, int]]:
    return list(DRAW_MOVES)


@pytest.fixture
def column_win_moves() -> List[Tuple[int, int]]:
    return list(COLUMN_WIN_MOVES)


@pytest.fixture
def drawn_game(play) -> Game:
    return play(DRAW_MOVES)


@pytest.fixture
def won_game(play) -> Game:
    return play(COLUMN_WIN_MOVES)
