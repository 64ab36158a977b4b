"""
Games module - board storage, move validation, outcome evaluation.
"""

from tac_toe.games.game_state import Board
from tac_toe.games.game_rules import CELL_LINES, LINE_INDICES, in_bounds, all_marked_same, line_values
from tac_toe.games.validator import validate_move, check_index_bounds
from tac_toe.games.evaluator import evaluate_outcome
from tac_toe.games.tic_tac_toe import Game

__all__ = [
    "Board",
    "Game",
    "CELL_LINES",
    "LINE_INDICES",
    "in_bounds",
    "all_marked_same",
    "line_values",
    "validate_move",
    "check_index_bounds",
    "evaluate_outcome",
]
