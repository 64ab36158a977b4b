"""
Configuration for the terminal front-end.
"""

from typing import Iterable, Optional

from tac_toe.core.types import EMPTY, FIRST_MARK, Mark


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: " ", Mark.X: "X", Mark.O: "O"}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        first_mark: Mark = FIRST_MARK,
        human_marks: Iterable[Mark] = (FIRST_MARK,),
        self_play: bool = False,
        seed: Optional[int] = None,
    ):
        self.first_mark = first_mark
        self.self_play = self_play
        self.seed = seed

        # Self-play means no mark reads from stdin
        self.human_marks = () if self_play else tuple(human_marks)


# Default configuration
DEFAULT_CONFIG = Config()
