"""
Command-line interface for playing in a terminal.
"""

import argparse
import logging
from typing import Callable, List, Optional, Sequence

import numpy as np

from tac_toe.core.errors import MoveError
from tac_toe.core.types import CellCoord, Draw, Mark, Outcome, Win
from tac_toe.games.tic_tac_toe import Game
from tac_toe.utils.config import Config

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against yourself or a random opponent"
    )
    parser.add_argument(
        "--moves", "-m",
        type=str,
        default=None,
        help="Space-separated moves to apply in order (e.g., '0,0 1,1 0,1')",
    )
    parser.add_argument(
        "--human",
        type=str,
        default=None,
        help="Marks played from stdin: X, O or XO (default: X). Overrides --self-play.",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Random moves for both marks (no human players)",
    )
    parser.add_argument(
        "--first",
        choices=[m.name for m in Mark],
        default=Mark.X.name,
        help="Mark that moves first (default: X)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for the random opponent",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move",
    )
    return parser.parse_args(argv)


def parse_move(text: str) -> CellCoord:
    """Parse 'row,col' into a coordinate pair."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise ValueError(f"Could not parse '{text}'; expected 'row,col' (e.g., '1,2').")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(
            f"Could not parse '{text}'; expected 'row,col' (e.g., '1,2')."
        ) from e


def parse_moves(moves_str: str) -> List[CellCoord]:
    return [parse_move(token) for token in moves_str.split()]


def parse_human_marks(marks_str: Optional[str], self_play: bool) -> List[Mark]:
    """Parse and validate the human marks argument."""
    if self_play and marks_str is None:
        return []

    if marks_str is None:
        return [Mark.X]

    try:
        marks = [Mark[ch] for ch in marks_str.strip().upper()]
    except KeyError as e:
        raise ValueError(
            f"Invalid --human value: '{marks_str}'. Expected X, O or XO."
        ) from e

    return sorted(set(marks))


def describe_outcome(outcome: Optional[Outcome]) -> str:
    if outcome is None:
        return "Game in progress"
    if isinstance(outcome, Draw):
        return "Draw!"
    if isinstance(outcome, Win):
        return f"{outcome.mark.name} wins ({outcome.line.name.lower()})"
    raise TypeError(f"Unknown outcome: {outcome!r}")


def random_move(game: Game, rng: np.random.Generator) -> CellCoord:
    moves = game.valid_moves()
    r, c = moves[rng.integers(len(moves))]
    return int(r), int(c)


def play_scripted(game: Game, moves: Sequence[CellCoord]) -> Optional[Outcome]:
    """Apply moves in order; rejected moves are reported and skipped."""
    for r, c in moves:
        try:
            game.apply_move(r, c)
        except MoveError as e:
            print(f"Rejected {r},{c}: {e}")

    print(game.state_string())
    print(describe_outcome(game.current_outcome()))
    return game.current_outcome()


def play_interactive(
    game: Game,
    config: Config,
    read: Optional[Callable[[str], str]] = None,
    rng: Optional[np.random.Generator] = None,
) -> Outcome:
    """Alternate human and random moves until the game ends."""
    if read is None:
        read = input
    if rng is None:
        rng = np.random.default_rng(config.seed)

    print(game.state_string())

    while not game.has_ended():
        mark = game.current_mover()

        if mark in config.human_marks:
            text = read(f"\nPlayer {mark.name} (row,col): ")
            try:
                r, c = parse_move(text)
                game.apply_move(r, c)
            except (ValueError, MoveError) as e:
                print(f"Invalid move: {e}")
                continue
        else:
            r, c = random_move(game, rng)
            game.apply_move(r, c)
            print(f"\nAI (Player {mark.name}) played: {r},{c}")

        print(game.state_string())

    print("\n" + "=" * 40)
    print("GAME OVER: " + describe_outcome(game.current_outcome()))
    print("=" * 40)
    return game.current_outcome()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        first_mark=Mark[args.first],
        human_marks=parse_human_marks(args.human, args.self_play),
        self_play=args.self_play and args.human is None,
        seed=args.seed,
    )
    game = Game(first_mark=config.first_mark)

    if args.moves is not None:
        play_scripted(game, parse_moves(args.moves))
        return 0

    try:
        play_interactive(game, config)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted")
        return 1

    logger.info("Finished after %d moves", len(game.moves_played))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
