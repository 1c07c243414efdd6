"""
Command-line interface: answer a single board, or play a game in the terminal.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tictactoe.api import play_turn
from tictactoe.core.errors import BoardFormatError, MoveError
from tictactoe.core.types import Mark, Result
from tictactoe.games.tic_tac_toe import TicTacToe
from tictactoe.selection.minimax import search
from tictactoe.serializers import dumps_response
from tictactoe.utils.config import Config
from tictactoe.utils.factory import create_game

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Perfect-play tic-tac-toe engine"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log at DEBUG level (overrides TICTACTOE_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    move = sub.add_parser("move", help="Answer one request and print the response JSON")
    move.add_argument(
        "--board", "-b",
        type=str,
        default=None,
        help='Request JSON, e.g. \'{"board": [[88,0,0],[0,0,0],[0,0,0]]}\' (default: read stdin)',
    )

    play = sub.add_parser("play", help="Play against the engine")
    play.add_argument(
        "--human",
        choices=["X", "0", "O"],
        default=None,
        help="Your mark, X or 0 (default: X, or TICTACTOE_HUMAN_MARK)",
    )
    return parser.parse_args(argv)


def _human_turn(game: TicTacToe) -> None:
    """Prompt for a move until a legal one is entered, then apply it."""
    print(f"\nYour turn ({game.current_player().glyph})")
    print("Format: x,y  (column then row, 0-based)")

    while True:
        raw = input("Move: ").strip()
        try:
            x, y = (int(v.strip()) for v in raw.split(","))
        except ValueError:
            print(f"Invalid input: {raw!r}")
            continue
        try:
            game.apply_move((x, y))
            return
        except MoveError as e:
            print(f"Illegal move: {e}")


def _engine_turn(game: TicTacToe) -> None:
    mover = game.current_player()
    found = search(game.get_state(), maximizing=True)
    game.apply_move((found.x, found.y))
    print(f"\nEngine ({mover.glyph}) played: {found.x},{found.y}")


def run_move(board_json: Optional[str]) -> int:
    payload = board_json if board_json is not None else sys.stdin.read()
    try:
        response = play_turn(payload)
    except BoardFormatError as e:
        print(f"Invalid board: {e}", file=sys.stderr)
        return 2
    print(dumps_response(response))
    return 0


def run_play(config: Config) -> int:
    game = create_game(config=config)
    print(game.state_string())

    try:
        while not game.is_over():
            if game.current_player() == config.engine_mark:
                _engine_turn(game)
            else:
                _human_turn(game)
            print(game.state_string())
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted")
        return 130

    print("\n" + "=" * 40)
    result, _ = game.result()
    if result == Result.LINE:
        print(f"GAME OVER - {game.winner().glyph} wins")
    else:
        print("GAME OVER - stalemate")
    print("=" * 40)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = Config.from_env()
    if args.command == "play" and args.human:
        config = Config(human_mark=Mark.from_glyph(args.human), log_level=config.log_level)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Config: human=%s log_level=%s", config.human_mark.glyph, config.log_level)

    if args.command == "move":
        return run_move(args.board)
    return run_play(config)


if __name__ == "__main__":
    sys.exit(main())
