"""
Console front-end for the TicTacToe engine.

This script ties together:
- The engine (board, rules, outcome)
- The minimax AI opponent
- A text board and keyboard input

Run this script to play TicTacToe against the AI!
"""

import argparse
import logging
from typing import Callable, List, Optional

from tictactoe_engine import (
    Cell,
    EngineConfig,
    GameEngine,
    InvalidMoveError,
    configure_logging,
    render_board,
)

HELP_TEXT = "Enter a cell 1-9, 'h' for a hint, 'r' to restart, 'q' to quit."


class ConsoleGame:
    """
    Text-mode game loop.

    Game flow:
    1. Board is printed with free cells numbered 1-9
    2. Human types a cell number
    3. Engine places the human's mark and the AI's answer
    4. Repeat until someone wins or it's a draw, then offer a restart
    """

    def __init__(
        self,
        engine: GameEngine,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        self.engine = engine
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.is_running = False

    def run(self) -> None:
        """Play until the user quits or input runs out."""
        self._banner("TicTacToe - You (X) vs. AI (O)")
        self.output_fn(HELP_TEXT)
        self._show_board()

        self.is_running = True
        while self.is_running:
            try:
                command = self.input_fn("Your move: ")
            except EOFError:
                break
            self.handle_command(command)

        self.output_fn("Goodbye!")

    def handle_command(self, command: str) -> None:
        """
        Act on one line of user input.

        Args:
            command: Raw text typed by the user.
        """
        command = command.strip().lower()

        if command in ("q", "quit", "exit"):
            self.is_running = False
        elif command in ("r", "restart"):
            self._reset_game()
        elif command in ("h", "hint"):
            self._show_hint()
        elif command.isdecimal():
            self._play(int(command) - 1)
        else:
            self.output_fn(f"Unknown command {command!r}. {HELP_TEXT}")

    def _play(self, index: int) -> None:
        if self.engine.is_game_over:
            self.output_fn("The game is over. Type 'r' to play again or 'q' to quit.")
            return

        try:
            self.engine.play_human_move(index)
        except InvalidMoveError as exc:
            if 0 <= index < EngineConfig.CELL_COUNT:
                self.output_fn(f"Can't play cell {index + 1}: {exc.reason}.")
            else:
                self.output_fn("Pick a cell from 1 to 9.")
            return

        moves = self.engine.moves
        if moves and moves[-1].player == Cell.OPPONENT:
            self.output_fn(f">>> AI played cell {moves[-1].index + 1}")

        self._show_board()

        if self.engine.is_game_over:
            self._show_game_result()

    def _show_hint(self) -> None:
        move = self.engine.suggest_move()
        if move is None:
            self.output_fn("No moves left.")
        else:
            self.output_fn(f"Hint: try cell {move + 1}")

    def _show_board(self) -> None:
        self.output_fn("")
        self.output_fn(render_board(self.engine.board, show_numbers=True))
        self.output_fn("")

    def _show_game_result(self) -> None:
        self._banner(f"GAME OVER - {self.engine.verdict}")
        self.output_fn("Type 'r' to play again or 'q' to quit.")

    def _reset_game(self) -> None:
        self.engine.reset()
        self.output_fn("Game reset!")
        self._show_board()

    def _banner(self, title: str) -> None:
        self.output_fn("=" * 60)
        self.output_fn(f"   {title}")
        self.output_fn("=" * 60)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable AI")
    parser.add_argument(
        "--pruning",
        action="store_true",
        help="Use alpha-beta pruning in the AI search"
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Disable the AI's transposition cache"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Engine log level (default: WARNING)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config = EngineConfig()
    config.USE_PRUNING = args.pruning
    config.USE_CACHE = not args.no_cache
    configure_logging(getattr(logging, args.log_level), config)

    game = ConsoleGame(GameEngine(config))

    try:
        game.run()
    except KeyboardInterrupt:
        game.output_fn("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
