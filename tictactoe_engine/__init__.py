"""
TicTacToe Engine
================
Human (X) versus an unbeatable minimax AI (O) on a 3x3 board.
The engine owns the board and the outcome; a presentation layer
feeds it cell indices and renders the snapshots it returns.
"""

from .config import EngineConfig, configure_logging
from .game_state import (
    Board,
    Cell,
    EMPTY_BOARD,
    GameOutcome,
    GameSnapshot,
    GameState,
    Move,
    board_from_string,
    empty_cells,
    render_board,
)
from .win_checker import WINNING_LINES, evaluate_outcome, get_winning_line, has_winning_line, is_full
from .move_validator import InvalidMoveError, MoveValidator, ValidationResult
from .ai_player import AIPlayer, select_opponent_move
from .engine import GameEngine

__version__ = "1.0.0"
