"""
Game engine for TicTacToe.

Owns the board, applies the human's moves, answers with the AI's
move, and tracks the outcome. Presentation layers call
apply_human_move() with a cell index and render the snapshot it returns.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from .ai_player import AIPlayer
from .config import EngineConfig
from .game_state import Board, Cell, GameOutcome, GameSnapshot, GameState, Move
from .move_validator import InvalidMoveError, MoveValidator
from .win_checker import Line, evaluate_outcome, get_winning_line, has_winning_line, is_full

logger = logging.getLogger(__name__)

_WIN_OUTCOMES = {
    Cell.HUMAN: GameOutcome.HUMAN_WIN,
    Cell.OPPONENT: GameOutcome.OPPONENT_WIN,
}


class GameEngine:
    """
    Human (X) versus an unbeatable AI (O).

    Game flow per call:
    1. Human's mark is validated and placed
    2. Human win or full board ends the game
    3. AI places its mark
    4. AI win or full board ends the game

    HUMAN_WIN, OPPONENT_WIN and DRAW are final until reset().
    """

    def __init__(self, config: Optional[EngineConfig] = None, ai: Optional[AIPlayer] = None):
        """
        Initialize the engine with an empty board.

        Args:
            config: Engine configuration.
            ai: The opponent (default: a minimax AIPlayer playing OPPONENT).
        """
        self.config = config or EngineConfig()
        self.validator = MoveValidator()
        self.ai = ai or AIPlayer(Cell.OPPONENT, self.config)
        self._advisor: Optional[AIPlayer] = None
        self._state = GameState()

    @classmethod
    def from_board(cls, board: Sequence[Cell], config: Optional[EngineConfig] = None) -> "GameEngine":
        """
        Create an engine that resumes a position.

        The human always moves first, so the board must hold as many X
        marks as O marks, or one more. The game stops at the first
        completed line, so an X win needs the extra X, an O win needs
        equal counts, and both sides can never have a line.

        Raises:
            ValueError: If the board is malformed or could not arise in play.
        """
        cells = list(board)
        if len(cells) != EngineConfig.CELL_COUNT:
            raise ValueError(f"A board has {EngineConfig.CELL_COUNT} cells, got {len(cells)}")
        if not all(isinstance(cell, Cell) for cell in cells):
            raise ValueError("Board cells must be Cell values")

        lead = cells.count(Cell.HUMAN) - cells.count(Cell.OPPONENT)
        if lead not in (0, 1):
            raise ValueError(f"Impossible position: X leads O by {lead} marks")

        human_won = has_winning_line(cells, Cell.HUMAN)
        opponent_won = has_winning_line(cells, Cell.OPPONENT)
        if human_won and opponent_won:
            raise ValueError("Impossible position: both sides have a winning line")
        if human_won and lead != 1:
            raise ValueError("Impossible position: X won but O moved afterwards")
        if opponent_won and lead != 0:
            raise ValueError("Impossible position: O won but X moved afterwards")

        outcome = evaluate_outcome(cells)
        if lead == 1 and not outcome.is_terminal:
            raise ValueError("Position has the AI to move; the engine resumes on the human's turn")

        engine = cls(config)
        engine._state = GameState(cells=cells, outcome=outcome)
        return engine

    # ==================== READ ACCESS ====================

    @property
    def board(self) -> Board:
        return tuple(self._state.cells)

    @property
    def outcome(self) -> GameOutcome:
        return self._state.outcome

    @property
    def moves(self) -> Tuple[Move, ...]:
        """Moves played since the last reset (not those of a loaded position)."""
        return tuple(self._state.moves)

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def verdict(self) -> Optional[str]:
        """Message for a finished game, None while in progress."""
        if not self.is_game_over:
            return None
        return self.config.VERDICT_MESSAGES[self.outcome.value]

    @property
    def winning_line(self) -> Optional[Line]:
        return get_winning_line(self._state.cells)

    def snapshot(self) -> GameSnapshot:
        return self._state.snapshot()

    def is_legal_move(self, index: Any) -> bool:
        return self.validator.validate_move(self._state, index).is_valid

    # ==================== MOVES ====================

    def apply_human_move(self, index: Any) -> GameSnapshot:
        """
        Play the human's move and the AI's answer.

        An illegal move (occupied cell, bad index, finished game) is
        ignored and the unchanged snapshot is returned.

        Args:
            index: Cell index (0-8).

        Returns:
            The board and outcome after the call.
        """
        try:
            return self.play_human_move(index)
        except InvalidMoveError as exc:
            logger.debug("Ignored move: %s", exc)
            return self.snapshot()

    def play_human_move(self, index: Any) -> GameSnapshot:
        """
        Play the human's move and the AI's answer.

        Same as apply_human_move() but illegal moves raise.

        Raises:
            InvalidMoveError: If the move breaks the rules.
        """
        result = self.validator.validate_move(self._state, index)
        if not result.is_valid:
            raise InvalidMoveError(index, result.error_message)

        self._state.place(index, Cell.HUMAN)
        logger.debug("Human played cell %d", index)

        if self._check_game_over(Cell.HUMAN):
            return self.snapshot()

        ai_move = self.ai.get_best_move(self._state.cells)
        self._state.place(ai_move, Cell.OPPONENT)
        logger.debug("AI played cell %d", ai_move)

        self._check_game_over(Cell.OPPONENT)
        return self.snapshot()

    def suggest_move(self) -> Optional[int]:
        """
        Get the best cell for the human, or None if the game is over.
        """
        if self.is_game_over:
            return None
        if self._advisor is None:
            self._advisor = AIPlayer(Cell.HUMAN, self.config)
        return self._advisor.get_best_move(self._state.cells)

    def reset(self) -> None:
        """Clear the board for a new game."""
        self._state = GameState()
        logger.info("Game reset")

    def _check_game_over(self, player: Cell) -> bool:
        """
        Settle the outcome after the given player's move.

        A win is checked before a full board, so a winning last
        move is never reported as a draw.

        Returns:
            True if the game just ended.
        """
        cells = self._state.cells
        if has_winning_line(cells, player):
            self._state.outcome = _WIN_OUTCOMES[player]
        elif is_full(cells):
            self._state.outcome = GameOutcome.DRAW
        else:
            return False

        logger.info("Game over: %s", self._state.outcome.value)
        return True
