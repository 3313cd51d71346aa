"""
Move validator for TicTacToe.
Validates that a human move follows the rules.
"""

from typing import Any, Optional
from dataclasses import dataclass

from .config import EngineConfig
from .game_state import Cell, GameState


class InvalidMoveError(ValueError):
    """Raised by the strict move entry point when a move breaks the rules."""

    def __init__(self, index: Any, reason: str):
        super().__init__(f"Invalid move {index!r}: {reason}")
        self.index = index
        self.reason = reason


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. The index must be an integer cell index (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: Any) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark in.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="game is already over"
            )

        # bool is an int subclass, but True is not a cell
        if isinstance(index, bool) or not isinstance(index, int):
            return ValidationResult(
                is_valid=False,
                error_message="cell index must be an integer"
            )

        if not 0 <= index < EngineConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"cell {index} is out of range (0-{EngineConfig.CELL_COUNT - 1})"
            )

        if game_state.cells[index] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"cell {index} is already occupied by {game_state.cells[index].value}"
            )

        return ValidationResult(is_valid=True)

