"""
Tests for move validation.
"""

import pytest

from tictactoe_engine import Cell, GameOutcome, GameState, InvalidMoveError, MoveValidator


@pytest.fixture
def validator():
    return MoveValidator()


def test_empty_cell_is_valid(validator):
    result = validator.validate_move(GameState(), 4)

    assert result.is_valid
    assert result.error_message is None


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_out_of_range(validator, index):
    result = validator.validate_move(GameState(), index)

    assert not result.is_valid
    assert "out of range" in result.error_message


@pytest.mark.parametrize("index", ["4", 4.0, None, True])
def test_non_integer(validator, index):
    result = validator.validate_move(GameState(), index)

    assert not result.is_valid
    assert "integer" in result.error_message


def test_occupied(validator):
    state = GameState()
    state.place(4, Cell.OPPONENT)

    result = validator.validate_move(state, 4)

    assert not result.is_valid
    assert result.error_message == "cell 4 is already occupied by O"


def test_game_over_rejects_everything(validator):
    state = GameState(outcome=GameOutcome.DRAW)

    assert not validator.validate_move(state, 0).is_valid
    assert validator.validate_move(state, 0).error_message == "game is already over"


def test_invalid_move_error():
    error = InvalidMoveError(9, "cell 9 is out of range (0-8)")

    assert isinstance(error, ValueError)
    assert error.index == 9
    assert error.reason == "cell 9 is out of range (0-8)"
    assert "Invalid move 9" in str(error)
