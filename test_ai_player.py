"""
Tests for the minimax AI.
"""

import pytest

from tictactoe_engine import (
    AIPlayer,
    Cell,
    EMPTY_BOARD,
    EngineConfig,
    board_from_string,
    empty_cells,
    evaluate_outcome,
    has_winning_line,
    select_opponent_move,
)


def _opponent_to_move_positions():
    """Every unfinished position reachable with X moving first and O to move."""
    seen = set()
    found = []
    pending = [EMPTY_BOARD]
    while pending:
        board = pending.pop()
        if board in seen:
            continue
        seen.add(board)
        if evaluate_outcome(board).is_terminal:
            continue

        if board.count(Cell.HUMAN) == board.count(Cell.OPPONENT):
            mover = Cell.HUMAN
        else:
            mover = Cell.OPPONENT
            found.append(board)

        for index in empty_cells(board):
            pending.append(board[:index] + (mover,) + board[index + 1:])
    return sorted(found, key=lambda b: [cell.value for cell in b])


@pytest.fixture(scope="module")
def positions():
    return _opponent_to_move_positions()


@pytest.fixture(scope="module")
def cached_ai():
    return AIPlayer(Cell.OPPONENT, use_pruning=False, use_cache=True)


def _play(board, index, player):
    return board[:index] + (player,) + board[index + 1:]


def test_takes_the_win():
    board = board_from_string("OO XX    ")
    assert select_opponent_move(board) == 2


def test_blocks_the_win():
    board = board_from_string("XX  O    ")
    assert select_opponent_move(board) == 2


def test_answers_corner_with_center():
    board = board_from_string("X        ")
    assert select_opponent_move(board) == 4


def test_prefers_fastest_win():
    # Cell 8 wins now; cell 2 forks and wins one move pair later
    board = board_from_string("OX XOX   ")
    ai = AIPlayer(Cell.OPPONENT)

    assert ai.minimax(_play(board, 8, Cell.OPPONENT), 0, False) == 10
    assert ai.minimax(_play(board, 2, Cell.OPPONENT), 0, False) == 8
    assert ai.get_best_move(board) == 8


def test_prefers_slowest_loss():
    ai = AIPlayer(Cell.OPPONENT)
    # X to move wins at once on 2
    immediate = board_from_string("XX OO O  ")
    assert ai.minimax(immediate, 0, False) == 1 - 10


def test_terminal_scores_use_depth():
    ai = AIPlayer(Cell.OPPONENT)

    assert ai.minimax(board_from_string("OOOXX X  "), 3, True) == 7
    assert ai.minimax(board_from_string("XXXOO O  "), 4, False) == -6
    assert ai.minimax(board_from_string("XOXXOOOXX"), 2, True) == 0


def test_empty_board_picks_lowest_index():
    moves = {select_opponent_move(EMPTY_BOARD) for _ in range(3)}
    assert moves == {0}
    assert AIPlayer(Cell.OPPONENT, use_pruning=True).get_best_move(EMPTY_BOARD) == 0


def test_full_board():
    board = board_from_string("XOXXOOOXX")

    assert AIPlayer(Cell.OPPONENT).get_best_move(board) is None
    with pytest.raises(ValueError):
        select_opponent_move(board)


def test_human_side_ai():
    ai = AIPlayer(Cell.HUMAN)

    assert ai.opponent == Cell.OPPONENT
    assert ai.get_best_move(board_from_string("XX OO    ")) == 2
    assert ai.get_best_move(board_from_string("OO XX    ")) == 5


def test_never_picks_an_occupied_cell(positions, cached_ai):
    for board in positions:
        move = cached_ai.get_best_move(board)
        assert move is not None
        assert board[move] == Cell.EMPTY


def test_always_takes_the_first_immediate_win(positions, cached_ai):
    checked = 0
    for board in positions:
        winning = [
            index for index in empty_cells(board)
            if has_winning_line(_play(board, index, Cell.OPPONENT), Cell.OPPONENT)
        ]
        if winning:
            assert cached_ai.get_best_move(board) == winning[0]
            checked += 1
    assert checked > 0


def test_pruning_picks_the_same_moves(positions, cached_ai):
    pruned = AIPlayer(Cell.OPPONENT, use_pruning=True)
    for board in positions:
        assert pruned.get_best_move(board) == cached_ai.get_best_move(board), board


def test_cache_does_not_change_moves(positions, cached_ai):
    plain = AIPlayer(Cell.OPPONENT, use_pruning=False, use_cache=False)
    for board in positions:
        if board.count(Cell.EMPTY) <= 4:
            assert plain.get_best_move(board) == cached_ai.get_best_move(board), board


def test_cache_respects_limit():
    config = EngineConfig()
    config.CACHE_LIMIT = 10
    ai = AIPlayer(Cell.OPPONENT, config, use_cache=True)

    assert ai.get_best_move(board_from_string("X        ")) == 4
    assert len(ai._cache) == 10

    ai.clear_cache()
    assert len(ai._cache) == 0


def test_counts_positions():
    ai = AIPlayer(Cell.OPPONENT, use_cache=False)
    ai.get_best_move(board_from_string("XOXXO    "))
    assert ai.positions_evaluated > 0


def test_config_defaults_are_used():
    config = EngineConfig()
    config.USE_PRUNING = True
    config.USE_CACHE = False
    ai = AIPlayer(Cell.OPPONENT, config)

    assert ai.use_pruning
    assert not ai.use_cache


def test_move_suggestion_text():
    ai = AIPlayer(Cell.OPPONENT)

    assert ai.get_move_suggestion(board_from_string("OO XX    ")) == "Place O in cell 3 (row 1, column 3)"
    assert ai.get_move_suggestion(board_from_string("XOXXOOOXX")) == "No moves available!"
