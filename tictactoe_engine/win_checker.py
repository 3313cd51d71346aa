"""
Win checker for TicTacToe.
Checks if a player has won or if the board is full.
"""

from typing import Optional, Sequence, Tuple

from .game_state import Cell, GameOutcome

Line = Tuple[int, int, int]

# All possible winning lines, as cell indices
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def has_winning_line(board: Sequence[Cell], player: Cell) -> bool:
    """
    Check if a player holds all three cells of any line.

    Args:
        board: The 9 cells.
        player: Cell.HUMAN or Cell.OPPONENT.

    Returns:
        True if the player has won.
    """
    for a, b, c in WINNING_LINES:
        if board[a] == player and board[b] == player and board[c] == player:
            return True
    return False


def is_full(board: Sequence[Cell]) -> bool:
    return Cell.EMPTY not in board


def get_winning_line(
    board: Sequence[Cell],
    player: Optional[Cell] = None
) -> Optional[Line]:
    """
    Get the winning line if there is one.

    Args:
        board: The 9 cells.
        player: Only look at this player's lines (default: either player).

    Returns:
        The first completed line, or None.
    """
    for line in WINNING_LINES:
        first = board[line[0]]
        if first == Cell.EMPTY:
            continue
        if player is not None and first != player:
            continue
        if board[line[1]] == first and board[line[2]] == first:
            return line
    return None


def evaluate_outcome(board: Sequence[Cell]) -> GameOutcome:
    """
    Work out the outcome of an arbitrary board.

    Wins are checked before fullness, so a full board with a
    completed line is a win, never a draw.
    """
    if has_winning_line(board, Cell.HUMAN):
        return GameOutcome.HUMAN_WIN
    if has_winning_line(board, Cell.OPPONENT):
        return GameOutcome.OPPONENT_WIN
    if is_full(board):
        return GameOutcome.DRAW
    return GameOutcome.IN_PROGRESS
