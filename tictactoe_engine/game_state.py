"""
Game state management for TicTacToe.
Tracks the board, the outcome, and the move history.
"""

from enum import Enum
from typing import List, NamedTuple, Sequence, Tuple
from dataclasses import dataclass, field

from .config import EngineConfig


class Cell(Enum):
    """What a board cell can hold."""
    EMPTY = " "
    HUMAN = "X"
    OPPONENT = "O"

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.HUMAN:
            return Cell.OPPONENT
        if self == Cell.OPPONENT:
            return Cell.HUMAN
        raise ValueError("An empty cell has no opposite")


class GameOutcome(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    HUMAN_WIN = "human_win"
    OPPONENT_WIN = "opponent_win"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameOutcome.IN_PROGRESS


# 9 cells, row-major: index = row * 3 + col
Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (Cell.EMPTY,) * EngineConfig.CELL_COUNT


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Cell        # Who made the move
    index: int          # Cell index (0-8)
    move_number: int    # Which move this is, counting both players from 0


class GameSnapshot(NamedTuple):
    """Read-only view of the board and the outcome."""
    board: Board
    outcome: GameOutcome


@dataclass
class GameState:
    """
    The complete mutable state of a TicTacToe game.

    Tracks:
    - The 9 cells
    - Game outcome (in progress, won, draw)
    - Move history

    Only the engine holds one of these; everyone else gets a GameSnapshot.
    """

    cells: List[Cell] = field(
        default_factory=lambda: list(EMPTY_BOARD)
    )

    outcome: GameOutcome = GameOutcome.IN_PROGRESS

    moves: List[Move] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    def place(self, index: int, player: Cell) -> Move:
        """
        Write a mark and record it in the history.

        The caller is responsible for validating the move first.

        Args:
            index: Cell index (0-8).
            player: Cell.HUMAN or Cell.OPPONENT.

        Returns:
            The recorded move.
        """
        self.cells[index] = player
        move = Move(player=player, index=index, move_number=len(self.moves))
        self.moves.append(move)
        return move

    def get_empty_cells(self) -> List[int]:
        return empty_cells(self.cells)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(board=tuple(self.cells), outcome=self.outcome)


def index_of(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    return row * EngineConfig.BOARD_SIZE + col


def position_of(index: int) -> Tuple[int, int]:
    """Convert a cell index to (row, col)."""
    return divmod(index, EngineConfig.BOARD_SIZE)


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """Indices of all empty cells, in ascending order."""
    return [i for i, cell in enumerate(board) if cell == Cell.EMPTY]


def board_from_string(text: str) -> Board:
    """
    Build a board from 9 characters, read row-major.

    'X' and 'O' are marks; ' ', '.', '_' and '-' are empty cells.
    Line breaks and '|' separators are ignored.

    Args:
        text: e.g. "XX OO    " or "XX.|OO.|...".

    Returns:
        The board as a tuple of cells.
    """
    symbols = {"X": Cell.HUMAN, "O": Cell.OPPONENT}
    cells = []
    for char in text:
        if char in "\n|":
            continue
        upper = char.upper()
        if upper in symbols:
            cells.append(symbols[upper])
        elif char in " ._-":
            cells.append(Cell.EMPTY)
        else:
            raise ValueError(f"Unknown board symbol {char!r}")

    if len(cells) != EngineConfig.CELL_COUNT:
        raise ValueError(
            f"A board has {EngineConfig.CELL_COUNT} cells, got {len(cells)}"
        )
    return tuple(cells)


def render_board(board: Sequence[Cell], show_numbers: bool = False) -> str:
    """
    Draw the board as text.

    Args:
        board: The board to draw.
        show_numbers: Label empty cells 1-9 for keyboard input.

    Returns:
        A multi-line string.
    """
    size = EngineConfig.BOARD_SIZE
    rows = []
    for row in range(size):
        labels = []
        for col in range(size):
            index = index_of(row, col)
            cell = board[index]
            if cell == Cell.EMPTY and show_numbers:
                labels.append(str(index + 1))
            else:
                labels.append(cell.value)
        rows.append(" " + " | ".join(labels))
    return "\n---+---+---\n".join(rows)
