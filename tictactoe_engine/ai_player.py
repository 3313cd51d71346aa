"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .config import EngineConfig
from .game_state import Cell, empty_cells, position_of
from .win_checker import has_winning_line, is_full

logger = logging.getLogger(__name__)

CacheKey = Tuple[Tuple[Cell, ...], int, bool]


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally - it wins as fast as it can,
    blocks the opponent, and never loses (at worst, draws).

    Candidate moves are tried in ascending index order and only a
    strictly better score replaces the current best, so among equally
    scored moves the lowest index wins.
    """

    def __init__(
        self,
        player: Cell = Cell.OPPONENT,
        config: Optional[EngineConfig] = None,
        use_pruning: Optional[bool] = None,
        use_cache: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which side the AI plays (default: OPPONENT).
            config: Engine configuration.
            use_pruning: Override config.USE_PRUNING.
            use_cache: Override config.USE_CACHE.
        """
        self.player = player
        self.opponent = player.opposite()
        self.config = config or EngineConfig()
        self.use_pruning = self.config.USE_PRUNING if use_pruning is None else use_pruning
        self.use_cache = self.config.USE_CACHE if use_cache is None else use_cache

        self._cache: Dict[CacheKey, int] = {}

        # Positions scored during the last search (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Sequence[Cell]) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            board: The 9 cells.

        Returns:
            Cell index of the best move, or None if the board is full.
        """
        self.positions_evaluated = 0
        cells = list(board)

        best_score = float('-inf')
        best_move = None

        for index in empty_cells(cells):
            cells[index] = self.player
            if self.use_pruning:
                score = self._alphabeta(cells, 0, False, best_score, float('inf'))
            else:
                score = self._minimax(cells, 0, False)
            cells[index] = Cell.EMPTY

            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "%s evaluated %d positions. Best move: %s (score: %s)",
            self.player.value, self.positions_evaluated, best_move, best_score
        )

        return best_move

    def minimax(self, board: Sequence[Cell], depth: int = 0, is_maximizing: bool = True) -> int:
        """
        Score a position with full minimax.

        Args:
            board: The 9 cells.
            depth: Plies already played since the search root.
            is_maximizing: True if it is the AI's turn to move.

        Returns:
            WIN_SCORE - depth for a forced win, depth - WIN_SCORE for a
            forced loss, DRAW_SCORE for a draw.
        """
        return self._minimax(list(board), depth, is_maximizing)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _terminal_score(self, cells: List[Cell], depth: int) -> Optional[int]:
        if has_winning_line(cells, self.player):
            return self.config.WIN_SCORE - depth
        if has_winning_line(cells, self.opponent):
            return depth - self.config.WIN_SCORE
        if is_full(cells):
            return self.config.DRAW_SCORE
        return None

    def _minimax(self, cells: List[Cell], depth: int, is_maximizing: bool) -> int:
        key = None
        if self.use_cache:
            key = (tuple(cells), depth, is_maximizing)
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        self.positions_evaluated += 1

        score = self._terminal_score(cells, depth)
        if score is None:
            mover = self.player if is_maximizing else self.opponent
            best = float('-inf') if is_maximizing else float('inf')
            for index, cell in enumerate(cells):
                if cell != Cell.EMPTY:
                    continue
                cells[index] = mover
                child = self._minimax(cells, depth + 1, not is_maximizing)
                cells[index] = Cell.EMPTY
                best = max(best, child) if is_maximizing else min(best, child)
            score = int(best)

        if key is not None and len(self._cache) < self.config.CACHE_LIMIT:
            self._cache[key] = score

        return score

    def _alphabeta(
        self,
        cells: List[Cell],
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax with alpha-beta pruning.

        The result is exact when it falls inside (alpha, beta) and
        only a bound otherwise, so it never goes through the cache.
        """
        self.positions_evaluated += 1

        score = self._terminal_score(cells, depth)
        if score is not None:
            return score

        if is_maximizing:
            max_score = float('-inf')
            for index, cell in enumerate(cells):
                if cell != Cell.EMPTY:
                    continue
                cells[index] = self.player
                score = self._alphabeta(cells, depth + 1, False, alpha, beta)
                cells[index] = Cell.EMPTY
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for index, cell in enumerate(cells):
                if cell != Cell.EMPTY:
                    continue
                cells[index] = self.opponent
                score = self._alphabeta(cells, depth + 1, True, alpha, beta)
                cells[index] = Cell.EMPTY
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def get_move_suggestion(self, board: Sequence[Cell]) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: The 9 cells.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = position_of(move)
        return f"Place {self.player.value} in cell {move + 1} (row {row + 1}, column {col + 1})"


def select_opponent_move(board: Sequence[Cell], config: Optional[EngineConfig] = None) -> int:
    """
    Pick the opponent's move for a board.

    Raises:
        ValueError: If the board has no empty cell.
    """
    move = AIPlayer(Cell.OPPONENT, config).get_best_move(board)
    if move is None:
        raise ValueError("Board is full, there is no move to select")
    return move


# Quick demo
if __name__ == "__main__":
    from .game_state import board_from_string, render_board

    ai = AIPlayer(Cell.OPPONENT)

    for title, text in [
        ("X is about to win with cell 3!", "XX  O    "),
        ("O can win with cell 3!", "OO XX    "),
    ]:
        board = board_from_string(text)
        print(render_board(board, show_numbers=True))
        print(f"\n{title}")
        print(ai.get_move_suggestion(board))
        print(f"({ai.positions_evaluated} positions evaluated)\n")
