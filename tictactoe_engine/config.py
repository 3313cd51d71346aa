"""
Engine configuration for TicTacToe.
All the settings for the board, scoring, search, and logging.
"""

import logging
from typing import Optional


class EngineConfig:
    """
    Configuration class for the game engine.
    Change these values per instance to tune the search or the messages.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells are numbered row-major 0-8
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    # ==================== SCORING ====================
    # A win found at search depth d scores WIN_SCORE - d,
    # a loss scores d - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== SEARCH SETTINGS ====================
    USE_PRUNING = False  # Alpha-beta; picks the same move as the full search
    USE_CACHE = True     # Transposition cache for the full search
    CACHE_LIMIT = 50000  # Max cached positions per AI player

    # ==================== MESSAGES ====================
    # Keyed by GameOutcome value
    VERDICT_MESSAGES = {
        "human_win": "You Win!",
        "opponent_win": "AI Wins!",
        "draw": "Draw!",
    }

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


_handler: Optional[logging.Handler] = None


def configure_logging(
    level: Optional[int] = None,
    config: Optional[EngineConfig] = None
) -> logging.Logger:
    """
    Send engine log records to stderr.

    Calling this again replaces the handler it attached before.

    Args:
        level: Logging level (default: config.LOG_LEVEL).
        config: Engine configuration.

    Returns:
        The package logger.
    """
    global _handler
    config = config or EngineConfig()

    logger = logging.getLogger("tictactoe_engine")
    logger.setLevel(config.LOG_LEVEL if level is None else level)

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    logger.addHandler(_handler)

    return logger
