"""
Configuration constants for the N-in-a-row game engine.
"""
from enum import Enum

# Board size limits
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 5
SUPPORTED_BOARD_SIZES = (3, 4, 5)

# Minimax scoring: a win found at depth d is worth WIN_SCORE - d
WIN_SCORE = 10


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def is_valid_board_size(board_size: int) -> bool:
    """Check if a board size is supported."""
    return board_size in SUPPORTED_BOARD_SIZES

def get_category_key(difficulty: str, board_size: int) -> str:
    """
    Get the score category a finished game counts towards.
    Results are tracked separately per difficulty and board size.
    """
    return f"{difficulty}-{board_size}"
