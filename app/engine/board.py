"""
Board representation for the N-in-a-row engine.

A board is a plain square list of lists. Each cell holds a Player mark or
None when empty. Helpers here validate, copy and mutate boards; nothing in
this module keeps state between calls.
"""
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from app.core.exceptions import CellOccupied, InvalidBoard, InvalidPosition
from app.core.game_config import SUPPORTED_BOARD_SIZES, is_valid_board_size


class Player(str, Enum):
    """The two marks on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


Cell = Optional[Player]
Board = List[List[Cell]]
Move = Tuple[int, int]


def create_empty_board(board_size: int) -> Board:
    """Create an empty board for the given size."""
    if not is_valid_board_size(board_size):
        raise InvalidBoard(
            f"Board size must be one of {SUPPORTED_BOARD_SIZES}, got {board_size}"
        )
    return [[None for _ in range(board_size)] for _ in range(board_size)]


def validate_board(board: Board) -> int:
    """
    Check that a board is a supported square grid of marks.

    Returns:
        The board size.

    Raises:
        InvalidBoard: if the board is malformed.
    """
    if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
        raise InvalidBoard("Board must be a list of rows")

    board_size = len(board)
    if not is_valid_board_size(board_size):
        raise InvalidBoard(
            f"Board size must be one of {SUPPORTED_BOARD_SIZES}, got {board_size}"
        )

    for index, row in enumerate(board):
        if len(row) != board_size:
            raise InvalidBoard(
                f"Board must be square: row {index} has {len(row)} cells, expected {board_size}"
            )
        for cell in row:
            if cell is not None and cell not in (Player.X, Player.O):
                raise InvalidBoard(f"Unknown cell value {cell!r}")

    return board_size


def is_valid_position(board: Board, row: int, col: int) -> bool:
    """Check if a position lies on the board."""
    board_size = len(board)
    return 0 <= row < board_size and 0 <= col < board_size


def get_empty_cells(board: Board) -> List[Move]:
    """Get all empty cells in row-major order."""
    return [
        (row, col)
        for row, cells in enumerate(board)
        for col, cell in enumerate(cells)
        if cell is None
    ]


def is_board_full(board: Board) -> bool:
    for row in board:
        if None in row:
            return False
    return True


def copy_board(board: Board) -> Board:
    """Copy a board, normalising cell values to Player marks."""
    return [[None if cell is None else Player(cell) for cell in row] for row in board]


def place_mark(board: Board, row: int, col: int, player: Player) -> None:
    """
    Place a mark on the board in place.

    Raises:
        InvalidPosition: if (row, col) is off the board.
        CellOccupied: if the cell already holds a mark.
    """
    if not is_valid_position(board, row, col):
        raise InvalidPosition(
            f"Position ({row}, {col}) is invalid for {len(board)}x{len(board)} board"
        )
    if board[row][col] is not None:
        raise CellOccupied(f"Cell ({row}, {col}) is already occupied")
    board[row][col] = player


@contextmanager
def trial_move(board: Board, row: int, col: int, player: Player) -> Iterator[Board]:
    """
    Place a mark for the duration of the block, then clear the cell again.

    The cell is restored on every exit path, including exceptions.
    """
    board[row][col] = player
    try:
        yield board
    finally:
        board[row][col] = None
