"""
Outcome classification for the N-in-a-row engine.
Checks if a player has completed a line or if the game is a draw.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from app.engine.board import Board, Move, Player, is_board_full, validate_board


class OutcomeStatus(str, Enum):
    UNDECIDED = "undecided"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    The classification of a board.

    Derived from the board on demand and never stored on it. `winner` and
    `line` are only set for a win.
    """
    status: OutcomeStatus
    winner: Optional[Player] = None
    line: Optional[List[Move]] = None

    @classmethod
    def undecided(cls) -> "Outcome":
        return cls(OutcomeStatus.UNDECIDED)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @classmethod
    def win(cls, winner: Player, line: List[Move]) -> "Outcome":
        return cls(OutcomeStatus.WIN, winner, line)

    @property
    def is_terminal(self) -> bool:
        return self.status != OutcomeStatus.UNDECIDED

    def result_for(self, player: Player) -> Optional[str]:
        """
        Translate the outcome into a result from one player's point of view.

        Returns:
            "win", "loss" or "draw", or None while the game is undecided.
        """
        if self.status == OutcomeStatus.WIN:
            return "win" if self.winner == player else "loss"
        if self.status == OutcomeStatus.DRAW:
            return "draw"
        return None


def iter_lines(board_size: int) -> Iterator[List[Move]]:
    """
    Yield every winning line in priority order.

    Rows top to bottom, then columns left to right, then the main diagonal
    and finally the anti-diagonal.
    """
    for row in range(board_size):
        yield [(row, col) for col in range(board_size)]

    for col in range(board_size):
        yield [(row, col) for row in range(board_size)]

    yield [(i, i) for i in range(board_size)]

    yield [(i, board_size - 1 - i) for i in range(board_size)]


def _line_owner(board: Board, line: List[Move]) -> Optional[Player]:
    first_row, first_col = line[0]
    first = board[first_row][first_col]
    if first is None:
        return None
    if all(board[row][col] == first for row, col in line):
        return Player(first)
    return None


def evaluate(board: Board) -> Outcome:
    """Classify a board without validating it first. Used by the search."""
    for line in iter_lines(len(board)):
        owner = _line_owner(board, line)
        if owner is not None:
            return Outcome.win(owner, line)

    if is_board_full(board):
        return Outcome.draw()

    return Outcome.undecided()


def classify(board: Board) -> Outcome:
    """
    Classify a board as won, drawn or undecided.

    The first completed line in priority order decides the winner, so a full
    board with a completed line is a win and never a draw.

    Raises:
        InvalidBoard: if the board is not a supported square grid.
    """
    validate_board(board)
    return evaluate(board)


def find_winning_line(board: Board) -> Optional[List[Move]]:
    """Get the first completed line, or None."""
    return classify(board).line
