from app.core.exceptions import (
    NotYourTurn, CellOccupied, GameEnded, InvalidPosition
)
from app.engine.board import Player, is_valid_position


class MoveValidator:
    """Validates moves against a game session."""

    def validate_move(self, session, player: Player, row: int, col: int) -> None:
        """Validate a move is legal for any board size."""
        # Check if game is still running
        if session.outcome.is_terminal:
            raise GameEnded(f"Game {session.id} has already ended")

        # Check if it's the player's turn
        if session.current_player != player:
            raise NotYourTurn(f"It's not player {player.value}'s turn")

        # Validate position bounds for the board size
        if not is_valid_position(session.board, row, col):
            raise InvalidPosition(
                f"Position ({row}, {col}) is invalid for "
                f"{session.board_size}x{session.board_size} board"
            )

        # Check if cell is already occupied
        if session.board[row][col] is not None:
            raise CellOccupied(f"Cell ({row}, {col}) is already occupied")
