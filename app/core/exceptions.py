class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class InvalidBoard(GameException):
    """Raised when a board is not a supported square grid of marks."""
    pass


class InvalidPosition(GameException):
    """Raised when move coordinates fall outside the board."""
    pass


class CellOccupied(GameException):
    """Raised when trying to move to an occupied cell."""
    pass


class GameEnded(GameException):
    """Raised when trying to move in an ended game."""
    pass


class NotYourTurn(GameException):
    """Raised when a player tries to move out of turn."""
    pass


class GameNotFound(GameException):
    """Raised when a game is not found."""
    pass


class EvaluationInProgress(GameException):
    """Raised when a move arrives while the board is still being evaluated."""
    pass
