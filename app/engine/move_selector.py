"""
Move selection for the computer opponent.

Easy picks a random empty cell, hard runs an exhaustive minimax search and
medium mixes the two.
"""
import logging
import math
import random
from typing import Optional

from app.core.config import settings
from app.core.game_config import WIN_SCORE, Difficulty
from app.engine.board import (
    Board, Move, Player, copy_board, get_empty_cells, trial_move, validate_board
)
from app.engine.outcome import OutcomeStatus, evaluate

logger = logging.getLogger(__name__)


class _MinimaxSearch:
    """
    One exhaustive search for a single move decision.

    Works on a private copy of the board. Every trial placement is undone
    before the next one is tried.
    """

    def __init__(self, board: Board, ai_player: Player):
        self.board = copy_board(board)
        self.ai_player = ai_player
        self.opponent = ai_player.opposite()
        self.positions_evaluated = 0

    def best_move(self) -> Optional[Move]:
        best_score = -math.inf
        best_move = None

        # Row-major order; only a strictly better score replaces the leader
        for row, col in get_empty_cells(self.board):
            with trial_move(self.board, row, col, self.ai_player):
                score = self.score(depth=0, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        logger.debug(
            f"Minimax evaluated {self.positions_evaluated} positions. "
            f"Best move: {best_move} (score: {best_score})"
        )
        return best_move

    def score(self, depth: int, is_maximizing: bool) -> int:
        """
        Score the current position for the AI player.

        Faster wins score higher and slower losses score less negative, so
        the search prefers the quickest win and the longest defence.
        """
        self.positions_evaluated += 1

        outcome = evaluate(self.board)
        if outcome.status == OutcomeStatus.WIN:
            if outcome.winner == self.ai_player:
                return WIN_SCORE - depth
            return depth - WIN_SCORE
        if outcome.status == OutcomeStatus.DRAW:
            return 0

        mark = self.ai_player if is_maximizing else self.opponent
        scores = []
        for row, col in get_empty_cells(self.board):
            with trial_move(self.board, row, col, mark):
                scores.append(self.score(depth + 1, not is_maximizing))

        return max(scores) if is_maximizing else min(scores)


class MoveSelector:
    """
    Chooses the computer's next move.

    Holds only its random number generator, so one instance can serve any
    number of boards.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        medium_random_move_rate: float = 0.5,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.medium_random_move_rate = medium_random_move_rate

    def select_move(
        self,
        board: Board,
        difficulty: Difficulty,
        ai_player: Player = Player.O,
    ) -> Optional[Move]:
        """
        Get the computer's move for the current position.

        Args:
            board: Current board. It is never modified.
            difficulty: Policy to choose with.
            ai_player: Mark the computer plays.

        Returns:
            (row, col) of an empty cell, or None if the board is full.
        """
        validate_board(board)
        difficulty = Difficulty(difficulty)
        ai_player = Player(ai_player)

        empty_cells = get_empty_cells(board)
        if not empty_cells:
            return None

        if difficulty == Difficulty.EASY:
            return self._random_move(empty_cells)

        if difficulty == Difficulty.MEDIUM and self.rng.random() < self.medium_random_move_rate:
            logger.debug("Medium difficulty: playing a random move")
            return self._random_move(empty_cells)

        return _MinimaxSearch(board, ai_player).best_move()

    def _random_move(self, empty_cells) -> Move:
        return self.rng.choice(empty_cells)


default_selector = MoveSelector(
    rng=random.Random(settings.RANDOM_SEED),
    medium_random_move_rate=settings.MEDIUM_RANDOM_MOVE_RATE,
)


def select_move(
    board: Board,
    difficulty: Difficulty,
    ai_player: Player = Player.O,
) -> Optional[Move]:
    """Select a move with the shared default selector."""
    return default_selector.select_move(board, difficulty, ai_player)
