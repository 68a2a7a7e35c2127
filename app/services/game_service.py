import logging
import threading
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

from app.core.config import settings
from app.core.exceptions import EvaluationInProgress, GameNotFound
from app.core.game_config import get_category_key
from app.engine.board import (
    Board, Move, Player, create_empty_board, get_empty_cells, place_mark
)
from app.engine.move_selector import Difficulty, MoveSelector, default_selector
from app.engine.outcome import Outcome, classify
from app.services.validators import MoveValidator

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """
    A single game between a human and the computer.

    The human plays X and moves first, the computer answers as O.
    """
    id: str
    board_size: int
    difficulty: Difficulty
    board: Optional[Board] = None
    human_player: Player = Player.X
    ai_player: Player = Player.O
    current_player: Player = Player.X
    outcome: Outcome = field(default_factory=Outcome.undecided)
    moves: List[Move] = field(default_factory=list)
    last_human_move: Optional[Move] = None
    last_ai_move: Optional[Move] = None
    last_active: float = 0.0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self):
        if self.board is None:
            self.board = create_empty_board(self.board_size)

    def initialize_board(self, board_size: int) -> None:
        """Start over on an empty board of the given size."""
        self.board = create_empty_board(board_size)
        self.board_size = board_size
        self.current_player = self.human_player
        self.outcome = Outcome.undecided()
        self.moves = []
        self.last_human_move = None
        self.last_ai_move = None

    @property
    def category(self) -> str:
        return get_category_key(self.difficulty.value, self.board_size)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "board": [list(row) for row in self.board],
            "board_size": self.board_size,
            "difficulty": self.difficulty,
            "current_player": self.current_player,
            "human_player": self.human_player,
            "ai_player": self.ai_player,
            "status": self.outcome.status,
            "winner": self.outcome.winner,
            "winning_line": self.outcome.line,
            "is_game_over": self.outcome.is_terminal,
            "result": self.outcome.result_for(self.human_player),
            "category": self.category,
            "moves_count": len(self.moves),
            "human_move": self.last_human_move,
            "ai_move": self.last_ai_move,
        }


class GameService:
    """
    Keeps game sessions in memory and drives the human/computer turn flow.

    At most `max_sessions` games are held. Games idle for longer than
    `idle_timeout` seconds are dropped when a new game is created, and if the
    service is still full the least recently used game makes room.
    """

    def __init__(self, selector: Optional[MoveSelector] = None, think_delay: float = 0.0,
                 max_sessions: int = 1000, idle_timeout: float = 3600.0,
                 clock: Callable[[], float] = time.monotonic):
        self.selector = selector if selector is not None else MoveSelector()
        self.think_delay = think_delay
        self.max_sessions = max_sessions
        self.idle_timeout = idle_timeout
        self.clock = clock
        self.validator = MoveValidator()
        self._sessions: Dict[str, GameSession] = {}
        self._sessions_lock = threading.Lock()

    @property
    def session_count(self) -> int:
        with self._sessions_lock:
            return len(self._sessions)

    def create_game(self, difficulty: Optional[Difficulty] = None,
                    board_size: Optional[int] = None) -> GameSession:
        if difficulty is None:
            difficulty = settings.DEFAULT_DIFFICULTY
        if board_size is None:
            board_size = settings.DEFAULT_BOARD_SIZE
        difficulty = Difficulty(difficulty)

        session = GameSession(
            id=uuid.uuid4().hex,
            board_size=board_size,
            difficulty=difficulty,
            last_active=self.clock(),
        )
        with self._sessions_lock:
            self._evict_sessions()
            self._sessions[session.id] = session

        logger.info(f"Game {session.id} ({board_size}x{board_size}, {difficulty.value}) created")
        return session

    def get_game(self, game_id: str) -> GameSession:
        with self._sessions_lock:
            session = self._sessions.get(game_id)
        if session is None:
            raise GameNotFound(f"Game {game_id} not found")
        session.last_active = self.clock()
        return session

    def delete_game(self, game_id: str) -> None:
        with self._sessions_lock:
            session = self._sessions.pop(game_id, None)
        if session is None:
            raise GameNotFound(f"Game {game_id} not found")
        logger.info(f"Game {game_id} deleted")

    def make_move(self, game_id: str, row: int, col: int) -> GameSession:
        """
        Apply the human's move and, unless the game ended, the computer's reply.
        """
        session = self.get_game(game_id)

        with self._evaluating(session):
            self.validator.validate_move(session, session.human_player, row, col)
            self._apply(session, session.human_player, (row, col))
            session.last_human_move = (row, col)
            session.last_ai_move = None

            if not session.outcome.is_terminal:
                if self.think_delay > 0:
                    time.sleep(self.think_delay)
                ai_move = self.selector.select_move(
                    session.board, session.difficulty, session.ai_player
                )
                if ai_move is not None:
                    self._apply(session, session.ai_player, ai_move)
                    session.last_ai_move = ai_move

        return session

    def update_settings(self, game_id: str, difficulty: Optional[Difficulty] = None,
                        board_size: Optional[int] = None) -> GameSession:
        """Change difficulty and/or board size. A new size starts a new game."""
        session = self.get_game(game_id)
        with self._evaluating(session):
            if difficulty is not None:
                session.difficulty = Difficulty(difficulty)
            if board_size is not None and board_size != session.board_size:
                session.initialize_board(board_size)
                logger.info(f"Game {game_id} restarted on a {board_size}x{board_size} board")
        return session

    def reset_game(self, game_id: str) -> GameSession:
        session = self.get_game(game_id)
        with self._evaluating(session):
            session.initialize_board(session.board_size)
        logger.info(f"Game {game_id} reset")
        return session

    @contextmanager
    def _evaluating(self, session: GameSession) -> Iterator[GameSession]:
        """
        Hold the session for one change. Requests that arrive while another
        change is running are rejected instead of waiting.
        """
        if not session.lock.acquire(blocking=False):
            raise EvaluationInProgress(f"Game {session.id} is still evaluating the previous move")
        try:
            yield session
        finally:
            session.lock.release()

    def _evict_sessions(self) -> None:
        # Caller holds self._sessions_lock
        now = self.clock()
        expired = [
            game_id for game_id, session in self._sessions.items()
            if now - session.last_active > self.idle_timeout
        ]
        for game_id in expired:
            del self._sessions[game_id]
        if expired:
            logger.info(f"Dropped {len(expired)} idle games")

        while self._sessions and len(self._sessions) >= self.max_sessions:
            oldest = min(self._sessions.values(), key=lambda s: s.last_active)
            del self._sessions[oldest.id]
            logger.info(f"Game {oldest.id} dropped to make room")

    def _apply(self, session: GameSession, player: Player, move: Move) -> None:
        row, col = move
        place_mark(session.board, row, col, player)
        session.moves.append(move)
        session.outcome = classify(session.board)

        if session.outcome.is_terminal:
            result = session.outcome.result_for(session.human_player)
            logger.info(f"Game {session.id} ended: {result} for the human ({session.category})")
        else:
            session.current_player = player.opposite()
            logger.debug(
                f"Game {session.id}: {player.value} played ({row}, {col}), "
                f"{len(get_empty_cells(session.board))} cells left"
            )


game_service_obj = GameService(
    selector=default_selector,
    think_delay=settings.AI_THINK_DELAY,
    max_sessions=settings.MAX_SESSIONS,
    idle_timeout=settings.SESSION_IDLE_TIMEOUT,
)
