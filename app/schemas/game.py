from pydantic import BaseModel, Field
from typing import List, Optional, Tuple

from app.core.game_config import MIN_BOARD_SIZE, MAX_BOARD_SIZE
from app.engine.board import Player
from app.engine.move_selector import Difficulty
from app.engine.outcome import OutcomeStatus


BoardCells = List[List[Optional[Player]]]


class ClassifyRequest(BaseModel):
    board: BoardCells = Field(..., description="Square board, null for empty cells")


class OutcomeResponse(BaseModel):
    status: OutcomeStatus
    winner: Optional[Player] = None
    line: Optional[List[Tuple[int, int]]] = None


class SelectMoveRequest(BaseModel):
    board: BoardCells = Field(..., description="Square board, null for empty cells")
    difficulty: Difficulty = Difficulty.HARD
    ai_player: Player = Field(Player.O, description="Mark the computer plays")


class MoveResponse(BaseModel):
    row: Optional[int] = None
    col: Optional[int] = None


class GameCreate(BaseModel):
    difficulty: Optional[Difficulty] = None
    board_size: Optional[int] = Field(
        None,
        ge=MIN_BOARD_SIZE,
        le=MAX_BOARD_SIZE,
        description=f"Board size ({MIN_BOARD_SIZE}x{MIN_BOARD_SIZE} to {MAX_BOARD_SIZE}x{MAX_BOARD_SIZE})"
    )


class GameSettingsUpdate(BaseModel):
    difficulty: Optional[Difficulty] = None
    board_size: Optional[int] = Field(None, ge=MIN_BOARD_SIZE, le=MAX_BOARD_SIZE)


class HumanMove(BaseModel):
    row: int = Field(..., ge=0, description="Row index (validated against the board size)")
    col: int = Field(..., ge=0, description="Column index (validated against the board size)")


class GameState(BaseModel):
    id: str
    board: BoardCells
    board_size: int
    difficulty: Difficulty
    current_player: Player
    human_player: Player
    ai_player: Player
    status: OutcomeStatus
    winner: Optional[Player] = None
    winning_line: Optional[List[Tuple[int, int]]] = None
    is_game_over: bool
    result: Optional[str] = Field(None, description="win, loss or draw from the human's side")
    category: str
    moves_count: int
    human_move: Optional[Tuple[int, int]] = None
    ai_move: Optional[Tuple[int, int]] = None
