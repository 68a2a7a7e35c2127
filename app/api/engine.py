"""
Stateless engine endpoints: classify a board or pick the computer's move.
"""
from fastapi import APIRouter, Depends

from app.api.deps import get_move_selector
from app.engine.move_selector import MoveSelector
from app.engine.outcome import classify
from app.schemas import game as game_schemas

router = APIRouter(
    prefix="/engine",
    tags=["engine"],
    responses={400: {"description": "Malformed board"}}
)


@router.post("/classify", response_model=game_schemas.OutcomeResponse)
def classify_board(request: game_schemas.ClassifyRequest):
    """
    Classify a board.

    Returns:
    - status: undecided, win or draw
    - winner and the completed line for a win
    """
    outcome = classify(request.board)
    return {"status": outcome.status, "winner": outcome.winner, "line": outcome.line}


@router.post("/move", response_model=game_schemas.MoveResponse)
def select_move(
        request: game_schemas.SelectMoveRequest,
        selector: MoveSelector = Depends(get_move_selector)
):
    """
    Choose the computer's next move for a board.

    Both coordinates are null when the board has no empty cell.
    """
    move = selector.select_move(request.board, request.difficulty, request.ai_player)
    if move is None:
        return {"row": None, "col": None}
    row, col = move
    return {"row": row, "col": col}
