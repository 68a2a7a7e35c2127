"""
Game-related API endpoints.
"""
from fastapi import APIRouter, Depends, Response

from app.api.deps import get_game_service
from app.schemas import game as game_schemas
from app.services.game_service import GameService

router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={404: {"description": "Game not found"}}
)


@router.post("", response_model=game_schemas.GameState)
def create_game(
        game: game_schemas.GameCreate,
        service: GameService = Depends(get_game_service)
):
    """
    Create a new game against the computer.

    The human plays X and moves first. Difficulty and board size fall back
    to the configured defaults.
    """
    return service.create_game(game.difficulty, game.board_size).to_dict()


@router.get("/{game_id}", response_model=game_schemas.GameState)
def get_game_state(
        game_id: str,
        service: GameService = Depends(get_game_service)
):
    """
    Get the current state of a game.
    """
    return service.get_game(game_id).to_dict()


@router.post("/{game_id}/move", response_model=game_schemas.GameState)
def make_move(
        game_id: str,
        move: game_schemas.HumanMove,
        service: GameService = Depends(get_game_service)
):
    """
    Make a move in the game.

    Validates:
    - Game exists and has not ended
    - It's the human's turn
    - The position is on the board and empty

    The computer answers in the same request unless the human's move ended
    the game. The response carries both moves and, once the game is over,
    the result from the human's side.
    """
    return service.make_move(game_id, move.row, move.col).to_dict()


@router.put("/{game_id}/settings", response_model=game_schemas.GameState)
def update_settings(
        game_id: str,
        update: game_schemas.GameSettingsUpdate,
        service: GameService = Depends(get_game_service)
):
    """
    Change difficulty or board size. Changing the size starts a new board.
    """
    return service.update_settings(game_id, update.difficulty, update.board_size).to_dict()


@router.post("/{game_id}/reset", response_model=game_schemas.GameState)
def reset_game(
        game_id: str,
        service: GameService = Depends(get_game_service)
):
    """Start over on an empty board of the same size."""
    return service.reset_game(game_id).to_dict()


@router.delete("/{game_id}", status_code=204)
def delete_game(
        game_id: str,
        service: GameService = Depends(get_game_service)
):
    """Forget a finished or abandoned game."""
    service.delete_game(game_id)
    return Response(status_code=204)
