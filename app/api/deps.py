"""
Dependency injection for API endpoints.
"""
from app.engine.move_selector import MoveSelector, default_selector
from app.services.game_service import GameService, game_service_obj


def get_game_service() -> GameService:
    """
    Game service dependency. Tests override it with a fresh service.
    """
    return game_service_obj


def get_move_selector() -> MoveSelector:
    return default_selector
